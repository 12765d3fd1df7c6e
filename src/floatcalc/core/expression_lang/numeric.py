"""
Single-precision helpers.

Python floats are IEEE-754 doubles. Every value the calculator produces is
rounded to the nearest float32 through ``struct``; because a double carries
more than twice the float32 significand, rounding an exact double result of
``+ - * /`` on two float32 operands gives the correctly rounded float32.
"""

from __future__ import annotations

import math
import struct
from enum import StrEnum

_FLOAT32 = struct.Struct("<f")


class NumberFormat(StrEnum):
    """How results are rendered for the console."""

    GENERAL = "general"
    SHORTEST = "shortest"


def to_float32(value: float) -> float:
    """Round a double to the nearest float32 (overflowing to +/-inf)."""
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_float32(text: str) -> float:
    """Parse a decimal literal such as ``"23.5"`` or ``"23."`` as float32."""
    return to_float32(float(text))


def format_number(
    value: float,
    style: NumberFormat = NumberFormat.GENERAL,
    precision: int = 6,
) -> str:
    """
    Render a float32 result.

    Args:
        value: The result to render
        style: ``general`` uses ``%g`` with ``precision`` significant digits;
            ``shortest`` uses the fewest digits that round back to ``value``
        precision: Significant digits for ``general``

    Returns:
        The textual number, ``inf``/``-inf``/``nan`` for non-finite values.
    """
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    if style == NumberFormat.SHORTEST:
        # 9 significant digits always round-trip a float32
        for digits in range(1, 10):
            text = f"{value:.{digits}g}"
            if parse_float32(text) == value:
                return text
        return f"{value:.9g}"

    return f"{value:.{precision}g}"
