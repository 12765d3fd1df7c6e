"""Tests for float32 rounding and result formatting."""

from __future__ import annotations

import math

import pytest

from floatcalc.core.expression_lang.numeric import (
    NumberFormat,
    format_number,
    parse_float32,
    to_float32,
)


class TestToFloat32:
    def test_rounds_to_single_precision(self) -> None:
        assert to_float32(0.1) == 0.10000000149011612

    def test_representable_values_unchanged(self) -> None:
        for value in (0.0, 1.0, 0.5, 12.0, 16777216.0):
            assert to_float32(value) == value

    def test_overflow(self) -> None:
        assert to_float32(1e39) == math.inf
        assert to_float32(-1e39) == -math.inf

    def test_non_finite_pass_through(self) -> None:
        assert to_float32(math.inf) == math.inf
        assert math.isnan(to_float32(math.nan))

    def test_negative_zero_keeps_sign(self) -> None:
        assert math.copysign(1.0, to_float32(-0.0)) == -1.0

    def test_parse(self) -> None:
        assert parse_float32("23.") == 23.0
        assert parse_float32("0.1") == to_float32(0.1)


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (12.0, "12"),
            (4.0, "4"),
            (2.5, "2.5"),
            (to_float32(1 / 3), "0.333333"),
            (to_float32(0.1), "0.1"),
            (16777216.0, "1.67772e+07"),
        ],
    )
    def test_general(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_general_precision(self) -> None:
        assert format_number(to_float32(1 / 3), precision=3) == "0.333"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (12.0, "12"),
            (to_float32(0.1), "0.1"),
            (to_float32(0.3), "0.3"),
            (16777216.0, "16777216"),
            (to_float32(1 / 3), "0.33333334"),
        ],
    )
    def test_shortest(self, value: float, expected: str) -> None:
        assert format_number(value, NumberFormat.SHORTEST) == expected

    @pytest.mark.parametrize("style", list(NumberFormat))
    def test_non_finite(self, style: NumberFormat) -> None:
        assert format_number(math.inf, style) == "inf"
        assert format_number(-math.inf, style) == "-inf"
        assert format_number(math.nan, style) == "nan"
