"""
Single-line calculator entry point.

``evaluate_line`` runs the whole pipeline (tokenize → parse → evaluate) for
one input line and reports either the value or a Diagnostic. It holds no
state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from floatcalc.core.diagnostics import Diagnostic
from floatcalc.core.errors import ExpressionError
from floatcalc.core.expression_lang.evaluator import evaluate
from floatcalc.core.expression_lang.parser import DEFAULT_MAX_DEPTH, parse_expr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Outcome of evaluating one line: exactly one of value or diagnostic is set."""

    value: float | None = None
    diagnostic: Diagnostic | None = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None


def evaluate_line(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> LineResult:
    """
    Evaluate one expression line.

    Args:
        source: The expression text, e.g. "(3 + 3) * 2 / (4 - 1)"
        max_depth: Maximum parenthesis nesting accepted by the parser

    Returns:
        LineResult with the float32 value, or with a Diagnostic locating the
        first tokenizer or parser failure. No partial result is produced.
    """
    try:
        expr = parse_expr(source, max_depth=max_depth)
    except ExpressionError as e:
        logger.debug("Rejected %r: %s at offset %d", source, e.kind, e.pos)
        return LineResult(diagnostic=e.to_diagnostic(source))

    value = evaluate(expr)
    logger.debug("Evaluated %r -> %r", source, value)
    return LineResult(value=value)
