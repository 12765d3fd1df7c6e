"""
floatcalc - single-precision command-line arithmetic evaluator.

Reads expressions over + - * / ( ) and decimal literals and prints their
float32 value, with caret diagnostics for malformed input.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.calculator import LineResult, evaluate_line
from .core.diagnostics import Diagnostic, DiagnosticKind, format_diagnostic
from .core.errors import ConfigError, ExpressionError, FloatcalcError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "ExpressionError",
    "FloatcalcError",
    "LineResult",
    "evaluate_line",
    "format_diagnostic",
]
