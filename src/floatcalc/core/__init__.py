"""Core floatcalc functionality: IR, tokenizer, parser, evaluator, diagnostics, configuration."""

from . import ir
from .calculator import LineResult, evaluate_line
from .config import CalculatorConfig, load_config
from .diagnostics import Diagnostic, DiagnosticKind, format_diagnostic
from .errors import ConfigError, ExpressionError, FloatcalcError

__all__ = [
    "ir",
    "CalculatorConfig",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "ExpressionError",
    "FloatcalcError",
    "LineResult",
    "evaluate_line",
    "format_diagnostic",
    "load_config",
]
