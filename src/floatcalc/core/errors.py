"""
Error types for floatcalc tokenizing, parsing and configuration.
"""

from floatcalc.core.diagnostics import Diagnostic, DiagnosticKind


class FloatcalcError(Exception):
    """Base exception for all floatcalc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExpressionError(FloatcalcError):
    """
    Raised when an input line cannot be turned into an expression tree.

    Subclasses:
    - ExpressionTokenError: a character that cannot start any token
    - ExpressionParseError: a token sequence that does not match the grammar
    """

    def __init__(self, message: str, kind: DiagnosticKind, pos: int, length: int = 1):
        self.kind = kind
        self.pos = pos
        self.length = length
        super().__init__(message)

    def to_diagnostic(self, source: str) -> Diagnostic:
        """Attach the failing source line to produce a renderable diagnostic."""
        return Diagnostic(kind=self.kind, offset=self.pos, source=source, length=self.length)


class ConfigError(FloatcalcError):
    """
    Raised when floatcalc.toml cannot be loaded.

    Examples:
    - Malformed TOML
    - Unknown sections or keys
    - Values of the wrong type (e.g. precision = "six")
    """

    pass
