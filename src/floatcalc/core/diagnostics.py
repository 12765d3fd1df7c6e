"""
Diagnostics for failed calculator input.

A Diagnostic records what went wrong, where, and in which source line, and
can be rendered as a caret-annotated message for the console.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# Width of the default REPL prompt (">>> ")
DEFAULT_MARGIN = 4


class DiagnosticKind(StrEnum):
    """Failure categories for a single input line."""

    INVALID_CHARACTER = "invalid_character"
    UNEXPECTED_TOKEN = "unexpected_token"
    END_OF_STREAM = "end_of_stream"
    NESTING_TOO_DEEP = "nesting_too_deep"


@dataclass(frozen=True)
class Diagnostic:
    """
    A tokenizer or parser failure located in its source line.

    Attributes:
        kind: Failure category
        offset: Zero-based index into ``source`` (``len(source)`` for end of stream)
        source: The line that failed
        length: Width of the offending token in characters
    """

    kind: DiagnosticKind
    offset: int
    source: str
    length: int = 1

    @property
    def fragment(self) -> str:
        """The offending token's text (empty at end of input)."""
        return self.source[self.offset : self.offset + self.length]

    @property
    def message(self) -> str:
        if self.kind == DiagnosticKind.INVALID_CHARACTER:
            return f"Unexpected character: {self.fragment!r}"
        if self.kind == DiagnosticKind.UNEXPECTED_TOKEN:
            return f"Unexpected token: {self.fragment!r}"
        if self.kind == DiagnosticKind.NESTING_TOO_DEEP:
            return "Parentheses nested too deeply"
        return "Unexpected end of stream"


def format_diagnostic(diagnostic: Diagnostic, margin: int = DEFAULT_MARGIN) -> str:
    """
    Render a diagnostic as message, source line and caret marker.

    Args:
        diagnostic: The failure to render
        margin: Left margin applied to the source and caret lines, normally
            the width of the prompt the user typed the line after

    Returns:
        Three lines joined with newlines, e.g.::

            Error: Unexpected character: 'a'
                3a
                 ^---- Here
    """
    pad = " " * margin
    lines = [
        f"Error: {diagnostic.message}",
        f"{pad}{diagnostic.source}",
        " " * (margin + diagnostic.offset) + "^---- Here",
    ]
    return "\n".join(lines)
