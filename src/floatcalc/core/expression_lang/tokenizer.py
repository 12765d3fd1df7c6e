"""
Tokenizer for the floatcalc expression language.

Converts an expression string into a sequence of typed tokens.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum, auto

from floatcalc.core.diagnostics import DiagnosticKind
from floatcalc.core.errors import ExpressionError
from floatcalc.core.expression_lang.numeric import parse_float32

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Operators
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    LITERAL = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    text: str
    pos: int
    value: float | None = None

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.ADD,
    "-": TokenKind.SUB,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# DIGIT+ ('.' DIGIT*)? -- a second '.' is left for the next token
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?")


class ExpressionTokenError(ExpressionError):
    """Error during expression tokenization."""

    def __init__(self, message: str, pos: int) -> None:
        super().__init__(message, DiagnosticKind.INVALID_CHARACTER, pos)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Raises:
        ExpressionTokenError: At the first character that cannot start a
            token. ".5" fails at the dot; "1.2.3" fails at the second dot.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c.isspace():
            i += 1
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        m = _NUMBER_RE.match(source, i)
        if m is None:
            raise ExpressionTokenError(f"Unexpected character: {c!r}", i)

        text = m.group(0)
        tokens.append(Token(TokenKind.LITERAL, text, i, parse_float32(text)))
        i = m.end()

    logger.debug("Tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
