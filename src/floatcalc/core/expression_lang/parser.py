"""
Recursive descent parser for the floatcalc expression language.

Grammar (precedence low to high, both levels left-associative):
    term    → factor (("+" | "-") factor)*
    factor  → primary (("*" | "/") primary)*
    primary → LITERAL | "(" term ")"
"""

from __future__ import annotations

import logging

from floatcalc.core.diagnostics import DiagnosticKind
from floatcalc.core.errors import ExpressionError
from floatcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from floatcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)

# Each nesting level costs a few interpreter frames (term → factor → primary)
DEFAULT_MAX_DEPTH = 200

_TERM_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.ADD: BinaryOp.ADD,
    TokenKind.SUB: BinaryOp.SUB,
}

_FACTOR_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.MUL: BinaryOp.MUL,
    TokenKind.DIV: BinaryOp.DIV,
}


class ExpressionParseError(ExpressionError):
    """Error during expression parsing."""


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token], end: int, max_depth: int) -> None:
        self.tokens = tokens
        self.end = end
        self.max_depth = max_depth
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def match(self, *kinds: TokenKind) -> Token | None:
        tok = self.current
        if tok is not None and tok.kind in kinds:
            return self.advance()
        return None

    def expect(self, kind: TokenKind) -> Token:
        tok = self.match(kind)
        if tok is None:
            raise self.unexpected()
        return tok

    def unexpected(self) -> ExpressionParseError:
        """Error for the token at the cursor, or for running out of tokens."""
        tok = self.current
        if tok is None:
            return ExpressionParseError(
                "Unexpected end of stream", DiagnosticKind.END_OF_STREAM, self.end
            )
        return ExpressionParseError(
            f"Unexpected token: {tok.text!r}",
            DiagnosticKind.UNEXPECTED_TOKEN,
            tok.pos,
            len(tok.text),
        )

    # -- Grammar rules --

    def parse_term(self) -> Expr:
        """factor (('+' | '-') factor)*"""
        left = self.parse_factor()
        while tok := self.match(*_TERM_OPS):
            right = self.parse_factor()
            left = BinaryExpr(op=_TERM_OPS[tok.kind], left=left, right=right)
        return left

    def parse_factor(self) -> Expr:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while tok := self.match(*_FACTOR_OPS):
            right = self.parse_primary()
            left = BinaryExpr(op=_FACTOR_OPS[tok.kind], left=left, right=right)
        return left

    def parse_primary(self) -> Expr:
        """LITERAL | '(' term ')'"""
        tok = self.match(TokenKind.LITERAL)
        if tok is not None:
            assert tok.value is not None
            return Literal(value=tok.value)

        tok = self.match(TokenKind.LPAREN)
        if tok is not None:
            if self.depth >= self.max_depth:
                raise ExpressionParseError(
                    f"Parentheses nested deeper than {self.max_depth} levels",
                    DiagnosticKind.NESTING_TOO_DEEP,
                    tok.pos,
                )
            self.depth += 1
            expr = self.parse_term()
            self.expect(TokenKind.RPAREN)
            self.depth -= 1
            return expr

        raise self.unexpected()


def parse_tokens(
    tokens: list[Token],
    end: int,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Expr:
    """Parse a token sequence into an AST.

    Args:
        tokens: Output of ``tokenize``
        end: Offset reported when the tokens run out, normally ``len(source)``
        max_depth: Maximum parenthesis nesting

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionParseError: If the tokens do not form exactly one term.
    """
    parser = _Parser(tokens, end, max_depth)
    try:
        expr = parser.parse_term()

        # Ensure all tokens consumed
        if parser.current is not None:
            raise parser.unexpected()
    except ExpressionParseError as e:
        logger.debug("Parse failed at offset %d: %s", e.pos, e.message)
        raise

    return expr


def parse_expr(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "(3 + 3) * 2")
        max_depth: Maximum parenthesis nesting

    Returns:
        Parsed expression AST.

    Raises:
        ExpressionTokenError: If tokenization fails.
        ExpressionParseError: If the expression is invalid.
    """
    return parse_tokens(tokenize(source), len(source), max_depth)
