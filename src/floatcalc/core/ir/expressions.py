"""
Expression tree types for floatcalc.

The tree is a closed union of two frozen node types:
- Literal: a float32 leaf
- BinaryExpr: one of + - * / applied to two owned subtrees

Nodes are built once by the parser and never mutated afterwards.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal, already rounded to float32."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"{self.value:g}"


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # Operator chains nest as deep as they are long; render without recursion
        rendered: list[str] = []
        stack: list[tuple[Expr, bool]] = [(self, False)]
        while stack:
            node, children_done = stack.pop()
            if isinstance(node, Literal):
                rendered.append(str(node))
            elif children_done:
                right = rendered.pop()
                left = rendered.pop()
                rendered.append(f"({left} {node.op.value} {right})")
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        return rendered[0]


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
