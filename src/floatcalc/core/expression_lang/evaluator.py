"""
Expression evaluator for the floatcalc expression language.

Evaluates expression AST nodes to a single float32 value.
Evaluation is pure and cannot fail: division by zero follows IEEE-754
and yields inf or nan.
"""

from __future__ import annotations

import math

from floatcalc.core.expression_lang.numeric import to_float32
from floatcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    The tree is walked with an explicit stack, so long operator chains such
    as ``1+1+...+1`` (a left-leaning tree as deep as the chain is long) do
    not run into the interpreter's recursion limit.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed float32 value.
    """
    # (node, children_done) pairs; left is pushed last so it is visited first
    stack: list[tuple[Expr, bool]] = [(expr, False)]
    values: list[float] = []

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Literal):
            values.append(node.value)
        elif isinstance(node, BinaryExpr):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node.op, left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply(op: BinaryOp, left: float, right: float) -> float:
    """Combine two float32 operands, rounding the result to float32."""
    if op == BinaryOp.ADD:
        return to_float32(left + right)
    if op == BinaryOp.SUB:
        return to_float32(left - right)
    if op == BinaryOp.MUL:
        return to_float32(left * right)
    if op == BinaryOp.DIV:
        return to_float32(_divide(left, right))
    raise TypeError(f"Unknown binary op: {op}")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division; Python raises ZeroDivisionError where IEEE gives inf/nan."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right
