"""
floatcalc expression language.

Tokenizer, parser and evaluator for single-precision arithmetic over
``+ - * / ( )`` and decimal literals.

Usage:
    from floatcalc.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("(3 + 3) * 2")
    result = evaluate(expr)
    # result == 12.0
"""

from floatcalc.core.expression_lang.evaluator import evaluate
from floatcalc.core.expression_lang.parser import parse_expr, parse_tokens
from floatcalc.core.expression_lang.tokenizer import tokenize

__all__ = ["evaluate", "parse_expr", "parse_tokens", "tokenize"]
