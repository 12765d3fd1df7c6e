"""
One-shot calculator commands.

- eval: evaluate a single expression
- inspect: show the tokens, tree and value of an expression
"""

from __future__ import annotations

import sys

import typer

from floatcalc.cli.repl import process_line, run_repl
from floatcalc.cli_ui import print_diagnostic, print_header, print_result, print_token_table
from floatcalc.core.config import CalculatorConfig
from floatcalc.core.diagnostics import format_diagnostic
from floatcalc.core.errors import ExpressionError
from floatcalc.core.expression_lang.evaluator import evaluate
from floatcalc.core.expression_lang.numeric import format_number
from floatcalc.core.expression_lang.parser import parse_tokens
from floatcalc.core.expression_lang.tokenizer import tokenize


def _config(ctx: typer.Context) -> CalculatorConfig:
    if isinstance(ctx.obj, CalculatorConfig):
        return ctx.obj
    return CalculatorConfig()


def repl_command(
    ctx: typer.Context,
    banner: bool = typer.Option(
        True,
        "--banner/--no-banner",
        help="Show the start-up banner",
    ),
) -> None:
    """
    Start the interactive calculator.

    Type an expression such as (3 + 3) * 2 and press Enter.
    Type 'exit' or send end-of-input to quit.
    """
    config = _config(ctx)
    if not banner:
        config = config.model_copy(
            update={"repl": config.repl.model_copy(update={"banner": False})}
        )
    raise typer.Exit(code=run_repl(sys.stdin, config))


def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '(3+3)*2'"),
) -> None:
    """
    Evaluate a single expression and print its value.

    Exits with code 1 and a caret diagnostic when the expression is invalid.
    """
    config = _config(ctx)
    if not process_line(expression.strip(), config):
        raise typer.Exit(code=1)


def inspect_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to inspect"),
) -> None:
    """
    Show how an expression is tokenized and parsed.

    Prints the token table, the fully parenthesised tree and the value.
    """
    config = _config(ctx)
    source = expression.strip()

    try:
        tokens = tokenize(source)
        print_header("Tokens")
        print_token_table(tokens)
        expr = parse_tokens(tokens, len(source), max_depth=config.parser.max_depth)
    except ExpressionError as e:
        print_diagnostic(format_diagnostic(e.to_diagnostic(source), margin=config.margin))
        raise typer.Exit(code=1)

    print_header("Tree")
    print_result(str(expr))
    print_header("Value")
    output = config.output
    print_result(format_number(evaluate(expr), output.number_format, output.precision))
