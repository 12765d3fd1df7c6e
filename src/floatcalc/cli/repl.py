"""
Interactive read-evaluate-print loop.

Reads one line at a time, strips it, stops on the exit word or end of
input, skips blank lines and prints either the value or a caret
diagnostic. Every line is evaluated independently.
"""

from __future__ import annotations

import logging
from typing import TextIO

from floatcalc.cli_ui import print_diagnostic, print_header, print_prompt, print_result
from floatcalc.core.calculator import evaluate_line
from floatcalc.core.config import CalculatorConfig
from floatcalc.core.diagnostics import format_diagnostic
from floatcalc.core.expression_lang.numeric import format_number

logger = logging.getLogger(__name__)


def run_repl(stream: TextIO, config: CalculatorConfig) -> int:
    """
    Run the calculator loop over ``stream``.

    Args:
        stream: Line source, normally sys.stdin
        config: Prompt, exit word, output and parser settings

    Returns:
        Process exit code (always 0: bad input never ends the loop)
    """
    repl = config.repl
    if repl.banner:
        print_header("Basic CLI calculator", f"Type '{repl.exit_command}' to exit")

    lines = 0
    while True:
        print_prompt(repl.prompt)
        raw = stream.readline()
        if not raw:
            # End of input: finish the prompt line
            print_result("")
            break

        line = raw.strip()
        if line == repl.exit_command:
            break
        if not line:
            continue

        lines += 1
        process_line(line, config)

    logger.debug("REPL finished after %d expressions", lines)
    return 0


def process_line(line: str, config: CalculatorConfig) -> bool:
    """Evaluate one line and print its value or diagnostic. Returns True on success."""
    result = evaluate_line(line, max_depth=config.parser.max_depth)
    if result.diagnostic is not None:
        print_diagnostic(format_diagnostic(result.diagnostic, margin=config.margin))
        return False

    assert result.value is not None
    output = config.output
    print_result(format_number(result.value, output.number_format, output.precision))
    return True
