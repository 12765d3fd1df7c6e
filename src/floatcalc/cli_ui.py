"""
Rich console helpers for the floatcalc CLI.

All user-facing output goes through the shared console so styling stays
consistent and tests can capture it. Source text is always wrapped in
``Text`` so that characters such as ``[`` are never read as markup, and is
printed with ``soft_wrap`` so caret lines stay aligned with long input.
"""

from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from floatcalc.core.expression_lang.tokenizer import Token

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "prompt": Style(color="bright_cyan"),
    "result": Style(color="bright_white", bold=True),
    "error": Style(color="red", bold=True),
    "muted": Style(color="bright_black"),
    "marker": Style(color="yellow", bold=True),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print(Text(title, style=STYLES["title"]), soft_wrap=True)
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]), soft_wrap=True)


def print_prompt(prompt: str) -> None:
    """Print the REPL prompt without a trailing newline."""
    console.print(Text(prompt, style=STYLES["prompt"]), end="", soft_wrap=True)


def print_result(text: str) -> None:
    """Print a formatted result."""
    console.print(Text(text, style=STYLES["result"]), soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]), soft_wrap=True)


def print_diagnostic(rendered: str) -> None:
    """Print a rendered diagnostic: red message, plain source, highlighted caret."""
    message, _, rest = rendered.partition("\n")
    console.print(Text(message, style=STYLES["error"]), soft_wrap=True)
    if not rest:
        return
    source, _, marker = rest.partition("\n")
    console.print(Text(source), soft_wrap=True)
    if marker:
        console.print(Text(marker, style=STYLES["marker"]), soft_wrap=True)


def print_token_table(tokens: Sequence[Token]) -> None:
    """Display tokens in a formatted table."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Kind", style="white bold")
    table.add_column("Text")
    table.add_column("Offset", justify="right", style="bright_black")

    for i, tok in enumerate(tokens, 1):
        table.add_row(str(i), str(tok.kind), Text(tok.text), str(tok.pos))

    console.print(table)
