"""
floatcalc CLI.

- repl.py: interactive read-evaluate-print loop
- commands.py: repl, eval and inspect commands

Running ``floatcalc`` with no command starts the REPL.
"""

from __future__ import annotations

import logging
import platform
import sys
from importlib.metadata import PackageNotFoundError, distribution
from pathlib import Path

import typer

from floatcalc._version import get_version
from floatcalc.cli.commands import eval_command, inspect_command, repl_command
from floatcalc.cli.repl import run_repl
from floatcalc.cli_ui import print_error
from floatcalc.core.config import CONFIG_FILENAME, load_config
from floatcalc.core.errors import ConfigError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        # Check if installed via pip (editable or not)
        try:
            dist = distribution("floatcalc")
            if dist.read_text("direct_url.json"):
                install_method = "pip (editable)"
            else:
                install_method = "pip"
        except PackageNotFoundError:
            install_method = "source checkout"

        typer.echo(f"floatcalc version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Installation:  {install_method}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG for floatcalc modules when verbose."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    if verbose:
        logging.getLogger("floatcalc").setLevel(logging.DEBUG)


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""floatcalc – single-precision command-line calculator

Evaluates expressions over + - * / ( ) and decimal literals.

  • floatcalc              start the interactive calculator
  • floatcalc eval EXPR    evaluate one expression
  • floatcalc inspect EXPR show tokens and tree
""",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    config_path: Path = typer.Option(
        Path(CONFIG_FILENAME),
        "--config",
        "-c",
        help="Path to floatcalc.toml",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log pipeline details to stderr",
    ),
) -> None:
    """floatcalc CLI main callback for global options."""
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(e.message)
        raise typer.Exit(code=2)

    ctx.obj = config
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=run_repl(sys.stdin, config))


app.command(name="repl")(repl_command)
app.command(name="eval")(eval_command)
app.command(name="inspect")(inspect_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = [
    "app",
    "main",
    "version_callback",
]
