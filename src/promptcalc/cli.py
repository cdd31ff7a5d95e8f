"""Command-line entry point for promptcalc.

Usage:
    promptcalc                 # Run one interactive calculation
    python -m promptcalc       # Same thing

Settings come from the environment:
    PROMPTCALC_STRICT_OPERANDS=1    # Refuse to compute with non-numeric operands
    PROMPTCALC_LOG_LEVEL=DEBUG      # Diagnostic verbosity (stderr)
    PROMPTCALC_BANNER="..."         # Welcome line
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from promptcalc.config import SessionConfig
from promptcalc.driver import run_calculation
from promptcalc.exceptions import CalculatorError
from promptcalc.session import ConsoleSession

app = typer.Typer(
    name="promptcalc",
    help="Interactive two-operand calculator",
    add_completion=False,
)


def configure_logging(level: int) -> logging.Handler:
    """Send promptcalc diagnostics to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    package_logger = logging.getLogger("promptcalc")
    package_logger.setLevel(level)
    for existing in [h for h in package_logger.handlers if isinstance(h, RichHandler)]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    return handler


@app.command()
def main() -> None:
    """Prompt for two values and an operator, then print the result."""
    try:
        config = SessionConfig.from_env()
    except CalculatorError as e:
        Console(stderr=True).print(f"[red]Invalid configuration:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)

    configure_logging(config.log_level_number)
    outcome = run_calculation(ConsoleSession(), config)
    raise typer.Exit(int(outcome))
