"""Command line interface for fortuner."""

from __future__ import annotations

import logging
from typing import List, Optional

import typer
from rich.console import Console

from fortuner.config import FortuneConfig
from fortuner.errors import ConfigError, FortuneError
from fortuner.runner import run

__version__ = "0.1.0"

err_console = Console(stderr=True)
app = typer.Typer(help="fortuner - print a random fortune, or every fortune matching a pattern")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fortuner {__version__}")
        raise typer.Exit()


@app.command()
def main(
    sources: List[str] = typer.Argument(..., metavar="FILE", help="Input files or directories"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-m", help="Pattern"),
    insensitive: bool = typer.Option(
        False, "--insensitive", "-i", help="Case-insensitive pattern matching"
    ),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Print a random fortune, or all fortunes matching --pattern."""
    _setup_logging(verbose)
    try:
        config = FortuneConfig.from_options(
            sources, pattern=pattern, insensitive=insensitive, seed=seed
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        run(config)
    except FortuneError as exc:
        err_console.print(str(exc), style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc
