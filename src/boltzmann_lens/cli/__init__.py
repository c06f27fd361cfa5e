"""CLI entry point - registers all subcommands."""

import typer

from .. import __version__
from ..logging_config import setup_logging
from ._common import console

app = typer.Typer(
    name="boltzmann-lens",
    help="Boltzmann Lens - complexity highlights from Boltzmann analyser output",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]Boltzmann Lens[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
):
    """Turn analyser complexity trees into ranked highlight regions."""
    setup_logging(verbose=verbose, quiet=quiet)


def main() -> None:
    app()


# Import subcommands to register them
from .highlight import highlight as _highlight  # noqa: F401, E402
from .complexity import complexity as _complexity  # noqa: F401, E402
