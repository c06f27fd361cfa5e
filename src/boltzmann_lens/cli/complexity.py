"""Complexity command - total complexity summary for one analysis file."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..analysis import load_analysis
from ..config import load_config
from ..exceptions import BoltzmannLensError
from ..session import complexity_badge, format_complexity, inset_title
from . import app
from ._common import console, err_console


@app.command()
def complexity(
    analysis_file: Path = typer.Argument(
        ...,
        help="Analyser output file (.blta)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML configuration file",
        exists=True,
        dir_okay=False,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
):
    """Show a file's total complexity, its badge and node count."""
    try:
        settings = load_config(config_file=config)
        analysis = load_analysis(analysis_file)
    except BoltzmannLensError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    badge = complexity_badge(analysis.total_complexity) if settings.show_file_complexity else None
    inset = inset_title(analysis.total_complexity) if settings.show_complexity_inset else None

    if json_output:
        output = {
            "file": str(analysis_file),
            "total_complexity": analysis.total_complexity,
            "badge": badge,
            "inset": inset,
            "nodes": len(analysis),
        }
        print(json.dumps(output, indent=2))
        return

    console.print(
        f"[bold cyan]{analysis_file.name}[/bold cyan]: "
        f"[yellow]{format_complexity(analysis.total_complexity)}[/yellow] "
        f"({len(analysis)} nodes)"
    )
    if badge is not None:
        console.print(f"Badge: [bold]{badge}[/bold]")
    if inset is not None:
        console.print(inset)
