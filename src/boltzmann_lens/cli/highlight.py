"""Highlight command - run the highlight pipeline on one analysis file."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table
from rich.text import Text

from ..analysis import load_analysis
from ..attenuation import load_attenuation
from ..config import load_config
from ..exceptions import BoltzmannLensError
from ..highlights import generate
from . import app
from ._common import console, err_console, format_range, highlight_to_dict


@app.command()
def highlight(
    analysis_file: Path = typer.Argument(
        ...,
        help="Analyser output file (.blta)",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    project: Optional[Path] = typer.Option(
        None,
        "--project",
        "-p",
        help="Project root holding .boltzmann/project.blta (enables attenuation lookup)",
        file_okay=False,
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        "-t",
        help="Minimum normalized complexity (0-1) to highlight",
        min=0.0,
        max=1.0,
    ),
    alpha: Optional[float] = typer.Option(
        None,
        "--alpha",
        help="Highlight alpha (0-1)",
        min=0.0,
        max=1.0,
    ),
    min_complexity: Optional[float] = typer.Option(
        None,
        "--min-complexity",
        help="Minimum attenuated complexity to keep",
        min=0.0,
    ),
    attenuation: Optional[bool] = typer.Option(
        None,
        "--attenuation/--no-attenuation",
        help="Reweight complexity with the project graph",
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
    """
    Show the highlight regions for an analysed file.

    [bold cyan]Examples:[/bold cyan]

      boltzmann-lens highlight .boltzmann/src/app.py.blta

      boltzmann-lens highlight .boltzmann/src/app.py.blta -p . --attenuation --json
    """
    try:
        settings = load_config(
            config_file=config,
            complexity_threshold=threshold,
            highlight_alpha=alpha,
            min_complexity_per_loc=min_complexity,
            attenuation=attenuation,
        )
        analysis = load_analysis(analysis_file)
    except BoltzmannLensError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    attenuation_state = load_attenuation(project, enabled=settings.attenuation)
    highlights = generate(analysis, attenuation_state, settings)

    if json_output:
        output = {
            "file": str(analysis_file),
            "total_complexity": analysis.total_complexity,
            "attenuation": attenuation_state.enabled,
            "highlights": [highlight_to_dict(h) for h in highlights],
        }
        print(json.dumps(output, indent=2))
        return

    console.print()
    console.print(
        f"[bold cyan]{analysis_file.name}[/bold cyan] -- "
        f"{len(highlights)} highlight(s) from {len(analysis)} node(s), "
        f"attenuation {'[green]on[/green]' if attenuation_state.enabled else '[dim]off[/dim]'}"
    )
    if not highlights:
        console.print("[dim]Nothing above the complexity threshold.[/dim]")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Range", min_width=16)
    table.add_column("Complexity", justify="right")
    table.add_column("Color")

    for h in sorted(highlights, key=lambda h: h.span):
        swatch = Text("  ", style=f"on {h.color.rgb_hex}")
        swatch.append(f" {h.color.hex}")
        table.add_row(format_range(h), h.hover_text.removeprefix("Complexity: "), swatch)

    console.print(table)
