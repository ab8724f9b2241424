"""Visualize command -- paint churn over a line range of one file."""

import json
from pathlib import Path
from typing import Optional

import typer

from .. import api
from ..exceptions import ChurnMapError
from ..logging_config import setup_logging
from ..render.surface import TerminalSurface
from . import app
from ._common import console, resolve_config


@app.command()
def visualize(
    file: Path = typer.Argument(
        ...,
        help="File to analyze (must be tracked by git)",
        dir_okay=False,
    ),
    line_range: Optional[str] = typer.Argument(
        None,
        metavar="[RANGE]",
        help="Line range: N or N-M (default: whole file)",
    ),
    prompt: bool = typer.Option(
        False,
        "--prompt",
        "-p",
        help="Ask for the line range interactively when RANGE is omitted",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Run this many git queries in parallel",
        min=1,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Explicit churnmap.toml to load",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-line commit ids"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Color each line by how many commits touched it.

    Lines are scored relative to the busiest line in the range, from
    [green]green[/green] (untouched) to [red]red[/red] (most changed), and
    followed by a ``⟶ Nx`` commit count.

    [bold cyan]Examples:[/bold cyan]

      churnmap visualize src/app.py

      churnmap visualize src/app.py 10-40

      churnmap visualize src/app.py --prompt
    """
    try:
        settings = resolve_config(config=config, workers=workers, verbose=verbose, quiet=quiet)
    except ChurnMapError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    setup_logging(
        verbose=settings.verbosity == "verbose",
        quiet=settings.verbosity == "quiet",
    )

    if line_range is None and prompt:
        line_range = typer.prompt(
            "Line range (N or N-M, empty for whole file)", default="", show_default=False
        )

    result = api.visualize(file, line_range or "", config=settings)

    if json_output:
        print(json.dumps(result.to_dict(), indent=2))
        return

    if not result.scored_lines:
        console.print(f"[yellow]No churn to show for[/yellow] {file}")
        return

    if isinstance(result.surface, TerminalSurface):
        first = result.scored_lines[0].line_number
        last = result.scored_lines[-1].line_number
        result.surface.show(console, start=first, end=last)
