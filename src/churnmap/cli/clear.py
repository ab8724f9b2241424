"""Clear command -- show a file with every churn decoration removed."""

from pathlib import Path

import typer

from .. import api
from ..config import load_config
from ..exceptions import ChurnMapError
from ..render.surface import TerminalSurface
from . import app
from ._common import console


@app.command()
def clear(
    file: Path = typer.Argument(
        ...,
        help="File whose churn overlay should be removed",
        dir_okay=False,
    ),
):
    """
    Remove churnmap decorations and print the plain file.

    Decorations owned by anything else are left alone.
    """
    try:
        settings = load_config()
    except ChurnMapError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if not file.is_file():
        console.print(f"[yellow]Nothing to clear:[/yellow] {file} does not exist")
        return

    surface = TerminalSurface.from_file(file)
    removed = api.clear(surface, config=settings)
    surface.show(console)
    console.print(f"[dim]Removed {removed} churn decorations[/dim]")
