"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="churnmap",
    help="churnmap - Line-level churn heatmaps from git history",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"churnmap {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Paint each line of a file by how often git says it changed."""


# Import subcommands to register them
from .visualize import visualize as _visualize  # noqa: F401, E402
from .clear import clear as _clear  # noqa: F401, E402
