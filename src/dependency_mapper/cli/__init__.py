"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="dependency-mapper",
    help="Dependency Mapper - package coupling metrics, cycles and SDP violations",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """Dependency Mapper - package coupling metrics, cycles and SDP violations."""
    if version:
        console.print(
            f"[bold cyan]Dependency Mapper[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .compare import compare as _compare  # noqa: F401, E402
