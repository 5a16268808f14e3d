"""Prediction comparison command: score guessed metrics against computed ones."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.table import Table

from ..architecture.analyzer import CouplingAnalyzer
from ..coaching import DEFAULT_TOLERANCE, PredictionReport, compare_predictions
from ..exceptions import DependencyMapperError
from ..loaders import load_predictions
from ..logging_config import setup_logging
from ..serializers import dumps, report_to_dict
from . import app
from ._common import console, read_input, resolve_config


@app.command()
def compare(
    input_file: Path = typer.Argument(
        ...,
        help="Edge list: JSON document or CSV with from,to columns",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    predictions_file: Path = typer.Argument(
        ...,
        help="JSON list of predictions (module, instability, abstractness, zone)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    types: Optional[Path] = typer.Option(
        None,
        "--types",
        "-t",
        help="JSON list of type-count records (module, total, abstract)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    tolerance: float = typer.Option(
        DEFAULT_TOLERANCE,
        "--tolerance",
        help="Maximum absolute error that still counts as a correct guess",
        min=0.0,
        max=1.0,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich or json",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
):
    """
    Compare predicted instability, abstractness and zones with the analysis.

    [bold cyan]Examples:[/bold cyan]

      dependency-mapper compare deps.json guesses.json

      dependency-mapper compare deps.json guesses.json --tolerance 0.05
    """
    logger = setup_logging()

    try:
        settings = resolve_config(config=config)
        fragment = read_input(input_file, types)
        result = CouplingAnalyzer(settings.thresholds).analyze(
            fragment.edges, fragment.type_counts
        )
        report = compare_predictions(result, load_predictions(predictions_file), tolerance)
    except DependencyMapperError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    if fmt == "json":
        typer.echo(dumps(report_to_dict(report)))
    else:
        _output_rich(report)


def _output_rich(report: PredictionReport) -> None:
    if not report.total:
        console.print("[yellow]No predictions to score[/yellow]")
        return

    table = Table(show_header=True)
    table.add_column("Module", style="cyan")
    table.add_column("Metric")
    table.add_column("Predicted", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Result")

    for o in report.outcomes:
        table.add_row(
            o.module,
            o.metric,
            _show(o.predicted),
            _show(o.actual),
            "[green]hit[/green]" if o.hit else "[red]miss[/red]",
        )
    console.print(table)
    console.print(
        f"  [bold]{report.hits}/{report.total}[/bold] correct "
        f"({report.accuracy:.0%})"
    )


def _show(value) -> str:
    if value is None:
        return "undefined"
    if isinstance(value, float):
        return f"{value:.2f}"
    return getattr(value, "value", str(value))
