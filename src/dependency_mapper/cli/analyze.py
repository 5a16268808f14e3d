"""Coupling analysis command: metrics, cycles and SDP violations."""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.table import Table

from ..architecture.analyzer import AnalysisResult, CouplingAnalyzer
from ..architecture.models import Zone
from ..config import AnalysisConfig
from ..exceptions import DependencyMapperError
from ..logging_config import setup_logging
from ..serializers import dumps, result_to_dict
from . import app
from ._common import console, format_ratio, read_input, resolve_config

_ZONE_STYLE = {Zone.PAIN: "red", Zone.USELESS: "yellow", Zone.NONE: "green"}


@app.command()
def analyze(
    input_file: Path = typer.Argument(
        ...,
        help="Edge list: JSON document or CSV with from,to columns",
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
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json (for tooling)",
        click_type=click.Choice(["rich", "json"], case_sensitive=False),
    ),
    min_delta: Optional[float] = typer.Option(
        None,
        "--min-delta",
        help="Only show violations with delta I above this (default: show all)",
        min=0.0,
        max=1.0,
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
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show every module, not only the ones with issues, and enable DEBUG logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress logging",
    ),
):
    """
    Compute Martin coupling metrics, circular dependencies and SDP violations.

    [bold cyan]Examples:[/bold cyan]

      dependency-mapper analyze deps.json

      dependency-mapper analyze edges.csv --types types.json --format json

      dependency-mapper analyze deps.json --min-delta 0.3
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        fragment = read_input(input_file, types)
        result = CouplingAnalyzer(settings.thresholds).analyze(
            fragment.edges, fragment.type_counts
        )
    except DependencyMapperError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)

    if fmt == "json":
        data = result_to_dict(result, settings.thresholds.high_priority_delta)
        if min_delta is not None:
            data["violations"] = [v for v in data["violations"] if v["delta_i"] > min_delta]
        typer.echo(dumps(data))
    else:
        _output_rich(result, settings, min_delta=min_delta, verbose=verbose)


def _output_rich(
    result: AnalysisResult,
    settings: AnalysisConfig,
    min_delta: Optional[float] = None,
    verbose: bool = False,
) -> None:
    """Human-readable terminal output. Only shows issues unless verbose."""
    graph = result.graph
    has_issues = False

    console.print()
    console.print(
        f"  [bold]{result.module_count}[/bold] modules, "
        f"[bold]{graph.edge_count}[/bold] dependencies"
    )
    console.print()

    # ── Circular Dependencies ──────────────────────────────────────
    if result.cycles:
        has_issues = True
        console.print("[bold red]Circular Dependencies[/bold red]")
        for cycle in result.cycles:
            label = "self-loop" if cycle.is_self_loop else f"{cycle.size} modules"
            console.print(f"  {' -> '.join(cycle.path)}  [dim]({label})[/dim]")
        console.print()

    # ── SDP Violations ─────────────────────────────────────────────
    violations = result.violations
    if min_delta is not None:
        violations = result.high_priority_violations(min_delta)
    if settings.max_violations:
        violations = violations[: settings.max_violations]

    if violations:
        has_issues = True
        high = settings.thresholds.high_priority_delta
        console.print(
            "[bold yellow]Stable Dependencies Violations[/bold yellow] "
            "(stable module depends on a less stable one)"
        )
        for v in violations:
            style = "red" if v.is_high_priority(high) else "yellow"
            console.print(
                f"  [bold]{v.depender}[/bold] -> [bold]{v.dependee}[/bold]  "
                f"[{style}]ΔI={v.delta_i:.2f}[/{style}]"
            )
        hidden = len(result.violations) - len(violations)
        if hidden > 0:
            console.print(f"  [dim]... and {hidden} more below the threshold or limit[/dim]")
        console.print()

    # ── Zones ──────────────────────────────────────────────────────
    for zone, title in ((Zone.PAIN, "Zone of Pain"), (Zone.USELESS, "Zone of Uselessness")):
        members = result.modules_in_zone(zone)
        if members:
            has_issues = True
            console.print(f"[bold {_ZONE_STYLE[zone]}]{title}[/bold {_ZONE_STYLE[zone]}]")
            console.print(f"  {', '.join(members)}")
            console.print()

    # ── Verbose: Module Metrics ────────────────────────────────────
    if verbose:
        console.print("[bold]Module Metrics[/bold]")
        table = Table(show_header=True)
        table.add_column("Module", style="cyan")
        table.add_column("Ca", justify="right")
        table.add_column("Ce", justify="right")
        table.add_column("I", justify="right")
        table.add_column("A", justify="right")
        table.add_column("D", justify="right")
        table.add_column("Zone")

        for name, m in result.metrics.items():
            style = _ZONE_STYLE[m.zone]
            table.add_row(
                name,
                str(m.afferent_coupling),
                str(m.efferent_coupling),
                format_ratio(m.instability),
                format_ratio(m.abstractness),
                format_ratio(m.main_seq_distance),
                f"[{style}]{m.zone.value}[/{style}]",
            )
        console.print(table)
        console.print()

    if not has_issues:
        console.print("[bold green]No coupling issues found.[/bold green]")
    console.print()
