"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config
from ..extraction import ExtractionFragment, merge_fragments
from ..loaders import load_fragment, load_type_counts

console = Console()


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    return load_config(config_file=config, verbose=verbose, quiet=quiet)


def read_input(input_file: Path, types_file: Optional[Path] = None) -> ExtractionFragment:
    """Load edges and type counts, merging a separate type-count file if given."""
    fragment = load_fragment(input_file)
    if types_file is None:
        return fragment
    extra = ExtractionFragment(type_counts=tuple(load_type_counts(types_file)))
    return merge_fragments([fragment, extra])


def format_ratio(value: Optional[float]) -> str:
    """Render a metric ratio; undefined stays visibly undefined."""
    if value is None:
        return "[dim]undefined[/dim]"
    return f"{value:.2f}"
