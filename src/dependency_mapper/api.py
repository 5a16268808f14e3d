"""Public API for Dependency Mapper.

Users should call analyze() instead of wiring the graph builder, cycle
detector, metrics calculator and violation analyzer by hand.

Example:
    >>> from dependency_mapper import analyze
    >>>
    >>> result = analyze([("app", "core"), ("core", "util")])
    >>> result.metrics["core"].instability
    0.5
    >>>
    >>> # With type counts and a custom config file
    >>> result = analyze(
    ...     edges,
    ...     type_counts=[("core", 10, 3)],
    ...     config_file=Path("dependency-mapper.toml"),
    ... )
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, TypeVar

from .architecture.analyzer import AnalysisResult, CouplingAnalyzer
from .config import AnalysisConfig, load_config
from .extraction import ExtractionFragment, Extractor, collect_fragments, merge_fragments
from .graph.builder import RawEdge, RawTypeCount
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

T = TypeVar("T")


def analyze(
    edges: Iterable[RawEdge],
    type_counts: Iterable[RawTypeCount] = (),
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> AnalysisResult:
    """Analyze a raw dependency edge list.

    This is the main entry point. It orchestrates:
    1. Load configuration (auto-discover TOML + apply overrides)
    2. Build the dependency graph
    3. Detect cycles, compute metrics, find SDP violations

    Args:
        edges: Raw (from, to) module identifier pairs
        type_counts: (module, total_types, abstract_types) records
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., verbose=True, thresholds=...)

    Returns:
        AnalysisResult with graph, cycles, metrics and violations

    Raises:
        ConfigurationError: If configuration is invalid
        DataIntegrityError: If a type-count record is malformed
    """
    config = _load_config(config_file, overrides)
    return _run(config, edges, type_counts)


def analyze_fragments(
    fragments: Iterable[ExtractionFragment],
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> AnalysisResult:
    """Merge extractor fragments and analyze the combined input."""
    merged = merge_fragments(fragments)
    return analyze(merged.edges, merged.type_counts, config_file=config_file, **overrides)


def analyze_sources(
    sources: Sequence[T],
    extractor: Extractor[T],
    config_file: Optional[Path] = None,
    **overrides: Any,
) -> AnalysisResult:
    """Run an extractor over every source, then analyze the merged output.

    Extraction uses ``config.workers`` threads (auto-detected when unset).
    Extractor exceptions propagate unchanged.
    """
    config = _load_config(config_file, overrides)
    fragments = collect_fragments(sources, extractor, max_workers=config.workers)
    merged = merge_fragments(fragments)
    return _run(config, merged.edges, merged.type_counts)


def _load_config(config_file: Optional[Path], overrides: dict[str, Any]) -> AnalysisConfig:
    if "verbose" in overrides or "quiet" in overrides:
        setup_logging(
            verbose=bool(overrides.get("verbose")), quiet=bool(overrides.get("quiet"))
        )

    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")
    return config


def _run(
    config: AnalysisConfig,
    edges: Iterable[RawEdge],
    type_counts: Iterable[RawTypeCount],
) -> AnalysisResult:
    result = CouplingAnalyzer(config.thresholds).analyze(edges, type_counts)

    logger.info(
        f"Analysis complete: {result.module_count} modules, {len(result.cycles)} cycles, "
        f"{len(result.violations)} violations"
    )
    return result
