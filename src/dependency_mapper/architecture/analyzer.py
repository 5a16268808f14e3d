"""CouplingAnalyzer: one full analysis run.

Orchestrates:
1. Graph construction (raw edges + type counts -> DependencyGraph)
2. Cycle detection
3. Martin metrics computation
4. Stable Dependencies Principle violation detection

Each run is independent and holds no state between calls, so one analyzer
may be shared across threads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..graph.algorithms import detect_cycles
from ..graph.builder import RawEdge, RawTypeCount, build_dependency_graph
from ..graph.models import Cycle, DependencyGraph
from ..logging_config import get_logger
from .metrics import compute_metrics
from .models import ModuleMetrics, Violation, Zone
from .violations import filter_violations, find_sdp_violations

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Top-level result of a coupling analysis run."""

    graph: DependencyGraph = field(default_factory=DependencyGraph)
    cycles: list[Cycle] = field(default_factory=list)
    metrics: dict[str, ModuleMetrics] = field(default_factory=dict)
    violations: list[Violation] = field(default_factory=list)

    @property
    def module_count(self) -> int:
        return len(self.graph.modules)

    @property
    def has_cycles(self) -> bool:
        return bool(self.cycles)

    def modules_in_zone(self, zone: Zone) -> list[str]:
        return [name for name, m in self.metrics.items() if m.zone is zone]

    def high_priority_violations(self, threshold: float) -> list[Violation]:
        return filter_violations(self.violations, threshold)


class CouplingAnalyzer:
    """Turns raw extractor output into cycles, metrics and violations."""

    name = "coupling"

    def __init__(self, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS) -> None:
        self.thresholds = thresholds

    def analyze(
        self,
        edges: Iterable[RawEdge],
        type_counts: Iterable[RawTypeCount] = (),
    ) -> AnalysisResult:
        """Run the full analysis.

        Raises:
            DataIntegrityError: If a type-count record is malformed. No
                partial result is produced.
        """
        graph = build_dependency_graph(edges, type_counts)
        return self.analyze_graph(graph)

    def analyze_graph(self, graph: DependencyGraph) -> AnalysisResult:
        """Run cycle, metric and violation analysis over an existing graph."""
        if not graph.modules:
            logger.info("Empty dependency graph - nothing to analyze")
            return AnalysisResult(graph=graph)

        cycles = detect_cycles(graph)
        metrics = compute_metrics(graph, self.thresholds)
        violations = find_sdp_violations(graph, metrics)

        logger.debug(
            f"Analyzed {len(graph.modules)} modules: {len(cycles)} cycles, "
            f"{len(violations)} violations"
        )
        return AnalysisResult(
            graph=graph,
            cycles=cycles,
            metrics=metrics,
            violations=violations,
        )
