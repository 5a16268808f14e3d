"""Stable Dependencies Principle checks.

Dependencies should point toward stability. An edge depender -> dependee is
a violation when the depender is more stable (lower instability) than the
module it depends on, so the depender inherits the dependee's volatility.
"""

from typing import Iterable, Mapping

from ..graph.models import DependencyGraph
from ..logging_config import get_logger
from .models import UNDEFINED, ModuleMetrics, Violation

logger = get_logger(__name__)


def find_sdp_violations(
    graph: DependencyGraph,
    metrics: Mapping[str, ModuleMetrics],
) -> list[Violation]:
    """Report every dependency that breaches the Stable Dependencies Principle.

    A violation is raised iff I(depender) < I(dependee). Edges touching a
    module with undefined instability are skipped. Results are ranked by
    descending delta_i, ties broken by depender then dependee.
    """
    violations: list[Violation] = []
    skipped = 0

    for dep in graph.dependencies:
        source_i = metrics[dep.source].instability
        target_i = metrics[dep.target].instability
        if source_i is UNDEFINED or target_i is UNDEFINED:
            skipped += 1
            continue
        if source_i < target_i:
            violations.append(Violation(dep.source, dep.target, target_i - source_i))

    violations.sort(key=lambda v: (-v.delta_i, v.depender, v.dependee))

    if skipped:
        logger.debug(f"Skipped {skipped} dependencies with undefined instability")
    logger.debug(f"Found {len(violations)} SDP violations")
    return violations


def filter_violations(violations: Iterable[Violation], min_delta: float) -> list[Violation]:
    """Keep violations whose delta_i is strictly above ``min_delta``."""
    return [v for v in violations if v.is_high_priority(min_delta)]
