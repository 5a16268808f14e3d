"""Martin metrics computation.

Computes per-module metrics:
- Afferent Coupling (Ca): distinct modules that depend on this module
- Efferent Coupling (Ce): distinct modules this module depends on
- Instability (I): Ce / (Ca + Ce), undefined if isolated
- Abstractness (A): abstract_types / total_types, undefined without types
- Main Sequence Distance (D): |A + I - 1|, undefined if A or I is
- Zone: Pain (low I, low A), Useless (high I, high A), or None
"""

from typing import Dict, Tuple

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..graph.models import DependencyGraph, Module
from ..logging_config import get_logger
from .models import UNDEFINED, ModuleMetrics, Ratio, Zone

logger = get_logger(__name__)


def compute_coupling(module: str, graph: DependencyGraph) -> Tuple[int, int]:
    """Compute afferent (Ca) and efferent (Ce) coupling for a module.

    Counts distinct neighbor modules; the graph already collapses duplicate
    edges and keeps self-loops out of the adjacency.

    Returns:
        Tuple of (Ca, Ce)
    """
    return len(graph.predecessors(module)), len(graph.successors(module))


def compute_instability(ca: int, ce: int) -> Ratio:
    """Compute instability I = Ce / (Ca + Ce).

    Returns:
        Instability in [0, 1], or UNDEFINED if isolated (Ca=Ce=0)
    """
    total = ca + ce
    if total == 0:
        return UNDEFINED
    return ce / total


def compute_abstractness(total_types: int, abstract_types: int) -> Ratio:
    """Compute abstractness A = abstract_types / total_types.

    Returns:
        Abstractness in [0, 1], or UNDEFINED if the module declares no types
    """
    if total_types == 0:
        return UNDEFINED
    return abstract_types / total_types


def compute_main_seq_distance(abstractness: Ratio, instability: Ratio) -> Ratio:
    """Compute main sequence distance D = |A + I - 1|.

    The main sequence is the line from (0, 1) to (1, 0) in the A-I plane:
    - D ≈ 0: balanced module (on the main sequence)
    - D ≈ 1 with A=0, I=0: Zone of Pain (stable but concrete)
    - D ≈ 1 with A=1, I=1: Zone of Uselessness (abstract but unstable)

    Returns:
        Distance in [0, 1], or UNDEFINED if either input is undefined
    """
    if abstractness is UNDEFINED or instability is UNDEFINED:
        return UNDEFINED
    return abs(abstractness + instability - 1.0)


def classify_zone(
    instability: Ratio,
    abstractness: Ratio,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> Zone:
    """Place a module in the Zone of Pain, the Zone of Uselessness, or neither.

    Both boundaries are strict. Undefined inputs always give Zone.NONE.
    """
    if instability is UNDEFINED or abstractness is UNDEFINED:
        return Zone.NONE
    if instability < thresholds.pain_threshold and abstractness < thresholds.pain_threshold:
        return Zone.PAIN
    if instability > thresholds.useless_threshold and abstractness > thresholds.useless_threshold:
        return Zone.USELESS
    return Zone.NONE


def compute_module_metrics(
    module: Module,
    graph: DependencyGraph,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> ModuleMetrics:
    """Compute all Martin metrics for a single module."""
    ca, ce = compute_coupling(module.name, graph)
    instability = compute_instability(ca, ce)
    abstractness = compute_abstractness(module.total_types, module.abstract_types)

    return ModuleMetrics(
        module=module.name,
        afferent_coupling=ca,
        efferent_coupling=ce,
        instability=instability,
        abstractness=abstractness,
        main_seq_distance=compute_main_seq_distance(abstractness, instability),
        zone=classify_zone(instability, abstractness, thresholds),
    )


def compute_metrics(
    graph: DependencyGraph,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> Dict[str, ModuleMetrics]:
    """Compute metrics for every module, keyed by module name in sorted order."""
    metrics = {
        name: compute_module_metrics(graph.modules[name], graph, thresholds)
        for name in graph.module_names
    }

    undefined = sum(1 for m in metrics.values() if m.instability is UNDEFINED)
    if undefined:
        logger.debug(f"{undefined} of {len(metrics)} modules are isolated (instability undefined)")

    return metrics
