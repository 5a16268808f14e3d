"""Serialization layer - transforms analysis results into a JSON-ready contract.

Rules:
- Modules are always emitted in sorted order
- Ratios stay on the 0-1 scale, undefined ratios become null (never 0)
- Zones are lowercase strings ("none", "pain", "useless")
- Cycles and violations keep the order the analyzer produced

Serializing the same result twice gives byte-identical JSON.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from .architecture.analyzer import AnalysisResult
from .architecture.models import ModuleMetrics, Violation
from .coaching import PredictionReport
from .graph.models import Cycle


def metrics_to_dict(m: ModuleMetrics) -> dict[str, Any]:
    return {
        "ca": m.afferent_coupling,
        "ce": m.efferent_coupling,
        "instability": m.instability,
        "abstractness": m.abstractness,
        "distance": m.main_seq_distance,
        "zone": m.zone.value,
    }


def cycle_to_dict(cycle: Cycle) -> dict[str, Any]:
    return {"members": list(cycle.members), "path": list(cycle.path)}


def violation_to_dict(v: Violation, high_priority_delta: Optional[float] = None) -> dict[str, Any]:
    data: dict[str, Any] = {
        "depender": v.depender,
        "dependee": v.dependee,
        "delta_i": v.delta_i,
    }
    if high_priority_delta is not None:
        data["high_priority"] = v.is_high_priority(high_priority_delta)
    return data


def result_to_dict(
    result: AnalysisResult, high_priority_delta: Optional[float] = None
) -> dict[str, Any]:
    """Machine-readable form of a full analysis run."""
    graph = result.graph
    return {
        "summary": {
            "modules": result.module_count,
            "dependencies": graph.edge_count,
            "self_loops": len(graph.self_loops),
            "cycles": len(result.cycles),
            "violations": len(result.violations),
        },
        "modules": {
            name: {
                "total_types": graph.modules[name].total_types,
                "abstract_types": graph.modules[name].abstract_types,
                **metrics_to_dict(result.metrics[name]),
            }
            for name in sorted(result.metrics)
        },
        "dependencies": [[d.source, d.target] for d in graph.dependencies],
        "cycles": [cycle_to_dict(c) for c in result.cycles],
        "violations": [violation_to_dict(v, high_priority_delta) for v in result.violations],
    }


def report_to_dict(report: PredictionReport) -> dict[str, Any]:
    return {
        "hits": report.hits,
        "total": report.total,
        "accuracy": report.accuracy,
        "outcomes": [
            {
                "module": o.module,
                "metric": o.metric,
                "predicted": _plain(o.predicted),
                "actual": _plain(o.actual),
                "error": o.error,
                "hit": o.hit,
            }
            for o in report.outcomes
        ],
    }


def dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, sort_keys=True)


def _plain(value: Any) -> Any:
    return getattr(value, "value", value)
