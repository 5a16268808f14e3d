"""Coupling analysis: Martin metrics, main-sequence zones, SDP violations."""

from .analyzer import AnalysisResult, CouplingAnalyzer
from .metrics import compute_metrics
from .models import UNDEFINED, ModuleMetrics, Violation, Zone
from .violations import filter_violations, find_sdp_violations

__all__ = [
    "AnalysisResult",
    "CouplingAnalyzer",
    "ModuleMetrics",
    "UNDEFINED",
    "Violation",
    "Zone",
    "compute_metrics",
    "filter_violations",
    "find_sdp_violations",
]
