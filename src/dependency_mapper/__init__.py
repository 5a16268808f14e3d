"""
Dependency Mapper - Package Coupling Analysis

Turns a raw module dependency edge list into Robert C. Martin's package
coupling metrics (Ca, Ce, instability, abstractness, distance from the main
sequence), finds circular dependencies with Tarjan's algorithm, and flags
Stable Dependencies Principle violations.
"""

__version__ = "0.1.0"

from .api import analyze, analyze_fragments, analyze_sources
from .architecture import (
    UNDEFINED,
    AnalysisResult,
    CouplingAnalyzer,
    ModuleMetrics,
    Violation,
    Zone,
)
from .exceptions import DataIntegrityError, DependencyMapperError
from .extraction import ExtractionFragment, collect_fragments, merge_fragments
from .graph import Cycle, DependencyGraph, Module, build_dependency_graph, detect_cycles

__all__ = [
    "analyze",  # Main entry point
    "analyze_fragments",
    "analyze_sources",
    "AnalysisResult",
    "CouplingAnalyzer",  # Advanced usage (direct analyzer access)
    "Cycle",
    "DataIntegrityError",
    "DependencyGraph",
    "DependencyMapperError",
    "ExtractionFragment",
    "Module",
    "ModuleMetrics",
    "UNDEFINED",
    "Violation",
    "Zone",
    "build_dependency_graph",
    "collect_fragments",
    "detect_cycles",
    "merge_fragments",
]
