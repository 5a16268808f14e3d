"""Module dependency graph: models, construction, cycle detection."""

from .algorithms import detect_cycles, tarjan_scc
from .builder import build_dependency_graph
from .models import Cycle, Dependency, DependencyGraph, Module, TypeCount

__all__ = [
    "Cycle",
    "Dependency",
    "DependencyGraph",
    "Module",
    "TypeCount",
    "build_dependency_graph",
    "detect_cycles",
    "tarjan_scc",
]
