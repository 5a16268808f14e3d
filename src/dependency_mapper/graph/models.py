"""Data models for the module dependency graph.

Levels:
  Modules: identities plus declared type counts (from the extractor)
  Dependencies: distinct directed edges between different modules
  Derived structures: cycles (SCCs and self-loops)
"""

from dataclasses import dataclass, field
from typing import NamedTuple


class TypeCount(NamedTuple):
    """A raw type-count record as emitted by a source extractor."""

    module: str
    total_types: int
    abstract_types: int


# ── Modules and relationships ──────────────────────────────────────


@dataclass(frozen=True)
class Module:
    """A unit of code identified by an opaque name or path."""

    name: str
    total_types: int = 0
    abstract_types: int = 0


@dataclass(frozen=True, order=True)
class Dependency:
    """Directed edge: source depends on target. Never a self-loop."""

    source: str
    target: str


@dataclass(frozen=True)
class DependencyGraph:
    """Deduplicated module dependency graph.

    Edges are directed: adjacency[A] contains B means A depends on B.
    Neighbor tuples are sorted so every traversal is deterministic.
    Self-loops are kept apart and never appear in adjacency.
    """

    modules: dict[str, Module] = field(default_factory=dict)
    dependencies: tuple[Dependency, ...] = ()
    adjacency: dict[str, tuple[str, ...]] = field(default_factory=dict)
    reverse: dict[str, tuple[str, ...]] = field(default_factory=dict)
    self_loops: tuple[str, ...] = ()

    @property
    def module_names(self) -> list[str]:
        return sorted(self.modules)

    @property
    def edge_count(self) -> int:
        return len(self.dependencies)

    def successors(self, name: str) -> tuple[str, ...]:
        return self.adjacency.get(name, ())

    def predecessors(self, name: str) -> tuple[str, ...]:
        return self.reverse.get(name, ())

    def has_dependency(self, source: str, target: str) -> bool:
        return target in self.adjacency.get(source, ())


# ── Derived structures ─────────────────────────────────────────────


@dataclass(frozen=True)
class Cycle:
    """A strongly connected component with more than one module, or a self-loop.

    ``members`` is sorted. ``path`` is one concrete closed walk through the
    cycle that starts and ends at ``members[0]``.
    """

    members: tuple[str, ...]
    path: tuple[str, ...]

    @property
    def is_self_loop(self) -> bool:
        return len(self.members) == 1

    @property
    def size(self) -> int:
        return len(self.members)
