"""Graph algorithms: strongly connected components and cycle detection."""

from collections import deque
from typing import Iterable, Iterator, Mapping, Sequence

from ..logging_config import get_logger
from .models import Cycle, DependencyGraph

logger = get_logger(__name__)


def detect_cycles(graph: DependencyGraph) -> list[Cycle]:
    """Find every circular dependency in the graph.

    Multi-module SCCs are cycles; so is every recorded self-loop, even when
    that module also belongs to a larger SCC. Cycles are ordered by their
    smallest member, then size, then members, so identical input always
    yields identical output.
    """
    cycles: list[Cycle] = []

    for component in tarjan_scc(graph.adjacency, graph.module_names):
        if len(component) > 1:
            members = tuple(sorted(component))
            cycles.append(Cycle(members=members, path=_closed_path(graph, members)))

    for name in graph.self_loops:
        cycles.append(Cycle(members=(name,), path=(name, name)))

    cycles.sort(key=lambda c: (c.members[0], len(c.members), c.members))
    logger.debug(f"Detected {len(cycles)} cycles")
    return cycles


# Explicit DFS frame: the module and the neighbors it has yet to visit
_Frame = tuple[str, Iterator[str]]


def tarjan_scc(
    adjacency: Mapping[str, Sequence[str]], nodes: Iterable[str]
) -> list[set[str]]:
    """Tarjan's algorithm for strongly connected components (iterative).

    Runs on an explicit frame stack, so dependency chains deeper than the
    interpreter's recursion limit are fine. Components come back in
    completion order; roots are visited in the order ``nodes`` yields them.
    Neighbors missing from ``nodes`` are ignored.
    """
    order = list(nodes)
    known = set(order)
    next_index = 0
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    pending: list[str] = []
    pending_set: set[str] = set()
    components: list[set[str]] = []

    def visit(node: str) -> _Frame:
        nonlocal next_index
        index[node] = lowlink[node] = next_index
        next_index += 1
        pending.append(node)
        pending_set.add(node)
        return node, (w for w in adjacency.get(node, ()) if w in known)

    for root in order:
        if root in index:
            continue

        frames: list[_Frame] = [visit(root)]
        while frames:
            node, neighbors = frames[-1]
            descended = False
            for w in neighbors:
                if w not in index:
                    frames.append(visit(w))
                    descended = True
                    break
                if w in pending_set:
                    lowlink[node] = min(lowlink[node], index[w])
            if descended:
                continue

            frames.pop()
            if frames:
                parent = frames[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])

            if lowlink[node] == index[node]:
                component: set[str] = set()
                while True:
                    member = pending.pop()
                    pending_set.discard(member)
                    component.add(member)
                    if member == node:
                        break
                components.append(component)

    return components


def _closed_path(graph: DependencyGraph, members: tuple[str, ...]) -> tuple[str, ...]:
    """Shortest closed walk from members[0] back to itself inside the component.

    BFS restricted to the component, visiting neighbors in sorted order.
    """
    start = members[0]
    inside = set(members)
    parent: dict[str, str] = {}
    queue: deque[str] = deque([start])
    seen = {start}

    while queue:
        node = queue.popleft()
        for neighbor in graph.successors(node):
            if neighbor == start:
                walk = [node]
                while walk[-1] != start:
                    walk.append(parent[walk[-1]])
                walk.reverse()
                return tuple(walk) + (start,)
            if neighbor in inside and neighbor not in seen:
                seen.add(neighbor)
                parent[neighbor] = node
                queue.append(neighbor)

    raise RuntimeError(f"SCC invariant violated: no closed path through {start!r}")
