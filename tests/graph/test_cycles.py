"""Tests for graph/algorithms.py: Tarjan SCC and cycle detection."""

import pytest

from dependency_mapper.graph.algorithms import detect_cycles, tarjan_scc
from dependency_mapper.graph.builder import build_dependency_graph
from dependency_mapper.graph.models import Cycle


class TestTarjanSCC:
    def test_empty_graph(self):
        assert tarjan_scc({}, []) == []

    def test_dag_gives_singletons(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": []}
        sccs = tarjan_scc(adjacency, ["a", "b", "c"])
        assert sorted(map(sorted, sccs)) == [["a"], ["b"], ["c"]]

    def test_simple_cycle(self):
        adjacency = {"a": ["b"], "b": ["c"], "c": ["a"]}
        sccs = tarjan_scc(adjacency, ["a", "b", "c"])
        assert sccs == [{"a", "b", "c"}]

    def test_two_components(self):
        adjacency = {"a": ["b"], "b": ["a", "c"], "c": ["d"], "d": ["c"]}
        sccs = tarjan_scc(adjacency, ["a", "b", "c", "d"])
        assert sorted(map(sorted, sccs)) == [["a", "b"], ["c", "d"]]

    def test_ignores_unknown_neighbors(self):
        adjacency = {"a": ["ghost"]}
        assert tarjan_scc(adjacency, ["a"]) == [{"a"}]

    def test_deep_chain_no_recursion_error(self):
        n = 5000
        nodes = [f"n{i:05d}" for i in range(n)]
        adjacency = {nodes[i]: [nodes[i + 1]] for i in range(n - 1)}
        adjacency[nodes[-1]] = [nodes[0]]
        sccs = tarjan_scc(adjacency, nodes)
        assert len(sccs) == 1
        assert len(sccs[0]) == n


class TestDetectCycles:
    def test_no_cycles_in_diamond(self, diamond_edges):
        graph = build_dependency_graph(diamond_edges)
        assert detect_cycles(graph) == []

    def test_mutual_cycle(self, mutual_edges):
        graph = build_dependency_graph(mutual_edges)
        cycles = detect_cycles(graph)
        assert cycles == [Cycle(members=("X", "Y"), path=("X", "Y", "X"))]

    def test_self_loop_is_cycle(self):
        graph = build_dependency_graph([("a", "a"), ("a", "b")])
        cycles = detect_cycles(graph)
        assert cycles == [Cycle(members=("a",), path=("a", "a"))]
        assert cycles[0].is_self_loop

    def test_singleton_without_self_loop_is_not_cycle(self):
        graph = build_dependency_graph([("a", "b")])
        assert detect_cycles(graph) == []

    def test_self_loop_inside_larger_cycle_reported_separately(self):
        graph = build_dependency_graph([("a", "b"), ("b", "a"), ("b", "b")])
        cycles = detect_cycles(graph)
        assert [c.members for c in cycles] == [("a", "b"), ("b",)]

    def test_cycle_reported_once(self):
        # Triangle with a chord: still one SCC, one cycle
        edges = [("a", "b"), ("b", "c"), ("c", "a"), ("a", "c")]
        cycles = detect_cycles(build_dependency_graph(edges))
        assert len(cycles) == 1
        assert cycles[0].members == ("a", "b", "c")

    def test_path_is_closed_and_uses_real_edges(self):
        edges = [("m", "n"), ("n", "o"), ("o", "p"), ("p", "m"), ("n", "m")]
        graph = build_dependency_graph(edges)
        (cycle,) = detect_cycles(graph)
        assert cycle.path[0] == cycle.path[-1] == "m"
        for source, target in zip(cycle.path, cycle.path[1:]):
            assert graph.has_dependency(source, target)

    def test_path_is_shortest(self):
        edges = [("a", "b"), ("b", "c"), ("c", "a"), ("b", "a")]
        (cycle,) = detect_cycles(build_dependency_graph(edges))
        assert cycle.path == ("a", "b", "a")

    def test_deterministic_order(self):
        edges = [
            ("z1", "z2"), ("z2", "z1"),
            ("b", "c"), ("c", "b"),
            ("m", "m"),
            ("a", "q"), ("q", "r"), ("r", "a"),
        ]
        cycles = detect_cycles(build_dependency_graph(edges))
        assert [c.members for c in cycles] == [
            ("a", "q", "r"),
            ("b", "c"),
            ("m",),
            ("z1", "z2"),
        ]

    def test_order_independent_of_input_order(self):
        edges = [("x", "y"), ("y", "x"), ("a", "b"), ("b", "a"), ("k", "k")]
        first = detect_cycles(build_dependency_graph(edges))
        second = detect_cycles(build_dependency_graph(list(reversed(edges))))
        assert first == second

    def test_every_cycle_member_is_a_module(self):
        edges = [("a", "b"), ("b", "c"), ("c", "a"), ("c", "d")]
        graph = build_dependency_graph(edges)
        for cycle in detect_cycles(graph):
            assert set(cycle.members) <= set(graph.modules)
            assert "d" not in cycle.members

    def test_empty_graph(self):
        assert detect_cycles(build_dependency_graph([])) == []


def _reachable(graph, start):
    seen = set()
    stack = list(graph.successors(start))
    while stack:
        node = stack.pop()
        if node not in seen:
            seen.add(node)
            stack.extend(graph.successors(node))
    return seen


class TestRandomGraphs:
    """Cycle detection checked against brute-force mutual reachability."""

    @pytest.mark.parametrize("seed", range(25))
    def test_one_cycle_per_strongly_connected_group(self, seed, random_input):
        edges, _ = random_input(seed)
        graph = build_dependency_graph(edges)
        reach = {name: _reachable(graph, name) for name in graph.modules}

        expected = set()
        for name in graph.modules:
            group = {other for other in reach[name] if name in reach[other]} | {name}
            if len(group) > 1:
                expected.add(tuple(sorted(group)))

        cycles = detect_cycles(graph)
        multi = [c.members for c in cycles if not c.is_self_loop]
        assert len(multi) == len(set(multi))
        assert set(multi) == expected
        assert [c.members[0] for c in cycles if c.is_self_loop] == list(graph.self_loops)

    @pytest.mark.parametrize("seed", range(25))
    def test_paths_follow_real_edges(self, seed, random_input):
        edges, _ = random_input(seed)
        graph = build_dependency_graph(edges)
        for cycle in detect_cycles(graph):
            assert cycle.path[0] == cycle.path[-1] == cycle.members[0]
            assert set(cycle.path) <= set(cycle.members)
            if cycle.is_self_loop:
                continue
            for source, target in zip(cycle.path, cycle.path[1:]):
                assert graph.has_dependency(source, target)


@pytest.mark.slow
class TestLargeGraphs:
    def test_100k_module_ring(self):
        n = 100_000
        nodes = [f"n{i:06d}" for i in range(n)]
        edges = [(nodes[i], nodes[(i + 1) % n]) for i in range(n)]
        cycles = detect_cycles(build_dependency_graph(edges))
        assert len(cycles) == 1
        assert cycles[0].size == n
        assert len(cycles[0].path) == n + 1

    def test_100k_module_chain_has_no_cycles(self):
        n = 100_000
        edges = [(f"n{i:06d}", f"n{i + 1:06d}") for i in range(n - 1)]
        assert detect_cycles(build_dependency_graph(edges)) == []
