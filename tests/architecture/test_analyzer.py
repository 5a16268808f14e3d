"""End-to-end tests for CouplingAnalyzer."""

import pytest

from dependency_mapper.architecture.analyzer import AnalysisResult, CouplingAnalyzer
from dependency_mapper.architecture.models import UNDEFINED, Zone
from dependency_mapper.config import ThresholdConfig
from dependency_mapper.exceptions import DataIntegrityError
from dependency_mapper.graph.builder import build_dependency_graph


@pytest.fixture
def analyzer():
    return CouplingAnalyzer()


class TestScenarios:
    def test_diamond(self, analyzer, diamond_edges):
        result = analyzer.analyze(diamond_edges)
        assert result.cycles == []
        m = result.metrics
        assert (m["A"].ca, m["A"].ce, m["A"].instability) == (0, 2, 1.0)
        assert (m["B"].ca, m["B"].ce, m["B"].instability) == (1, 1, 0.5)
        assert (m["C"].ca, m["C"].ce, m["C"].instability) == (1, 1, 0.5)
        assert (m["D"].ca, m["D"].ce, m["D"].instability) == (2, 0, 0.0)

    def test_mutual_cycle(self, analyzer, mutual_edges):
        result = analyzer.analyze(mutual_edges)
        assert len(result.cycles) == 1
        assert result.cycles[0].members == ("X", "Y")
        assert result.metrics["X"].instability == 0.5
        assert result.metrics["Y"].instability == 0.5
        assert (result.metrics["X"].ca, result.metrics["X"].ce) == (1, 1)

    def test_isolated_module(self, analyzer):
        graph = build_dependency_graph([("a", "b")], [("Z", 0, 0)])
        result = analyzer.analyze_graph(graph)
        z = result.metrics["Z"]
        assert z.instability is UNDEFINED
        assert z.abstractness is UNDEFINED
        assert z.zone is Zone.NONE

    def test_abstractness(self, analyzer):
        result = analyzer.analyze([("m", "n")], [("m", 10, 3)])
        assert result.metrics["m"].abstractness == 0.3

    def test_sdp_violation(self, analyzer, sdp_edges):
        result = analyzer.analyze(sdp_edges)
        assert len(result.violations) == 1
        v = result.violations[0]
        assert (v.depender, v.dependee) == ("P", "Q")
        assert v.delta_i == pytest.approx(0.7)

    def test_main_sequence_distance(self, analyzer):
        # I = 3/5 = 0.6, A = 1/10 = 0.1
        edges = [("m", f"out{i}") for i in range(3)] + [(f"in{i}", "m") for i in range(2)]
        result = analyzer.analyze(edges, [("m", 10, 1)])
        m = result.metrics["m"]
        assert m.instability == pytest.approx(0.6)
        assert m.abstractness == pytest.approx(0.1)
        assert m.main_seq_distance == pytest.approx(0.3)


class TestAnalyzer:
    def test_empty_input(self, analyzer):
        result = analyzer.analyze([], [])
        assert result.module_count == 0
        assert result.cycles == []
        assert result.metrics == {}
        assert result.violations == []

    def test_integrity_error_aborts_run(self, analyzer):
        with pytest.raises(DataIntegrityError):
            analyzer.analyze([("a", "b")], [("a", 1, 2)])

    def test_idempotent(self, analyzer, sdp_edges, mutual_edges):
        edges = sdp_edges + mutual_edges + [("Q", "Q")]
        types = [("P", 5, 1), ("Q", 3, 3)]
        assert analyzer.analyze(edges, types) == analyzer.analyze(edges, types)

    def test_input_order_does_not_matter(self, analyzer, sdp_edges, mutual_edges):
        edges = sdp_edges + mutual_edges
        assert analyzer.analyze(edges) == analyzer.analyze(list(reversed(edges)))

    def test_custom_thresholds(self):
        edges = [(f"user{i}", "util") for i in range(3)] + [("util", "x")]
        # util: I = 0.25, A = 0.25
        result = CouplingAnalyzer(ThresholdConfig(pain_threshold=0.3)).analyze(
            edges, [("util", 4, 1)]
        )
        assert result.metrics["util"].zone is Zone.PAIN
        default = CouplingAnalyzer().analyze(edges, [("util", 4, 1)])
        assert default.metrics["util"].zone is Zone.NONE

    def test_modules_in_zone(self, analyzer):
        edges = [(f"user{i}", "util") for i in range(5)]
        result = analyzer.analyze(edges, [("util", 8, 0)])
        assert result.modules_in_zone(Zone.PAIN) == ["util"]
        assert result.modules_in_zone(Zone.USELESS) == []

    def test_high_priority_violations(self, analyzer, sdp_edges):
        result = analyzer.analyze(sdp_edges)
        assert len(result.high_priority_violations(0.3)) == 1
        assert result.high_priority_violations(0.8) == []

    def test_has_cycles(self, analyzer, mutual_edges, diamond_edges):
        assert analyzer.analyze(mutual_edges).has_cycles
        assert not analyzer.analyze(diamond_edges).has_cycles

    def test_default_result_is_empty(self):
        result = AnalysisResult()
        assert result.module_count == 0
        assert not result.has_cycles
