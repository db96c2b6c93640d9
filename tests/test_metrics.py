import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from types import SimpleNamespace

import pytest

from eval.metrics import TraversalCounters, compute_search_metrics, summarize_runs


def _metrics(counters, **kw):
    base = dict(success=True, path_length=5, path_cost=4, total_free_spaces=20, weighted=False)
    base.update(kw)
    return compute_search_metrics(counters, **base)


def test_basic_ratios():
    m = _metrics(TraversalCounters(nodes_expanded=10, total_successors=12, execution_time_ms=2.0))
    assert m.branching_factor == pytest.approx(1.2)
    assert m.penetrance == pytest.approx(0.5)
    assert m.search_efficiency_rate == pytest.approx(50.0)
    assert m.completion_percentage == pytest.approx(50.0)
    assert m.nodes_per_second == pytest.approx(5000.0)
    assert m.time_per_node_ms == pytest.approx(0.2)
    assert m.path_optimality_ratio is None      # no reference given
    assert m.avg_heuristic is None and m.avg_f_value is None


def test_optimality_uses_length_unweighted_and_cost_weighted():
    c = TraversalCounters(10, 12, 1.0)
    # reference length 4 vs found length 5
    assert _metrics(c, optimal_reference=4).path_optimality_ratio == pytest.approx(0.8)
    # reference cost 6 vs found cost 8
    m = _metrics(c, weighted=True, path_cost=8, optimal_reference=6)
    assert m.path_optimality_ratio == pytest.approx(0.75)


def test_zero_denominators_give_zero():
    m = _metrics(TraversalCounters(0, 0, 0.0), success=False, path_length=0, path_cost=0,
                 total_free_spaces=0)
    assert m.branching_factor == 0
    assert m.completion_percentage == 0
    assert m.nodes_per_second == 0
    assert m.time_per_node_ms == 0


def test_failure_leaves_success_only_metrics_empty():
    m = _metrics(TraversalCounters(7, 9, 1.0), success=False, path_length=0, path_cost=0,
                 optimal_reference=5)
    assert m.penetrance is None
    assert m.search_efficiency_rate is None
    assert m.path_optimality_ratio is None
    assert m.branching_factor == pytest.approx(9 / 7)


def test_heuristic_averages():
    m = _metrics(TraversalCounters(4, 3, 1.0, heuristic_sum=6.0, f_value_sum=14.0))
    assert m.avg_heuristic == pytest.approx(1.5)
    assert m.avg_f_value == pytest.approx(3.5)


def test_to_dict_is_flat():
    d = _metrics(TraversalCounters(10, 12, 2.0)).to_dict()
    assert d["path_length"] == 5 and d["weighted"] is False
    assert "penetrance" in d and "avg_f_value" in d


def test_summarize_runs():
    runs = [SimpleNamespace(execution_time_ms=t, nodes_expanded=n, success=s)
            for t, n, s in [(1.0, 10, True), (3.0, 10, True), (2.0, 13, False)]]
    s = summarize_runs(runs)
    assert s["runs"] == 3
    assert s["success_rate"] == pytest.approx(2 / 3)
    assert s["mean_time_ms"] == pytest.approx(2.0)
    assert s["min_time_ms"] == 1.0 and s["max_time_ms"] == 3.0
    assert s["mean_nodes_expanded"] == pytest.approx(11.0)
    assert summarize_runs([]) == {}
