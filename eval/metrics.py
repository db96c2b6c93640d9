#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
metrics.py
----------
Secondary statistics derived from the raw counters of one search, plus
aggregate helpers for repeated runs.

Assumptions
-----------
- Raw counters come from a planner in planners/ (TraversalCounters below).
- path_length counts positions, start included (a 1-step path has length 2).
- In weighted mode (terrain active) path quality is judged by path cost,
  otherwise by path length. This holds for every planner.

What's inside
-------------
- TraversalCounters: what a planner records while it runs
- SearchMetrics / compute_search_metrics(): the derived values
- summarize_runs(): mean/std/min/max over repeated runs
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, Optional
import numpy as np


@dataclass(frozen=True)
class TraversalCounters:
    """Raw counters collected during one search."""
    nodes_expanded: int
    total_successors: int
    execution_time_ms: float
    # A* only: running sums of h and f over expanded nodes, in expansion order
    heuristic_sum: Optional[float] = None
    f_value_sum: Optional[float] = None


@dataclass(frozen=True)
class SearchMetrics:
    path_length: int
    path_cost: float
    branching_factor: float
    completion_percentage: float
    nodes_per_second: float
    time_per_node_ms: float
    total_free_spaces: int
    weighted: bool
    optimal_reference: Optional[float] = None
    # success only
    penetrance: Optional[float] = None
    search_efficiency_rate: Optional[float] = None
    path_optimality_ratio: Optional[float] = None
    # A* only
    avg_heuristic: Optional[float] = None
    avg_f_value: Optional[float] = None

    def to_dict(self) -> Dict:
        return asdict(self)


def _safe_div(num: float, den: float) -> float:
    return float(num) / den if den else 0.0


def compute_search_metrics(counters: TraversalCounters,
                           *,
                           success: bool,
                           path_length: int,
                           path_cost: float,
                           total_free_spaces: int,
                           weighted: bool,
                           optimal_reference: Optional[float] = None) -> SearchMetrics:
    """
    Derive the metrics for one finished search (success or failure).

    Zero denominators give 0 rather than raising.
    """
    n = counters.nodes_expanded
    ms = counters.execution_time_ms

    penetrance = efficiency = ratio = None
    if success:
        penetrance = _safe_div(path_length, n)
        efficiency = penetrance * 100.0
        if optimal_reference is not None:
            found = path_cost if weighted else path_length
            ratio = _safe_div(optimal_reference, found)

    avg_h = avg_f = None
    if counters.heuristic_sum is not None:
        avg_h = _safe_div(counters.heuristic_sum, n)
        avg_f = _safe_div(counters.f_value_sum or 0.0, n)

    return SearchMetrics(
        path_length=path_length,
        path_cost=path_cost,
        branching_factor=_safe_div(counters.total_successors, n),
        completion_percentage=_safe_div(n, total_free_spaces) * 100.0,
        nodes_per_second=_safe_div(n, ms / 1000.0),
        time_per_node_ms=_safe_div(ms, n),
        total_free_spaces=total_free_spaces,
        weighted=weighted,
        optimal_reference=optimal_reference,
        penetrance=penetrance,
        search_efficiency_rate=efficiency,
        path_optimality_ratio=ratio,
        avg_heuristic=avg_h,
        avg_f_value=avg_f,
    )


# -------------------- Aggregates over repeated runs -------------------- #

def summarize_runs(results: Iterable) -> Dict[str, float]:
    """
    Runtime and effort statistics over SearchResults of the same configuration.
    Returns {} for an empty input.
    """
    results = list(results)
    if not results:
        return {}
    times = np.array([r.execution_time_ms for r in results], dtype=float)
    expanded = np.array([r.nodes_expanded for r in results], dtype=float)
    out = {
        "runs": len(results),
        "success_rate": float(np.mean([bool(r.success) for r in results])),
        "mean_time_ms": float(np.mean(times)),
        "std_time_ms": float(np.std(times)),
        "min_time_ms": float(np.min(times)),
        "max_time_ms": float(np.max(times)),
        "mean_nodes_expanded": float(np.mean(expanded)),
    }
    return out

