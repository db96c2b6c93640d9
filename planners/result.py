#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SearchResult: the single output contract of every planner.

A result is created fresh by each search and never modified afterwards.
Display code reads the metrics; animation code replays `visited_nodes`
and then `path`.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from eval.metrics import SearchMetrics, TraversalCounters

Position = Tuple[int, int]


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    success: bool
    path: Tuple[Position, ...]             # start..goal, () on failure
    visited_nodes: Tuple[Position, ...]    # expansion order
    counters: TraversalCounters
    metrics: SearchMetrics
    heuristic_name: Optional[str] = None   # A* only

    # raw counters
    @property
    def nodes_expanded(self) -> int:
        return self.counters.nodes_expanded

    @property
    def total_successors(self) -> int:
        return self.counters.total_successors

    @property
    def execution_time_ms(self) -> float:
        return self.counters.execution_time_ms

    # derived metrics
    @property
    def path_length(self) -> int:
        return self.metrics.path_length

    @property
    def path_cost(self) -> float:
        return self.metrics.path_cost

    @property
    def branching_factor(self) -> float:
        return self.metrics.branching_factor

    @property
    def penetrance(self) -> Optional[float]:
        return self.metrics.penetrance

    @property
    def path_optimality_ratio(self) -> Optional[float]:
        return self.metrics.path_optimality_ratio

    @property
    def completion_percentage(self) -> float:
        return self.metrics.completion_percentage

    @property
    def nodes_per_second(self) -> float:
        return self.metrics.nodes_per_second

    @property
    def avg_heuristic(self) -> Optional[float]:
        return self.metrics.avg_heuristic

    @property
    def avg_f_value(self) -> Optional[float]:
        return self.metrics.avg_f_value

    @property
    def label(self) -> str:
        """'BFS', 'DFS' or 'A* (manhattan)'."""
        if self.heuristic_name:
            return f"A* ({self.heuristic_name})"
        return self.algorithm.upper()

    def replay(self) -> Iterator[Tuple[str, Position]]:
        """Animation order: every visited cell, then every path cell."""
        for pos in self.visited_nodes:
            yield "visited", pos
        for pos in self.path:
            yield "path", pos

    def to_dict(self, include_trace: bool = False) -> Dict[str, Any]:
        """Flat row for tables/CSV. Trace sequences only on request."""
        row: Dict[str, Any] = {
            "algorithm": self.algorithm,
            "heuristic": self.heuristic_name or "",
            "success": self.success,
            "nodes_expanded": self.nodes_expanded,
            "total_successors": self.total_successors,
            "execution_time_ms": self.execution_time_ms,
        }
        row.update(self.metrics.to_dict())
        if include_trace:
            row["path"] = [list(p) for p in self.path]
            row["visited_nodes"] = [list(p) for p in self.visited_nodes]
        return row
