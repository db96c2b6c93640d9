#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Shared plumbing for the grid planners.

- SearchNode: (pos, path, cost) with an immutable path tuple. Each expansion
  builds a new tuple, so sibling branches never share a path.
- GridPlanner: input validation, timing and result assembly.
- FrontierPlanner: one traversal loop for BFS and DFS, parameterized by which
  end of the frontier is popped (FIFO vs LIFO).
"""

from __future__ import annotations
from collections import deque
from typing import List, NamedTuple, Optional, Tuple
import logging
import time

from envs.grid import OccupancyGrid, Position, as_grid, check_endpoints
from envs.terrain import Terrain, cost_provider
from eval.metrics import TraversalCounters, compute_search_metrics
from planners.result import SearchResult

logger = logging.getLogger(__name__)


class SearchNode(NamedTuple):
    pos: Position
    path: Tuple[Position, ...]
    cost: float


class GridPlanner:
    """Base class. Subclasses implement _search()."""
    name = "planner"

    def plan(self, grid, start: Position, goal: Position,
             optimal_reference: Optional[float] = None,
             terrain: Optional[Terrain] = None) -> SearchResult:
        """
        Search from start to goal.

        Args:
            grid: OccupancyGrid or 2D bool array-like (True = obstacle)
            start, goal: (row, col), both free
            optimal_reference: best known path length (uniform) or cost
                (weighted) used for the optimality ratio; None skips it
            terrain: optional Terrain matching the grid

        Returns:
            SearchResult (success False with populated counters if no path)

        Raises:
            ValueError on malformed input (bad endpoints, terrain mismatch, ...)
        """
        grid = as_grid(grid)
        start = (int(start[0]), int(start[1]))
        goal = (int(goal[0]), int(goal[1]))
        check_endpoints(grid, start, goal)
        if terrain is not None:
            terrain.check_matches(grid)

        t0 = time.perf_counter()
        node, visited_nodes, counters = self._search(grid, start, goal, terrain)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        counters = counters._replace(execution_time_ms=elapsed_ms)
        return self._finish(grid, node, visited_nodes, counters,
                            optimal_reference, terrain is not None)

    def _search(self, grid: OccupancyGrid, start: Position, goal: Position,
                terrain: Optional[Terrain]):
        """Return (goal SearchNode or None, visited list, _Counters)."""
        raise NotImplementedError

    @property
    def heuristic_name(self) -> Optional[str]:
        return None

    def _finish(self, grid: OccupancyGrid, node: Optional[SearchNode],
                visited_nodes: List[Position], counters: "_Counters",
                optimal_reference: Optional[float], weighted: bool) -> SearchResult:
        success = node is not None
        path = node.path if success else ()
        raw = TraversalCounters(
            nodes_expanded=counters.nodes_expanded,
            total_successors=counters.total_successors,
            execution_time_ms=counters.execution_time_ms,
            heuristic_sum=counters.heuristic_sum,
            f_value_sum=counters.f_value_sum,
        )
        metrics = compute_search_metrics(
            raw,
            success=success,
            path_length=len(path),
            path_cost=node.cost if success else 0,
            total_free_spaces=grid.count_free(),
            weighted=weighted,
            optimal_reference=optimal_reference,
        )
        result = SearchResult(
            algorithm=self.name,
            success=success,
            path=path,
            visited_nodes=tuple(visited_nodes),
            counters=raw,
            metrics=metrics,
            heuristic_name=self.heuristic_name,
        )
        logger.debug("%s: success=%s expanded=%d successors=%d path_len=%d cost=%s time=%.3fms",
                     result.label, success, raw.nodes_expanded, raw.total_successors,
                     metrics.path_length, metrics.path_cost, raw.execution_time_ms)
        return result


class _Counters(NamedTuple):
    nodes_expanded: int = 0
    total_successors: int = 0
    execution_time_ms: float = 0.0
    heuristic_sum: Optional[float] = None
    f_value_sum: Optional[float] = None


class FrontierPlanner(GridPlanner):
    """
    Uninformed search over a double-ended frontier.

    lifo=False pops the oldest node (BFS); lifo=True pops the newest (DFS).
    In LIFO mode successors are pushed in reverse direction order so that
    'up' is still explored first.
    """
    lifo = False

    def _search(self, grid, start, goal, terrain):
        cost_of = cost_provider(terrain)
        frontier = deque([SearchNode(start, (start,), 0)])
        visited = {start}
        visited_nodes: List[Position] = []
        expanded = 0
        successors = 0
        pop = frontier.pop if self.lifo else frontier.popleft

        while frontier:
            current = pop()
            expanded += 1
            visited_nodes.append(current.pos)

            if current.pos == goal:
                return current, visited_nodes, _Counters(expanded, successors)

            accepted = []
            for nxt in grid.neighbors(current.pos):
                if nxt in visited:
                    continue
                # mark before pushing: no duplicate entries from siblings
                visited.add(nxt)
                accepted.append(SearchNode(nxt, current.path + (nxt,), current.cost + cost_of(nxt)))
            successors += len(accepted)
            if self.lifo:
                accepted.reverse()
            frontier.extend(accepted)

        return None, visited_nodes, _Counters(expanded, successors)
