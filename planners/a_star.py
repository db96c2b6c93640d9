#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A* path planner for 4-connected grid maps.
- Obstacles are True in `grid`; free space is False.
- Heuristic selected by name: manhattan, euclidean or chebyshev.
- Edge cost: cost of the entered cell (1 everywhere without terrain).

Open list is a stable binary heap keyed by f = g + h; equal f pops in push
order. Stale heap entries (for cells closed since) are dropped on pop instead
of using decrease-key.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from envs.terrain import cost_provider
from planners.base import GridPlanner, SearchNode, _Counters
from planners.heuristics import get_heuristic
from planners.priority_queue import StablePriorityQueue
from planners.result import SearchResult


class AStarPlanner(GridPlanner):
    name = "a_star"

    def __init__(self, heuristic: str = "manhattan"):
        # resolve now: an unknown name fails before any search work
        self._h = get_heuristic(heuristic)
        self._heuristic = str(heuristic).strip().lower()

    @property
    def heuristic_name(self) -> str:
        return self._heuristic

    def _search(self, grid, start, goal, terrain):
        h = self._h
        cost_of = cost_provider(terrain)

        pq: StablePriorityQueue[SearchNode] = StablePriorityQueue()
        pq.push(SearchNode(start, (start,), 0), h(start, goal))
        closed = set()
        g: Dict[Tuple[int, int], float] = {start: 0}
        visited_nodes: List[Tuple[int, int]] = []
        expanded = 0
        successors = 0
        h_sum = 0.0
        f_sum = 0.0

        while pq:
            current = pq.pop()
            if current.pos in closed:
                continue  # stale entry
            closed.add(current.pos)
            expanded += 1
            visited_nodes.append(current.pos)

            h_cur = h(current.pos, goal)
            h_sum += h_cur
            f_sum += current.cost + h_cur

            if current.pos == goal:
                return current, visited_nodes, _Counters(expanded, successors, 0.0, h_sum, f_sum)

            for nxt in grid.neighbors(current.pos):
                if nxt in closed:
                    continue
                tentative_g = current.cost + cost_of(nxt)
                best = g.get(nxt)
                if best is None or tentative_g < best:
                    g[nxt] = tentative_g
                    successors += 1
                    pq.push(SearchNode(nxt, current.path + (nxt,), tentative_g),
                            tentative_g + h(nxt, goal))

        return None, visited_nodes, _Counters(expanded, successors, 0.0, h_sum, f_sum)


def a_star(grid, start: Tuple[int, int], goal: Tuple[int, int],
           heuristic_name: str = "manhattan",
           optimal_reference: Optional[float] = None, terrain=None) -> SearchResult:
    return AStarPlanner(heuristic=heuristic_name).plan(grid, start, goal, optimal_reference, terrain)
