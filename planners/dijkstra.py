#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Dijkstra sweep for grid maps (4-connected), used as the exact oracle.
- Uniform edge relaxation, no heuristic (A* with h=0).
- Edge cost: cost of the entered cell (1 without terrain).

Not one of the compared planners: it supplies the true optimum that the
optimality ratio is measured against.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
import heapq
import math
import numpy as np

from envs.grid import OccupancyGrid, Position, as_grid, check_endpoints
from envs.terrain import Terrain, cost_provider


def distance_map(grid, source: Position, terrain: Optional[Terrain] = None) -> np.ndarray:
    """
    Minimum cost from `source` to every cell (inf where unreachable or blocked).
    Cost of a path = sum of the costs of the cells entered after `source`.
    """
    grid = as_grid(grid)
    if terrain is not None:
        terrain.check_matches(grid)
    cost_of = cost_provider(terrain)
    H, W = grid.shape

    dist = np.full((H, W), np.inf, dtype=np.float64)
    done = np.zeros((H, W), dtype=bool)
    if not grid.is_free(source):
        return dist

    dist[source] = 0.0
    pq: List[Tuple[float, int, int]] = [(0.0, source[0], source[1])]
    while pq:
        d, r, c = heapq.heappop(pq)
        if done[r, c]:
            continue
        done[r, c] = True
        for nr, nc in grid.neighbors((r, c)):
            if done[nr, nc]:
                continue
            nd = d + cost_of((nr, nc))
            if nd < dist[nr, nc]:
                dist[nr, nc] = nd
                heapq.heappush(pq, (nd, nr, nc))
    return dist


def optimal_reference(grid, start: Position, goal: Position,
                      terrain: Optional[Terrain] = None) -> Tuple[Optional[int], Optional[float]]:
    """
    (optimal_path_length, optimal_path_cost) from start to goal.

    Length counts positions including the start (fewest-steps path);
    cost is the minimum weighted cost (equals steps without terrain).
    Both are None if the goal is unreachable.
    """
    grid = as_grid(grid)
    check_endpoints(grid, start, goal)
    steps = distance_map(grid, start)[goal]
    if math.isinf(steps):
        return None, None
    cost = distance_map(grid, start, terrain)[goal] if terrain is not None else steps
    return int(steps) + 1, float(cost)
