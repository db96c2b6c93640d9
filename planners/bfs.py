#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Breadth-First Search planner (fewest steps).
- 4-connected grids, successors in the order up, right, down, left.
- FIFO frontier: the first time the goal is popped, the path has the fewest
  possible steps.
- Terrain costs are accumulated into path_cost but never steer the search,
  so with weighted terrain the path is step-optimal, not cost-optimal.
"""

from __future__ import annotations
from typing import Optional, Tuple

from planners.base import FrontierPlanner
from planners.result import SearchResult


class BFSPlanner(FrontierPlanner):
    name = "bfs"
    lifo = False


def bfs(grid, start: Tuple[int, int], goal: Tuple[int, int],
        optimal_reference: Optional[float] = None, terrain=None) -> SearchResult:
    return BFSPlanner().plan(grid, start, goal, optimal_reference, terrain)
