#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Depth-First Search planner (not optimal, but useful as a baseline).
- 4-connected grids.
- LIFO frontier; successors are pushed in reverse so 'up' is popped first.
- Returns the first path found (often long and twisty).
"""

from __future__ import annotations
from typing import Optional, Tuple

from planners.base import FrontierPlanner
from planners.result import SearchResult


class DFSPlanner(FrontierPlanner):
    name = "dfs"
    lifo = True


def dfs(grid, start: Tuple[int, int], goal: Tuple[int, int],
        optimal_reference: Optional[float] = None, terrain=None) -> SearchResult:
    return DFSPlanner().plan(grid, start, goal, optimal_reference, terrain)
