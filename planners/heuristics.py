#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Distance heuristics for A* on 4-connected grids.

All three are admissible here: every move covers one grid unit and costs at
least 1, so none of them can overestimate the remaining cost.
  manhattan : |dr| + |dc|        (tightest for 4-connected moves)
  euclidean : sqrt(dr^2 + dc^2)
  chebyshev : max(|dr|, |dc|)
"""

from __future__ import annotations
from typing import Callable, Dict, Tuple
import math

Position = Tuple[int, int]
Heuristic = Callable[[Position, Position], float]


def manhattan(a: Position, b: Position) -> float:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Position, b: Position) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def chebyshev(a: Position, b: Position) -> float:
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


HEURISTICS: Dict[str, Heuristic] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "chebyshev": chebyshev,
}


def get_heuristic(name: str) -> Heuristic:
    """Look up a heuristic by name; unknown names raise ValueError."""
    key = str(name).strip().lower()
    if key not in HEURISTICS:
        raise ValueError(f"Unknown heuristic '{name}'. Available: {sorted(HEURISTICS)}")
    return HEURISTICS[key]
