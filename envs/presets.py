#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
presets.py
----------
The three fixed comparison mazes (15x15, 25x25, 40x40) and a loader that turns
a preset into a ready-to-search GridEnvironment.

Each preset is laid out to separate the planners:
- a long dead-end corridor near the start that DFS falls into,
- a central maze forcing detours,
- water/mud on the visually direct route and a cheap grass detour, so that
  BFS (step-optimal) and A* (cost-optimal) disagree in weighted mode.

Declared reference values (optimal_path_length counts positions including the
start; optimal_path_cost is the minimum weighted cost) come with each preset.
`load_preset(..., exact_reference=True)` recomputes both with Dijkstra instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from envs.grid import OccupancyGrid, Position, check_endpoints
from envs.terrain import Terrain, build_terrain_grid


# ------------------------------ Layout helpers ------------------------------ #

def _hline(row: int, col: int, n: int) -> List[Position]:
    return [(row, col + i) for i in range(n)]


def _vline(row: int, col: int, n: int) -> List[Position]:
    return [(row + i, col) for i in range(n)]


def _tiles(cells: List[Position], kind: str) -> List[Dict]:
    return [{"row": r, "col": c, "type": kind} for r, c in cells]


def _diag(row: int, col: int, n: int) -> List[Position]:
    return [(row + i, col + i) for i in range(n)]


# --------------------------------- Presets ---------------------------------- #

GRID_PRESETS: Dict[str, Dict] = {
    # Small: basic behaviour of each planner
    "small": {
        "rows": 15,
        "cols": 15,
        "start": (1, 1),
        "goal": (13, 13),
        "optimal_path_length": 25,
        "optimal_path_cost": 25,
        "obstacles": (
            # DFS trap: winding corridor top-left
            _hline(0, 3, 10) + _vline(1, 3, 5) + _hline(5, 4, 4)
            + [(1, 12), (2, 12), (3, 12)]
            # central maze
            + _vline(6, 6, 6) + _hline(8, 8, 4) + _hline(11, 3, 3)
            # branching zone
            + [(4, 10), (5, 11), (9, 4), (10, 5), (12, 8), (12, 9)]
        ),
        "terrain": (
            # water on the apparently shortest route
            _tiles([(7, 7), (8, 7), (9, 8), (10, 9), (11, 10)], "water")
            # mud near the goal approach
            + _tiles([(12, 11), (12, 12), (11, 12)], "mud")
            # cheap grass detour
            + _tiles(_vline(10, 7, 4), "grass")
        ),
    },
    # Medium: several traps and competing corridors
    "medium": {
        "rows": 25,
        "cols": 25,
        "start": (1, 1),
        "goal": (23, 23),
        "optimal_path_length": 45,
        "optimal_path_cost": 44,
        "obstacles": (
            # major DFS trap: spiral corridor top-right
            _hline(0, 10, 12) + _vline(1, 10, 8) + _hline(8, 11, 8) + _vline(2, 18, 6)
            + [(2, 19), (2, 20), (2, 21)]
            # secondary trap bottom-left
            + _vline(15, 2, 6) + _hline(20, 3, 4) + _vline(17, 6, 3)
            # central maze
            + _vline(8, 8, 8) + _vline(6, 15, 10)
            + _hline(12, 9, 5) + _hline(18, 10, 6)
            # branching
            + [(5, 5), (6, 6), (10, 20), (11, 21),
               (15, 18), (16, 19), (21, 10), (22, 11)]
        ),
        "terrain": (
            # water barrier across the direct diagonal
            _tiles(_diag(10, 10, 8) + [(18, 18), (19, 19)], "water")
            # mud
            + _tiles(_vline(9, 17, 4) + _hline(20, 17, 3) + [(21, 20), (22, 21)], "mud")
            # cheap grass route
            + _tiles(_vline(16, 8, 6) + _hline(22, 9, 5), "grass")
        ),
    },
    # Large: multiple traps and mixed terrain
    "large": {
        "rows": 40,
        "cols": 40,
        "start": (2, 2),
        "goal": (37, 37),
        "optimal_path_length": 71,
        "optimal_path_cost": 73,
        "obstacles": (
            # DFS trap #1: upper spiral
            _hline(0, 8, 20) + _vline(1, 8, 12) + _hline(12, 9, 15)
            + _vline(2, 23, 10) + _hline(2, 24, 8)
            # DFS trap #2: left corridor
            + _vline(18, 3, 15) + _hline(32, 4, 5) + _vline(25, 8, 8)
            # central maze, vertical barriers
            + _vline(15, 15, 15) + _vline(10, 25, 12) + _vline(20, 32, 10)
            # horizontal barriers
            + _hline(20, 16, 10) + _hline(28, 18, 8) + _hline(35, 20, 6)
            + _hline(25, 33, 7) + _hline(20, 26, 6)
            # scattered
            + [(8, 35), (9, 35), (10, 36), (26, 36), (33, 28), (34, 29),
               (15, 35), (16, 36), (17, 37)]
        ),
        "terrain": (
            _tiles(_diag(18, 18, 15), "water")
            + _tiles(_diag(17, 17, 10) + _diag(33, 33, 5), "mud")
            # upper grass route
            + _tiles(_hline(14, 26, 10) + _vline(15, 35, 8), "grass")
            # lower grass route
            + _tiles(_vline(30, 16, 8) + _hline(37, 17, 6), "grass")
        ),
    },
}


# ------------------------------- Environment -------------------------------- #

@dataclass
class GridEnvironment:
    """Grid, optional terrain, endpoints and reference optimum for one comparison run."""
    grid: OccupancyGrid
    start: Position
    goal: Position
    terrain: Optional[Terrain] = None
    optimal_path_length: Optional[int] = None
    optimal_path_cost: Optional[float] = None
    name: str = "custom"
    settings: Dict = field(default_factory=dict)   # provenance

    def __post_init__(self):
        check_endpoints(self.grid, self.start, self.goal)
        if self.terrain is not None:
            self.terrain.check_matches(self.grid)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def weighted(self) -> bool:
        return self.terrain is not None

    @property
    def optimal_reference(self) -> Optional[float]:
        """Cost reference in weighted mode, step (position count) reference otherwise."""
        return self.optimal_path_cost if self.weighted else self.optimal_path_length


def load_preset(name: str, weighted: bool = False,
                exact_reference: bool = False) -> GridEnvironment:
    """
    Build the GridEnvironment for preset `name` ('small', 'medium', 'large').

    weighted        : attach the preset's terrain (otherwise uniform cost)
    exact_reference : replace the declared optimal values with Dijkstra results
    """
    key = name.strip().lower()
    if key not in GRID_PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Available: {sorted(GRID_PRESETS)}")
    p = GRID_PRESETS[key]
    rows, cols = p["rows"], p["cols"]
    grid = OccupancyGrid.from_obstacles(rows, cols, p["obstacles"])
    terrain = build_terrain_grid(rows, cols, p["obstacles"], p["terrain"]) if weighted else None

    length, cost = p["optimal_path_length"], p["optimal_path_cost"]
    if exact_reference:
        from planners.dijkstra import optimal_reference  # lazy import
        length, cost = optimal_reference(grid, p["start"], p["goal"], terrain)

    return GridEnvironment(
        grid=grid,
        start=p["start"],
        goal=p["goal"],
        terrain=terrain,
        optimal_path_length=length,
        optimal_path_cost=cost,
        name=key,
        settings={"preset": key, "weighted": weighted, "exact_reference": exact_reference},
    )
