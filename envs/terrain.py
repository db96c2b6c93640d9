#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
terrain.py
----------
Optional per-cell traversal costs layered over an OccupancyGrid.

- Free cells carry an integer cost >= 1 and a type tag (road, grass, mud, water).
- Obstacle cells carry cost = inf and the tag 'obstacle'.
- Without terrain every move costs exactly 1 (uniform-cost mode).

Moving *into* a cell costs that cell's value; the start cell is never paid for.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

import numpy as np

from envs.grid import OccupancyGrid, Position

logger = logging.getLogger(__name__)

# name -> traversal cost
TERRAIN_TYPES: Dict[str, float] = {
    "road": 1,
    "grass": 2,
    "mud": 3,
    "water": 5,
    "obstacle": math.inf,
}

DEFAULT_TERRAIN = "road"


@dataclass(frozen=True, eq=False)
class Terrain:
    """Cost and type matrices, same shape as the grid they decorate."""
    costs: np.ndarray    # (H, W) float64, inf on obstacles
    types: np.ndarray    # (H, W) object array of type names

    def __post_init__(self):
        costs = np.array(self.costs, dtype=np.float64, copy=True)
        types = np.array(self.types, dtype=object, copy=True)
        if costs.shape != types.shape:
            raise ValueError(f"Terrain cost/type shapes differ: {costs.shape} vs {types.shape}")
        finite = costs[np.isfinite(costs)]
        if finite.size and (finite < 1).any():
            raise ValueError("Terrain costs must be >= 1 on free cells")
        costs.flags.writeable = False
        types.flags.writeable = False
        object.__setattr__(self, "costs", costs)
        object.__setattr__(self, "types", types)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.costs.shape

    def cost_of(self, pos: Position) -> float:
        # No bounds/obstacle check: callers only ask about in-bounds free cells.
        return float(self.costs[pos])

    def type_of(self, pos: Position) -> str:
        return str(self.types[pos])

    def min_cost(self) -> float:
        finite = self.costs[np.isfinite(self.costs)]
        return float(finite.min()) if finite.size else 1.0

    def check_matches(self, grid: OccupancyGrid) -> None:
        """Raise ValueError unless this terrain fits `grid` cell for cell."""
        if self.costs.shape != grid.shape:
            raise ValueError(f"Terrain shape {self.costs.shape} does not match grid shape {grid.shape}")
        blocked = np.isinf(self.costs)
        if not np.array_equal(blocked, grid.cells):
            n = int(np.count_nonzero(blocked != grid.cells))
            raise ValueError(f"Terrain obstacles do not mirror grid obstacles ({n} cells differ)")


def _uniform_cost(pos: Position) -> float:
    return 1


def cost_provider(terrain: Optional[Terrain]) -> Callable[[Position], float]:
    """Return the move-cost function for `terrain` (constant 1 when absent)."""
    if terrain is None:
        return _uniform_cost
    return terrain.cost_of


def build_terrain_grid(rows: int, cols: int,
                       obstacles: Iterable[Position],
                       terrain_defs: Iterable[Dict]) -> Terrain:
    """
    Materialize a full Terrain from sparse definitions.

    Parameters
    ----------
    rows, cols : int
        Grid size.
    obstacles : iterable of (r, c)
        Blocked cells (cost inf, type 'obstacle').
    terrain_defs : iterable of dict
        Entries like {'row': r, 'col': c, 'type': 'water'}. They never
        overwrite obstacles. Out-of-bounds entries are skipped.

    Returns
    -------
    Terrain with 'road' (cost 1) everywhere else.
    """
    costs = np.full((rows, cols), TERRAIN_TYPES[DEFAULT_TERRAIN], dtype=np.float64)
    types = np.full((rows, cols), DEFAULT_TERRAIN, dtype=object)

    for r, c in obstacles:
        if 0 <= r < rows and 0 <= c < cols:
            costs[r, c] = math.inf
            types[r, c] = "obstacle"

    skipped = 0
    for d in terrain_defs:
        r, c = int(d["row"]), int(d["col"])
        kind = str(d["type"]).lower()
        if kind not in TERRAIN_TYPES or kind == "obstacle":
            raise ValueError(f"Unknown terrain type '{d['type']}'. "
                             f"Available: {sorted(k for k in TERRAIN_TYPES if k != 'obstacle')}")
        if not (0 <= r < rows and 0 <= c < cols):
            skipped += 1
            continue
        if types[r, c] == "obstacle":
            continue
        costs[r, c] = TERRAIN_TYPES[kind]
        types[r, c] = kind

    if skipped:
        logger.warning("Skipped %d terrain definitions outside the %dx%d grid", skipped, rows, cols)
    return Terrain(costs=costs, types=types)
