#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
grid.py
-------
Immutable 2D occupancy grid shared by every planner.

Grid convention: cells[r, c] == True means obstacle (blocked), False means free.
Positions are (row, col) tuples; tuples are hashable so they double as
set/dict keys during a search.

Movement is 4-connected only. Neighbors are always produced in the fixed
order up, right, down, left so every planner sees the same successor order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

Position = Tuple[int, int]

# up, right, down, left
DELTAS_4: Tuple[Position, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Characters understood by OccupancyGrid.from_ascii
ASCII_TERRAIN = {
    "g": "grass",
    "m": "mud",
    "w": "water",
}


@dataclass(frozen=True, eq=False)
class OccupancyGrid:
    """Rectangular free/obstacle map. Read-only after construction."""
    cells: np.ndarray   # (H, W) bool array: True = obstacle

    def __post_init__(self):
        cells = np.array(self.cells, dtype=bool, copy=True)
        if cells.ndim != 2 or cells.shape[0] < 1 or cells.shape[1] < 1:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {cells.shape}")
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    # ------------------------------ constructors ----------------------------- #

    @classmethod
    def from_obstacles(cls, rows: int, cols: int,
                       obstacles: Iterable[Position]) -> "OccupancyGrid":
        """Build a grid of the given size; out-of-bounds obstacles are ignored."""
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be >= 1, got {rows}x{cols}")
        cells = np.zeros((rows, cols), dtype=bool)
        for r, c in obstacles:
            if 0 <= r < rows and 0 <= c < cols:
                cells[r, c] = True
        return cls(cells)

    @classmethod
    def from_ascii(cls, lines: Sequence[str]) -> "ParsedMap":
        """
        Parse a small text map, handy for fixtures.

        '#' obstacle, '.' road, 'S' start, 'G' goal,
        'g' grass, 'm' mud, 'w' water.
        """
        if not lines:
            raise ValueError("Empty map")
        width = len(lines[0])
        obstacles: List[Position] = []
        terrain_defs: List[Dict] = []
        start: Optional[Position] = None
        goal: Optional[Position] = None
        for r, line in enumerate(lines):
            if len(line) != width:
                raise ValueError(f"Ragged map: row {r} has {len(line)} columns, expected {width}")
            for c, ch in enumerate(line):
                if ch == "#":
                    obstacles.append((r, c))
                elif ch == "S":
                    start = (r, c)
                elif ch == "G":
                    goal = (r, c)
                elif ch in ASCII_TERRAIN:
                    terrain_defs.append({"row": r, "col": c, "type": ASCII_TERRAIN[ch]})
                elif ch != ".":
                    raise ValueError(f"Unknown map character {ch!r} at {(r, c)}")
        if start is None or goal is None:
            raise ValueError("Map must contain exactly one 'S' and one 'G'")
        grid = cls.from_obstacles(len(lines), width, obstacles)
        return ParsedMap(grid=grid, start=start, goal=goal,
                         obstacles=tuple(obstacles), terrain_defs=tuple(terrain_defs))

    # ------------------------------- geometry ------------------------------- #

    @property
    def shape(self) -> Tuple[int, int]:
        return self.cells.shape

    @property
    def H(self) -> int:
        return self.cells.shape[0]

    @property
    def W(self) -> int:
        return self.cells.shape[1]

    def in_bounds(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.cells.shape[0] and 0 <= c < self.cells.shape[1]

    def is_free(self, pos: Position) -> bool:
        return self.in_bounds(pos) and not self.cells[pos]

    def count_free(self) -> int:
        return int(self.cells.size - np.count_nonzero(self.cells))

    def obstacle_positions(self) -> List[Position]:
        rr, cc = np.nonzero(self.cells)
        return [(int(r), int(c)) for r, c in zip(rr, cc)]

    def neighbors(self, pos: Position) -> Iterator[Position]:
        """In-bounds free neighbors of pos in the order up, right, down, left."""
        H, W = self.cells.shape
        r, c = pos
        for dr, dc in DELTAS_4:
            nr, nc = r + dr, c + dc
            if 0 <= nr < H and 0 <= nc < W and not self.cells[nr, nc]:
                yield (nr, nc)

    def reachable_from(self, pos: Position) -> int:
        """Number of free cells in the 4-connected component containing pos."""
        if not self.is_free(pos):
            return 0
        seen = {pos}
        stack = [pos]
        while stack:
            cur = stack.pop()
            for nxt in self.neighbors(cur):
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        return len(seen)


@dataclass(frozen=True)
class ParsedMap:
    """Result of OccupancyGrid.from_ascii."""
    grid: OccupancyGrid
    start: Position
    goal: Position
    obstacles: Tuple[Position, ...]
    terrain_defs: Tuple[Dict, ...]


def as_grid(grid) -> OccupancyGrid:
    """Accept an OccupancyGrid or a boolean array-like (True = obstacle)."""
    if isinstance(grid, OccupancyGrid):
        return grid
    return OccupancyGrid(np.asarray(grid, dtype=bool))


def check_endpoints(grid: OccupancyGrid, start: Position, goal: Position) -> None:
    """Start and goal must be in bounds and free; anything else is a caller bug."""
    for label, pos in (("start", start), ("goal", goal)):
        if not grid.in_bounds(pos):
            raise ValueError(f"{label} {pos} is outside the {grid.H}x{grid.W} grid")
        if grid.cells[pos]:
            raise ValueError(f"{label} {pos} is on an obstacle")
