# -*- coding: utf-8 -*-
"""
Grid model, terrain costs and the preset mazes.
Exposes:
- OccupancyGrid / Position (grid.py)
- Terrain, TERRAIN_TYPES, build_terrain_grid, cost_provider (terrain.py)
- GridEnvironment, GRID_PRESETS, load_preset (presets.py)
"""

from __future__ import annotations

from .grid import OccupancyGrid, ParsedMap, Position, DELTAS_4, as_grid, check_endpoints
from .terrain import Terrain, TERRAIN_TYPES, build_terrain_grid, cost_provider
from .presets import GridEnvironment, GRID_PRESETS, load_preset

__all__ = [
    "OccupancyGrid",
    "ParsedMap",
    "Position",
    "DELTAS_4",
    "as_grid",
    "check_endpoints",
    "Terrain",
    "TERRAIN_TYPES",
    "build_terrain_grid",
    "cost_provider",
    "GridEnvironment",
    "GRID_PRESETS",
    "load_preset",
]
