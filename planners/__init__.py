# -*- coding: utf-8 -*-
"""
Planners on grid maps with a unified API:
planner.plan(grid, start: (r,c), goal: (r,c), optimal_reference=None, terrain=None)
  -> SearchResult (success, path, visited_nodes, counters, metrics)
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Type

from .base import GridPlanner, SearchNode, FrontierPlanner
from .result import SearchResult
from .a_star import AStarPlanner, a_star
from .bfs import BFSPlanner, bfs
from .dfs import DFSPlanner, dfs
from .heuristics import HEURISTICS, get_heuristic
from .priority_queue import StablePriorityQueue


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    A_STAR = "a_star"


# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type[GridPlanner]] = {
    Algorithm.BFS.value: BFSPlanner,
    Algorithm.DFS.value: DFSPlanner,
    Algorithm.A_STAR.value: AStarPlanner,
}

# Accepted spellings on the command line
ALIASES = {"astar": "a_star", "a*": "a_star"}


def parse_algorithm(name) -> Algorithm:
    if isinstance(name, Algorithm):
        return name
    key = str(name).strip().lower()
    key = ALIASES.get(key, key)
    try:
        return Algorithm(key)
    except ValueError:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}") from None


def get_planner(name, **kwargs) -> GridPlanner:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str or Algorithm
        One of: 'bfs', 'dfs', 'a_star'
    kwargs : dict
        Passed to the planner constructor (e.g., heuristic='euclidean' for A*)
    """
    return PLANNERS[parse_algorithm(name).value](**kwargs)


def run_search(env, algorithm, heuristic: str = "manhattan",
               optimal_reference: Optional[float] = None) -> SearchResult:
    """
    Run one planner on a GridEnvironment (see envs.presets).
    `heuristic` only applies to A*. The environment's own reference is used
    unless `optimal_reference` is given.
    """
    algo = parse_algorithm(algorithm)
    ref = env.optimal_reference if optimal_reference is None else optimal_reference
    planner = get_planner(algo, heuristic=heuristic) if algo is Algorithm.A_STAR else get_planner(algo)
    return planner.plan(env.grid, env.start, env.goal, ref, env.terrain)


__all__ = [
    "Algorithm",
    "AStarPlanner",
    "BFSPlanner",
    "DFSPlanner",
    "FrontierPlanner",
    "GridPlanner",
    "SearchNode",
    "SearchResult",
    "StablePriorityQueue",
    "HEURISTICS",
    "PLANNERS",
    "a_star",
    "bfs",
    "dfs",
    "get_heuristic",
    "get_planner",
    "parse_algorithm",
    "run_search",
]
