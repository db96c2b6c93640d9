import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np
import pytest

from envs.grid import OccupancyGrid
from envs.terrain import build_terrain_grid
from envs.presets import GRID_PRESETS, load_preset
from planners import (PLANNERS, Algorithm, AStarPlanner, a_star, bfs, dfs,
                      get_planner, parse_algorithm, run_search)
from planners.dijkstra import distance_map, optimal_reference
from planners.heuristics import HEURISTICS, get_heuristic
from planners.priority_queue import StablePriorityQueue

HEURISTIC_NAMES = sorted(HEURISTICS)


def parse(lines):
    """ParsedMap plus its Terrain (None when the map has no terrain tiles)."""
    m = OccupancyGrid.from_ascii(lines)
    terrain = None
    if m.terrain_defs:
        terrain = build_terrain_grid(m.grid.H, m.grid.W, m.obstacles, m.terrain_defs)
    return m, terrain


def run_all(grid, start, goal, ref=None, terrain=None):
    """One result per planner, A* once per heuristic."""
    out = {"bfs": bfs(grid, start, goal, ref, terrain),
           "dfs": dfs(grid, start, goal, ref, terrain)}
    for h in HEURISTIC_NAMES:
        out[f"a_star_{h}"] = a_star(grid, start, goal, h, ref, terrain)
    return out


def assert_valid_path(grid, result, terrain=None):
    path = result.path
    assert all(grid.is_free(p) for p in path)
    for (r0, c0), (r1, c1) in zip(path[:-1], path[1:]):
        assert abs(r1 - r0) + abs(c1 - c0) == 1
    expected = sum(terrain.cost_of(p) for p in path[1:]) if terrain is not None else len(path) - 1
    assert result.path_cost == pytest.approx(expected)


# Direct route runs through water (cost 5); the detour below costs 4.
WATER_MAP = [
    "SwG",
    "...",
]

# 'up' from S leads into a dead end that DFS exhausts before going down.
DEAD_END_MAP = [
    "...",
    "S#.",
    "G..",
]

# Goal walled off in the corner.
ENCLOSED_MAP = [
    "S....",
    ".....",
    ".....",
    "....#",
    "...#G",
]


# ------------------------------ basic behaviour ------------------------------ #

def test_bfs_finds_fewest_steps_on_open_grid():
    grid = np.zeros((5, 5), dtype=bool)
    res = bfs(grid, (0, 0), (4, 4))
    assert res.success
    assert res.path_length == 9
    assert res.path[0] == (0, 0) and res.path[-1] == (4, 4)
    assert res.path_cost == 8


@pytest.mark.parametrize("h", HEURISTIC_NAMES)
def test_a_star_open_grid_is_step_optimal(h):
    res = a_star(np.zeros((5, 5), dtype=bool), (0, 0), (4, 4), h)
    assert res.success and res.path_length == 9
    assert res.heuristic_name == h
    assert res.label == f"A* ({h})"


def test_dfs_finds_a_path_on_open_grid():
    grid = OccupancyGrid(np.zeros((5, 5), dtype=bool))
    res = dfs(grid, (0, 0), (4, 4))
    assert res.success
    assert res.path_length >= 9
    assert_valid_path(grid, res)


def test_start_equals_goal():
    for name, res in run_all(np.zeros((3, 3), dtype=bool), (1, 1), (1, 1)).items():
        assert res.success, name
        assert res.path == ((1, 1),)
        assert res.nodes_expanded == 1
        assert res.path_cost == 0


def test_single_corridor_counters():
    m, _ = parse(["S.G"])
    for name, res in run_all(m.grid, m.start, m.goal).items():
        assert res.path == ((0, 0), (0, 1), (0, 2)), name
        assert res.nodes_expanded == 3
        assert res.total_successors == 2
        assert res.branching_factor == pytest.approx(2 / 3)
        assert res.penetrance == pytest.approx(1.0)
        assert res.completion_percentage == pytest.approx(100.0)


def test_a_star_heuristic_averages_follow_expansion_order():
    m, _ = parse(["S.G"])
    res = a_star(m.grid, m.start, m.goal, "manhattan")
    # h: 2, 1, 0 ; g: 0, 1, 2 -> f stays 2
    assert res.avg_heuristic == pytest.approx(1.0)
    assert res.avg_f_value == pytest.approx(2.0)
    assert bfs(m.grid, m.start, m.goal).avg_heuristic is None


# ------------------------------ weighted terrain ------------------------------ #

def test_bfs_walks_through_water_but_a_star_goes_around():
    m, terrain = parse(WATER_MAP)
    b = bfs(m.grid, m.start, m.goal, terrain=terrain)
    assert b.path == ((0, 0), (0, 1), (0, 2))
    assert b.path_cost == 6
    for h in HEURISTIC_NAMES:
        a = a_star(m.grid, m.start, m.goal, h, terrain=terrain)
        assert a.path == ((0, 0), (1, 0), (1, 1), (1, 2), (0, 2))
        assert a.path_cost == 4
        assert_valid_path(m.grid, a, terrain)


def test_a_star_matches_exhaustive_optimum_on_water_map():
    m, terrain = parse(WATER_MAP)
    length, cost = optimal_reference(m.grid, m.start, m.goal, terrain)
    assert (length, cost) == (3, 4.0)
    results = run_all(m.grid, m.start, m.goal, cost, terrain)
    for h in HEURISTIC_NAMES:
        a = results[f"a_star_{h}"]
        assert a.path_cost == pytest.approx(cost)
        assert a.path_optimality_ratio == pytest.approx(1.0)
        assert a.path_cost <= results["bfs"].path_cost
        assert a.path_cost <= results["dfs"].path_cost
    # weighted mode judges BFS by cost: 4 / 6
    assert results["bfs"].path_optimality_ratio == pytest.approx(4 / 6)


@pytest.mark.parametrize("name", sorted(GRID_PRESETS))
@pytest.mark.parametrize("weighted", [False, True])
def test_presets_solved_and_a_star_is_cost_optimal(name, weighted):
    env = load_preset(name, weighted=weighted, exact_reference=True)
    b = run_search(env, "bfs")
    d = run_search(env, Algorithm.DFS)
    assert b.success and d.success
    assert b.path_length == env.optimal_path_length
    assert d.path_length >= b.path_length
    for h in HEURISTIC_NAMES:
        a = run_search(env, "a_star", heuristic=h)
        assert a.success
        assert_valid_path(env.grid, a, env.terrain)
        assert a.path_cost == pytest.approx(env.optimal_path_cost)
        assert a.path_cost <= b.path_cost and a.path_cost <= d.path_cost
        assert a.path_optimality_ratio == pytest.approx(1.0)
    for res in (b, d):
        assert_valid_path(env.grid, res, env.terrain)
        assert res.path_optimality_ratio <= 1.0 + 1e-9


# ------------------------------ DFS vs BFS effort ------------------------------ #

def test_dfs_exhausts_dead_end_before_goal():
    m, _ = parse(DEAD_END_MAP)
    b = bfs(m.grid, m.start, m.goal)
    d = dfs(m.grid, m.start, m.goal)
    assert b.path == d.path == ((1, 0), (2, 0))
    assert b.visited_nodes == ((1, 0), (0, 0), (2, 0))
    assert d.visited_nodes == ((1, 0), (0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0))
    assert d.nodes_expanded > b.nodes_expanded


# ------------------------------ failure ------------------------------ #

def test_enclosed_goal_fails_for_every_planner():
    m, _ = parse(ENCLOSED_MAP)
    reachable = m.grid.reachable_from(m.start)
    for name, res in run_all(m.grid, m.start, m.goal, ref=9).items():
        assert not res.success, name
        assert res.path == ()
        assert res.path_length == 0
        assert res.nodes_expanded == reachable == 22
        # whole reachable component explored; the goal cell itself is the only free cell left
        assert res.completion_percentage == pytest.approx(100.0 * 22 / 23)
        assert res.penetrance is None and res.path_optimality_ratio is None
        assert res.branching_factor > 0


# ------------------------------ invariants ------------------------------ #

@pytest.mark.parametrize("weighted", [False, True])
def test_results_are_deterministic(weighted):
    env = load_preset("small", weighted=weighted)
    for algo in Algorithm:
        r1, r2 = run_search(env, algo), run_search(env, algo)
        assert r1.path == r2.path
        assert r1.visited_nodes == r2.visited_nodes
        assert r1.nodes_expanded == r2.nodes_expanded
        assert r1.total_successors == r2.total_successors
        assert r1.metrics.path_cost == r2.metrics.path_cost


@pytest.mark.parametrize("name", sorted(GRID_PRESETS))
def test_visited_nodes_unique_free_and_counted(name):
    env = load_preset(name, weighted=True)
    for algo in Algorithm:
        res = run_search(env, algo)
        assert res.nodes_expanded == len(res.visited_nodes)
        assert len(set(res.visited_nodes)) == len(res.visited_nodes)
        assert all(env.grid.is_free(p) for p in res.visited_nodes)
        assert res.visited_nodes[0] == env.start
        assert res.visited_nodes[-1] == env.goal
        assert res.branching_factor >= 0
        assert 0 < res.penetrance <= 1
        assert 0 < res.completion_percentage <= 100


@pytest.mark.parametrize("h", HEURISTIC_NAMES)
def test_heuristics_never_overestimate(h):
    env = load_preset("medium")
    dist = distance_map(env.grid, env.goal)
    fn = HEURISTICS[h]
    for r, c in zip(*np.nonzero(np.isfinite(dist))):
        assert fn((int(r), int(c)), env.goal) <= dist[r, c] + 1e-9


def test_replay_yields_visited_then_path():
    m, _ = parse(["S.G"])
    res = bfs(m.grid, m.start, m.goal)
    steps = list(res.replay())
    assert [kind for kind, _ in steps] == ["visited"] * 3 + ["path"] * 3
    assert [p for _, p in steps[3:]] == list(res.path)


def test_to_dict_has_flat_metrics():
    m, _ = parse(["S.G"])
    row = a_star(m.grid, m.start, m.goal, "euclidean", 3).to_dict(include_trace=True)
    assert row["algorithm"] == "a_star" and row["heuristic"] == "euclidean"
    assert row["path_optimality_ratio"] == pytest.approx(1.0)
    assert row["path"] == [[0, 0], [0, 1], [0, 2]]
    assert "visited_nodes" in row


# ------------------------------ configuration errors ------------------------------ #

def test_unknown_heuristic_fails_fast():
    with pytest.raises(ValueError):
        a_star(np.zeros((3, 3), dtype=bool), (0, 0), (2, 2), "octile")
    with pytest.raises(ValueError):
        AStarPlanner(heuristic="bogus")


def test_bad_endpoints_and_terrain_rejected():
    grid = OccupancyGrid.from_obstacles(3, 3, [(1, 1)])
    with pytest.raises(ValueError):
        bfs(grid, (1, 1), (2, 2))
    with pytest.raises(ValueError):
        dfs(grid, (0, 0), (3, 3))
    with pytest.raises(ValueError):
        a_star(grid, (0, 0), (2, 2), "manhattan", terrain=build_terrain_grid(3, 3, [], []))


def test_planner_factory():
    assert set(PLANNERS) == {"bfs", "dfs", "a_star"}
    assert parse_algorithm("A*") is Algorithm.A_STAR
    assert parse_algorithm("astar") is Algorithm.A_STAR
    assert get_planner("a_star", heuristic="chebyshev").heuristic_name == "chebyshev"
    assert get_planner(Algorithm.BFS).name == "bfs"
    with pytest.raises(ValueError):
        get_planner("greedy")


# ------------------------------ building blocks ------------------------------ #

def test_priority_queue_breaks_ties_in_push_order():
    pq = StablePriorityQueue()
    for item, prio in [("a", 2), ("b", 1), ("c", 2), ("d", 1)]:
        pq.push(item, prio)
    assert len(pq) == 4 and pq.peek_priority() == 1
    assert [pq.pop() for _ in range(4)] == ["b", "d", "a", "c"]
    assert not pq
    with pytest.raises(IndexError):
        pq.pop()


def test_heuristic_values():
    a, b = (0, 0), (3, 4)
    assert HEURISTICS["manhattan"](a, b) == 7
    assert HEURISTICS["euclidean"](a, b) == pytest.approx(5.0)
    assert HEURISTICS["chebyshev"](a, b) == 4
    assert get_heuristic(" Manhattan ") is HEURISTICS["manhattan"]
