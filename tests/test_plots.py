import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from envs.presets import load_preset
from eval.plots import plot_comparison, render_search, save_search_figure
from planners import run_search


def test_render_search_titles_with_result():
    env = load_preset("small", weighted=True)
    res = run_search(env, "a_star", heuristic="euclidean")
    ax = render_search(env.grid, env.start, env.goal, result=res, terrain=env.terrain)
    assert ax.get_title().startswith("A* (euclidean): success")
    plt.close(ax.figure)


def test_render_map_only():
    env = load_preset("medium")
    ax = render_search(env.grid, env.start, env.goal, title="medium")
    assert ax.get_title() == "medium"
    plt.close(ax.figure)


def test_save_search_figure(tmp_path):
    env = load_preset("small")
    res = run_search(env, "dfs")
    out = save_search_figure(env, res, str(tmp_path / "sub" / "dfs.png"))
    assert os.path.exists(out)


def test_plot_comparison_skips_missing_columns(tmp_path):
    df = pd.DataFrame([
        {"preset": "small", "mode": "simple", "algorithm": "bfs", "heuristic": None, "nodes_expanded": 90},
        {"preset": "small", "mode": "simple", "algorithm": "a_star", "heuristic": "manhattan", "nodes_expanded": 40},
    ])
    written = plot_comparison(df, str(tmp_path))
    assert written == [str(tmp_path / "compare_nodes_expanded.png")]
    assert plot_comparison(pd.DataFrame(), str(tmp_path)) == []
