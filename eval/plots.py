#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
plots.py
--------
Static figures for search results (matplotlib only, pandas for CSV tables).

- render_search(): grid + terrain + visited cells + final path for one result
- plot_comparison(): grouped bar charts from a run_compare CSV

Layers in render_search:
  - background: white road, terrain tinted by type, obstacles dark gray
  - visited cells (light orange, alpha), path (line), start/goal stars
"""

from __future__ import annotations
import os
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# RGB per terrain type
TERRAIN_COLORS: Dict[str, tuple] = {
    "road": (0.97, 0.98, 0.98),
    "grass": (0.64, 0.90, 0.21),
    "mud": (0.57, 0.25, 0.05),
    "water": (0.23, 0.51, 0.96),
    "obstacle": (0.12, 0.16, 0.22),
}

VISITED_COLOR = (1.0, 0.75, 0.35)


def render_search(grid, start, goal, result=None, terrain=None, ax=None, title: Optional[str] = None):
    """
    Render one search on `ax` (a new figure if None). Returns the axes.

    grid    : envs.OccupancyGrid
    result  : planners.SearchResult or None (just the map)
    terrain : envs.Terrain or None
    """
    H, W = grid.shape
    if ax is None:
        _, ax = plt.subplots(figsize=(max(W / 4, 3), max(H / 4, 3)), dpi=120)

    rgb = np.ones((H, W, 3), dtype=float)
    rgb[:] = TERRAIN_COLORS["road"]
    if terrain is not None:
        for kind, color in TERRAIN_COLORS.items():
            rgb[terrain.types == kind] = color
    rgb[grid.cells] = TERRAIN_COLORS["obstacle"]

    if result is not None and result.visited_nodes:
        rr, cc = zip(*result.visited_nodes)
        rr, cc = np.array(rr), np.array(cc)
        rgb[rr, cc] = 0.55 * rgb[rr, cc] + 0.45 * np.array(VISITED_COLOR)

    ax.imshow(rgb, interpolation="nearest", origin="upper")
    ax.set_xticks([]); ax.set_yticks([])

    if result is not None and result.path:
        pr, pc = zip(*result.path)
        ax.plot(pc, pr, color="crimson", lw=2, alpha=0.9)

    ax.plot(start[1], start[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="lime", lw=0)
    ax.plot(goal[1], goal[0], marker="*", markersize=10, markeredgecolor="k", markerfacecolor="red", lw=0)

    if title is None and result is not None:
        status = "success" if result.success else "no path"
        title = f"{result.label}: {status}, {result.nodes_expanded} expanded"
    if title:
        ax.set_title(title, fontsize=8)
    return ax


def save_search_figure(env, result, outpath: str) -> str:
    """Render `result` on GridEnvironment `env` and save to `outpath`."""
    fig, ax = plt.subplots(figsize=(max(env.grid.W / 4, 3), max(env.grid.H / 4, 3)), dpi=120)
    render_search(env.grid, env.start, env.goal, result=result, terrain=env.terrain, ax=ax)
    fig.tight_layout()
    os.makedirs(os.path.dirname(outpath) or ".", exist_ok=True)
    fig.savefig(outpath, bbox_inches="tight")
    plt.close(fig)
    return outpath


# ------------------------- Comparison charts ------------------------- #

COMPARISON_METRICS = [
    ("nodes_expanded", "Nodes expanded"),
    ("execution_time_ms", "Time (ms)"),
    ("path_optimality_ratio", "Optimality ratio"),
]


def _label(row) -> str:
    h = row.get("heuristic", "")
    if isinstance(h, str) and h:
        return f"A* ({h})"
    return str(row["algorithm"]).upper()


def plot_comparison(df: pd.DataFrame, outdir: str) -> List[str]:
    """
    One bar chart per metric: mean (+/- std) per planner, grouped by preset/mode.
    Returns the written paths; empty input writes nothing.
    """
    if df is None or df.empty:
        return []
    df = df.copy()
    df["planner"] = df.apply(_label, axis=1)
    df["setting"] = df["preset"].astype(str) + "/" + df["mode"].astype(str)
    os.makedirs(outdir, exist_ok=True)

    written = []
    for col, ylabel in COMPARISON_METRICS:
        if col not in df.columns:
            continue
        G = df.groupby(["setting", "planner"])[col].agg(["mean", "std"]).reset_index()
        if G["mean"].isna().all():
            continue
        settings = sorted(G["setting"].unique())
        planners = sorted(G["planner"].unique())
        x = np.arange(len(settings))
        width = 0.8 / max(len(planners), 1)

        plt.figure(figsize=(7.0, 4.0))
        for i, p in enumerate(planners):
            g = G[G["planner"] == p].set_index("setting").reindex(settings)
            plt.bar(x + i * width, g["mean"].fillna(0).values, width,
                    yerr=g["std"].fillna(0).values, capsize=3, label=p)
        plt.xticks(x + width * (len(planners) - 1) / 2, settings, rotation=15)
        plt.ylabel(ylabel)
        plt.grid(True, axis="y", alpha=0.3)
        plt.legend(fontsize=7)
        plt.tight_layout()
        out = os.path.join(outdir, f"compare_{col}.png")
        plt.savefig(out, bbox_inches="tight")
        plt.close()
        written.append(out)
    return written
