#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_compare.py
--------------
Side-by-side comparison of BFS, DFS and A* on the preset mazes:
- Loads each preset in uniform ('simple') and/or weighted terrain mode
- Runs every selected planner (A* once per heuristic), `--repeats` times
- Logs a summary per configuration and prints a table
- Writes one CSV row per run to <outdir>/compare_<timestamp>.csv
- Optionally saves a figure of each search (visited cells + path)

Example:
    python -m cli.run_compare \
        --presets small,medium,large \
        --mode both \
        --algorithms bfs,dfs,a_star \
        --heuristics manhattan,euclidean,chebyshev \
        --repeats 5 \
        --exact-reference \
        --outdir results/csv \
        --plot-dir results/figs
"""

from __future__ import annotations
import argparse
import csv
import logging
import os
import time
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from envs.presets import GRID_PRESETS, load_preset
from eval.metrics import summarize_runs
from planners import Algorithm, parse_algorithm, run_search
from planners.heuristics import get_heuristic

logger = logging.getLogger(__name__)

MODES = {"simple": (False,), "weighted": (True,), "both": (False, True)}

CSV_FIELDS = [
    "preset", "mode", "repeat", "algorithm", "heuristic", "success",
    "nodes_expanded", "total_successors", "execution_time_ms",
    "path_length", "path_cost", "branching_factor", "penetrance",
    "search_efficiency_rate", "completion_percentage", "nodes_per_second",
    "time_per_node_ms", "total_free_spaces", "optimal_reference",
    "path_optimality_ratio", "avg_heuristic", "avg_f_value",
]


# -------------------- helpers -------------------- #

def _parse_list(s: str) -> List[str]:
    return [tok.strip().lower() for tok in s.split(",") if tok.strip()]


def _parse_presets(s: str) -> List[str]:
    names = _parse_list(s)
    for n in names:
        if n not in GRID_PRESETS:
            raise ValueError(f"Unknown preset '{n}'. Available: {sorted(GRID_PRESETS)}")
    return names


def _parse_algorithms(s: str) -> List[Algorithm]:
    return [parse_algorithm(n) for n in _parse_list(s)]


def _parse_heuristics(s: str) -> List[str]:
    names = _parse_list(s)
    for n in names:
        get_heuristic(n)
    return names


def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def _fmt(v, spec: str) -> str:
    return "-" if v is None else format(v, spec)


def build_jobs(algorithms: List[Algorithm], heuristics: List[str]) -> List[Tuple[Algorithm, Optional[str]]]:
    jobs: List[Tuple[Algorithm, Optional[str]]] = []
    for algo in algorithms:
        if algo is Algorithm.A_STAR:
            jobs.extend((algo, h) for h in heuristics)
        else:
            jobs.append((algo, None))
    return jobs


def log_result(result, preset: str, mode: str) -> None:
    m = result.metrics
    logger.info("%s | grid %s | mode %s", result.label, preset, mode)
    logger.info("  status: %s, expanded %d, generated %d, %.2f ms",
                "path found" if result.success else "no path",
                result.nodes_expanded, result.total_successors, result.execution_time_ms)
    logger.info("  path length %d, cost %s, branching %.2f, coverage %.1f%%",
                m.path_length, m.path_cost, m.branching_factor, m.completion_percentage)
    if result.heuristic_name:
        logger.info("  avg h %.2f, avg f %.2f", m.avg_heuristic, m.avg_f_value)


def run_comparison(presets: List[str], weighted_modes, jobs, repeats: int = 1,
                   exact_reference: bool = False, plot_dir: Optional[str] = None,
                   progress: bool = True) -> List[Dict]:
    """Run every (preset, mode, planner) combination; return CSV-ready rows."""
    rows: List[Dict] = []
    total = len(presets) * len(weighted_modes) * len(jobs) * repeats
    bar = tqdm(total=total, desc="searches", disable=not progress)
    for preset in presets:
        for weighted in weighted_modes:
            env = load_preset(preset, weighted=weighted, exact_reference=exact_reference)
            mode = "weighted" if weighted else "simple"
            for algo, heuristic in jobs:
                results = []
                for rep in range(repeats):
                    if heuristic is None:
                        res = run_search(env, algo)
                    else:
                        res = run_search(env, algo, heuristic=heuristic)
                    results.append(res)
                    row = res.to_dict()
                    row.update({"preset": preset, "mode": mode, "repeat": rep})
                    rows.append({k: row.get(k) for k in CSV_FIELDS})
                    bar.update(1)
                log_result(results[0], preset, mode)
                stats = summarize_runs(results)
                logger.debug("  %d runs: mean %.3f ms (std %.3f)",
                             stats["runs"], stats["mean_time_ms"], stats["std_time_ms"])
                if plot_dir:
                    from eval.plots import save_search_figure  # lazy: matplotlib
                    tag = algo.value if heuristic is None else f"{algo.value}_{heuristic}"
                    out = save_search_figure(env, results[0], os.path.join(plot_dir, f"{preset}_{mode}_{tag}.png"))
                    logger.info("Saved: %s", out)
    bar.close()
    return rows


def print_table(rows: List[Dict]) -> None:
    print(f"{'preset':7} {'mode':8} {'planner':18} {'succ':4} {'expanded':>8} {'len':>4} "
          f"{'cost':>6} {'bf':>5} {'cover%':>6} {'ratio':>6} {'time[ms]':>9}")
    for r in rows:
        if r["repeat"] != 0:
            continue
        label = f"A* ({r['heuristic']})" if r["heuristic"] else str(r["algorithm"]).upper()
        print(f"{r['preset']:7} {r['mode']:8} {label:18} {int(bool(r['success'])):4d} "
              f"{r['nodes_expanded']:8d} {r['path_length']:4d} {_fmt(r['path_cost'], '6.0f')} "
              f"{r['branching_factor']:5.2f} {r['completion_percentage']:6.1f} "
              f"{_fmt(r['path_optimality_ratio'], '6.3f')} {r['execution_time_ms']:9.3f}")


def write_csv(rows: List[Dict], outdir: str) -> str:
    _ensure_dir(outdir)
    path = os.path.join(outdir, f"compare_{time.strftime('%Y%m%d_%H%M%S')}.csv")
    with open(path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        w.writerows(rows)
    return path


# -------------------- main -------------------- #

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Compare BFS, DFS and A* on the preset mazes.")
    ap.add_argument("--presets", type=str, default="small,medium,large")
    ap.add_argument("--mode", type=str, default="both", choices=sorted(MODES))
    ap.add_argument("--algorithms", type=str, default="bfs,dfs,a_star")
    ap.add_argument("--heuristics", type=str, default="manhattan,euclidean,chebyshev")
    ap.add_argument("--repeats", type=int, default=1)
    ap.add_argument("--exact-reference", action="store_true",
                    help="recompute optimal references with Dijkstra instead of the declared values")
    ap.add_argument("--outdir", type=str, default="results/csv")
    ap.add_argument("--plot-dir", type=str, default=None)
    ap.add_argument("--no-progress", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    try:
        presets = _parse_presets(args.presets)
        algorithms = _parse_algorithms(args.algorithms)
        heuristics = _parse_heuristics(args.heuristics)
    except ValueError as e:
        ap.error(str(e))
    if args.repeats < 1:
        ap.error("--repeats must be >= 1")

    jobs = build_jobs(algorithms, heuristics)
    rows = run_comparison(presets, MODES[args.mode], jobs,
                          repeats=args.repeats,
                          exact_reference=args.exact_reference,
                          plot_dir=args.plot_dir,
                          progress=not args.no_progress)
    print_table(rows)
    path = write_csv(rows, args.outdir)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
