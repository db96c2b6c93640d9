#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
make_figs.py
------------
Reads CSV outputs of cli.run_compare and generates comparison bar charts
(matplotlib, pandas for aggregation).

Generates (one per metric, if the column is present):
  - figs/compare_nodes_expanded.png
  - figs/compare_execution_time_ms.png
  - figs/compare_path_optimality_ratio.png

Example:
    python -m cli.make_figs --csv-glob "results/csv/compare_*.csv" --outdir results/figs
"""

from __future__ import annotations
import argparse
import glob
import os
from typing import List, Optional

import pandas as pd

from eval.plots import plot_comparison


def _load_many(glob_pat: str) -> Optional[pd.DataFrame]:
    paths = sorted(glob.glob(glob_pat))
    if not paths:
        print(f"[make_figs] No files for pattern: {glob_pat}")
        return None
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(p)
        dfs.append(df)
    out = pd.concat(dfs, ignore_index=True)
    print(f"[make_figs] Loaded {len(paths)} file(s) → {len(out)} rows from {glob_pat}")
    return out


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate comparison figures from run_compare CSVs.")
    ap.add_argument("--csv-glob", type=str, default="results/csv/compare_*.csv")
    ap.add_argument("--outdir", type=str, default="results/figs")
    args = ap.parse_args(argv)

    df = _load_many(args.csv_glob)
    if df is None:
        return 1
    for path in plot_comparison(df, args.outdir):
        print(f"[make_figs] Wrote {path}")
    print(f"[DONE] Figures in: {args.outdir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
