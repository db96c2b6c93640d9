# -*- coding: utf-8 -*-
"""
Evaluation utilities: metrics (always) and plotting (matplotlib/pandas,
imported on demand from eval.plots so headless metric use stays light).
"""

from __future__ import annotations

from .metrics import (
    TraversalCounters,
    SearchMetrics,
    compute_search_metrics,
    summarize_runs,
)

__all__ = [
    "TraversalCounters",
    "SearchMetrics",
    "compute_search_metrics",
    "summarize_runs",
]
