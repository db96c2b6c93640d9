# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_compare : run BFS / DFS / A* on the preset mazes, print a table, write CSV
- make_figs   : bar charts from run_compare CSVs
"""
__all__ = [
    "run_compare",
    "make_figs",
]
