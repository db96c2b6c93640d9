#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Binary-heap min-priority queue with FIFO tie-breaking.

Entries with equal priority pop in insertion order. Stale entries are not
removed here; A* skips them on pop (lazy deletion).
"""

from __future__ import annotations
from typing import Any, Generic, List, Tuple, TypeVar
import heapq
import itertools

T = TypeVar("T")


class StablePriorityQueue(Generic[T]):
    def __init__(self):
        self._heap: List[Tuple[float, int, Any]] = []
        self._seq = itertools.count()  # monotonic counter for stability

    def push(self, item: T, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._seq), item))

    def pop(self) -> T:
        """Remove and return the lowest-priority item; IndexError if empty."""
        return heapq.heappop(self._heap)[2]

    def peek_priority(self) -> float:
        return self._heap[0][0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
