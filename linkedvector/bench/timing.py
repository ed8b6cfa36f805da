"""Timing helpers and the operations compared by the benchmark.

Each container (built-in ``list``, ``collections.deque`` and ``IndexedList``)
gets the same three operations: construction by appending, access at the
midpoint and deletion at the midpoint.
"""

from __future__ import annotations

import statistics
import time
from collections import deque
from itertools import islice
from typing import Any, Callable, Tuple

from ..datastructures import IndexedList

CONTAINERS = ("list", "deque", "IndexedList")


def measure(operation: Callable[..., Any], *args: Any, iterations: int = 5) -> Tuple[float, float, Any]:
    """Run `operation(*args)` several times; return avg ms, std dev ms and the last result."""
    if iterations < 1:
        raise ValueError("iterations must be >= 1")
    times = []
    result = None
    for _ in range(iterations):
        start = time.perf_counter()
        result = operation(*args)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_time, result


# ----------------------------
# Construction (push_back)
# ----------------------------

def build_list(count: int, element: Any) -> list:
    out = []
    for _ in range(count):
        out.append(element)
    return out


def build_deque(count: int, element: Any) -> deque:
    out: deque = deque()
    for _ in range(count):
        out.append(element)
    return out


def build_indexed_list(count: int, element: Any, item_size: int | None = None) -> IndexedList:
    out: IndexedList = IndexedList.with_capacity(count, item_size=item_size)
    for _ in range(count):
        out.push_back(element)
    return out


BUILDERS = {
    "list": build_list,
    "deque": build_deque,
    "IndexedList": build_indexed_list,
}


# ----------------------------
# Access at the midpoint
# ----------------------------

def access_list(c: list) -> Any:
    return c[len(c) // 2]


def access_deque(c: deque) -> Any:
    # Walk like a linked list instead of using deque's indexed lookup.
    return next(islice(c, len(c) // 2, None))


def access_indexed_list(c: IndexedList) -> Any:
    return c[len(c) // 2].item


ACCESSORS = {
    "list": access_list,
    "deque": access_deque,
    "IndexedList": access_indexed_list,
}


# ----------------------------
# Deletion at the midpoint
# ----------------------------

def delete_list(c: list, idx: int) -> list:
    del c[idx]
    return c


def delete_deque(c: deque, idx: int) -> deque:
    # Split at idx, drop the first element of the back half, join again.
    c.rotate(-idx)
    c.popleft()
    c.rotate(idx)
    return c


def delete_indexed_list(c: IndexedList, idx: int) -> IndexedList:
    c.delete(idx)
    return c


DELETERS = {
    "list": delete_list,
    "deque": delete_deque,
    "IndexedList": delete_indexed_list,
}
