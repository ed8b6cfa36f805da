"""Memory estimates and report output for the container benchmark.

Sizes are *modeled*, not measured: every container is charged ``item_size``
bytes per element (one reference by default), plus whatever link or index
overhead its layout needs. This keeps the three containers comparable even
though Python itself only ever stores references.
"""

from __future__ import annotations

import csv
import logging
import sys
from collections import deque
from typing import Any, Iterable, Optional

from ..datastructures import DEFAULT_ITEM_SIZE, IndexedList
from .timing import ACCESSORS, BUILDERS, CONTAINERS, DELETERS, measure

logger = logging.getLogger(__name__)

_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")

CSV_HEADER = [
    "Container",
    "Operation",
    "Size",
    "Average Time (ms)",
    "Std Dev Time (ms)",
    "Used (bytes)",
    "Real (bytes)",
]


def human_bytes(b: int) -> str:
    """Format a byte count with base-1024 units, e.g. ``1536 -> '1.50 KB'``."""
    val = float(b)
    i = 0
    while val >= 1024.0 and i < len(_UNITS) - 1:
        val /= 1024.0
        i += 1
    return f"{val:.2f} {_UNITS[i]}"


# -----------------------------------------------------------
# Memory models
# -----------------------------------------------------------

def list_mem(c: list, item_size: int = DEFAULT_ITEM_SIZE) -> tuple[int, int]:
    """(used, real) for a list: elements in use vs. over-allocated slots."""
    allocated = (sys.getsizeof(c) - sys.getsizeof([])) // DEFAULT_ITEM_SIZE
    return item_size * len(c), item_size * allocated


def deque_mem(c: deque, item_size: int = DEFAULT_ITEM_SIZE) -> tuple[int, int]:
    """(used, real) for a deque modeled as a doubly-linked node list."""
    used = (item_size + 2 * DEFAULT_ITEM_SIZE) * len(c)
    return used, used


def indexed_list_mem(c: IndexedList) -> tuple[int, int]:
    return c.mem_used(), c.true_mem_used()


def mem_of(container: str, c: Any, item_size: int) -> tuple[int, int]:
    if container == "list":
        return list_mem(c, item_size)
    if container == "deque":
        return deque_mem(c, item_size)
    if container == "IndexedList":
        return indexed_list_mem(c)
    raise ValueError(f"Unknown container: {container!r}")


def describe(container: str, c: Any, item_size: int) -> str:
    """Two-line memory summary for one container."""
    used, real = mem_of(container, c, item_size)
    if container == "IndexedList":
        head = f"IndexedList: len = {len(c)}, true_len = {c.true_len()}, capacity = {c.capacity()}"
    else:
        head = f"{container}: len = {len(c)}"
    return f"{head}\n  used ≈ {used} ({human_bytes(used)})\n  real ≈ {real} ({human_bytes(real)})"


# -----------------------------------------------------------
# Suite
# -----------------------------------------------------------

def run_suite(count: int, element: Any, item_size: Optional[int] = None, iterations: int = 5) -> list[dict[str, Any]]:
    """Build, access and delete at the midpoint for each container.

    Returns one row per (container, operation) with timings and the memory
    estimate of the container after the operation.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    size = DEFAULT_ITEM_SIZE if item_size is None else item_size
    rows: list[dict[str, Any]] = []

    for name in CONTAINERS:
        logger.debug("benchmarking %s with %d elements", name, count)
        if name == "IndexedList":
            avg, std, c = measure(BUILDERS[name], count, element, size, iterations=iterations)
        else:
            avg, std, c = measure(BUILDERS[name], count, element, iterations=iterations)
        rows.append(_row(name, "construct", count, avg, std, c, size))

        avg, std, _ = measure(ACCESSORS[name], c, iterations=iterations)
        rows.append(_row(name, "access", count, avg, std, c, size))

        # One deletion per container; repeating would shrink it further.
        avg, std, c = measure(DELETERS[name], c, len(c) // 2, iterations=1)
        rows.append(_row(name, "delete", count, avg, std, c, size))

    return rows


def _row(container: str, operation: str, count: int, avg: float, std: float, c: Any, item_size: int) -> dict[str, Any]:
    used, real = mem_of(container, c, item_size)
    return {
        "container": container,
        "operation": operation,
        "size": count,
        "avg_ms": avg,
        "std_ms": std,
        "used": used,
        "real": real,
    }


def format_rows(rows: Iterable[dict[str, Any]]) -> list[str]:
    """One printable line per row."""
    return [
        f"{r['container']:<12} | {r['operation']:<9} | Size: {r['size']:<8} | "
        f"Avg Time: {r['avg_ms']:.3f} ms | Std Time: {r['std_ms']:.3f} ms | "
        f"Used: {human_bytes(r['used'])} | Real: {human_bytes(r['real'])}"
        for r in rows
    ]


def write_csv(path: str, rows: Iterable[dict[str, Any]]) -> int:
    """Write rows to `path` and return how many were written."""
    n = 0
    with open(path, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(CSV_HEADER)
        for r in rows:
            writer.writerow([
                r["container"],
                r["operation"],
                r["size"],
                f"{r['avg_ms']:.3f}",
                f"{r['std_ms']:.3f}",
                r["used"],
                r["real"],
            ])
            n += 1
    return n


def sweep(base: int, steps: int, element: Any = 0, item_size: Optional[int] = None, iterations: int = 5) -> list[dict[str, Any]]:
    """Run the suite for sizes base, 2*base, 4*base, ... (`steps` sizes)."""
    rows: list[dict[str, Any]] = []
    for size in (base * (2 ** i) for i in range(steps)):
        rows.extend(run_suite(size, element, item_size=item_size, iterations=iterations))
    return rows
