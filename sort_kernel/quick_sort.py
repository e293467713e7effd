"""
Quicksort — Lomuto partition, last element as pivot.

No randomized pivot and no median-of-three: sorted and reverse-sorted input
degrade to O(n^2) comparisons and O(n) recursion depth. Not stable.

quick_sort_iterative performs the same partitions, in the same left-first
order, over an explicit work stack so pathological input cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Tuple

from .domain_types import SortStats
from .invariants import PreconditionError, validate_range


def partition(
    array: MutableSequence,
    low: int,
    high: int,
    stats: Optional[SortStats] = None,
) -> int:
    """
    Partition array[low..high] around array[high].

    Afterwards every element left of the returned index is <= pivot and
    every element right of it is > pivot. Returns the pivot's final index.
    """
    if low > high:
        raise PreconditionError(
            "partition_range",
            f"Cannot partition an empty range low={low}, high={high}"
        )
    validate_range(array, low, high)
    return _partition(array, low, high, stats)


def quick_sort(
    array: MutableSequence,
    low: int,
    high: int,
    stats: Optional[SortStats] = None,
) -> None:
    """Sort the inclusive range array[low..high] in place. low >= high is a no-op."""
    if low >= high:
        return
    validate_range(array, low, high)
    _quick_sort(array, low, high, stats, 1)


def quick_sort_iterative(
    array: MutableSequence,
    low: int,
    high: int,
    stats: Optional[SortStats] = None,
) -> None:
    """quick_sort over an explicit (low, high, depth) stack."""
    if low >= high:
        return
    validate_range(array, low, high)

    pending: List[Tuple[int, int, int]] = [(low, high, 1)]
    while pending:
        lo, hi, depth = pending.pop()
        if lo >= hi:
            continue
        if stats is not None:
            stats.max_depth = max(stats.max_depth, depth)
        pi = _partition(array, lo, hi, stats)
        # right pushed first so the left range is sorted first
        pending.append((pi + 1, hi, depth + 1))
        pending.append((lo, pi - 1, depth + 1))


# ---------------------------------------------------------------------------
# Internals (bounds already checked)
# ---------------------------------------------------------------------------

def _partition(
    array: MutableSequence,
    low: int,
    high: int,
    stats: Optional[SortStats],
) -> int:
    pivot = array[high]
    i = low - 1

    for j in range(low, high):
        if stats is not None:
            stats.comparisons += 1
        if array[j] <= pivot:
            i += 1
            array[i], array[j] = array[j], array[i]
            if stats is not None:
                stats.swaps += 1

    array[i + 1], array[high] = array[high], array[i + 1]
    if stats is not None:
        stats.swaps += 1
        stats.partitions += 1
    return i + 1


def _quick_sort(
    array: MutableSequence,
    low: int,
    high: int,
    stats: Optional[SortStats],
    depth: int,
) -> None:
    if low < high:
        if stats is not None:
            stats.max_depth = max(stats.max_depth, depth)
        pi = _partition(array, low, high, stats)
        _quick_sort(array, low, pi - 1, stats, depth + 1)
        _quick_sort(array, pi + 1, high, stats, depth + 1)
