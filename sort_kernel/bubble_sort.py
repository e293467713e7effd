"""
Bubble Sort — in-place, stable, early exit.

Full left-to-right passes over adjacent pairs, swapping only on strict
inequality. Terminates after the first pass that performs no swap.
"""

from __future__ import annotations

from typing import MutableSequence, Optional

from .domain_types import SortStats
from .invariants import validate_index, validate_size


def swap(array: MutableSequence, a: int, b: int) -> None:
    """Exchange the values at positions a and b. Hard fail out of bounds."""
    validate_index(array, a)
    validate_index(array, b)
    array[a], array[b] = array[b], array[a]


def bubble_sort(
    array: MutableSequence,
    size: int,
    stats: Optional[SortStats] = None,
) -> None:
    """Sort array[0:size) in place into non-decreasing order."""
    validate_size(array, size)
    if size <= 1:
        return

    unsorted = True
    while unsorted:
        swapped = False
        for i in range(size - 1):
            if stats is not None:
                stats.comparisons += 1
            if array[i] > array[i + 1]:
                array[i], array[i + 1] = array[i + 1], array[i]
                swapped = True
                if stats is not None:
                    stats.swaps += 1
        if stats is not None:
            stats.passes += 1
        if not swapped:
            unsorted = False
