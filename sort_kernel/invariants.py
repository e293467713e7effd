"""
Sort Kernel — Precondition and Post-condition Checks

Hard-fail validation. Misuse of an entry point raises PreconditionError;
a sort result that is out of order or not a permutation of its input raises
InvariantViolationError.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .domain_types import REGISTER_MASK


class PreconditionError(ValueError):
    """Raised when a caller violates an operation's input domain."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[PRECONDITION:{rule}] {detail}")


class InvariantViolationError(Exception):
    """Raised when a sorted result breaks the sort post-condition."""

    def __init__(self, rule: str, detail: str) -> None:
        self.rule = rule
        self.detail = detail
        super().__init__(f"[INVARIANT:{rule}] {detail}")


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------

def validate_seed(seed: int) -> None:
    """A zero register is a fixed point; the seed must be in 1..0xFFFF."""
    if seed == 0:
        raise PreconditionError(
            "nonzero_seed",
            "Seed 0 is a fixed point of the register and yields zeros forever"
        )
    if seed < 0 or seed > REGISTER_MASK:
        raise PreconditionError(
            "seed_range",
            f"Seed {seed:#x} does not fit in a 16-bit register"
        )


def validate_size(array: Sequence, size: int) -> None:
    if size < 0:
        raise PreconditionError(
            "size_non_negative",
            f"Size must be >= 0, got {size}"
        )
    if size > len(array):
        raise PreconditionError(
            "size_within_array",
            f"Size {size} exceeds array length {len(array)}"
        )


def validate_range(array: Sequence, low: int, high: int) -> None:
    """Bounds check for a non-empty inclusive range [low, high]."""
    if low < 0:
        raise PreconditionError(
            "range_low",
            f"low={low} is negative"
        )
    if high >= len(array):
        raise PreconditionError(
            "range_high",
            f"high={high} is out of bounds for array length {len(array)}"
        )


def validate_index(array: Sequence, index: int) -> None:
    if index < 0 or index >= len(array):
        raise PreconditionError(
            "index_bounds",
            f"Index {index} is out of bounds for array length {len(array)}"
        )


# ---------------------------------------------------------------------------
# Post-conditions
# ---------------------------------------------------------------------------

def is_non_decreasing(values: Sequence) -> bool:
    return all(values[i] <= values[i + 1] for i in range(len(values) - 1))


def verify_sorted(original: Sequence, result: Sequence) -> None:
    """
    Check the sort post-condition. Raises InvariantViolationError on the
    first failure:
      - permutation: result holds exactly the multiset of original
      - non_decreasing: result[i] <= result[i + 1] for every adjacent pair
    """
    if Counter(original) != Counter(result):
        raise InvariantViolationError(
            "permutation",
            f"Result is not a permutation of the input "
            f"({len(original)} values in, {len(result)} out)"
        )
    for i in range(len(result) - 1):
        if result[i] > result[i + 1]:
            raise InvariantViolationError(
                "non_decreasing",
                f"result[{i}]={result[i]!r} > result[{i + 1}]={result[i + 1]!r}"
            )
