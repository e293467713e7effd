"""
Sort Kernel
Deterministic LFSR generator plus two in-place comparison sorts.
Register values: unsigned 16-bit, seed 0xF3AD.
"""

from .domain_types import (
    SortStats, REGISTER_BITS, REGISTER_MASK, TAPS, SEED, PERIOD,
)
from .invariants import (
    PreconditionError,
    InvariantViolationError,
    validate_seed,
    validate_size,
    validate_range,
    is_non_decreasing,
    verify_sorted,
)
from .lfsr import LFSR, step, next_random, reseed
from .bubble_sort import bubble_sort, swap
from .quick_sort import partition, quick_sort, quick_sort_iterative
from .hashing import canonical_serialize, canonical_hash

__all__ = [
    "SortStats",
    "REGISTER_BITS",
    "REGISTER_MASK",
    "TAPS",
    "SEED",
    "PERIOD",
    "PreconditionError",
    "InvariantViolationError",
    "validate_seed",
    "validate_size",
    "validate_range",
    "is_non_decreasing",
    "verify_sorted",
    "LFSR",
    "step",
    "next_random",
    "reseed",
    "bubble_sort",
    "swap",
    "partition",
    "quick_sort",
    "quick_sort_iterative",
    "canonical_serialize",
    "canonical_hash",
]
