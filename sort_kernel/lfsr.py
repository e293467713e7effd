"""
Deterministic LFSR — 16-bit Fibonacci linear-feedback shift register.

Identical (seed, call count) → identical sequence. Not a cryptographic
primitive; it exists so sort fixtures get reproducible "random" input.

Each step XORs bits 0, 2, 3 and 5 of the register into a feedback bit,
shifts the register right by one and inserts the feedback bit at bit 15.
"""

from __future__ import annotations

import threading
from typing import Iterator, List

from .domain_types import FEEDBACK_BIT, REGISTER_MASK, SEED, TAPS
from .invariants import PreconditionError, validate_seed


def step(register: int) -> int:
    """Pure recurrence: return the register value following `register`."""
    bit = 0
    for tap in TAPS:
        bit ^= register >> tap
    bit &= 1
    return ((register >> 1) | (bit << FEEDBACK_BIT)) & REGISTER_MASK


class LFSR:
    """Caller-owned generator state. No global state touched."""

    def __init__(self, seed: int = SEED) -> None:
        validate_seed(seed)
        self._register = seed

    @property
    def register(self) -> int:
        return self._register

    def reseed(self, seed: int = SEED) -> None:
        validate_seed(seed)
        self._register = seed

    def next(self) -> int:
        """Advance the register and return its new value."""
        self._register = step(self._register)
        return self._register

    def take(self, count: int) -> List[int]:
        """Return the next `count` values, e.g. to fill a fixture array."""
        if count < 0:
            raise PreconditionError(
                "count_non_negative",
                f"Count must be >= 0, got {count}"
            )
        return [self.next() for _ in range(count)]

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()


# ---------------------------------------------------------------------------
# Process-wide default generator
# ---------------------------------------------------------------------------

_default = LFSR(SEED)
_default_lock = threading.Lock()


def next_random() -> int:
    """Advance the shared default generator and return its new value."""
    with _default_lock:
        return _default.next()


def reseed(seed: int = SEED) -> None:
    """Reset the shared default generator to `seed`."""
    with _default_lock:
        _default.reseed(seed)
