"""
Sort Kernel — Core Domain Types

Pure data. No algorithm logic.
Register values are unsigned 16-bit. Arrays are plain mutable sequences.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Register:
    The 16-bit state of the linear-feedback shift register.

Taps:
    Bit positions XOR-ed together to form the feedback bit.

Pivot:
    Element the Lomuto partition compares every other element against.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass


# ── Register Geometry ─────────────────────────────────────────
REGISTER_BITS: int = 16
REGISTER_MASK: int = (1 << REGISTER_BITS) - 1
FEEDBACK_BIT: int = REGISTER_BITS - 1

# x^16 + x^14 + x^13 + x^11 + 1, expressed as right-shift taps
TAPS = (0, 2, 3, 5)

SEED: int = 0xF3AD
PERIOD: int = REGISTER_MASK   # maximal length: every non-zero state once


# ── Sort Instrumentation ──────────────────────────────────────

@dataclass
class SortStats:
    """
    Work counters filled in by a sort when the caller passes one.

    comparisons: element comparisons performed
    swaps:       exchanges performed (self-swaps included)
    passes:      full bubble-sort passes
    partitions:  Lomuto partition steps
    max_depth:   deepest partition level reached (1 = whole range)
    """

    comparisons: int = 0
    swaps: int = 0
    passes: int = 0
    partitions: int = 0
    max_depth: int = 0

    def to_dict(self) -> dict:
        return {
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "passes": self.passes,
            "partitions": self.partitions,
            "max_depth": self.max_depth,
        }
