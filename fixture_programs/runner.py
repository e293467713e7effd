"""
Fixture Runner — Build, sort, and verify fixture programs.

Every run builds its input from a fresh LFSR owned by the run, so results
never depend on the process-wide default generator.

Provides single-program verification and a smoke suite over the whole
catalog when run as __main__.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, MutableSequence, Optional

from sort_kernel.bubble_sort import bubble_sort
from sort_kernel.domain_types import SortStats
from sort_kernel.hashing import canonical_hash
from sort_kernel.invariants import PreconditionError, verify_sorted
from sort_kernel.lfsr import LFSR
from sort_kernel.quick_sort import quick_sort, quick_sort_iterative

from .program_spec import ProgramResult, ProgramSpec

logger = logging.getLogger(__name__)


class DeterminismError(Exception):
    """Raised when two runs of the same program produce different output."""

    def __init__(self, name: str, expected: str, actual: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Determinism failure for program {name!r}: "
            f"first run hash={expected!r}, second run hash={actual!r}"
        )


# ---------------------------------------------------------------------------
# Algorithm registry
# ---------------------------------------------------------------------------

def _run_bubble(array: MutableSequence, stats: Optional[SortStats]) -> None:
    bubble_sort(array, len(array), stats)


def _run_quick(array: MutableSequence, stats: Optional[SortStats]) -> None:
    quick_sort(array, 0, len(array) - 1, stats)


def _run_quick_iterative(array: MutableSequence, stats: Optional[SortStats]) -> None:
    quick_sort_iterative(array, 0, len(array) - 1, stats)


ALGORITHMS: Dict[str, Callable[[MutableSequence, Optional[SortStats]], None]] = {
    "bubble": _run_bubble,
    "quick": _run_quick,
    "quick_iterative": _run_quick_iterative,
}

STABLE: Dict[str, bool] = {
    "bubble": True,
    "quick": False,
    "quick_iterative": False,
}


def sort_values(
    values: MutableSequence,
    algorithm: str,
    stats: Optional[SortStats] = None,
) -> None:
    """Sort `values` in place over its full range with the named algorithm."""
    fn = ALGORITHMS.get(algorithm)
    if fn is None:
        raise PreconditionError(
            "algorithm",
            f"Unknown algorithm {algorithm!r}. "
            f"Valid algorithms: {sorted(ALGORITHMS)}"
        )
    fn(values, stats)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------

def build_input(spec: ProgramSpec) -> List[int]:
    """Allocate the program's array and fill it from its source."""
    if spec.source == "literal":
        if len(spec.values) != spec.size:
            raise PreconditionError(
                "literal_size",
                f"Program {spec.name!r} declares size {spec.size} "
                f"but has {len(spec.values)} literal values"
            )
        return list(spec.values)
    if spec.source == "lfsr":
        return LFSR(spec.seed).take(spec.size)
    raise PreconditionError(
        "source",
        f"Unknown source {spec.source!r} for program {spec.name!r}"
    )


def run_program(spec: ProgramSpec) -> ProgramResult:
    """
    Build the input, sort it with the program's algorithm (if any) and
    verify the post-condition. Raises InvariantViolationError when the
    output is not a sorted permutation of the input.
    """
    original = build_input(spec)
    array = list(original)
    stats = SortStats()

    start = time.perf_counter()
    if spec.algorithm is not None:
        sort_values(array, spec.algorithm, stats)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if spec.algorithm is not None:
        verify_sorted(original, array)

    logger.debug(
        "program=%s algorithm=%s size=%d comparisons=%d swaps=%d",
        spec.name, spec.algorithm, len(array), stats.comparisons, stats.swaps,
    )

    return ProgramResult(
        name=spec.name,
        algorithm=spec.algorithm,
        input_values=tuple(original),
        output_values=tuple(array),
        input_hash=canonical_hash(original),
        output_hash=canonical_hash(array),
        stable=STABLE.get(spec.algorithm) if spec.algorithm else None,
        elapsed_ms=round(elapsed_ms, 2),
        stats=stats.to_dict(),
    )


def verify_program(spec: ProgramSpec) -> ProgramResult:
    """
    Run a program twice and compare output hashes.
    Returns the first result; raises DeterminismError on divergence.
    """
    first = run_program(spec)
    second = run_program(spec)
    if first.output_hash != second.output_hash:
        raise DeterminismError(spec.name, first.output_hash, second.output_hash)
    logger.info("program=%s deterministic hash=%s", spec.name, first.output_hash)
    return first


# ---------------------------------------------------------------------------
# CLI smoke tests
# ---------------------------------------------------------------------------

def _run_smoke_tests() -> None:
    """Verify every catalog program and check cross-algorithm agreement."""
    import json

    from .catalog import list_programs

    all_ok = True
    sorted_hashes: Dict[str, str] = {}

    for spec in list_programs():
        print(f"\n{'-'*60}")
        print(f"  {spec.name}  (algorithm={spec.algorithm})")
        print(f"{'-'*60}")

        try:
            result = verify_program(spec)
            print(json.dumps(result.to_dict(show=5), indent=2))
            print("  OK: Deterministic (hash stable)")
            if spec.source == "lfsr" and spec.algorithm is not None:
                sorted_hashes[spec.name] = result.output_hash
        except Exception as exc:
            print(f"  FAIL: {exc}")
            all_ok = False

    if len(set(sorted_hashes.values())) > 1:
        print(f"  FAIL: algorithms disagree on LFSR input: {sorted_hashes}")
        all_ok = False

    print(f"\n{'='*60}")
    if all_ok:
        print("  ALL SMOKE TESTS PASSED")
    else:
        print("  SOME TESTS FAILED")
    print(f"{'='*60}")


if __name__ == "__main__":
    _run_smoke_tests()
