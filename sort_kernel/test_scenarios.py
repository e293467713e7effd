"""
Sort Kernel — Test Scenarios

Covers:
  - LFSR golden sequence, reseeding, full period, non-degeneracy
  - Shared next_random() generator under concurrent callers
  - Bubble sort scenarios, stability, early exit, partial size
  - Lomuto partition and quicksort scenarios, sub-ranges, no-op ranges
  - Quicksort worst case on sorted input, instability
  - Recursive / iterative quicksort agreement
  - Permutation, order and idempotence over LFSR-derived arrays
  - Precondition and post-condition failures

Run:  py -3 -m sort_kernel.test_scenarios
"""

from __future__ import annotations

import os
import sys
import threading

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sort_kernel.bubble_sort import bubble_sort, swap
from sort_kernel.domain_types import PERIOD, SEED, SortStats
from sort_kernel.hashing import canonical_hash, canonical_serialize
from sort_kernel.invariants import (
    InvariantViolationError,
    PreconditionError,
    is_non_decreasing,
    verify_sorted,
)
from sort_kernel.lfsr import LFSR, next_random, reseed, step
from sort_kernel.quick_sort import partition, quick_sort, quick_sort_iterative


GOLDEN_FIRST_FIVE = [0x79D6, 0xBCEB, 0xDE75, 0xEF3A, 0x779D]

_pass = 0
_fail = 0


def _test(name, fn):
    global _pass, _fail
    try:
        fn()
        print(f"  [PASS] {name}")
        _pass += 1
    except Exception as exc:
        print(f"  [FAIL] {name}: {exc}")
        _fail += 1


def _expect_precondition(rule, fn, *args):
    try:
        fn(*args)
    except PreconditionError as exc:
        assert exc.rule == rule, f"expected rule {rule!r}, got {exc.rule!r}"
        return
    raise AssertionError(f"Expected PreconditionError({rule!r})")


class _Tagged:
    """Value compared on `value` only; `tag` records original position."""

    def __init__(self, value: int, tag: str) -> None:
        self.value = value
        self.tag = tag

    def __gt__(self, other):
        return self.value > other.value

    def __ge__(self, other):
        return self.value >= other.value

    def __lt__(self, other):
        return self.value < other.value

    def __le__(self, other):
        return self.value <= other.value

    def __repr__(self):
        return f"{self.value}{self.tag}"


def _sample_arrays():
    """Arrays of length 0..40 with negatives and plenty of duplicates."""
    gen = LFSR(0xACE1)
    for n in range(41):
        yield [(v % 21) - 10 for v in gen.take(n)]


def _sort_all(values):
    a, b, c = list(values), list(values), list(values)
    bubble_sort(a, len(a))
    quick_sort(b, 0, len(b) - 1)
    quick_sort_iterative(c, 0, len(c) - 1)
    return a, b, c


# ---------------------------------------------------------------------------
# LFSR
# ---------------------------------------------------------------------------

def test_lfsr_golden_sequence():
    gen = LFSR(SEED)
    assert gen.take(5) == GOLDEN_FIRST_FIVE
    assert gen.register == 0x779D


def test_lfsr_step_is_pure():
    assert step(0xF3AD) == 0x79D6
    assert step(0xF3AD) == 0x79D6
    assert step(0x79D6) == 0xBCEB
    # zero register is a fixed point
    assert step(0) == 0


def test_lfsr_reseed_repeats_sequence():
    gen = LFSR()
    first = gen.take(50)
    gen.reseed(SEED)
    assert gen.take(50) == first
    assert LFSR(SEED).take(50) == first


def test_lfsr_iteration_matches_next():
    it = iter(LFSR())
    assert [next(it) for _ in range(5)] == GOLDEN_FIRST_FIVE


def test_lfsr_non_degenerate():
    values = LFSR().take(1000)
    assert 0 not in values
    assert len(set(values)) == 1000
    assert all(0 < v <= 0xFFFF for v in values)


def test_lfsr_full_period():
    gen = LFSR(SEED)
    seen = set()
    for _ in range(PERIOD):
        seen.add(gen.next())
    assert len(seen) == PERIOD
    assert gen.register == SEED


def test_lfsr_invalid_seeds():
    _expect_precondition("nonzero_seed", LFSR, 0)
    _expect_precondition("seed_range", LFSR, 0x10000)
    _expect_precondition("seed_range", LFSR, -1)
    _expect_precondition("count_non_negative", LFSR().take, -1)


def test_next_random_default_generator():
    reseed()
    assert [next_random() for _ in range(5)] == GOLDEN_FIRST_FIVE
    reseed()
    assert [next_random() for _ in range(5)] == GOLDEN_FIRST_FIVE
    reseed(0xACE1)
    assert next_random() == step(0xACE1)
    reseed()


def test_next_random_concurrent_callers():
    reseed()
    results = [[] for _ in range(4)]

    def draw(out):
        for _ in range(250):
            out.append(next_random())

    threads = [threading.Thread(target=draw, args=(r,)) for r in results]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    drawn = sorted(v for r in results for v in r)
    assert drawn == sorted(LFSR(SEED).take(1000))
    reseed()


# ---------------------------------------------------------------------------
# Bubble Sort
# ---------------------------------------------------------------------------

def test_bubble_scenario_five():
    v = [4, 6, 2, 7, 8]
    bubble_sort(v, 5)
    assert v == [2, 4, 6, 7, 8]


def test_bubble_scenario_six():
    v = [5, 7, 2, 1, 8, 10]
    bubble_sort(v, 6)
    assert v == [1, 2, 5, 7, 8, 10]


def test_bubble_trivial_sizes():
    for v in ([], [42]):
        stats = SortStats()
        before = list(v)
        bubble_sort(v, len(v), stats)
        assert v == before
        assert stats.comparisons == 0
        assert stats.passes == 0


def test_bubble_sorted_input_single_pass():
    v = list(range(10))
    stats = SortStats()
    bubble_sort(v, 10, stats)
    assert v == list(range(10))
    assert stats.passes == 1
    assert stats.comparisons == 9
    assert stats.swaps == 0


def test_bubble_reverse_input():
    v = [5, 4, 3, 2, 1]
    stats = SortStats()
    bubble_sort(v, 5, stats)
    assert v == [1, 2, 3, 4, 5]
    assert stats.swaps == 10      # one per inversion
    assert stats.passes == 5      # four swapping passes + one clean pass
    assert stats.comparisons == 20


def test_bubble_partial_size():
    v = [3, 2, 1, 0]
    bubble_sort(v, 2)
    assert v == [2, 3, 1, 0]


def test_bubble_stability():
    items = [_Tagged(3, "a"), _Tagged(1, "b"), _Tagged(3, "c"),
             _Tagged(1, "d"), _Tagged(2, "e"), _Tagged(3, "f")]
    bubble_sort(items, len(items))
    assert [i.tag for i in items] == ["b", "d", "e", "a", "c", "f"]


def test_bubble_invalid_size():
    _expect_precondition("size_non_negative", bubble_sort, [1], -1)
    _expect_precondition("size_within_array", bubble_sort, [1], 2)


def test_swap():
    v = [1, 2, 3]
    swap(v, 0, 2)
    assert v == [3, 2, 1]
    swap(v, 1, 1)
    assert v == [3, 2, 1]
    _expect_precondition("index_bounds", swap, v, 0, 3)
    _expect_precondition("index_bounds", swap, v, -1, 0)


# ---------------------------------------------------------------------------
# Quicksort
# ---------------------------------------------------------------------------

def test_partition_scenario():
    v = [3, 1, 2]
    pi = partition(v, 0, 2)
    assert pi == 1
    assert v == [1, 2, 3]


def test_partition_places_pivot():
    v = [7, 2, 9, 4, 4, 1, 5]
    pi = partition(v, 0, 6)
    assert v[pi] == 5
    assert all(x <= 5 for x in v[:pi])
    assert all(x > 5 for x in v[pi + 1:])


def test_partition_invalid_range():
    _expect_precondition("partition_range", partition, [1], 1, 0)
    _expect_precondition("range_high", partition, [1, 2], 0, 2)


def test_quick_scenario():
    v = [3, 1, 2]
    quick_sort(v, 0, 2)
    assert v == [1, 2, 3]


def test_quick_noop_ranges():
    empty = []
    quick_sort(empty, 0, -1)
    assert empty == []
    one = [5]
    quick_sort(one, 0, 0)
    assert one == [5]
    two = [2, 1]
    quick_sort(two, 1, 0)
    assert two == [2, 1]
    # no-op ranges are not bounds checked
    quick_sort(two, 5, 5)
    assert two == [2, 1]


def test_quick_sub_range():
    v = [9, 3, 2, 1, 0]
    quick_sort(v, 1, 3)
    assert v == [9, 1, 2, 3, 0]
    w = [9, 3, 2, 1, 0]
    quick_sort_iterative(w, 1, 3)
    assert w == v


def test_quick_invalid_range():
    _expect_precondition("range_high", quick_sort, [1, 2], 0, 2)
    _expect_precondition("range_low", quick_sort, [1, 2], -1, 1)
    _expect_precondition("range_high", quick_sort_iterative, [1, 2], 0, 2)


def test_quick_sorted_input_worst_case():
    n = 50
    for fn in (quick_sort, quick_sort_iterative):
        v = list(range(n))
        stats = SortStats()
        fn(v, 0, n - 1, stats)
        assert v == list(range(n))
        assert stats.comparisons == n * (n - 1) // 2
        assert stats.partitions == n - 1
        assert stats.max_depth == n - 1


def test_quick_not_stable():
    items = [_Tagged(1, "a"), _Tagged(1, "b"), _Tagged(0, "c")]
    quick_sort(items, 0, 2)
    assert [i.value for i in items] == [0, 1, 1]
    assert [i.tag for i in items] == ["c", "b", "a"]


def test_quick_recursive_iterative_same_stats():
    values = LFSR().take(300)
    a, b = list(values), list(values)
    sa, sb = SortStats(), SortStats()
    quick_sort(a, 0, len(a) - 1, sa)
    quick_sort_iterative(b, 0, len(b) - 1, sb)
    assert a == b
    assert sa == sb


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

def test_permutation_and_order():
    for values in _sample_arrays():
        for result in _sort_all(values):
            verify_sorted(values, result)
            assert result == sorted(values)


def test_idempotence():
    for values in _sample_arrays():
        once = sorted(values)
        for result in _sort_all(once):
            assert result == once
        for result in _sort_all(values):
            again = _sort_all(result)
            assert all(r == result for r in again)


def test_cross_algorithm_agreement_on_lfsr_input():
    values = LFSR(SEED).take(1000)
    a, b, c = _sort_all(values)
    assert a == b == c
    assert canonical_hash(a) == canonical_hash(sorted(values))
    assert is_non_decreasing(a)


# ---------------------------------------------------------------------------
# Post-conditions and hashing
# ---------------------------------------------------------------------------

def test_verify_sorted_failures():
    try:
        verify_sorted([1, 2], [1, 1])
        raise AssertionError("Expected permutation violation")
    except InvariantViolationError as exc:
        assert exc.rule == "permutation"
    try:
        verify_sorted([1, 2], [2, 1])
        raise AssertionError("Expected order violation")
    except InvariantViolationError as exc:
        assert exc.rule == "non_decreasing"


def test_canonical_serialize():
    assert canonical_serialize([3, -1, 0]) == b"[3,-1,0]"
    assert canonical_hash([1, 2]) != canonical_hash([2, 1])
    assert len(canonical_hash([])) == 64


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

def main():
    tests = [
        ("LFSR: golden sequence", test_lfsr_golden_sequence),
        ("LFSR: step is pure", test_lfsr_step_is_pure),
        ("LFSR: reseed repeats", test_lfsr_reseed_repeats_sequence),
        ("LFSR: iteration", test_lfsr_iteration_matches_next),
        ("LFSR: non-degenerate", test_lfsr_non_degenerate),
        ("LFSR: full period", test_lfsr_full_period),
        ("LFSR: invalid seeds", test_lfsr_invalid_seeds),
        ("next_random: default generator", test_next_random_default_generator),
        ("next_random: concurrent callers", test_next_random_concurrent_callers),
        ("Bubble: [4,6,2,7,8]", test_bubble_scenario_five),
        ("Bubble: [5,7,2,1,8,10]", test_bubble_scenario_six),
        ("Bubble: trivial sizes", test_bubble_trivial_sizes),
        ("Bubble: sorted input single pass", test_bubble_sorted_input_single_pass),
        ("Bubble: reverse input", test_bubble_reverse_input),
        ("Bubble: partial size", test_bubble_partial_size),
        ("Bubble: stability", test_bubble_stability),
        ("Bubble: invalid size", test_bubble_invalid_size),
        ("Swap", test_swap),
        ("Partition: [3,1,2]", test_partition_scenario),
        ("Partition: pivot placement", test_partition_places_pivot),
        ("Partition: invalid range", test_partition_invalid_range),
        ("Quick: [3,1,2]", test_quick_scenario),
        ("Quick: no-op ranges", test_quick_noop_ranges),
        ("Quick: sub-range", test_quick_sub_range),
        ("Quick: invalid range", test_quick_invalid_range),
        ("Quick: sorted input worst case", test_quick_sorted_input_worst_case),
        ("Quick: not stable", test_quick_not_stable),
        ("Quick: recursive == iterative", test_quick_recursive_iterative_same_stats),
        ("Property: permutation + order", test_permutation_and_order),
        ("Property: idempotence", test_idempotence),
        ("Property: cross-algorithm agreement", test_cross_algorithm_agreement_on_lfsr_input),
        ("verify_sorted failures", test_verify_sorted_failures),
        ("Canonical serialization", test_canonical_serialize),
    ]

    print(f"\nRunning {len(tests)} tests...\n")
    for name, fn in tests:
        _test(name, fn)

    print(f"\n{'='*60}")
    print(f"  {_pass} passed, {_fail} failed out of {_pass + _fail}")
    print(f"{'='*60}")

    if _fail > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
