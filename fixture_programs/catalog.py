"""
Fixture Program Catalog

The reference programs: a literal-array bubble sort, an LFSR-fed quicksort
over 1000 values and a bare LFSR fill, plus the variants used for
cross-algorithm agreement.
"""

from __future__ import annotations

from typing import Dict, List

from sort_kernel.domain_types import SEED

from .program_spec import ProgramSpec

LFSR_FIXTURE_SIZE: int = 1000


_PROGRAMS: Dict[str, ProgramSpec] = {
    spec.name: spec
    for spec in [
        ProgramSpec(
            name="bubblesort",
            description="Bubble sort over a five element literal array",
            source="literal",
            size=5,
            values=(4, 6, 2, 7, 8),
            algorithm="bubble",
        ),
        ProgramSpec(
            name="bubblesort_6",
            description="Bubble sort over a six element literal array",
            source="literal",
            size=6,
            values=(5, 7, 2, 1, 8, 10),
            algorithm="bubble",
        ),
        ProgramSpec(
            name="quicksort",
            description="Recursive quicksort over 1000 LFSR values",
            source="lfsr",
            size=LFSR_FIXTURE_SIZE,
            algorithm="quick",
            seed=SEED,
        ),
        ProgramSpec(
            name="quicksort_iterative",
            description="Work-stack quicksort over 1000 LFSR values",
            source="lfsr",
            size=LFSR_FIXTURE_SIZE,
            algorithm="quick_iterative",
            seed=SEED,
        ),
        ProgramSpec(
            name="bubblesort_lfsr",
            description="Bubble sort over 1000 LFSR values",
            source="lfsr",
            size=LFSR_FIXTURE_SIZE,
            algorithm="bubble",
            seed=SEED,
        ),
        ProgramSpec(
            name="lfsr",
            description="Fill 1000 values from the LFSR without sorting",
            source="lfsr",
            size=LFSR_FIXTURE_SIZE,
            algorithm=None,
            seed=SEED,
        ),
    ]
}


def get_program(name: str) -> ProgramSpec:
    """Look up a program by name. Raises KeyError for unknown names."""
    try:
        return _PROGRAMS[name]
    except KeyError:
        raise KeyError(
            f"Unknown program {name!r}. Valid programs: {sorted(_PROGRAMS)}"
        ) from None


def list_programs() -> List[ProgramSpec]:
    return [_PROGRAMS[name] for name in sorted(_PROGRAMS)]
