"""
Deterministic Fixture Programs.

Builds fixture arrays (literal or LFSR-fed), sorts them with the kernel
routines and verifies the result is a sorted permutation of the input.
"""

from .catalog import get_program, list_programs, LFSR_FIXTURE_SIZE
from .config import FixtureConfig, load_config
from .program_spec import ProgramResult, ProgramSpec
from .runner import (
    ALGORITHMS,
    STABLE,
    DeterminismError,
    build_input,
    run_program,
    sort_values,
    verify_program,
)

__all__ = [
    "get_program",
    "list_programs",
    "LFSR_FIXTURE_SIZE",
    "FixtureConfig",
    "load_config",
    "ProgramResult",
    "ProgramSpec",
    "ALGORITHMS",
    "STABLE",
    "DeterminismError",
    "build_input",
    "run_program",
    "sort_values",
    "verify_program",
]
