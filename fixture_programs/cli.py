"""
Command-line interface for the fixture programs
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from sort_kernel.domain_types import SortStats
from sort_kernel.hashing import canonical_hash
from sort_kernel.invariants import InvariantViolationError, PreconditionError
from sort_kernel.lfsr import LFSR

from .catalog import get_program, list_programs
from .config import load_config
from .runner import ALGORITHMS, DeterminismError, run_program, sort_values, verify_program

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="fixture-programs",
        description="Deterministic LFSR-fed sort fixtures",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )
    parser.add_argument("--env-file", help="Path to a .env file", default=None)

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List fixture programs")

    run = sub.add_parser("run", help="Run one fixture program")
    run.add_argument("name", help="Program name (see 'list')")
    run.add_argument(
        "--show", type=int, default=10,
        help="Number of leading input/output values to print",
    )

    lfsr = sub.add_parser("lfsr", help="Print successive LFSR values")
    lfsr.add_argument(
        "--seed", type=lambda s: int(s, 0), default=None,
        help="Register seed (default from FIXTURE_SEED or 0xF3AD)",
    )
    lfsr.add_argument("--count", "-n", type=int, default=5)
    lfsr.add_argument("--hex", action="store_true", help="Print values in hex")

    srt = sub.add_parser("sort", help="Sort integers given on the command line")
    srt.add_argument("algorithm", choices=sorted(ALGORITHMS))
    srt.add_argument("values", nargs="*", type=int)

    verify = sub.add_parser("verify", help="Verify programs run deterministically")
    verify.add_argument("names", nargs="*", help="Programs to verify (default: all)")

    return parser.parse_args(argv)


def _cmd_list(args: argparse.Namespace) -> int:
    for spec in list_programs():
        print(f"{spec.name:22s} {str(spec.algorithm):16s} {spec.description}")
    return EXIT_OK


def _cmd_run(args: argparse.Namespace) -> int:
    result = run_program(get_program(args.name))
    print(json.dumps(result.to_dict(show=args.show), indent=2))
    return EXIT_OK


def _cmd_lfsr(args: argparse.Namespace, seed: int, max_size: int) -> int:
    if args.count > max_size:
        raise PreconditionError(
            "max_size", f"count={args.count} exceeds FIXTURE_MAX_SIZE={max_size}"
        )
    gen = LFSR(args.seed if args.seed is not None else seed)
    for value in gen.take(args.count):
        print(f"{value:#06x}" if args.hex else value)
    return EXIT_OK


def _cmd_sort(args: argparse.Namespace, max_size: int) -> int:
    if len(args.values) > max_size:
        raise PreconditionError(
            "max_size", f"{len(args.values)} values exceed FIXTURE_MAX_SIZE={max_size}"
        )
    values = list(args.values)
    stats = SortStats()
    sort_values(values, args.algorithm, stats)
    print(json.dumps({
        "algorithm": args.algorithm,
        "values": values,
        "hash": canonical_hash(values),
        "stats": stats.to_dict(),
    }, indent=2))
    return EXIT_OK


def _cmd_verify(args: argparse.Namespace) -> int:
    specs = [get_program(n) for n in args.names] if args.names else list_programs()
    failed = 0
    for spec in specs:
        try:
            result = verify_program(spec)
            print(f"  [PASS] {spec.name}: {result.output_hash}")
        except (DeterminismError, InvariantViolationError) as exc:
            print(f"  [FAIL] {spec.name}: {exc}")
            failed += 1
    print(f"\n{len(specs) - failed} passed, {failed} failed out of {len(specs)}")
    return EXIT_FAILED if failed else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config = load_config(args.env_file)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=getattr(logging, args.log_level or config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("config=%s", config)

    try:
        if args.command == "list":
            return _cmd_list(args)
        if args.command == "run":
            return _cmd_run(args)
        if args.command == "lfsr":
            return _cmd_lfsr(args, config.seed, config.max_size)
        if args.command == "sort":
            return _cmd_sort(args, config.max_size)
        return _cmd_verify(args)
    except KeyError as exc:
        logger.error("%s", exc.args[0])
        return EXIT_USAGE
    except PreconditionError as exc:
        logger.error("%s", exc)
        return EXIT_USAGE
    except InvariantViolationError as exc:
        logger.error("%s", exc)
        return EXIT_FAILED
    except RecursionError:
        logger.error("recursion limit exceeded; use the quick_iterative algorithm")
        return EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
