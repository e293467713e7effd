"""
Configuration — environment driven, optional .env file.

  FIXTURE_SEED       default LFSR seed (any int literal, e.g. 0xF3AD)
  FIXTURE_MAX_SIZE   largest array the CLI/backend will generate or sort
  FIXTURE_LOG_LEVEL  logging level name
  FRONTEND_URL       CORS origin allowed by the backend
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from sort_kernel.domain_types import SEED
from sort_kernel.invariants import validate_seed

DEFAULT_MAX_SIZE: int = 10_000
DEFAULT_LOG_LEVEL: str = "INFO"
DEFAULT_FRONTEND_URL: str = "http://localhost:3000"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class FixtureConfig:
    seed: int = SEED
    max_size: int = DEFAULT_MAX_SIZE
    log_level: str = DEFAULT_LOG_LEVEL
    frontend_url: str = DEFAULT_FRONTEND_URL

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def load_config(env_file: Optional[str] = None) -> FixtureConfig:
    """
    Build a FixtureConfig from the environment.

    If `env_file` is given (or a .env exists in the working directory) it is
    loaded first; variables already set in the environment win.
    Raises ValueError on malformed values.
    """
    if env_file is not None:
        load_dotenv(env_file)
    elif os.path.exists(".env"):
        load_dotenv(".env")

    raw_seed = os.environ.get("FIXTURE_SEED", "")
    try:
        seed = int(raw_seed, 0) if raw_seed else SEED
    except ValueError:
        raise ValueError(f"FIXTURE_SEED must be an integer, got {raw_seed!r}") from None
    validate_seed(seed)

    raw_max = os.environ.get("FIXTURE_MAX_SIZE", "")
    try:
        max_size = int(raw_max) if raw_max else DEFAULT_MAX_SIZE
    except ValueError:
        raise ValueError(f"FIXTURE_MAX_SIZE must be an integer, got {raw_max!r}") from None
    if max_size < 0:
        raise ValueError(f"FIXTURE_MAX_SIZE must be >= 0, got {max_size}")

    log_level = os.environ.get("FIXTURE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(
            f"FIXTURE_LOG_LEVEL must be one of {_LOG_LEVELS}, got {log_level!r}"
        )

    return FixtureConfig(
        seed=seed,
        max_size=max_size,
        log_level=log_level,
        frontend_url=os.environ.get("FRONTEND_URL", DEFAULT_FRONTEND_URL),
    )
