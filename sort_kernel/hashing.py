"""
Sort Kernel — Canonical Hashing

Deterministic serialization + SHA-256 of an integer array, so fixture
inputs and outputs can be pinned and compared across algorithms.

Rules:
  - Values kept in array order (never re-sorted here)
  - UTF-8 JSON list, no whitespace, ints only
"""

from __future__ import annotations

import hashlib
import json
from typing import Sequence


def canonical_serialize(values: Sequence[int]) -> bytes:
    """Compact JSON list of the values, in order."""
    return json.dumps(
        [int(v) for v in values], ensure_ascii=True, separators=(",", ":"),
    ).encode("utf-8")


def canonical_hash(values: Sequence[int]) -> str:
    """SHA-256 of canonical serialization. Lowercase hex string."""
    return hashlib.sha256(canonical_serialize(values)).hexdigest()
