# file: backend/main.py
"""
FastAPI Backend — Sort Fixture API v1.

Stateless: every request builds its own generator and array.
No in-memory state between requests.

Endpoints:
  GET  /programs             — list fixture programs
  POST /programs/{name}/run  — build + sort + verify a program
  POST /lfsr                 — draw values from a freshly seeded LFSR
  POST /sort                 — sort posted integers with a named algorithm
"""
from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from fixture_programs.catalog import get_program, list_programs
from fixture_programs.config import load_config
from fixture_programs.runner import STABLE, run_program, sort_values
from sort_kernel.domain_types import SortStats
from sort_kernel.hashing import canonical_hash
from sort_kernel.invariants import InvariantViolationError, PreconditionError, verify_sorted
from sort_kernel.lfsr import LFSR

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

_env_path = os.path.join(os.path.dirname(__file__), ".env")
CONFIG = load_config(_env_path if os.path.exists(_env_path) else None)

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Sort Fixture API",
    version="1.0.0",
    description="Deterministic LFSR-fed bubble sort and quicksort fixtures",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        CONFIG.frontend_url,
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------


class LfsrRequest(BaseModel):
    seed: Optional[int] = None
    count: int = 5


class SortRequest(BaseModel):
    values: List[int]
    algorithm: str = "quick"


class RunRequest(BaseModel):
    show: Optional[int] = None


# ---------------------------------------------------------------------------
# Core helpers
# ---------------------------------------------------------------------------


def _check_size(n: int) -> None:
    if n > CONFIG.max_size:
        raise HTTPException(
            status_code=400,
            detail=f"Requested size {n} exceeds maximum {CONFIG.max_size}",
        )


def _translate(exc: Exception) -> HTTPException:
    """Map kernel exceptions onto HTTP errors."""
    if isinstance(exc, PreconditionError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, InvariantViolationError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, RecursionError):
        return HTTPException(
            status_code=422,
            detail="Recursion limit exceeded; use the quick_iterative algorithm",
        )
    return HTTPException(status_code=500, detail=str(exc))


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/programs")
def programs() -> List[Dict]:
    return [spec.to_dict() for spec in list_programs()]


@app.post("/programs/{name}/run")
def run(name: str, req: Optional[RunRequest] = None):
    try:
        spec = get_program(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Program {name!r} not found")
    _check_size(spec.size)

    try:
        result = run_program(spec)
    except (PreconditionError, InvariantViolationError, RecursionError) as exc:
        raise _translate(exc)

    logger.info("ran program=%s hash=%s", name, result.output_hash)
    return result.to_dict(show=req.show if req else None)


@app.post("/lfsr")
def lfsr(req: LfsrRequest):
    _check_size(req.count)
    try:
        gen = LFSR(req.seed if req.seed is not None else CONFIG.seed)
        values = gen.take(req.count)
    except PreconditionError as exc:
        raise _translate(exc)
    return {
        "seed": req.seed if req.seed is not None else CONFIG.seed,
        "count": req.count,
        "values": values,
        "register": gen.register,
    }


@app.post("/sort")
def sort(req: SortRequest):
    _check_size(len(req.values))
    values = list(req.values)
    stats = SortStats()
    try:
        sort_values(values, req.algorithm, stats)
        verify_sorted(req.values, values)
    except (PreconditionError, InvariantViolationError, RecursionError) as exc:
        raise _translate(exc)
    return {
        "algorithm": req.algorithm,
        "stable": STABLE[req.algorithm],
        "values": values,
        "hash": canonical_hash(values),
        "stats": stats.to_dict(),
    }


@app.get("/health")
def health():
    return {
        "status": "ok",
        "seed": CONFIG.seed,
        "max_size": CONFIG.max_size,
    }
