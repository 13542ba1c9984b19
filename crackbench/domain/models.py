"""
Domain models for crackbench.

`SearchOutcome` is what a single search invocation produces; `ResultRecord` is
the uniform, immutable row the benchmark driver accumulates and hands to the
persistence layer, regardless of which searcher produced it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AlgorithmType(str, Enum):
    """Which searcher produced a result."""

    SEQUENTIAL = "Sequential"
    CONCURRENT = "Concurrent"


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one complete search invocation.

    `candidates_scanned` counts comparisons actually performed (the matching
    candidate included), summed across workers for concurrent searches.
    """

    found: bool
    elapsed_seconds: float
    candidates_scanned: int = 0
    match_index: Optional[int] = None


class ResultRecord(BaseModel):
    """
    One benchmark measurement for a (run, target) pair.
    """

    run_id: int = Field(..., ge=1, description="1-based repetition index.")
    algorithm_type: AlgorithmType = Field(..., description="Searcher that produced the outcome.")
    target: str = Field(..., description="Secret that was searched for.")
    worker_count: int = Field(..., ge=1, description="Workers used (1 for sequential).")
    elapsed_seconds: float = Field(..., ge=0.0, description="Wall-clock search time.")
    throughput: float = Field(..., ge=0.0, description="Candidates evaluated per second.")
    memory_delta_mb: float = Field(0.0, description="Best-effort RSS delta in MiB.")
    found: bool = Field(True, description="Whether the target was located.")

    model_config = {"frozen": True}


__all__ = ["AlgorithmType", "ResultRecord", "SearchOutcome"]
