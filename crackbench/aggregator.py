"""
Result aggregation for crackbench.

`aggregate` turns one SearchOutcome into a ResultRecord, deriving throughput
the same way for every searcher so sequential and concurrent results are
comparable. `summarize` folds a list of records into per-configuration
statistics for reporting.
"""

from __future__ import annotations

import math
import statistics
from typing import Dict, List, Optional, Sequence, Tuple

from crackbench.domain.models import AlgorithmType, ResultRecord, SearchOutcome


def throughput(candidates_scanned: int, elapsed_seconds: float) -> float:
    """
    Candidates per second; `math.inf` when the elapsed time rounds to zero.
    """
    if elapsed_seconds <= 0:
        return math.inf
    return candidates_scanned / elapsed_seconds


def aggregate(
    outcome: SearchOutcome,
    run_id: int,
    algorithm_type: AlgorithmType,
    target: str,
    worker_count: int,
    candidates_scanned: Optional[int] = None,
    memory_delta_mb: float = 0.0,
) -> ResultRecord:
    """
    Package a search outcome as an immutable ResultRecord.

    Parameters
    ----------
    outcome : SearchOutcome
        Outcome returned by a searcher.
    run_id : int
        1-based repetition index.
    algorithm_type : AlgorithmType
        Searcher that produced the outcome.
    target : str
        Secret that was searched for.
    worker_count : int
        Workers used for the search.
    candidates_scanned : int | None
        Comparisons to credit for throughput. Defaults to the outcome's count.
    memory_delta_mb : float
        Best-effort memory instrumentation; zero when unavailable.
    """
    scanned = outcome.candidates_scanned if candidates_scanned is None else candidates_scanned
    return ResultRecord(
        run_id=run_id,
        algorithm_type=algorithm_type,
        target=target,
        worker_count=worker_count,
        elapsed_seconds=outcome.elapsed_seconds,
        throughput=throughput(scanned, outcome.elapsed_seconds),
        memory_delta_mb=memory_delta_mb,
        found=outcome.found,
    )


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _describe(values: Sequence[float], decimals: int = 2) -> Dict[str, float]:
    """
    Median, mean, stddev, min and max of `values`, rounded.

    Infinite values are skipped unless every value is infinite, in which case
    the sentinel itself is reported (stddev 0).
    """
    finite = [v for v in values if math.isfinite(v)]
    if not finite:
        if values:
            return {"median": math.inf, "mean": math.inf, "stddev": 0.0, "min": math.inf, "max": math.inf}
        finite = [0.0]
    stats = {
        "median": statistics.median(finite),
        "mean": statistics.mean(finite),
        "stddev": statistics.stdev(finite) if len(finite) > 1 else 0.0,
        "min": min(finite),
        "max": max(finite),
    }
    return {k: _round_float(v, decimals) for k, v in stats.items()}


def summarize(records: Sequence[ResultRecord]) -> List[dict]:
    """
    Aggregate records into statistical summaries per searcher configuration.

    Groups by `(algorithm_type, worker_count)` in first-seen order. Infinite
    throughputs (zero-duration searches) are left out of the statistics; a
    group where every run was infinite reports `math.inf`.
    """
    groups: Dict[Tuple[AlgorithmType, int], List[ResultRecord]] = {}
    for record in records:
        groups.setdefault((record.algorithm_type, record.worker_count), []).append(record)

    summary: List[dict] = []
    for (algorithm_type, worker_count), group in groups.items():
        summary.append(
            {
                "algorithm_type": algorithm_type.value,
                "worker_count": worker_count,
                "runs": len(group),
                "found": sum(1 for r in group if r.found),
                "elapsed_seconds": _describe([r.elapsed_seconds for r in group], decimals=6),
                "throughput": _describe([r.throughput for r in group]),
                "memory_delta_mb": _describe([r.memory_delta_mb for r in group], decimals=3),
            }
        )
    return summary


__all__ = ["aggregate", "summarize", "throughput"]
