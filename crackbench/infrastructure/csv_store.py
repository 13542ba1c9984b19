"""
CSV persistence for benchmark records.

The column layout matches the historical `performance_data*.csv` exports so
existing analysis notebooks keep working.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Optional, Sequence

from crackbench.domain.models import AlgorithmType, ResultRecord
from crackbench.utils.logging import get_logger

log = get_logger(__name__)

CSV_HEADER = [
    "RunID",
    "AlgorithmType",
    "Password",
    "NumCores",
    "TimeToCrackSec",
    "GuessesPerSecond",
    "MemAllocMB",
]


def results_filename(kinds: Iterable[AlgorithmType], worker_count: int) -> str:
    """
    File name for a session that ran the given searchers.

    Sequential-only sessions are labelled as one core; mixed sessions get the
    generic name.
    """
    kind_set = set(kinds)
    if kind_set == {AlgorithmType.SEQUENTIAL}:
        return "performance_data_1_cores.csv"
    if kind_set == {AlgorithmType.CONCURRENT}:
        return f"performance_data_{worker_count}_cores.csv"
    return "performance_data.csv"


def _to_row(record: ResultRecord) -> list[str]:
    return [
        str(record.run_id),
        record.algorithm_type.value,
        record.target,
        str(record.worker_count),
        f"{record.elapsed_seconds:.6f}",
        f"{record.throughput:.2f}",
        f"{record.memory_delta_mb:.6f}",
    ]


def save_results_csv(records: Sequence[ResultRecord], path: Path | str) -> Optional[Path]:
    """
    Write `records` to `path` as CSV, creating parent directories.

    Returns the written path, or None when there is nothing to write.
    """
    if not records:
        log.info("[PERSIST] No records to save; skipping CSV export")
        return None

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        writer.writerows(_to_row(record) for record in records)

    log.info(
        f"[PERSIST] Performance data saved to {out_path}",
        extra={"path": str(out_path), "records": len(records)},
    )
    return out_path


__all__ = ["CSV_HEADER", "results_filename", "save_results_csv"]
