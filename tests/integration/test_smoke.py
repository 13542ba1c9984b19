"""
End-to-end tests for crackbench using real spawned worker processes.

These tests verify that:
1. Both searchers agree on every outcome for the same targets
2. Records flow from the orchestrator into a CSV export unchanged
3. The concurrent searcher terminates (no hang) when the target is absent
"""

from __future__ import annotations

import csv
from pathlib import Path

from crackbench.aggregator import summarize
from crackbench.domain.models import AlgorithmType
from crackbench.infrastructure.csv_store import results_filename
from crackbench.infrastructure.s3_upload import persist_and_upload
from crackbench.orchestrator import BenchmarkConfig, run_benchmark, run_modes
from crackbench.strategies.concurrent import search_concurrent
from crackbench.strategies.sequential import search_sequential

RUN_COUNT = 2
TARGETS = ["042", "999", "500"]


class TestSearcherAgreement:
    """Sequential and process-backed concurrent searchers must agree."""

    def test_same_found_and_index_for_every_target(self):
        for target in ["000", "333", "334", "666", "999", "12"]:
            sequential = search_sequential(target, 3, 1000)
            concurrent = search_concurrent(target, 3, 1000, 3, backend="process")
            assert concurrent.found == sequential.found, target
            assert concurrent.match_index == sequential.match_index, target

    def test_absent_target_terminates_with_full_exhaustion(self):
        outcome = search_concurrent("1234", 3, 1000, 4, backend="process")
        assert outcome.found is False
        assert outcome.candidates_scanned == 1000


class TestBenchmarkPipeline:
    """Orchestrator to CSV with real workers."""

    def test_both_modes_to_csv(self, process_config: BenchmarkConfig, tmp_path: Path):
        kinds = [AlgorithmType.SEQUENTIAL, AlgorithmType.CONCURRENT]
        records = run_modes(process_config, TARGETS, RUN_COUNT, kinds)

        assert len(records) == len(kinds) * RUN_COUNT * len(TARGETS)
        assert all(r.found for r in records)

        path = persist_and_upload(
            records, tmp_path / results_filename(kinds, process_config.worker_count)
        )
        assert path == tmp_path / "performance_data.csv"
        with path.open("r", newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 1 + len(records)
        assert [row[2] for row in rows[1:4]] == TARGETS

        summary = summarize(records)
        assert {(s["algorithm_type"], s["worker_count"]) for s in summary} == {
            ("Sequential", 1),
            ("Concurrent", process_config.worker_count),
        }
        assert all(s["found"] == s["runs"] for s in summary)

    def test_concurrent_records_report_positive_throughput(self, process_config: BenchmarkConfig):
        records = run_benchmark(process_config, ["777"], 1, AlgorithmType.CONCURRENT)
        assert records[0].found is True
        assert records[0].elapsed_seconds > 0
        assert records[0].throughput > 0
