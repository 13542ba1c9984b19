from __future__ import annotations

import os
from time import sleep

from crackbench import config
from crackbench.utils import profiler

EXPECTED_LENGTH = 5
EXPECTED_WORKERS = 3


def test_get_settings_defaults() -> None:
    settings = config.get_settings()
    assert settings.password_length == 6
    assert settings.benchmark_runs > 0
    assert settings.worker_count == (os.cpu_count() or 1)
    assert settings.search_backend == "process"
    assert settings.results_dir == "results"
    assert settings.s3_bucket == "cracking-algorithm-data"
    assert settings.aws_region == "sa-east-1"
    assert settings.aws_access_key_id is None


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("PASSWORD_LENGTH", str(EXPECTED_LENGTH))
    monkeypatch.setenv("WORKER_COUNT", str(EXPECTED_WORKERS))
    monkeypatch.setenv("SEARCH_BACKEND", "thread")

    settings = config.get_settings()

    assert settings.password_length == EXPECTED_LENGTH
    assert settings.worker_count == EXPECTED_WORKERS
    assert settings.search_backend == "thread"


def test_get_settings_reads_dotenv(tmp_path) -> None:
    (tmp_path / ".env").write_text("BENCHMARK_RUNS=11\nJSON_LOGS=true\n", encoding="utf-8")
    settings = config.get_settings()
    assert settings.benchmark_runs == 11
    assert settings.json_logs is True


def test_configuration_error_is_value_error() -> None:
    assert issubclass(config.ConfigurationError, ValueError)


def test_profile_block_measures_time() -> None:
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.start_rss_bytes is not None
    assert stats.peak_rss_bytes is not None
    assert stats.peak_rss_bytes >= stats.start_rss_bytes
    assert isinstance(stats.memory_delta_mb, float)
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)


def test_profile_block_tracks_python_allocations_when_enabled() -> None:
    with profiler.profile_block("alloc", enable_tracemalloc=True) as stats:
        payload = [str(i) for i in range(10_000)]
    assert len(payload) == 10_000
    assert stats.peak_traced_bytes is not None
    assert stats.peak_traced_bytes > 0


def test_memory_delta_defaults_to_zero_without_samples() -> None:
    assert profiler.ProfileStats(label="empty").memory_delta_mb == 0.0
