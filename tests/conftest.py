"""
Pytest configuration for crackbench.

Provides fixtures for:
- Isolating Settings from the developer's environment and `.env`
- Small benchmark configurations that finish in milliseconds
"""

from __future__ import annotations

from typing import Generator

import pytest

from crackbench.config import get_settings
from crackbench.orchestrator import BenchmarkConfig, make_config

SETTINGS_ENV_VARS = (
    "PASSWORD_LENGTH",
    "BENCHMARK_RUNS",
    "WORKER_COUNT",
    "SEARCH_BACKEND",
    "RESULTS_DIR",
    "LOG_LEVEL",
    "JSON_LOGS",
    "S3_BUCKET",
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """
    Run every test from an empty directory with no crackbench env overrides.
    """
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def thread_config() -> BenchmarkConfig:
    """Four-digit space searched by four thread workers."""
    return make_config(password_length=4, worker_count=4, backend="thread")


@pytest.fixture
def process_config() -> BenchmarkConfig:
    """Three-digit space searched by two spawned worker processes."""
    return make_config(password_length=3, worker_count=2, backend="process")
