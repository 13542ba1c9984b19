"""
crackbench - Benchmarking suite for exhaustive fixed-width numeric secret search.

This package compares two ways of enumerating a `10**n` search space:

- A sequential, single-threaded in-order scan
- A range-partitioned concurrent scan with cooperative cancellation

Both produce the same uniform ResultRecord so timings and throughput are
directly comparable. Records can be exported to CSV and uploaded to S3.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from crackbench.aggregator import aggregate, summarize
from crackbench.config import ConfigurationError, Settings, get_settings
from crackbench.domain.candidates import generate, random_target, search_space_size
from crackbench.domain.models import AlgorithmType, ResultRecord, SearchOutcome
from crackbench.orchestrator import (
    BenchmarkConfig,
    available_searchers,
    make_config,
    run_benchmark,
    run_modes,
)
from crackbench.strategies.concurrent import ConcurrentStrategy, search_concurrent
from crackbench.strategies.partition import Partition, partition
from crackbench.strategies.sequential import SequentialStrategy, search_sequential
from crackbench.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "ConfigurationError",
    "Settings",
    "get_settings",
    # Domain
    "AlgorithmType",
    "ResultRecord",
    "SearchOutcome",
    "generate",
    "random_target",
    "search_space_size",
    # Search core
    "ConcurrentStrategy",
    "Partition",
    "SequentialStrategy",
    "partition",
    "search_concurrent",
    "search_sequential",
    # Orchestration
    "BenchmarkConfig",
    "aggregate",
    "available_searchers",
    "make_config",
    "run_benchmark",
    "run_modes",
    "summarize",
    # Logging
    "configure_logging",
    "get_logger",
]
