"""
Profiling utilities for crackbench.

This module provides a context manager to measure, around one search:
- Wall-clock time (perf_counter)
- CPU usage (psutil)
- Resident memory at start/end and sampled peak (psutil)
- Optionally, peak Python allocations (tracemalloc)

tracemalloc is off by default: it hooks every allocation, and the scan loop
allocates one string per candidate, so enabling it would skew timings.

Usage example:
    from crackbench.utils.profiler import profile_block

    with profile_block("sequential") as stats:
        search_sequential("0042", 4, 10_000)

    print(stats.duration_seconds, stats.memory_delta_mb)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Generator, Optional

import psutil

_MIB = 1024 * 1024


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    start_rss_bytes: Optional[int] = field(default=None)
    end_rss_bytes: Optional[int] = field(default=None)
    peak_rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def memory_delta_mb(self) -> float:
        """RSS growth across the block in MiB; 0.0 when RSS was not sampled."""
        if self.start_rss_bytes is None or self.end_rss_bytes is None:
            return 0.0
        return (self.end_rss_bytes - self.start_rss_bytes) / _MIB


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 50, enable_tracemalloc: bool = False
) -> Generator[ProfileStats, None, None]:
    """
    Context manager to profile a block of code.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling. Lower = more accurate but higher overhead.
    enable_tracemalloc : bool
        Whether to enable tracemalloc for tracking Python-level allocations.

    Notes
    -----
    Only the calling process is measured; memory used by spawned search
    workers is not included.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    peak_rss = 0
    stop_sampling = threading.Event()

    def _sample_memory() -> None:
        nonlocal peak_rss
        while not stop_sampling.is_set():
            try:
                peak_rss = max(peak_rss, process.memory_info().rss)
            except psutil.Error:
                return
            stop_sampling.wait(timeout=sample_interval_ms / 1000.0)

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    stats.start_rss_bytes = process.memory_info().rss
    peak_rss = stats.start_rss_bytes

    sampler = threading.Thread(target=_sample_memory, daemon=True)
    sampler.start()

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts

        stop_sampling.set()
        sampler.join(timeout=1.0)

        stats.end_rss_bytes = process.memory_info().rss
        stats.peak_rss_bytes = max(peak_rss, stats.end_rss_bytes)
        stats.cpu_percent = process.cpu_percent(interval=None)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            # Stop tracemalloc only if we started it
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
