"""
Partitioned concurrent searcher.

The space is split into one contiguous range per worker. Workers scan their
range independently and share only a CancellationToken and a ResultSlot: the
first worker to match publishes its index and raises cancellation, and every
sibling stops before its next comparison. The coordinator joins all workers
and then reads the slot.

Two backends share the same worker body and primitives:

- ``process``: spawned OS processes, one interpreter (and GIL) per worker, so
  partitions really run in parallel. This is the benchmark default.
- ``thread``: threads in the calling process. Cheaper to start, but the scan is
  CPU-bound so workers interleave under the GIL.
"""

from __future__ import annotations

import ctypes
import multiprocessing as mp
import threading
import time
from typing import Any, List, Sequence

from crackbench.domain.candidates import generate
from crackbench.domain.models import AlgorithmType, SearchOutcome
from crackbench.strategies.abstract import AbstractSearchStrategy
from crackbench.strategies.coordination import CancellationToken, ResultSlot
from crackbench.strategies.partition import Partition, partition

BACKENDS = ("process", "thread")
DEFAULT_BACKEND = "process"


def _scan_partition(
    target: str,
    width: int,
    start: int,
    end: int,
    worker_id: int,
    token: CancellationToken,
    slot: ResultSlot,
    scanned: Any,
) -> None:
    """
    Worker body: scan `[start, end)` low-to-high until match, cancel or exhaustion.

    Writes the number of comparisons performed to `scanned[worker_id]` on exit.
    """
    examined = 0
    for index in range(start, end):
        if token.cancelled:
            break
        examined += 1
        if generate(index, width) == target:
            # A faster sibling may already own the slot; a late publish is dropped.
            slot.publish(index)
            token.cancel()
            break
    scanned[worker_id] = examined


def _make_workers(
    backend: str,
    ctx: Any,
    target: str,
    width: int,
    ranges: Sequence[Partition],
    token: CancellationToken,
    slot: ResultSlot,
    scanned: Any,
) -> List[Any]:
    factory = ctx.Process if backend == "process" else threading.Thread
    return [
        factory(
            target=_scan_partition,
            args=(target, width, part.start, part.end, worker_id, token, slot, scanned),
            name=f"crackbench-worker-{worker_id}",
        )
        for worker_id, part in enumerate(ranges)
    ]


def search_concurrent(
    target: str,
    width: int,
    space: int,
    num_workers: int,
    backend: str = DEFAULT_BACKEND,
) -> SearchOutcome:
    """
    Search `[0, space)` for `target` with one worker per partition.

    Parameters
    ----------
    target : str
        Secret to locate.
    width : int
        Digit width of every candidate.
    space : int
        Number of candidates to enumerate.
    num_workers : int
        Workers to fan out to; must be >= 1.
    backend : str
        ``"process"`` or ``"thread"``.

    Returns
    -------
    SearchOutcome
        ``found`` is True iff some worker published a match. Elapsed time runs
        from before partitioning until the last worker has terminated.

    Raises
    ------
    ValueError
        If `num_workers` < 1 or `backend` is unknown. Raised before any worker
        starts.
    RuntimeError
        If a worker process terminates abnormally.

    If the wait is interrupted (e.g. KeyboardInterrupt), cancellation is raised
    and every started worker is joined before the exception propagates.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")
    if backend not in BACKENDS:
        raise ValueError(f"Unknown backend '{backend}'. Available: {', '.join(BACKENDS)}")

    start_time = time.perf_counter()
    ctx = mp.get_context("spawn")
    token = CancellationToken(ctx)
    slot = ResultSlot(ctx)
    scanned = ctx.RawArray(ctypes.c_longlong, num_workers)

    ranges = partition(space, num_workers)
    workers = _make_workers(backend, ctx, target, width, ranges, token, slot, scanned)
    started: List[Any] = []
    try:
        for worker in workers:
            worker.start()
            started.append(worker)
        for worker in workers:
            worker.join()
    except BaseException:
        # Interrupted fan-in: stop every sibling at its next check before unwinding.
        token.cancel()
        for worker in started:
            worker.join()
        raise
    elapsed = time.perf_counter() - start_time

    if backend == "process":
        failed = [w.name for w in workers if w.exitcode != 0]
        if failed:
            raise RuntimeError(f"Search workers exited abnormally: {', '.join(failed)}")

    match_index = slot.index
    return SearchOutcome(
        found=match_index is not None,
        elapsed_seconds=elapsed,
        candidates_scanned=sum(scanned),
        match_index=match_index,
    )


class ConcurrentStrategy(AbstractSearchStrategy):
    """
    Fan the scan out across `workers` partitions with cooperative cancellation.
    """

    name: str = "concurrent"
    description: str = "Range-partitioned workers with shared cancellation and first-writer-wins result."
    algorithm_type: AlgorithmType = AlgorithmType.CONCURRENT

    def __init__(self, workers: int, backend: str = DEFAULT_BACKEND) -> None:
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}'. Available: {', '.join(BACKENDS)}")
        self.worker_count = workers
        self.backend = backend

    def search(self, target: str, width: int, space: int) -> SearchOutcome:
        return search_concurrent(target, width, space, self.worker_count, backend=self.backend)


__all__ = ["BACKENDS", "DEFAULT_BACKEND", "ConcurrentStrategy", "search_concurrent"]
