"""
Sequential (baseline) searcher: single-threaded, in-order, stop at first match.

Intended as the simplest possible baseline to compare the partitioned
concurrent searcher against.
"""

from __future__ import annotations

import time

from crackbench.domain.candidates import generate
from crackbench.domain.models import AlgorithmType, SearchOutcome
from crackbench.strategies.abstract import AbstractSearchStrategy


def search_sequential(target: str, width: int, space: int) -> SearchOutcome:
    """
    Enumerate `[0, space)` in increasing order until `target` is generated.

    Blocks the caller for the whole scan. A target outside the space (for
    example one of the wrong width) exhausts the range and reports
    `found=False`.
    """
    start_time = time.perf_counter()
    for index in range(space):
        if generate(index, width) == target:
            return SearchOutcome(
                found=True,
                elapsed_seconds=time.perf_counter() - start_time,
                candidates_scanned=index + 1,
                match_index=index,
            )
    return SearchOutcome(
        found=False,
        elapsed_seconds=time.perf_counter() - start_time,
        candidates_scanned=space,
    )


class SequentialStrategy(AbstractSearchStrategy):
    """Scan the whole space on the calling thread."""

    name: str = "sequential"
    description: str = "Single-threaded in-order scan; stops at first match."
    algorithm_type: AlgorithmType = AlgorithmType.SEQUENTIAL
    worker_count: int = 1

    def search(self, target: str, width: int, space: int) -> SearchOutcome:
        return search_sequential(target, width, space)


__all__ = ["SequentialStrategy", "search_sequential"]
