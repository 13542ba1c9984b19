"""
Range partitioning of the search space across workers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Partition:
    """Half-open index range `[start, end)` assigned to one worker."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(self.end - self.start, 0)


def partition(space: int, num_workers: int) -> List[Partition]:
    """
    Split `[0, space)` into `num_workers` contiguous, ordered ranges.

    Every worker gets `space // num_workers` indices and the last one also
    absorbs the remainder, so the union is exactly `[0, space)`. When
    `space < num_workers` the leading partitions are empty, which is valid.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be >= 1, got {num_workers}")

    chunk = space // num_workers
    ranges: List[Partition] = []
    for i in range(num_workers):
        start = i * chunk
        end = space if i == num_workers - 1 else (i + 1) * chunk
        ranges.append(Partition(start=start, end=end))
    return ranges


__all__ = ["Partition", "partition"]
