"""
Strategies package for crackbench.

This module re-exports the searcher interfaces, the partitioner and the
concrete searchers so downstream code can import from `crackbench.strategies`
directly.
"""

from crackbench.strategies.abstract import AbstractSearchStrategy, SearchStrategy
from crackbench.strategies.concurrent import BACKENDS, ConcurrentStrategy, search_concurrent
from crackbench.strategies.coordination import CancellationToken, ResultSlot
from crackbench.strategies.partition import Partition, partition
from crackbench.strategies.sequential import SequentialStrategy, search_sequential

__all__ = [
    # Abstracts
    "AbstractSearchStrategy",
    "SearchStrategy",
    # Building blocks
    "CancellationToken",
    "Partition",
    "ResultSlot",
    "partition",
    # Concrete searchers
    "BACKENDS",
    "ConcurrentStrategy",
    "SequentialStrategy",
    "search_concurrent",
    "search_sequential",
]
