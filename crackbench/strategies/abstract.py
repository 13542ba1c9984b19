"""
Abstract searcher interfaces for crackbench.

Concrete searchers (sequential, concurrent) implement the SearchStrategy
protocol and return a SearchOutcome so the orchestrator can time, aggregate and
report them uniformly.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable

from crackbench.domain.models import AlgorithmType, SearchOutcome


@runtime_checkable
class SearchStrategy(Protocol):
    """
    Common interface all searchers must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the approach.
    algorithm_type : AlgorithmType
        Label recorded on every ResultRecord this searcher produces.
    worker_count : int
        Number of workers the searcher fans out to.
    """

    name: str
    description: str
    algorithm_type: AlgorithmType
    worker_count: int

    def search(self, target: str, width: int, space: int) -> SearchOutcome:
        """
        Scan `[0, space)` for `target` and return the outcome.

        Parameters
        ----------
        target : str
            Secret to locate, compared by exact string equality.
        width : int
            Digit width of every candidate.
        space : int
            Number of candidates to enumerate.
        """
        ...


class AbstractSearchStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name`, `description` and `algorithm_type` and
    implement `search`.
    """

    name: str
    description: str
    algorithm_type: AlgorithmType
    worker_count: int = 1

    @abc.abstractmethod
    def search(self, target: str, width: int, space: int) -> SearchOutcome:  # pragma: no cover
        """Run the search and return its outcome."""
        raise NotImplementedError


__all__ = [
    "AbstractSearchStrategy",
    "SearchStrategy",
]
