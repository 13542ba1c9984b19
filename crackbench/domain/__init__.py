"""
Domain package for crackbench.

Exports the core domain models and the candidate generator. Keep this package
free of I/O and concurrency concerns.
"""

from crackbench.domain.candidates import generate, random_target, search_space_size
from crackbench.domain.models import AlgorithmType, ResultRecord, SearchOutcome

__all__ = [
    "AlgorithmType",
    "ResultRecord",
    "SearchOutcome",
    "generate",
    "random_target",
    "search_space_size",
]
