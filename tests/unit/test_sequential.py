from __future__ import annotations

from crackbench.domain.models import AlgorithmType
from crackbench.strategies.abstract import SearchStrategy
from crackbench.strategies.sequential import SequentialStrategy, search_sequential

WIDTH = 4
SPACE = 10_000
EXPECTED_COMPARISONS_FOR_0042 = 43


def test_sequential_finds_target_after_scanning_prefix() -> None:
    outcome = search_sequential("0042", WIDTH, SPACE)
    assert outcome.found is True
    assert outcome.match_index == 42
    assert outcome.candidates_scanned == EXPECTED_COMPARISONS_FOR_0042
    assert outcome.elapsed_seconds >= 0.0


def test_sequential_finds_first_and_last_candidates() -> None:
    assert search_sequential("0000", WIDTH, SPACE).candidates_scanned == 1
    last = search_sequential("9999", WIDTH, SPACE)
    assert last.found is True
    assert last.candidates_scanned == SPACE


def test_sequential_wrong_width_target_exhausts_space() -> None:
    outcome = search_sequential("12", WIDTH, SPACE)
    assert outcome.found is False
    assert outcome.match_index is None
    assert outcome.candidates_scanned == SPACE


def test_sequential_is_idempotent() -> None:
    first = search_sequential("0815", WIDTH, SPACE)
    second = search_sequential("0815", WIDTH, SPACE)
    assert (first.found, first.match_index) == (second.found, second.match_index)


def test_sequential_strategy_satisfies_protocol() -> None:
    strategy = SequentialStrategy()
    assert isinstance(strategy, SearchStrategy)
    assert strategy.algorithm_type is AlgorithmType.SEQUENTIAL
    assert strategy.worker_count == 1
    assert strategy.search("07", 2, 100).match_index == 7
