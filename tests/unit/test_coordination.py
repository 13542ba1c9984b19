from __future__ import annotations

import multiprocessing as mp
import threading

from crackbench.strategies.concurrent import _scan_partition
from crackbench.strategies.coordination import CancellationToken, ResultSlot

PUBLISHER_COUNT = 8


def test_cancellation_token_is_monotonic() -> None:
    token = CancellationToken()
    assert token.cancelled is False
    token.cancel()
    assert token.cancelled is True
    token.cancel()
    assert token.cancelled is True


def test_result_slot_first_writer_wins() -> None:
    slot = ResultSlot()
    assert slot.filled is False
    assert slot.index is None

    assert slot.publish(5) is True
    assert slot.publish(7) is False

    assert slot.filled is True
    assert slot.index == 5


def test_result_slot_accepts_index_zero() -> None:
    slot = ResultSlot()
    assert slot.publish(0) is True
    assert slot.filled is True
    assert slot.index == 0


def test_result_slot_has_exactly_one_winner_under_contention() -> None:
    slot = ResultSlot(mp.get_context("spawn"))
    barrier = threading.Barrier(PUBLISHER_COUNT)
    wins: list[bool] = [False] * PUBLISHER_COUNT

    def publisher(i: int) -> None:
        barrier.wait()
        wins[i] = slot.publish(100 + i)

    threads = [threading.Thread(target=publisher, args=(i,)) for i in range(PUBLISHER_COUNT)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(wins) == 1
    assert slot.index == 100 + wins.index(True)


def test_worker_exits_without_comparing_when_already_cancelled() -> None:
    token = CancellationToken()
    slot = ResultSlot()
    scanned = [-1]
    token.cancel()

    _scan_partition("0005", 4, 0, 100, 0, token, slot, scanned)

    assert scanned == [0]
    assert slot.filled is False


def test_worker_publishes_and_cancels_on_match() -> None:
    token = CancellationToken()
    slot = ResultSlot()
    scanned = [0]

    _scan_partition("0042", 4, 0, 2500, 0, token, slot, scanned)

    assert scanned == [43]
    assert slot.index == 42
    assert token.cancelled is True


def test_late_match_does_not_overwrite_slot() -> None:
    token = CancellationToken()
    slot = ResultSlot()
    slot.publish(1)
    scanned = [0]

    _scan_partition("0042", 4, 0, 100, 0, token, slot, scanned)

    assert slot.index == 1
    assert token.cancelled is True


def test_worker_exhausts_range_without_match() -> None:
    token = CancellationToken()
    slot = ResultSlot()
    scanned = [0]

    _scan_partition("0042", 4, 100, 200, 0, token, slot, scanned)

    assert scanned == [100]
    assert slot.filled is False
    assert token.cancelled is False
