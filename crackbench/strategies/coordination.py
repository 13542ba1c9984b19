"""
Cross-worker coordination primitives for the concurrent searcher.

Both primitives live in shared memory allocated from a `multiprocessing`
context, so the same objects can be handed to threads or to spawned worker
processes. They are the only mutable state shared between workers.
"""

from __future__ import annotations

import ctypes
import multiprocessing as mp
from typing import Any, Optional

_EMPTY = -1


class CancellationToken:
    """
    Monotonic stop flag checked by workers before every comparison.

    Reads are lock-free; once `cancel()` has been called the flag stays set for
    the lifetime of the token.
    """

    def __init__(self, ctx: Any = None) -> None:
        ctx = ctx or mp.get_context()
        self._flag = ctx.RawValue(ctypes.c_bool, False)

    @property
    def cancelled(self) -> bool:
        return self._flag.value

    def cancel(self) -> None:
        self._flag.value = True


class ResultSlot:
    """
    Single-slot publication point with first-writer-wins semantics.

    Holds the global index of the first match published; later publishes are
    discarded and report False.
    """

    def __init__(self, ctx: Any = None) -> None:
        ctx = ctx or mp.get_context()
        self._value = ctx.Value(ctypes.c_longlong, _EMPTY)

    def publish(self, index: int) -> bool:
        with self._value.get_lock():
            if self._value.value != _EMPTY:
                return False
            self._value.value = index
            return True

    @property
    def filled(self) -> bool:
        return self.index is not None

    @property
    def index(self) -> Optional[int]:
        with self._value.get_lock():
            value = self._value.value
        return None if value == _EMPTY else value


__all__ = ["CancellationToken", "ResultSlot"]
