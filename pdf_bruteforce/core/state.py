"""
Shared search state for the PDF brute-forcer.

This module holds the only mutable state shared between worker threads:
the found slot, the attempts counter and the abort flag.
"""

import threading
from enum import Enum
from typing import NamedTuple, Optional


class StopPolicy(Enum):
    """When a worker gives up its chunk after a match exists"""
    LOWEST = "lowest"  # keep going while a lower match is still possible
    FIRST = "first"    # stop as soon as any match exists


class Match(NamedTuple):
    index: int
    password: str


class FoundSlot:
    """Holds the lowest-indexed match offered so far

    Writes go through a lock and only ever lower the stored index; reads are
    a single reference load so the worker hot path stays lock-free.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._match: Optional[Match] = None

    def offer(self, index: int, password: str) -> bool:
        """Record a match; returns True if it became the current answer"""
        with self._lock:
            if self._match is not None and self._match.index <= index:
                return False
            self._match = Match(index, password)
            return True

    def get(self) -> Optional[Match]:
        return self._match

    def is_set(self) -> bool:
        return self._match is not None


class AttemptCounter:
    """Monotonic counter of verified candidates, updated in batches"""

    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def add(self, count: int) -> int:
        """Add ``count`` and return the new total"""
        with self._lock:
            self._value += count
            return self._value

    @property
    def value(self) -> int:
        return self._value


class SharedState:
    """State shared by all workers of one search run"""

    def __init__(self):
        self.found = FoundSlot()
        self.attempts = AttemptCounter()
        self._abort = threading.Event()
        self._abort_lock = threading.Lock()
        self.abort_cause: Optional[str] = None

    def abort(self, cause: str) -> None:
        """Ask every worker to stop; the first cause given is kept"""
        with self._abort_lock:
            if self.abort_cause is None:
                self.abort_cause = cause
        self._abort.set()

    @property
    def aborted(self) -> bool:
        return self._abort.is_set()

    def should_stop(self, index: int, policy: StopPolicy = StopPolicy.LOWEST) -> bool:
        """Decide whether a worker about to try ``index`` must stop"""
        if self._abort.is_set():
            return True
        match = self.found.get()
        if match is None:
            return False
        if policy is StopPolicy.FIRST:
            return True
        return match.index < index
