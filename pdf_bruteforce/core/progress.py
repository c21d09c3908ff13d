"""
Progress reporting for the PDF brute-forcer.

A background thread samples the shared attempts counter and renders speed
and ETA. Nothing here feeds back into the search.
"""

import threading
import time
from typing import Callable, NamedTuple, Optional

from tqdm import tqdm

from .state import AttemptCounter

DEFAULT_INTERVAL = 0.25


class ProgressSnapshot(NamedTuple):
    attempts: int
    total: int
    elapsed: float

    @property
    def speed(self) -> float:
        return self.attempts / self.elapsed if self.elapsed > 0 else 0.0

    @property
    def eta_seconds(self) -> Optional[float]:
        speed = self.speed
        if speed <= 0:
            return None
        return max(0, self.total - self.attempts) / speed


def format_speed(speed: float) -> str:
    if speed > 1_000_000:
        return f"{speed/1_000_000:.2f}M/s"
    elif speed > 1_000:
        return f"{speed/1_000:.2f}K/s"
    return f"{speed:.2f}/s"


def format_eta(eta_seconds: Optional[float]) -> str:
    if eta_seconds is None:
        return "unknown"
    hours, remainder = divmod(eta_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{int(hours)}h {int(minutes)}m {int(seconds)}s"


class ProgressReporter:
    """Periodically renders the attempts counter against the keyspace size"""

    def __init__(self, counter: AttemptCounter, total: int,
                 interval: float = DEFAULT_INTERVAL,
                 show_bar: bool = True,
                 callback: Optional[Callable[[ProgressSnapshot], None]] = None):
        """Initialize the reporter

        Args:
            counter: Shared attempts counter to sample
            total: Number of candidates in the keyspace
            interval: Seconds between samples
            show_bar: Whether to draw a tqdm bar
            callback: Optional function called with every snapshot
        """
        self.counter = counter
        self.total = total
        self.interval = interval
        self.callback = callback
        self.progress_bar = tqdm(total=total, unit="pw", leave=False) if show_bar else None
        self.start_time = time.monotonic()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "ProgressReporter":
        self.start_time = time.monotonic()
        self._thread = threading.Thread(target=self._run, name="pwbf-progress", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        """Stop sampling, publish a final snapshot and close the bar"""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        self.refresh()
        if self.progress_bar is not None:
            self.progress_bar.close()
            self.progress_bar = None

    def __enter__(self) -> "ProgressReporter":
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.refresh()

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(self.counter.value, self.total,
                                time.monotonic() - self.start_time)

    def refresh(self) -> ProgressSnapshot:
        snap = self.snapshot()

        if self.progress_bar is not None:
            delta = snap.attempts - self.progress_bar.n
            if delta > 0:
                self.progress_bar.update(delta)
            self.progress_bar.set_description(
                f"Tried: {snap.attempts:,} | Speed: {format_speed(snap.speed)} | "
                f"ETA: {format_eta(snap.eta_seconds)}"
            )

        if self.callback:
            self.callback(snap)
        return snap
