"""
Search coordinator for the PDF brute-forcer.

The coordinator partitions the keyspace, runs one worker thread per chunk,
and turns whatever the workers leave in the shared state into a single
result: the lowest-indexed match, exhaustion, or an abort.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from .keyspace import Keyspace
from .partition import partition
from .progress import DEFAULT_INTERVAL, ProgressReporter, ProgressSnapshot
from .state import SharedState, StopPolicy
from .worker import DEFAULT_REPORT_EVERY, WorkerReport, search_worker
from pdf_bruteforce.utils.exceptions import ConfigError

logger = logging.getLogger(__name__)


class SearchState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


class SearchResult(NamedTuple):
    outcome: SearchState
    password: Optional[str]
    index: Optional[int]
    attempts: int
    total: int
    elapsed: float
    cause: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.outcome is SearchState.FOUND


class SearchCoordinator:
    """Runs one brute-force search over a keyspace

    A coordinator is single use: ``run`` moves it from IDLE to RUNNING and
    then to exactly one of FOUND, EXHAUSTED or ABORTED.
    """

    def __init__(self,
                 keyspace: Keyspace,
                 verify: Callable[[str], bool],
                 workers: int = 1,
                 report_every: int = DEFAULT_REPORT_EVERY,
                 stop_policy: StopPolicy = StopPolicy.LOWEST,
                 timeout: Optional[float] = None,
                 show_progress: bool = False,
                 progress_interval: float = DEFAULT_INTERVAL,
                 progress_callback: Optional[Callable[[ProgressSnapshot], None]] = None,
                 poll_interval: float = 0.05):
        """Validate the run settings

        Args:
            keyspace: Candidate space to search
            verify: Password check shared by all workers
            workers: Number of worker threads
            report_every: Iterations between attempts-counter updates
            stop_policy: When workers give up their chunk after a match
            timeout: Optional wall-clock budget in seconds
            show_progress: Whether to draw a progress bar
            progress_interval: Seconds between progress samples
            progress_callback: Optional function receiving progress snapshots
            poll_interval: Seconds between checks of the time budget
        """
        if workers < 1:
            raise ConfigError(f"--threads must be at least 1 (got {workers})")
        if report_every < 1:
            raise ConfigError(f"Report interval must be at least 1 (got {report_every})")
        if timeout is not None and timeout <= 0:
            raise ConfigError(f"Timeout must be positive (got {timeout})")

        self.keyspace = keyspace
        self.verify = verify
        self.workers = workers
        self.report_every = report_every
        self.stop_policy = StopPolicy(stop_policy)
        self.timeout = timeout
        self.show_progress = show_progress
        self.progress_interval = progress_interval
        self.progress_callback = progress_callback
        self.poll_interval = poll_interval

        self.state = SearchState.IDLE
        self.shared: Optional[SharedState] = None
        self.reports: List[WorkerReport] = []
        self._pending_cancel: Optional[str] = None

    def cancel(self, cause: str = "cancelled") -> None:
        """Ask a running (or not yet started) search to stop

        Safe to call from any thread, including a signal handler.
        """
        if self.shared is None:
            self._pending_cancel = cause
        else:
            self.shared.abort(cause)

    def run(self) -> SearchResult:
        """Search the keyspace and return the outcome

        Raises:
            VerificationError: if a worker's password check failed; every
                other worker has stopped by the time it is raised
        """
        if self.state is not SearchState.IDLE:
            raise RuntimeError(f"Search coordinator already used (state: {self.state.value})")

        total = self.keyspace.get_total_count()
        chunks = partition(total, self.workers)
        shared = SharedState()
        # cancel() may run between these lines; it sees either shared or the pending cause
        self.shared = shared
        if self._pending_cancel is not None:
            shared.abort(self._pending_cancel)
        self.state = SearchState.RUNNING

        logger.info(f"Searching {total:,} candidates with {len(chunks)} worker(s)")
        start_time = time.monotonic()

        reporter = None
        if self.show_progress or self.progress_callback:
            reporter = ProgressReporter(shared.attempts, total,
                                        interval=self.progress_interval,
                                        show_bar=self.show_progress,
                                        callback=self.progress_callback).start()
        try:
            with ThreadPoolExecutor(max_workers=len(chunks) or 1,
                                    thread_name_prefix="pwbf-worker") as executor:
                futures = [
                    executor.submit(search_worker, worker_id, chunk, self.keyspace,
                                    self.verify, shared, self.report_every, self.stop_policy)
                    for worker_id, chunk in enumerate(chunks)
                ]
                pending = set(futures)
                try:
                    while pending:
                        _, pending = wait(pending, timeout=self.poll_interval)
                        if (self.timeout is not None and not shared.aborted
                                and time.monotonic() - start_time > self.timeout):
                            logger.warning(f"Time budget of {self.timeout}s exceeded, stopping workers")
                            shared.abort(f"time budget of {self.timeout}s exceeded")
                except BaseException as e:
                    # executor shutdown joins the workers; they must see the abort first
                    shared.abort(f"interrupted ({type(e).__name__})")
                    self.state = SearchState.ABORTED
                    raise
        finally:
            if reporter is not None:
                reporter.stop()

        elapsed = time.monotonic() - start_time
        errors = []
        self.reports = []
        for future in futures:
            error = future.exception()
            if error is not None:
                errors.append(error)
            else:
                self.reports.append(future.result())

        attempts = shared.attempts.value
        if errors:
            self.state = SearchState.ABORTED
            for error in errors[1:]:
                logger.debug(f"Additional worker failure: {error}")
            logger.error(f"Search aborted: {errors[0]}")
            raise errors[0]

        match = shared.found.get()
        if match is not None:
            self.state = SearchState.FOUND
            logger.info(f"Match at index {match.index:,} after {attempts:,} attempts")
            return SearchResult(self.state, match.password, match.index,
                                attempts, total, elapsed)

        if shared.aborted:
            self.state = SearchState.ABORTED
            logger.warning(f"Search aborted: {shared.abort_cause}")
            return SearchResult(self.state, None, None, attempts, total, elapsed,
                                cause=shared.abort_cause)

        self.state = SearchState.EXHAUSTED
        if attempts != total:
            logger.warning(f"Exhausted search tried {attempts:,} of {total:,} candidates")
        logger.info(f"No password found in {total:,} candidates")
        return SearchResult(self.state, None, None, attempts, total, elapsed)
