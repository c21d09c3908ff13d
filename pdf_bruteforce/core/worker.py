"""
Worker module for the PDF brute-forcer.

This module contains the loop each worker thread runs over its chunk of the
global index range.
"""

import logging
from typing import Callable, NamedTuple, Optional

from .keyspace import Keyspace
from .partition import Chunk
from .state import Match, SharedState, StopPolicy
from pdf_bruteforce.utils.exceptions import VerificationError

logger = logging.getLogger(__name__)

DEFAULT_REPORT_EVERY = 1000


class WorkerReport(NamedTuple):
    worker_id: int
    attempts: int
    match: Optional[Match] = None


def search_worker(worker_id: int,
                  chunk: Chunk,
                  keyspace: Keyspace,
                  verify: Callable[[str], bool],
                  shared: SharedState,
                  report_every: int = DEFAULT_REPORT_EVERY,
                  stop_policy: StopPolicy = StopPolicy.LOWEST) -> WorkerReport:
    """Try every index of ``chunk`` in increasing order

    Args:
        worker_id: Identifier used in logs and errors
        chunk: Index range owned by this worker
        keyspace: Maps indices to candidate passwords
        verify: Password check; returns True on a match, raises on failure
        shared: State shared with the other workers
        report_every: Iterations between attempts-counter updates
        stop_policy: When to give up the chunk once a match exists

    Returns:
        Summary of the work done

    Raises:
        VerificationError: if ``verify`` raises; the whole search is aborted
    """
    attempts = 0
    pending = 0
    match = None
    logger.debug(f"Worker-{worker_id}: searching [{chunk.start}, {chunk.end})")

    try:
        for index in range(chunk.start, chunk.end):
            if shared.should_stop(index, stop_policy):
                logger.debug(f"Worker-{worker_id}: stopping at index {index}")
                break

            candidate = keyspace.position_to_password(index)
            try:
                matched = verify(candidate)
            except Exception as e:
                shared.abort(f"verification failed in worker {worker_id}")
                raise VerificationError(
                    f"Worker-{worker_id}: verification of candidate at index {index} failed: {e}",
                    worker_id=worker_id, index=index, candidate=candidate,
                ) from e

            attempts += 1
            pending += 1

            if matched:
                match = Match(index, candidate)
                if shared.found.offer(index, candidate):
                    logger.debug(f"Worker-{worker_id}: match at index {index}")
                break

            if pending >= report_every:
                shared.attempts.add(pending)
                pending = 0
    finally:
        if pending:
            shared.attempts.add(pending)

    return WorkerReport(worker_id, attempts, match)
