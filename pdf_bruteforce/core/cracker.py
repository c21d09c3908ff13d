"""
Main cracker class for the PDF brute-forcer.

This module provides the PDFCracker class that ties a PDF document to a
brute-force search run.
"""

import os
import signal
import threading
from typing import Any, Callable, Dict, Optional
import pikepdf

from .coordinator import SearchCoordinator, SearchResult
from .keyspace import Keyspace
from .progress import DEFAULT_INTERVAL, ProgressSnapshot
from .state import StopPolicy
from .verifier import PDFVerifier
from .worker import DEFAULT_REPORT_EVERY
from pdf_bruteforce.utils.exceptions import (
    ConfigError,
    PDFNotFoundError,
    PDFNotEncryptedError,
    VerificationError,
)
from pdf_bruteforce.utils.logger import Logger


class PDFCracker:
    """Brute-forces the password of one PDF document"""

    def __init__(self, pdf_path: str, workers: int = 1, logger=None):
        """Initialize with PDF path and worker count

        Args:
            pdf_path: Path to the PDF file
            workers: Number of worker threads
            logger: Optional logger instance
        """
        if not os.path.exists(pdf_path):
            raise PDFNotFoundError(f"PDF file not found: {pdf_path}")
        if workers < 1:
            raise ConfigError(f"--threads must be at least 1 (got {workers})")

        self.pdf_path = pdf_path
        self.workers = workers
        self.logger = logger or Logger(
            name=f"pdf_bruteforce.{os.path.basename(pdf_path)}",
            console=False,
        ).get_logger()

        self.report_every = DEFAULT_REPORT_EVERY
        self.progress_interval = DEFAULT_INTERVAL
        self.coordinator: Optional[SearchCoordinator] = None
        self._verifier: Optional[PDFVerifier] = None
        self.original_sigint_handler = None
        self.interrupted = False

    @property
    def verifier(self) -> PDFVerifier:
        if self._verifier is None:
            self._verifier = PDFVerifier.from_path(self.pdf_path)
        return self._verifier

    def is_password_protected(self) -> bool:
        """Check if the PDF is actually password protected

        Raises:
            VerificationError: the document could not be parsed
        """
        try:
            return self.verifier.is_encrypted()
        except pikepdf.PdfError as e:
            self.logger.error(f"Error checking PDF: {str(e)}")
            raise VerificationError(f"Failed to load PDF: {e}") from e

    def _setup_signal_handlers(self) -> None:
        """Turn Ctrl+C into a cooperative cancel of the running search"""
        if threading.current_thread() is not threading.main_thread():
            return
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

        def sigint_handler(sig, frame):
            self.logger.info("Interrupted by user. Stopping workers...")
            self.interrupted = True
            if self.coordinator is not None:
                self.coordinator.cancel("interrupted by user")

        signal.signal(signal.SIGINT, sigint_handler)

    def _restore_signal_handlers(self) -> None:
        if self.original_sigint_handler is not None:
            signal.signal(signal.SIGINT, self.original_sigint_handler)
            self.original_sigint_handler = None

    def crack(self,
              charset: str,
              min_length: int,
              max_length: int,
              stop_policy: StopPolicy = StopPolicy.LOWEST,
              timeout: Optional[float] = None,
              show_progress: bool = True,
              progress_callback: Optional[Callable[[ProgressSnapshot], None]] = None) -> SearchResult:
        """Search every candidate of the given charset and lengths

        The configuration is validated and the keyspace sized before the
        document is touched.

        Returns:
            The search result (found, exhausted or aborted)

        Raises:
            ConfigError: invalid charset or length range
            CapacityError: the search space is too large
            PDFNotEncryptedError: the document has no password
            VerificationError: the document could not be checked
        """
        keyspace = Keyspace(charset, min_length, max_length)
        self.logger.info(f"PDF: {self.pdf_path}")
        self.logger.info(f"Min length: {min_length}")
        self.logger.info(f"Max length: {max_length}")
        self.logger.info(f"Charset size: {keyspace.base}")
        self.logger.info(f"Total possible passwords: {keyspace.get_total_count():,}")

        if not self.is_password_protected():
            raise PDFNotEncryptedError(f"{self.pdf_path} is not encrypted")

        self.logger.info(f"PDF is password protected. Using {self.workers} worker thread(s)")
        self.coordinator = SearchCoordinator(
            keyspace,
            self.verifier,
            workers=self.workers,
            report_every=self.report_every,
            stop_policy=stop_policy,
            timeout=timeout,
            show_progress=show_progress,
            progress_interval=self.progress_interval,
            progress_callback=progress_callback,
        )

        self._setup_signal_handlers()
        try:
            result = self.coordinator.run()
        finally:
            self._restore_signal_handlers()

        if result.found:
            self._confirm(result)
        return result

    def _confirm(self, result: SearchResult) -> None:
        """Re-open the document with the discovered password"""
        try:
            confirmed = self.verifier(result.password)
        except pikepdf.PdfError as e:
            raise VerificationError(
                f"Unexpected error re-opening PDF with discovered password: {e}",
                index=result.index, candidate=result.password,
            ) from e
        if not confirmed:
            raise VerificationError(
                "Unexpected error re-opening PDF with discovered password",
                index=result.index, candidate=result.password,
            )

    def describe(self, result: SearchResult) -> Dict[str, Any]:
        """Summarize a result for logging or saving"""
        summary = {
            "pdf_path": self.pdf_path,
            "outcome": result.outcome.value,
            "attempts": result.attempts,
            "total": result.total,
            "elapsed": round(result.elapsed, 3),
        }
        if result.found:
            summary["password"] = result.password
            summary["index"] = result.index
        if result.cause:
            summary["cause"] = result.cause
        return summary
