"""
Logging utilities for the PDF brute-forcer.
"""

import logging
import os
import sys
from typing import Optional


class Logger:
    """Configures the package logger used by the CLI and the search core"""

    def __init__(self, name: str = "pdf_bruteforce", log_file: Optional[str] = None,
                 level: int = logging.INFO, console: bool = True):
        """Initialize the logger

        Core modules log through child loggers (``pdf_bruteforce.core.*``),
        so configuring the package logger here routes their records too.

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self) -> logging.Logger:
        """Get the logger instance"""
        return self.logger
