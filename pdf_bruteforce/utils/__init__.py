"""
Utility modules for the PDF brute-forcer.
"""

from .config import Config, verbosity_to_level
from .exceptions import (
    PDFBruteForceError,
    PDFNotFoundError,
    PDFNotEncryptedError,
    ConfigError,
    EmptyCharsetError,
    CapacityError,
    VerificationError,
)
from .logger import Logger
