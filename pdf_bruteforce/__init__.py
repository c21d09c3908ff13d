"""
PDF Brute-Forcer

Exhaustive password recovery for encrypted PDF documents over a configurable
character set and length range.
"""

from pdf_bruteforce.core.cracker import PDFCracker
from pdf_bruteforce.core.charset import build_charset
from pdf_bruteforce.core.keyspace import Keyspace
from pdf_bruteforce.core.coordinator import (
    SearchCoordinator,
    SearchResult,
    SearchState,
)

__version__ = "0.1.0"
