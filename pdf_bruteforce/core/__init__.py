"""
Core functionality for the PDF brute-forcer.
"""

from .charset import build_charset, DIGITS, LETTERS, SYMBOLS
from .keyspace import Keyspace, MAX_CANDIDATES, total_candidates, length_of, decode, encode
from .partition import Chunk, partition
from .state import SharedState, StopPolicy, Match
from .worker import search_worker, WorkerReport
from .coordinator import SearchCoordinator, SearchResult, SearchState
from .progress import ProgressReporter, ProgressSnapshot
from .verifier import PDFVerifier
from .cracker import PDFCracker
