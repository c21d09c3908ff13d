"""
Custom exceptions for the PDF brute-forcer.
"""

from typing import Optional


class PDFBruteForceError(Exception):
    """Base exception for PDF brute-force errors"""
    pass


class PDFNotFoundError(PDFBruteForceError):
    """PDF file not found"""
    pass


class PDFNotEncryptedError(PDFBruteForceError):
    """PDF is not encrypted"""
    pass


class ConfigError(PDFBruteForceError):
    """Error in configuration"""
    pass


class EmptyCharsetError(ConfigError):
    """No character category selected and no custom characters supplied"""
    pass


class CapacityError(PDFBruteForceError, OverflowError):
    """Search space is larger than the supported candidate ceiling"""
    pass


class VerificationError(PDFBruteForceError):
    """The password check itself failed (not a wrong password)"""

    def __init__(self, message: str, worker_id: Optional[int] = None,
                 index: Optional[int] = None, candidate: Optional[str] = None):
        super().__init__(message)
        self.worker_id = worker_id
        self.index = index
        self.candidate = candidate
