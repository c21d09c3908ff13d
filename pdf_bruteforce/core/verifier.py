"""
Password verification against an encrypted PDF.
"""

import io
import os

import pikepdf

from pdf_bruteforce.utils.exceptions import PDFNotFoundError


class PDFVerifier:
    """Callable password check over an in-memory copy of a PDF

    The document bytes are read once and never modified, so one instance can
    be shared by every worker thread; each attempt opens its own stream.
    """

    def __init__(self, data: bytes, name: str = "<memory>"):
        self.data = data
        self.name = name

    @classmethod
    def from_path(cls, pdf_path: str) -> "PDFVerifier":
        if not os.path.exists(pdf_path):
            raise PDFNotFoundError(f"PDF file not found: {pdf_path}")
        with open(pdf_path, "rb") as f:
            return cls(f.read(), name=pdf_path)

    def is_encrypted(self) -> bool:
        """Check whether opening the document needs a password"""
        try:
            with pikepdf.open(io.BytesIO(self.data)):
                return False
        except pikepdf.PasswordError:
            return True

    def __call__(self, password: str) -> bool:
        """Try a single password

        Returns:
            True if the password opens the document, False if it is wrong

        Raises:
            pikepdf.PdfError: the document could not be processed at all
        """
        try:
            with pikepdf.open(io.BytesIO(self.data), password=password):
                return True
        except pikepdf.PasswordError:
            return False
