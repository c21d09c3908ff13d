import pikepdf
import pytest

from pdf_bruteforce.core.coordinator import SearchState
from pdf_bruteforce.core.cracker import PDFCracker
from pdf_bruteforce.utils.exceptions import (
    CapacityError,
    ConfigError,
    PDFNotEncryptedError,
    PDFNotFoundError,
    VerificationError,
)


def test_cracks_two_digit_password(encrypted_pdf):
    cracker = PDFCracker(encrypted_pdf, workers=3)
    result = cracker.crack("0123456789", 1, 2, show_progress=False)

    assert result.outcome is SearchState.FOUND
    assert result.password == "42"
    # ten one-digit candidates come first
    assert result.index == 10 + 42

    summary = cracker.describe(result)
    assert summary["password"] == "42"
    assert summary["outcome"] == "found"


def test_reports_exhaustion(encrypted_pdf):
    cracker = PDFCracker(encrypted_pdf, workers=2)
    result = cracker.crack("abc", 1, 2, show_progress=False)

    assert result.outcome is SearchState.EXHAUSTED
    assert result.attempts == 3 + 9
    assert "password" not in cracker.describe(result)


def test_unencrypted_document_is_not_searched(plain_pdf):
    with pytest.raises(PDFNotEncryptedError):
        PDFCracker(plain_pdf).crack("0123456789", 1, 1, show_progress=False)


def test_configuration_checked_before_document(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"garbage")
    cracker = PDFCracker(str(broken))
    with pytest.raises(ConfigError):
        cracker.crack("0123456789", 3, 2)
    with pytest.raises(CapacityError):
        cracker.crack("".join(chr(33 + i) for i in range(95)), 20, 20)


def test_missing_document(tmp_path):
    with pytest.raises(PDFNotFoundError):
        PDFCracker(str(tmp_path / "nope.pdf"))


def test_zero_workers(encrypted_pdf):
    with pytest.raises(ConfigError):
        PDFCracker(encrypted_pdf, workers=0)


class FlakyVerifier:
    """Accepts '42' once, then fails to open the document"""

    def __init__(self):
        self.opened = 0

    def is_encrypted(self):
        return True

    def __call__(self, password):
        if password != "42":
            return False
        self.opened += 1
        if self.opened > 1:
            raise pikepdf.PdfError("file damaged between attempts")
        return True


def test_recheck_failure_is_a_verification_error(encrypted_pdf):
    cracker = PDFCracker(encrypted_pdf)
    cracker._verifier = FlakyVerifier()

    with pytest.raises(VerificationError) as excinfo:
        cracker.crack("0123456789", 2, 2, show_progress=False)

    assert excinfo.value.candidate == "42"
    assert isinstance(excinfo.value.__cause__, pikepdf.PdfError)
