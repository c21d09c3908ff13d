import json

from pdf_bruteforce.cli import create_parser, main
from pdf_bruteforce.utils.config import Config


def run(tmp_path, *args):
    return main(["--config", str(tmp_path / "config.json"), "-q", *args])


def test_finds_password(encrypted_pdf, tmp_path):
    summary = tmp_path / "summary.json"
    code = run(tmp_path, "-i", encrypted_pdf, "--min", "2", "--max", "2", "-d",
               "-t", "2", "--output-file", str(summary))
    assert code == 0
    data = json.loads(summary.read_text())
    assert data["password"] == "42"
    assert data["index"] == 42


def test_not_found_exit_code(encrypted_pdf, tmp_path):
    code = run(tmp_path, "-i", encrypted_pdf, "--min", "1", "--max", "3", "-c", "xyz")
    assert code == 2


def test_empty_charset_fails_before_search(encrypted_pdf, tmp_path):
    assert run(tmp_path, "-i", encrypted_pdf, "--max", "2") == 1


def test_invalid_length_range(encrypted_pdf, tmp_path):
    assert run(tmp_path, "-i", encrypted_pdf, "-d", "--min", "4", "--max", "3") == 1


def test_zero_threads(encrypted_pdf, tmp_path):
    assert run(tmp_path, "-i", encrypted_pdf, "-d", "-t", "0") == 1


def test_search_space_too_large(encrypted_pdf, tmp_path):
    assert run(tmp_path, "-i", encrypted_pdf, "-d", "-a", "-s", "--min", "20", "--max", "20") == 1


def test_not_encrypted(plain_pdf, tmp_path):
    assert run(tmp_path, "-i", plain_pdf, "-d", "--max", "1") == 0


def test_damaged_document_is_a_verification_error(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_bytes(b"%PDF-1.7 garbage")
    assert run(tmp_path, "-i", str(broken), "-d", "--max", "1") == 3


def test_missing_document(tmp_path):
    assert run(tmp_path, "-i", str(tmp_path / "missing.pdf"), "-d") == 1


def test_saved_config_supplies_defaults(encrypted_pdf, tmp_path):
    assert run(tmp_path, "-i", encrypted_pdf, "-d", "--min", "2", "--max", "2",
               "-t", "3", "--save-config") == 0

    saved = Config(str(tmp_path / "config.json"))
    assert saved["digits"] is True
    assert saved["workers"] == 3
    assert saved["min_length"] == 2

    assert run(tmp_path, "-i", encrypted_pdf) == 0


def test_stop_policy_help_explains_trade_off():
    help_text = create_parser().format_help()
    assert "--stop-policy" in help_text
    assert "returns sooner" in " ".join(help_text.split())
