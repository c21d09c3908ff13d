import pikepdf
import pytest


def make_pdf(path, user_password=None, owner_password="owner-secret"):
    pdf = pikepdf.new()
    pdf.add_blank_page()
    if user_password is None:
        pdf.save(path)
    else:
        pdf.save(path, encryption=pikepdf.Encryption(
            user=user_password, owner=owner_password, R=6))
    pdf.close()
    return path


@pytest.fixture
def encrypted_pdf(tmp_path):
    """A PDF whose user password is '42'"""
    return str(make_pdf(tmp_path / "locked.pdf", user_password="42"))


@pytest.fixture
def plain_pdf(tmp_path):
    return str(make_pdf(tmp_path / "plain.pdf"))
