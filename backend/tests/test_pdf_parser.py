from unittest.mock import MagicMock, patch

import pytest

from services.errors import ExtractionFailure, InputError
from services.pdf_parser import extract_text, get_resume_text, validate_upload


class PDFPasswordIncorrect(Exception):
    pass


class PDFSyntaxError(Exception):
    pass


class PdfminerException(Exception):
    pass


def _fake_pdf(*page_texts):
    pdf = MagicMock()
    pdf.pages = []
    for text in page_texts:
        page = MagicMock()
        page.extract_text.return_value = text
        pdf.pages.append(page)
    pdf.__enter__.return_value = pdf
    return pdf


# --- Upload validation ---


def test_validate_upload_accepts_pdf():
    validate_upload("resume.pdf", "application/pdf", 1024, 10)
    validate_upload("RESUME.PDF", None, 1024, 10)


def test_validate_upload_no_file():
    with pytest.raises(InputError, match="No file selected"):
        validate_upload(None, None, 0, 10)


@pytest.mark.parametrize(
    "filename,content_type",
    [("resume.txt", "text/plain"), ("resume.docx", None), ("resume.pdf", "image/png")],
)
def test_validate_upload_rejects_non_pdf(filename, content_type):
    with pytest.raises(InputError, match="upload a PDF"):
        validate_upload(filename, content_type, 1024, 10)


def test_validate_upload_size_limit():
    validate_upload("resume.pdf", "application/pdf", 10 * 1024 * 1024, 10)
    with pytest.raises(InputError, match="smaller than 10MB"):
        validate_upload("resume.pdf", "application/pdf", 10 * 1024 * 1024 + 1, 10)


def test_validate_upload_empty_file():
    with pytest.raises(InputError, match="empty"):
        validate_upload("resume.pdf", "application/pdf", 0, 10)


# --- Text extraction ---


def test_extract_text_joins_pages():
    with patch("services.pdf_parser.pdfplumber.open", return_value=_fake_pdf("Page one", None, "Page three")):
        assert extract_text(b"%PDF-") == "Page one\n\nPage three"


def test_extract_text_no_selectable_text():
    with patch("services.pdf_parser.pdfplumber.open", return_value=_fake_pdf(None, "  ")):
        with pytest.raises(ExtractionFailure, match="selectable text"):
            extract_text(b"%PDF-")


def test_extract_text_password_protected():
    error = PdfminerException(PDFPasswordIncorrect())
    with patch("services.pdf_parser.pdfplumber.open", side_effect=error):
        with pytest.raises(ExtractionFailure, match="password protected"):
            extract_text(b"%PDF-")


def test_extract_text_corrupted():
    error = PdfminerException(PDFSyntaxError("No /Root object!"))
    with patch("services.pdf_parser.pdfplumber.open", side_effect=error):
        with pytest.raises(ExtractionFailure, match="corrupted"):
            extract_text(b"garbage")


def test_extract_text_other_failure_keeps_cause():
    with patch("services.pdf_parser.pdfplumber.open", side_effect=OSError("disk on fire")):
        with pytest.raises(ExtractionFailure, match="disk on fire") as excinfo:
            extract_text(b"%PDF-")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_get_resume_text_includes_sections():
    fake = _fake_pdf("Jane Doe\nSkills\nPython, SQL\nEducation\nB.S. Statistics")
    with patch("services.pdf_parser.pdfplumber.open", return_value=fake):
        resume = get_resume_text(b"%PDF-")
    assert resume.full_text.startswith("Jane Doe")
    assert resume.sections["skills"] == "Python, SQL"
    assert resume.sections["education"] == "B.S. Statistics"
    assert resume.sections["other"] == "Jane Doe"
