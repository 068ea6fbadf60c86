import io
import logging

import pdfplumber

from models.schemas.resume_text import ResumeText
from services.errors import ExtractionFailure, InputError
from services.section_parser import parse_sections

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = frozenset({"application/pdf"})

NO_TEXT_MESSAGE = (
    "No text could be extracted from the PDF. "
    "Please ensure the PDF contains selectable text."
)


def validate_upload(
    filename: str | None,
    content_type: str | None,
    size: int,
    max_size_mb: int,
) -> None:
    """Reject uploads that are not a PDF or exceed the size limit."""
    if not filename:
        raise InputError("No file selected")

    is_pdf_name = filename.lower().endswith(".pdf")
    is_pdf_type = not content_type or content_type in PDF_CONTENT_TYPES
    if not (is_pdf_name and is_pdf_type):
        logger.warning("Rejected upload %s (%s)", filename, content_type)
        raise InputError(
            "Please upload a PDF file. Other file formats are not supported at the moment."
        )

    if size == 0:
        raise InputError("The uploaded file is empty")

    if size > max_size_mb * 1024 * 1024:
        raise InputError(
            f"File size too large. Please upload a PDF smaller than {max_size_mb}MB."
        )


def _exception_names(exc: BaseException) -> set[str]:
    """Class names across the exception, its wrapped args, and its cause chain."""
    names: set[str] = set()
    current: BaseException | None = exc
    while current is not None and type(current).__name__ not in names:
        names.add(type(current).__name__)
        for arg in current.args:
            if isinstance(arg, BaseException):
                names.add(type(arg).__name__)
        current = current.__cause__ or current.__context__
    return names


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file.

    Raises ExtractionFailure for password-protected, corrupted or
    image-only PDFs.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        names = " ".join(_exception_names(e)).lower()
        logger.error("Error extracting text from PDF: %s", e)
        if "password" in names:
            raise ExtractionFailure(
                "The PDF is password protected. "
                "Please remove the password protection and try again."
            ) from e
        if "syntax" in names:
            raise ExtractionFailure(
                "The PDF file appears to be corrupted. Please try with a different PDF."
            ) from e
        raise ExtractionFailure(f"Failed to extract text from PDF: {e}") from e

    text = "\n".join(pages).strip()
    if not text:
        raise ExtractionFailure(NO_TEXT_MESSAGE)
    logger.info("Extracted %d characters from %d page(s)", len(text), len(pages))
    return text


def get_resume_text(pdf_bytes: bytes) -> ResumeText:
    """Full text plus labelled sections for an uploaded resume."""
    text = extract_text(pdf_bytes)
    return ResumeText(full_text=text, sections=parse_sections(text))
