"""
Resume Text Extraction
- PDF via PyMuPDF (fitz)
- DOCX via python-docx (body paragraphs, then table cells)

Returns one plain-text blob per document for the scoring engine.
"""

import io
import logging
from pathlib import Path

import fitz  # PyMuPDF
from docx import Document

from utils.text_utils import clean_text

logger = logging.getLogger(__name__)

PDF_TYPES = {".pdf": "application/pdf"}
DOCX_TYPES = {".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document"}
SUPPORTED_EXTENSIONS = tuple(PDF_TYPES) + tuple(DOCX_TYPES)


class ResumeParseError(Exception):
    """The document could not be read."""


class UnsupportedFormatError(ResumeParseError):
    """The document is not a PDF or DOCX file."""


def get_pdf_text(file_bytes: bytes) -> str:
    """Returns the text of every page, in reading order, joined by newlines."""
    with fitz.open(stream=file_bytes, filetype="pdf") as doc:
        pages = [page.get_text("text", sort=True) for page in doc]
    return "\n".join(pages)


def get_docx_text(file_bytes: bytes) -> str:
    """Returns paragraph text followed by table cell text (tab separated per row)."""
    doc = Document(io.BytesIO(file_bytes))
    parts = [p.text for p in doc.paragraphs]

    for table in doc.tables:
        for row in table.rows:
            parts.append("\t".join(cell.text.strip() for cell in row.cells))

    return "\n".join(parts)


def parse_resume(file_bytes: bytes, filename: str) -> str:
    """
    Extracts clean plain text from an uploaded resume.

    Raises:
        UnsupportedFormatError: extension is not .pdf or .docx
        ResumeParseError: the file is empty, corrupt or unreadable
    """
    ext = Path(filename or "").suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError("Unsupported file type. Please upload PDF or DOCX.")

    if not file_bytes:
        raise ResumeParseError("Uploaded file is empty.")

    try:
        if ext in PDF_TYPES:
            raw = get_pdf_text(file_bytes)
        else:
            raw = get_docx_text(file_bytes)
    except Exception as e:
        logger.warning("Failed to parse %s: %s", filename, e)
        raise ResumeParseError("Failed to parse resume. Please ensure the file is not corrupted.") from e

    text = clean_text(raw)
    logger.info("Parsed %s (%d characters)", filename, len(text))
    return text
