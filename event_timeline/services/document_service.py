"""
Document text extraction service.

Uses PyPDF2 for PDFs and python-docx for Word documents; anything else is
read as plain text. Extraction is CPU-bound; the import worker runs it in a
thread pool to avoid blocking the event loop.
"""

import io
import logging
import zipfile
from pathlib import PurePath
from typing import List, Optional

from docx import Document as DocxDocument
from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Formats we recognize but cannot read, with the hint shown to the user
UNSUPPORTED_FORMATS = {
    ".doc": "Legacy .doc files are not supported. Please convert to .docx or .pdf",
    ".pages": ".pages files are not supported. Please export as .pdf or .docx from Pages",
}


class UnsupportedDocumentError(ValueError):
    """Raised for uploads we cannot extract text from."""


def extract_text_from_pdf(content: bytes) -> str:
    """
    Extract all text from a PDF, one page per line block.
    This is blocking CPU work; call via asyncio.to_thread in the worker.
    """
    try:
        reader = PdfReader(io.BytesIO(content))
        parts: List[str] = []
        for page in reader.pages:
            text = page.extract_text()
            if text:
                parts.append(text)
    except PdfReadError as e:
        raise UnsupportedDocumentError(f"Could not read PDF: {e}") from e
    return "\n".join(parts)


def extract_text_from_docx(content: bytes) -> str:
    """Paragraph text followed by table rows (cells joined with " | ")."""
    try:
        doc = DocxDocument(io.BytesIO(content))
    except (zipfile.BadZipFile, ValueError, KeyError) as e:
        # Not a zip, or a zip without a Word document part
        raise UnsupportedDocumentError(f"Could not read DOCX: {e}") from e

    lines = [p.text for p in doc.paragraphs if p.text.strip()]
    for table in doc.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if cells:
                lines.append(" | ".join(cells))
    return "\n".join(lines)


def extract_text(filename: str, content: bytes, content_type: Optional[str] = None) -> str:
    """
    Route an upload to the right extractor by extension or content type.
    Unknown types are decoded as UTF-8 text.
    """
    suffix = PurePath(filename or "").suffix.lower()
    if suffix in UNSUPPORTED_FORMATS:
        raise UnsupportedDocumentError(UNSUPPORTED_FORMATS[suffix])

    if suffix == ".pdf" or content_type == PDF_CONTENT_TYPE:
        logger.debug("Extracting PDF text from %s", filename)
        return extract_text_from_pdf(content)
    if suffix == ".docx" or content_type == DOCX_CONTENT_TYPE:
        logger.debug("Extracting DOCX text from %s", filename)
        return extract_text_from_docx(content)

    return content.decode("utf-8", errors="replace")
