"""Plain-text extraction from uploaded documents.

Never raises: unsupported types and extraction failures produce a short
placeholder naming the file, which the resume parser rejects as too short.
"""

import io
import logging

import pdfplumber
from docx import Document

logger = logging.getLogger(__name__)

PDF = "application/pdf"
DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOC = "application/msword"
IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})

ALLOWED_TYPES = frozenset({PDF, DOCX, DOC}) | IMAGE_TYPES


def extract_text(file_bytes: bytes, mime_type: str, original_name: str = "") -> str:
    """Return the document's text, or a placeholder if it has none we can read."""
    try:
        if mime_type == PDF:
            with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
                # Scanned pages have no text layer
                lines = [page.extract_text() or "" for page in pdf.pages]
        elif mime_type == DOCX:
            lines = [paragraph.text for paragraph in Document(io.BytesIO(file_bytes)).paragraphs]
        elif mime_type == DOC:
            lines = [f"Document: {original_name}"]
        else:
            lines = [f"Image: {original_name}"]
    except Exception as e:
        logger.warning("Text extraction failed for %s (%s): %s", original_name, mime_type, e)
        return f"File: {original_name} (text extraction failed)"
    return "\n".join(lines).strip()
