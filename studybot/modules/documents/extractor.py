"""Turn uploaded PDF bytes into the bounded excerpt that prompts embed.

The excerpt is a raw character slice of the extracted text: no attempt is made
to cut on word or sentence boundaries, and nothing is trimmed.
"""

from __future__ import annotations

import io

from pypdf import PdfReader

from studybot.core.config import settings
from studybot.core.errors import ExtractionError
from studybot.core.logging import get_logger

logger = get_logger(__name__)

PAGE_SEPARATOR = "\n\n"


def extract_text(pdf_bytes: bytes | None) -> str:
    """Extract the text of every page, pages separated by a blank line."""
    if not pdf_bytes:
        raise ExtractionError("No PDF file uploaded.")

    try:
        reader = PdfReader(io.BytesIO(pdf_bytes))
        pages = [page.extract_text() or "" for page in reader.pages]
    except Exception as exc:
        # pypdf raises a mix of PdfReadError, ValueError and friends on garbage input
        logger.warning("PDF extraction failed: %s", exc)
        raise ExtractionError(f"Could not read the uploaded PDF: {exc}") from exc

    text = PAGE_SEPARATOR.join(pages)
    logger.info("Extracted %d chars from %d page(s)", len(text), len(pages))
    return text


def truncate_excerpt(text: str, limit: int | None = None) -> str:
    if limit is None:
        limit = settings.llm.excerpt_char_limit
    return text[: max(0, int(limit))]


def extract_excerpt(pdf_bytes: bytes | None, limit: int | None = None) -> str:
    """Extract the PDF text and keep only its first ``limit`` characters."""
    return truncate_excerpt(extract_text(pdf_bytes), limit)
