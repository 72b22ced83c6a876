"""PDF text extraction exports."""

from .extractor import extract_excerpt, extract_text, truncate_excerpt

__all__ = ["extract_excerpt", "extract_text", "truncate_excerpt"]
