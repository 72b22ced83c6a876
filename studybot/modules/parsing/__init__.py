"""Completion parsers exports."""

from .parser import (
    FLASHCARD_RULES,
    MarkerRule,
    parse,
    parse_flashcard,
    parse_question,
    parse_validation,
)

__all__ = [
    "FLASHCARD_RULES",
    "MarkerRule",
    "parse",
    "parse_flashcard",
    "parse_question",
    "parse_validation",
]
