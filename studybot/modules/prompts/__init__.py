"""Prompt templates for the three request kinds."""

from .builder import (
    DEFAULT_QUESTION_INSTRUCTION,
    PromptKind,
    build_prompt,
    flashcard_prompt,
    question_prompt,
    simplify_instruction,
    validation_prompt,
)

__all__ = [
    "DEFAULT_QUESTION_INSTRUCTION",
    "PromptKind",
    "build_prompt",
    "flashcard_prompt",
    "question_prompt",
    "simplify_instruction",
    "validation_prompt",
]
