"""Prompt templates sent to the chat-completion model.

Flashcards are requested as free prose because their parser has a readable
fallback. Questions and validations feed programmatic decisions, so those
templates demand a bare JSON object.

Embedded text is interpolated as-is; nothing is escaped.
"""

from __future__ import annotations

from enum import Enum


class PromptKind(str, Enum):
    FLASHCARD = "flashcard"
    QUESTION = "question"
    VALIDATION = "validation"


DEFAULT_QUESTION_INSTRUCTION = (
    "Generate a multiple choice question (with 4 distinct options labeled A, B, C, "
    "and D) based on the PDF content."
)


def flashcard_prompt(excerpt: str, instruction: str) -> str:
    return (
        "You are a chatbot that helps users learn topics from a given document by "
        "creating flashcards. The document content is as follows:\n\n"
        f"'{excerpt}'\n\n"
        f"User's question or topic: '{instruction}'\n"
        "Create a flashcard with a question and answer based on the document content."
    )


def _exclusion_clause(previous_question: str) -> str:
    return (
        " Ensure that this question is completely different from the previous "
        f'question: "{previous_question}".'
    )


def question_prompt(
    excerpt: str, instruction: str = "", exclude: str | None = None
) -> str:
    """Ask for exactly one four-option MCQ as a bare JSON object.

    ``exclude`` names a previously asked question the model must not repeat.
    """
    user_instruction = (instruction or "").strip() or DEFAULT_QUESTION_INSTRUCTION
    if exclude and exclude.strip():
        user_instruction += _exclusion_clause(exclude)
    return f"""You are an AI that generates multiple-choice questions based on a given document.
The document content is:
"{excerpt}"
Generate a multiple-choice question with four options labeled A, B, C, and D.
Return only the JSON object (no additional text) in this exact format:
{{
  "question": "Your question here",
  "options": ["A. Option text", "B. Option text", "C. Option text", "D. Option text"]
}}
User's instruction: "{user_instruction}\""""


def validation_prompt(question: str, selected_option: str) -> str:
    return f"""You are an AI that validates answers for multiple-choice questions.
The question is:
"{question}"
The user selected:
"{selected_option}"
Return only a JSON object strictly in the following format (no extra text):
{{"correct": true}}
if the answer is correct or {{"correct": false}} if not."""


def simplify_instruction(front: str, back: str) -> str:
    """Flashcard instruction asking to rewrite only the answer of an existing card."""
    return (
        "Simplify the answer of this flashcard so it is easier to understand. "
        "Keep the question exactly as it is and change only the answer.\n"
        f"**Front:** {front}\n"
        f"**Back:** {back}\n"
        "Reply with the flashcard in the same **Front:** / **Back:** format."
    )


def build_prompt(
    kind: PromptKind | str,
    excerpt: str,
    instruction: str,
    extra: str | None = None,
) -> str:
    """Build the prompt for ``kind``.

    - flashcard: ``extra`` is ignored.
    - question: ``extra`` is a previous question to exclude.
    - validation: ``instruction`` is the question, ``extra`` the selected
      option; ``excerpt`` is not used.
    """
    kind = PromptKind(kind)
    if kind is PromptKind.FLASHCARD:
        return flashcard_prompt(excerpt, instruction)
    if kind is PromptKind.QUESTION:
        return question_prompt(excerpt, instruction, exclude=extra)
    return validation_prompt(instruction, extra or "")
