"""Turn raw completion text into structured results.

Flashcards are parsed tolerantly with an ordered list of marker rules and never
fail. Questions and validations must be strict JSON exactly as received: no
code-fence or leading-prose stripping is attempted, and a failure keeps the
raw text on the ``ParseError``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ShapeError

from studybot.core.errors import ParseError
from studybot.core.logging import get_logger
from studybot.modules.prompts.builder import PromptKind
from studybot.modules.study.models import Flashcard, QuizQuestion, ValidationResult

logger = get_logger(__name__)

ANSWER_MARKER = "**Answer:**"
BACK_MARKER = "**Back:**"
FRONT_MARKER = "**Front:**"

JSON_PARSE_FAILED = "Failed to parse AI response as JSON."

M = TypeVar("M", bound=BaseModel)


def _split_on_answer(text: str) -> Flashcard:
    front, _, back = text.partition(ANSWER_MARKER)
    return Flashcard(front=front.strip(), back=back.strip())


def _split_on_back(text: str) -> Flashcard:
    front, _, back = text.partition(BACK_MARKER)
    if FRONT_MARKER in front:
        front = front.replace(FRONT_MARKER, "", 1)
    return Flashcard(front=front.strip(), back=back.strip())


@dataclass(frozen=True)
class MarkerRule:
    marker: Optional[str]
    split: Callable[[str], Flashcard]

    def matches(self, text: str) -> bool:
        return self.marker is None or self.marker in text


# Evaluated top to bottom, first match wins. The last rule always matches.
FLASHCARD_RULES: tuple[MarkerRule, ...] = (
    MarkerRule(ANSWER_MARKER, _split_on_answer),
    MarkerRule(BACK_MARKER, _split_on_back),
    MarkerRule(None, lambda text: Flashcard(front=text.strip(), back="")),
)


def parse_flashcard(raw: str) -> Flashcard:
    text = raw or ""
    for rule in FLASHCARD_RULES:
        if rule.matches(text):
            return rule.split(text)
    raise AssertionError("FLASHCARD_RULES must end with a catch-all rule")


def _parse_json_model(raw: str, model: type[M]) -> M:
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Completion is not valid JSON (%s); raw=%r", exc, raw)
        raise ParseError(JSON_PARSE_FAILED, raw) from exc
    try:
        return model.model_validate(data)
    except ShapeError as exc:
        logger.warning("Completion JSON has the wrong shape for %s; raw=%r", model.__name__, raw)
        raise ParseError(
            f"AI response JSON does not match the expected {model.__name__} shape.",
            raw,
        ) from exc


def parse_question(raw: str) -> QuizQuestion:
    return _parse_json_model(raw, QuizQuestion)


def parse_validation(raw: str) -> ValidationResult:
    return _parse_json_model(raw, ValidationResult)


def parse(kind: PromptKind | str, raw: str) -> Flashcard | QuizQuestion | ValidationResult:
    kind = PromptKind(kind)
    if kind is PromptKind.FLASHCARD:
        return parse_flashcard(raw)
    if kind is PromptKind.QUESTION:
        return parse_question(raw)
    return parse_validation(raw)
