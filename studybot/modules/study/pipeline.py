"""Study pipeline: extract -> prompt -> complete -> parse.

Provides a high-level class the API handlers and the CLI share. Each call is
independent: nothing is cached or retried between requests.
"""

from __future__ import annotations

import asyncio

from studybot.core.errors import require_fields
from studybot.core.logging import get_logger
from studybot.modules.completion.client import CompletionClient
from studybot.modules.documents.extractor import extract_excerpt
from studybot.modules.parsing.parser import (
    parse_flashcard,
    parse_question,
    parse_validation,
)
from studybot.modules.prompts.builder import (
    flashcard_prompt,
    question_prompt,
    simplify_instruction,
    validation_prompt,
)
from studybot.modules.study.models import (
    Flashcard,
    FlashcardResult,
    QuizQuestion,
    ValidationResult,
)

logger = get_logger(__name__)


def merge_simplified(original: Flashcard, simplified: Flashcard) -> Flashcard:
    """Keep the original question unless the model actually produced a new one."""
    new_front = simplified.front.strip()
    if not new_front or new_front == original.front.strip():
        return Flashcard(front=original.front, back=simplified.back)
    return simplified


class StudyPipeline:
    def __init__(
        self,
        client: CompletionClient | None = None,
        *,
        excerpt_limit: int | None = None,
    ) -> None:
        self.client = client or CompletionClient()
        self.excerpt_limit = excerpt_limit

    async def excerpt(self, pdf_bytes: bytes | None) -> str:
        # pypdf is synchronous; keep it off the event loop
        return await asyncio.to_thread(extract_excerpt, pdf_bytes, self.excerpt_limit)

    async def _complete(self, prompt: str, api_key: str | None, model: str | None) -> str:
        raw = await self.client.complete(prompt, api_key, model)
        logger.debug("Raw completion: %r", raw)
        return raw

    async def generate_flashcard(
        self,
        pdf_bytes: bytes | None,
        instruction: str,
        api_key: str | None,
        *,
        model: str | None = None,
    ) -> FlashcardResult:
        require_fields(apiKey=api_key)
        excerpt = await self.excerpt(pdf_bytes)
        raw = await self._complete(flashcard_prompt(excerpt, instruction), api_key, model)
        return FlashcardResult(raw=raw, card=parse_flashcard(raw))

    async def simplify_flashcard(
        self,
        pdf_bytes: bytes | None,
        card: Flashcard,
        api_key: str | None,
        *,
        model: str | None = None,
    ) -> Flashcard:
        """Ask for a simpler answer to ``card`` while holding its question fixed."""
        result = await self.generate_flashcard(
            pdf_bytes,
            simplify_instruction(card.front, card.back),
            api_key,
            model=model,
        )
        merged = merge_simplified(card, result.card)
        if merged.front != card.front:
            logger.info("Simplified flashcard came back with a different question")
        return merged

    async def generate_question(
        self,
        pdf_bytes: bytes | None,
        instruction: str | None,
        api_key: str | None,
        *,
        previous_question: str | None = None,
        model: str | None = None,
    ) -> QuizQuestion:
        require_fields(apiKey=api_key)
        excerpt = await self.excerpt(pdf_bytes)
        prompt = question_prompt(excerpt, instruction or "", exclude=previous_question)
        raw = await self._complete(prompt, api_key, model)
        return parse_question(raw)

    async def validate_answer(
        self,
        question: str,
        selected_option: str,
        api_key: str | None,
        *,
        model: str | None = None,
    ) -> ValidationResult:
        require_fields(apiKey=api_key)
        raw = await self._complete(validation_prompt(question, selected_option), api_key, model)
        return parse_validation(raw)
