"""Thin wrapper around the hosted chat-completion API.

One prompt goes out as a single user message; the reply text comes back
untouched. The API key arrives with each request, so a model is built per
call.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from groq import APIError
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError, ModelHTTPError
from pydantic_ai.models import Model

from studybot.core.config import settings
from studybot.core.errors import UpstreamError, require_fields
from studybot.core.logging import get_logger

logger = get_logger(__name__)

# Yields a model for one call and releases its connections on exit.
ModelFactory = Callable[[str, str], AsyncContextManager[Model]]


@asynccontextmanager
async def groq_model(api_key: str, model_name: str) -> AsyncIterator[Model]:
    """Groq chat model whose SDK client never retries and is closed after use."""
    from groq import AsyncGroq
    from pydantic_ai.models.groq import GroqModel
    from pydantic_ai.providers.groq import GroqProvider

    client = AsyncGroq(
        api_key=api_key,
        max_retries=0,
        timeout=settings.llm.timeout_seconds,
    )
    try:
        yield GroqModel(model_name, provider=GroqProvider(groq_client=client))
    finally:
        await client.close()


def _provider_message(exc: Exception) -> str:
    """Pull the human-readable message out of a provider error when there is one."""
    if isinstance(exc, ModelHTTPError):
        body = exc.body
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
            if isinstance(error, str) and error:
                return error
        return f"status_code: {exc.status_code}, model_name: {exc.model_name}"
    return str(exc) or exc.__class__.__name__


class CompletionClient:
    """Sends one prompt per call and returns the raw completion text."""

    def __init__(
        self,
        *,
        model_name: str | None = None,
        model_factory: ModelFactory | None = None,
    ) -> None:
        self.model_name = model_name or settings.llm.model
        self.model_factory = model_factory or groq_model

    async def complete(
        self, prompt: str, api_key: str | None, model: str | None = None
    ) -> str:
        require_fields(apiKey=api_key)
        model_name = model or self.model_name
        logger.info("Requesting completion from %s (%d char prompt)", model_name, len(prompt))
        async with self.model_factory(api_key, model_name) as llm:
            agent: Agent[None, str] = Agent[None, str](
                model=llm,
                output_type=str,
                retries=0,
            )
            try:
                res = await agent.run(prompt)
            except (AgentRunError, APIError) as exc:
                message = _provider_message(exc)
                logger.error("Completion call to %s failed: %s", model_name, message)
                raise UpstreamError(message) from exc
        return res.output
