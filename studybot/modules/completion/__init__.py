"""Chat-completion client exports."""

from .client import CompletionClient, ModelFactory, groq_model

__all__ = ["CompletionClient", "ModelFactory", "groq_model"]
