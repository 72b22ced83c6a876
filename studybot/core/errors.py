"""Error taxonomy for the study pipeline.

Each error knows the HTTP status it maps to; the API layer turns any of them
into an ``{"error": message}`` body (``ParseError`` adds ``raw``).
"""

from __future__ import annotations

from typing import Iterable


class StudyBotError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"error": self.message}


class ValidationError(StudyBotError):
    """One or more required request fields are missing."""

    status_code = 400

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = list(missing)
        super().__init__(
            f"Missing required parameters ({', '.join(self.missing)})."
        )


class ExtractionError(StudyBotError):
    """No PDF was supplied or the bytes could not be read as a PDF."""

    status_code = 400


class UpstreamError(StudyBotError):
    """The chat-completion call itself failed."""

    status_code = 500


class ParseError(StudyBotError):
    """The completion arrived but did not have the expected shape.

    ``raw`` is the model output exactly as received so callers can show it.
    """

    status_code = 500

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw

    def to_payload(self) -> dict:
        return {"error": self.message, "raw": self.raw}


def require_fields(**fields: object) -> None:
    """Raise ``ValidationError`` naming every field whose value is empty."""
    missing = [
        name
        for name, value in fields.items()
        if value is None or (isinstance(value, (str, bytes)) and not value.strip())
    ]
    if missing:
        raise ValidationError(missing)
