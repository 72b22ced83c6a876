from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from studybot.modules.study.models import Flashcard


class FlashcardResponse(BaseModel):
    flashcard: str = Field(..., description="Raw model text, unparsed")
    card: Flashcard


class QuestionResponse(BaseModel):
    question: str
    options: list[str]


class ValidateAnswerRequest(BaseModel):
    # Fields are optional here so absent ones produce our own 400 message
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = None
    selected_option: Optional[str] = Field(default=None, alias="selectedOption")
    api_key: Optional[str] = Field(default=None, alias="apiKey")


class ValidateAnswerResponse(BaseModel):
    correct: bool


class SimplifyResponse(BaseModel):
    front: str
    back: str
