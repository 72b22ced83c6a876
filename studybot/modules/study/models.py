"""Pydantic models for parsed completions and quiz scoring.

Shape checks are deliberately loose: fields must be present with the right
types, but option count and labels are not enforced.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool


class Flashcard(BaseModel):
    """Question on the front, answer on the back. ``back`` may be empty."""

    front: str
    back: str = ""


class FlashcardResult(BaseModel):
    raw: str
    card: Flashcard


class QuizQuestion(BaseModel):
    """A single multiple-choice question; options carry their "A. ".."D. " labels."""

    question: str
    options: list[str]


class ValidationResult(BaseModel):
    # only a JSON true or false counts; "yes" or 1 is a parse failure
    correct: StrictBool


class ScoreEntry(BaseModel):
    question: str
    mark: int


class ScoreSheet(BaseModel):
    """Append-only record of one quiz session's answers."""

    entries: list[ScoreEntry] = Field(default_factory=list)

    def record(self, question: str, correct: bool) -> ScoreEntry:
        entry = ScoreEntry(question=question, mark=1 if correct else 0)
        self.entries.append(entry)
        return entry

    @property
    def total(self) -> int:
        return sum(e.mark for e in self.entries)

    @property
    def answered(self) -> int:
        return len(self.entries)
