"""Study models exports.

The pipeline lives in ``studybot.modules.study.pipeline`` and is imported
from there so the parser can depend on these models without a cycle.
"""

from .models import (
    Flashcard,
    FlashcardResult,
    QuizQuestion,
    ScoreEntry,
    ScoreSheet,
    ValidationResult,
)

__all__ = [
    "Flashcard",
    "FlashcardResult",
    "QuizQuestion",
    "ScoreEntry",
    "ScoreSheet",
    "ValidationResult",
]
