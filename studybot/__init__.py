"""Generate study flashcards and quiz questions from uploaded PDFs."""

__version__ = "0.1.0"
