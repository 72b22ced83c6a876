from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path
from typing import Callable

from studybot.core.config import settings
from studybot.core.errors import ParseError, StudyBotError
from studybot.modules.study.models import Flashcard, ScoreSheet
from studybot.modules.study.pipeline import StudyPipeline

LETTERS = "ABCD"


def _read_pdf(path: str) -> bytes:
    pdf_path = Path(path)
    if not pdf_path.exists():
        raise SystemExit(f"PDF not found at: {pdf_path}")
    return pdf_path.read_bytes()


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2))


def _pick_option(options: list[str], answer: str) -> str | None:
    """Map a typed letter (or 1-based number) onto one of the options."""
    answer = answer.strip().upper()
    if not answer:
        return None
    if answer.isdigit():
        idx = int(answer) - 1
    elif answer[0] in LETTERS:
        idx = LETTERS.index(answer[0])
    else:
        return None
    if 0 <= idx < len(options):
        return options[idx]
    return None


async def run_quiz(
    pipeline: StudyPipeline,
    pdf_bytes: bytes,
    api_key: str | None,
    *,
    rounds: int,
    instruction: str = "",
    model: str | None = None,
    ask: Callable[[str], str] | None = None,
) -> ScoreSheet:
    """Play ``rounds`` questions; each new question must differ from the last."""
    ask = ask or input
    sheet = ScoreSheet()
    previous: str | None = None
    for n in range(1, rounds + 1):
        q = await pipeline.generate_question(
            pdf_bytes, instruction, api_key, previous_question=previous, model=model
        )
        print(f"\nQ{n}. {q.question}")
        for option in q.options:
            print(f"   {option}")
        choice = None
        while choice is None:
            choice = _pick_option(q.options, ask("Your answer: "))
        result = await pipeline.validate_answer(q.question, choice, api_key, model=model)
        sheet.record(q.question, result.correct)
        print("Correct!" if result.correct else "Incorrect.")
        previous = q.question
    print(f"\nScore: {sheet.total}/{sheet.answered}")
    return sheet


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="studybot-cli", description="Flashcards and quiz questions from a PDF"
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--api-key", help="Groq API key (defaults to GROQ_API_KEY from the environment)"
    )
    common.add_argument("--model", help="Model id override")
    sub = parser.add_subparsers(dest="cmd", required=True)

    f = sub.add_parser("flashcard", parents=[common], help="Generate one flashcard")
    f.add_argument("--pdf", required=True, help="Path to the PDF")
    f.add_argument("--prompt", "-p", required=True, help="Topic or question")

    s = sub.add_parser(
        "simplify", parents=[common], help="Rewrite a flashcard's answer more simply"
    )
    s.add_argument("--pdf", required=True, help="Path to the PDF")
    s.add_argument("--front", required=True)
    s.add_argument("--back", default="")

    q = sub.add_parser("question", parents=[common], help="Generate one MCQ")
    q.add_argument("--pdf", required=True, help="Path to the PDF")
    q.add_argument("--prompt", "-p", default="", help="Extra instruction")
    q.add_argument("--exclude", help="Previous question the new one must differ from")

    v = sub.add_parser("validate", parents=[common], help="Check a selected option")
    v.add_argument("--question", required=True)
    v.add_argument("--option", required=True, help='Selected option, e.g. "B. Paris"')

    qz = sub.add_parser("quiz", parents=[common], help="Interactive quiz with scoring")
    qz.add_argument("--pdf", required=True, help="Path to the PDF")
    qz.add_argument("--rounds", type=int, default=5)
    qz.add_argument("--prompt", "-p", default="", help="Extra instruction")

    args = parser.parse_args(argv)
    api_key = args.api_key or settings.llm.groq_api_key
    pipeline = StudyPipeline()

    try:
        if args.cmd == "flashcard":
            result = asyncio.run(
                pipeline.generate_flashcard(
                    _read_pdf(args.pdf), args.prompt, api_key, model=args.model
                )
            )
            _print_json({**result.card.model_dump(), "raw": result.raw})
            return 0
        if args.cmd == "simplify":
            card = asyncio.run(
                pipeline.simplify_flashcard(
                    _read_pdf(args.pdf),
                    Flashcard(front=args.front, back=args.back),
                    api_key,
                    model=args.model,
                )
            )
            _print_json(card.model_dump())
            return 0
        if args.cmd == "question":
            question = asyncio.run(
                pipeline.generate_question(
                    _read_pdf(args.pdf),
                    args.prompt,
                    api_key,
                    previous_question=args.exclude,
                    model=args.model,
                )
            )
            _print_json(question.model_dump())
            return 0
        if args.cmd == "validate":
            verdict = asyncio.run(
                pipeline.validate_answer(args.question, args.option, api_key, model=args.model)
            )
            _print_json(verdict.model_dump())
            return 0
        if args.cmd == "quiz":
            asyncio.run(
                run_quiz(
                    pipeline,
                    _read_pdf(args.pdf),
                    api_key,
                    rounds=max(1, args.rounds),
                    instruction=args.prompt,
                    model=args.model,
                )
            )
            return 0
    except ParseError as e:
        print(f"error: {e.message}")
        print(f"raw: {e.raw}")
        return 1
    except StudyBotError as e:
        print(f"error: {e.message}")
        return 1

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
