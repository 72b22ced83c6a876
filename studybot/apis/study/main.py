from __future__ import annotations

from typing import Awaitable, Optional, TypeVar

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from studybot.apis.deps import get_pipeline, require_user
from studybot.core.config import settings
from studybot.core.errors import StudyBotError, require_fields
from studybot.core.logging import get_logger
from studybot.modules.study.models import Flashcard
from studybot.modules.study.pipeline import StudyPipeline
from .schemas import (
    FlashcardResponse,
    QuestionResponse,
    SimplifyResponse,
    ValidateAnswerRequest,
    ValidateAnswerResponse,
)


router = APIRouter(dependencies=[Depends(require_user)])
logger = get_logger(__name__)

T = TypeVar("T")

PREFIX = f"/{settings.app.api_prefix}"


async def _read_upload(upload: Optional[UploadFile]) -> Optional[bytes]:
    if upload is None:
        return None
    try:
        return await upload.read()
    finally:
        await upload.close()


async def _run(endpoint: str, call: Awaitable[T]) -> T:
    """Await one route step, turning unexpected failures into a 500."""
    try:
        return await call
    except StudyBotError:
        raise
    except Exception as exc:
        logger.exception("Unexpected error in %s", endpoint)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post(
    f"{PREFIX}/generate-flashcard",
    response_model=FlashcardResponse,
    tags=["study"],
)
async def generate_flashcard(
    pdf_file: Optional[UploadFile] = File(default=None, alias="pdfFile"),
    user_input: Optional[str] = Form(default=None, alias="userInput"),
    api_key: Optional[str] = Form(default=None, alias="apiKey"),
    pipeline: StudyPipeline = Depends(get_pipeline),
) -> FlashcardResponse:
    pdf_bytes = await _run("generate-flashcard", _read_upload(pdf_file))
    require_fields(pdfFile=pdf_bytes, userInput=user_input, apiKey=api_key)
    result = await _run(
        "generate-flashcard",
        pipeline.generate_flashcard(pdf_bytes, user_input, api_key),
    )
    return FlashcardResponse(flashcard=result.raw, card=result.card)


@router.post(
    f"{PREFIX}/generate-question",
    response_model=QuestionResponse,
    tags=["study"],
)
async def generate_question(
    pdf_file: Optional[UploadFile] = File(default=None, alias="pdfFile"),
    user_input: Optional[str] = Form(default=None, alias="userInput"),
    api_key: Optional[str] = Form(default=None, alias="apiKey"),
    previous_question: Optional[str] = Form(default=None, alias="previousQuestion"),
    pipeline: StudyPipeline = Depends(get_pipeline),
) -> QuestionResponse:
    pdf_bytes = await _run("generate-question", _read_upload(pdf_file))
    require_fields(pdfFile=pdf_bytes, apiKey=api_key)
    question = await _run(
        "generate-question",
        pipeline.generate_question(
            pdf_bytes,
            user_input,
            api_key,
            previous_question=previous_question,
        ),
    )
    return QuestionResponse(question=question.question, options=question.options)


@router.post(
    f"{PREFIX}/validate-answer",
    response_model=ValidateAnswerResponse,
    tags=["study"],
)
async def validate_answer(
    req: Optional[ValidateAnswerRequest] = None,
    pipeline: StudyPipeline = Depends(get_pipeline),
) -> ValidateAnswerResponse:
    req = req or ValidateAnswerRequest()
    require_fields(
        question=req.question,
        selectedOption=req.selected_option,
        apiKey=req.api_key,
    )
    result = await _run(
        "validate-answer",
        pipeline.validate_answer(req.question, req.selected_option, req.api_key),
    )
    return ValidateAnswerResponse(correct=result.correct)


@router.post(
    f"{PREFIX}/simplify-flashcard",
    response_model=SimplifyResponse,
    tags=["study"],
)
async def simplify_flashcard(
    pdf_file: Optional[UploadFile] = File(default=None, alias="pdfFile"),
    front: Optional[str] = Form(default=None),
    back: Optional[str] = Form(default=None),
    api_key: Optional[str] = Form(default=None, alias="apiKey"),
    pipeline: StudyPipeline = Depends(get_pipeline),
) -> SimplifyResponse:
    pdf_bytes = await _run("simplify-flashcard", _read_upload(pdf_file))
    require_fields(pdfFile=pdf_bytes, front=front, apiKey=api_key)
    card = await _run(
        "simplify-flashcard",
        pipeline.simplify_flashcard(
            pdf_bytes, Flashcard(front=front, back=back or ""), api_key
        ),
    )
    return SimplifyResponse(front=card.front, back=card.back)
