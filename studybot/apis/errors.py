"""Render every error as ``{"error": message}`` so clients see one envelope."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studybot.core.errors import StudyBotError
from studybot.core.logging import get_logger

logger = get_logger(__name__)


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "selectedOption") or ("body",) for a bad body
    parts = [str(p) for p in loc[1:]]
    return ".".join(parts) or str(loc[0])


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StudyBotError)
    async def _study_error(request: Request, exc: StudyBotError) -> JSONResponse:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        missing = [_field_name(tuple(e["loc"])) for e in errors if e.get("type") == "missing"]
        if missing:
            message = f"Missing required parameters ({', '.join(missing)})."
        elif errors:
            message = f"Invalid request: {errors[0].get('msg', 'malformed input')}"
        else:
            message = "Invalid request."
        return JSONResponse(status_code=400, content={"error": message})
