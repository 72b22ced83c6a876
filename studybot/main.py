import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from studybot import __version__
from studybot.apis.auth import router as auth_router
from studybot.apis.errors import install_error_handlers
from studybot.apis.study.main import router as study_router
from studybot.core.config import settings
from studybot.core.db.base import engine, init_models
from studybot.core.logging import bind_request_id, get_logger, reset_request_id, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if settings.app.is_production and settings.auth.jwt_secret == "dev-secret-change-me":
        logger.warning("JWT_SECRET is the development default; set it before deploying")
    await init_models()
    try:
        yield
    finally:
        await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app.name, version=__version__, lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        token = bind_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)
        response.headers["X-Request-ID"] = request_id
        return response

    install_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(study_router)

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "app": settings.app.name,
            "version": settings.app.version,
        }

    return app


app = create_app()


def run() -> None:
    try:
        uvicorn.run(
            "studybot.main:app",
            host="0.0.0.0",
            port=settings.app.port,
            reload=not settings.app.is_production,
        )
    except Exception as e:
        print(f"An error occurred when starting the server: {e}.")


if __name__ == "__main__":
    run()
