"""Prompt Optimizer Server"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import evaluate, health, optimize
from .config import Settings, get_settings
from .core.exceptions import PromptOptimizerError
from .core.logging import configure_logging

logger = logging.getLogger(__name__)


async def _handle_domain_error(request: Request, exc: PromptOptimizerError) -> JSONResponse:
    logger.error(
        f"Request to {request.url.path} failed with {type(exc).__name__} "
        f"({exc.status_code}): {exc.message}"
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(status_code=422, content={"error": "; ".join(problems)})


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Prompt Optimizer",
        description="Optimize prompts with Gemini and GPT-4o and benchmark the rewrite",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Every error leaves the API as {"error": <message>}
    app.add_exception_handler(PromptOptimizerError, _handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, _handle_http_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)

    app.include_router(optimize.router)
    app.include_router(evaluate.router)
    app.include_router(health.router)

    return app


app = create_app()
