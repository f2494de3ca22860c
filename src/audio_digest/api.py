"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from audio_digest.config import load_config
from audio_digest.dependencies import Services, build_services
from audio_digest.logging import setup_logging
from audio_digest.routes import process_router, upload_router

logger = setup_logging()


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request", extra={"path": request.url.path})
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request.", "details": str(exc.errors())},
    )


def create_app(services: Services | None = None) -> FastAPI:
    """
    Builds the application.

    Args:
        services: Pre-built components. When omitted they are constructed from
            environment configuration at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if services is None:
            app.state.services = build_services(load_config())
        yield

    app = FastAPI(title="Audio Digest Service", lifespan=lifespan)
    if services is not None:
        app.state.services = services

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.include_router(upload_router)
    app.include_router(process_router)
    return app
