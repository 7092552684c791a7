"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from src.api.dependencies import get_upstream_client
from src.api.middleware import PermissiveCORSMiddleware, cors_headers
from src.api.response import build_error
from src.api.routers import api_router
from src.config.settings import Settings, get_settings
from src.infrastructure.logging.logger import setup_logging
from src.orchestrator.operations import operation_for_path

settings = get_settings()

setup_logging(
    level=settings.log_level,
    json_output=not settings.debug,
    silence_noisy_loggers=True,
)

logger = logging.getLogger(__name__)


def _validate_startup_config(settings: Settings) -> None:
    """Validate required configuration at startup."""
    if not settings.anthropic_api_key:
        logger.warning("No anthropic_api_key configured; forwarded requests will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup and shutdown lifecycle."""
    logger.info("Starting %s", settings.app_name)
    _validate_startup_config(settings)
    yield
    logger.info("Shutting down %s", settings.app_name)
    try:
        await get_upstream_client().close()
    except Exception as e:
        logger.error("Error closing upstream client: %s", e, exc_info=True)


app = FastAPI(
    title=settings.app_name,
    description="Permaculture consultation API with topic relevance safeguards",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(PermissiveCORSMiddleware, settings=settings)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts=["*"])

app.include_router(api_router, prefix="/api")


def _missing_fields(exc: RequestValidationError) -> list[str]:
    names = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        if loc and loc[0] not in names:
            names.append(loc[0])
    return names


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Structural validation failures are 400; an unparseable body is a 500."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        logger.warning("Malformed JSON body on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content=build_error("Internal server error", "Malformed JSON body"),
        )

    operation = operation_for_path(request.url.path)
    if operation is not None and operation.validation_message:
        message = operation.validation_message
    else:
        fields = _missing_fields(exc)
        message = f"Missing or invalid fields: {', '.join(fields)}" if fields else "Invalid request body"
    return JSONResponse(status_code=400, content=build_error(message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and wrong methods are both plain 404s."""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return JSONResponse(status_code=exc.status_code, content=build_error(str(exc.detail)))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler; exposes the message only, never the traceback."""
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content=build_error("Internal server error", str(exc)),
        headers=cors_headers(settings),
    )
