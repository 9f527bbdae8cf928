"""the beautiful world start from here."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.logging_config import configure_logging
from app.routers import gh, info
from app.services.telegram import DeliveryError


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)
    if not settings.github_webhook_secret:
        structlog.get_logger().warning("github_webhook_secret_missing")
    yield


app = FastAPI(title="GitHub → Telegram push notifier", lifespan=lifespan)


@app.exception_handler(DeliveryError)
async def delivery_error_handler(request: Request, exc: DeliveryError) -> PlainTextResponse:
    structlog.get_logger().error("delivery_failed", path=request.url.path, error=str(exc))
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Plain-text 500 for anything the routes did not handle."""
    logger = structlog.get_logger()
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return PlainTextResponse("Internal Server Error", status_code=500)


app.include_router(info.router)
app.include_router(gh.router)
