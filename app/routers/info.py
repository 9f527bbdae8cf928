"""Ruter Ingfo?"""

from __future__ import annotations

from textwrap import dedent

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.schemas import HealthResponse

router = APIRouter()

HTTP_HELP_TEXT = dedent(
    """
GitHub → Telegram Push Notifier (HTTP Help)

Endpoints
---------
- GET  /                    : Health check
- GET  /help                : This text
- POST /api/webhook/github  : GitHub webhook (push events only)

Environment
-----------
- GITHUB_WEBHOOK_SECRET : secret configured on the GitHub webhook (required)
- TELEGRAM_BOT_TOKEN    : bot used to send alerts
- TELEGRAM_CHAT_ID      : destination chat / group / channel
- TELEGRAM_TOPIC_ID     : optional forum topic id
- LOG_LEVEL, JSON_LOGS  : logging output

Notes
-----
- Requests without a valid X-Hub-Signature-256 are rejected with 401.
- Events other than push are acknowledged with 200 and dropped.
"""
).strip()


@router.get("/", response_model=HealthResponse)
def health() -> HealthResponse:
    """Health check."""
    return HealthResponse()


@router.get("/help", response_class=PlainTextResponse)
def http_help():
    """
    HTTP help endpoint.
    Returns a plaintext cheat sheet of endpoints and settings.
    """
    return HTTP_HELP_TEXT
