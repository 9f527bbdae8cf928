"""Ruter GH?"""

from __future__ import annotations

import json

import structlog
from fastapi import APIRouter, Depends, Header, HTTPException, Request
from fastapi.responses import PlainTextResponse

from app.dependencies import get_clock, get_notifier, get_webhook_secret
from app.services.github import format_push_event
from app.services.telegram import DeliveryError, Notifier
from app.timezone import Clock
from app.utils import gh_verify

logger = structlog.get_logger()

router = APIRouter(prefix="/api/webhook", tags=["github"])

PUSH_EVENT = "push"


@router.post("/github", response_class=PlainTextResponse)
async def github_webhook(
    request: Request,
    x_hub_signature_256: str | None = Header(None),
    x_github_event: str | None = Header(None),
    secret: str = Depends(get_webhook_secret),
    notifier: Notifier = Depends(get_notifier),
    clock: Clock = Depends(get_clock),
):
    """
    GitHub webhook endpoint.

    The signature in `X-Hub-Signature-256` is checked against the raw body
    before anything is parsed. Only `push` events are forwarded; every other
    authenticated event is acknowledged and dropped.
    """
    body = await request.body()
    if not gh_verify(body, x_hub_signature_256, secret):
        logger.warning(
            "webhook_rejected",
            event=x_github_event,
            has_signature=bool(x_hub_signature_256),
            secret_configured=bool(secret),
        )
        raise HTTPException(401, "Invalid signature")

    try:
        payload = json.loads(body)
    except ValueError as exc:
        logger.warning("webhook_invalid_json", event=x_github_event, error=str(exc))
        raise HTTPException(500, "Internal Server Error") from exc

    if x_github_event != PUSH_EVENT:
        logger.info("webhook_ignored", event=x_github_event)
        return "Ignored event"

    text = format_push_event(payload, clock=clock)
    result = await notifier.send(text)
    if not result.success:
        raise DeliveryError(result.error or "Failed to send Telegram alert")

    logger.info("push_delivered", chars=len(text))
    return "OK"
