"""Centralized FastAPI dependencies for use with Depends()."""

from __future__ import annotations

from app.config import settings
from app.services.telegram import Notifier, TelegramNotifier
from app.timezone import Clock, utc_now

_notifier: Notifier = TelegramNotifier(
    settings.telegram_bot_token,
    settings.telegram_chat_id,
    settings.telegram_topic_id,
    parse_mode=settings.telegram_parse_mode,
)


def get_webhook_secret() -> str:
    """Shared secret GitHub signs webhook bodies with (may be empty)."""
    return settings.github_webhook_secret


def get_notifier() -> Notifier:
    """Return the notifier push alerts are delivered through."""
    return _notifier


def get_clock() -> Clock:
    return utc_now


__all__ = ["get_clock", "get_notifier", "get_webhook_secret"]
