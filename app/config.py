"""the beautiful world start from here."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from app.utils import parse_bool, parse_topic_id

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """App Settings"""

    github_webhook_secret: str = os.getenv("GITHUB_WEBHOOK_SECRET", "")
    telegram_bot_token: str = os.getenv("TELEGRAM_BOT_TOKEN", "")
    telegram_chat_id: str = os.getenv("TELEGRAM_CHAT_ID", "")
    telegram_topic_id: int | None = parse_topic_id(os.getenv("TELEGRAM_TOPIC_ID", ""))
    telegram_parse_mode: str = os.getenv("TELEGRAM_PARSE_MODE", "Markdown")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    json_logs: bool = parse_bool(os.getenv("JSON_LOGS", "true"))


settings = Settings()
