"""Yet another tele services"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol

import httpx
import structlog

from app.schemas import DeliveryResult

logger = structlog.get_logger()

TELEGRAM_API_BASE = "https://api.telegram.org"
HTTP_TIMEOUT_SECONDS = 15
MESSAGE_LIMIT = 4096

JSONDict = dict[str, Any]


class TelegramError(Exception):
    """Telegram rejected a request or could not be reached."""


class DeliveryError(Exception):
    """The notifier reported that a push alert was not delivered."""


class Notifier(Protocol):
    """Anything that can deliver a formatted notification."""

    async def send(self, text: str) -> DeliveryResult:
        ...


def _normalize_newlines(s: str) -> str:
    return (s or "").replace("\r\n", "\n").replace("\r", "\n")


def _split_text(text: str, limit: int = MESSAGE_LIMIT) -> Iterable[str]:
    """Split text chars max 4096"""
    t = text or ""
    while len(t) > limit:
        cut = t.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        yield t[:cut]
        t = t[cut:]
    if t:
        yield t


def _check(resp: httpx.Response) -> JSONDict:
    try:
        data = resp.json()
    except ValueError:
        data = {}
    if resp.status_code >= 300 or not data.get("ok", True):
        raise TelegramError(f"Telegram error: {resp.status_code} {resp.text}")
    return data


async def send_message(
    client: httpx.AsyncClient,
    token: str,
    chat_id: int | str,
    text: str,
    topic_id: Optional[int] = None,
    *,
    parse_mode: str | None = "Markdown",
    disable_web_page_preview: bool = True,
    auto_split: bool = True,
) -> list[JSONDict]:
    """Send a message, one request per chunk when ``auto_split`` is set."""
    api = f"{TELEGRAM_API_BASE}/bot{token}/sendMessage"
    rendered = _normalize_newlines(text)

    payload_base: JSONDict = {
        "chat_id": chat_id,
        "text": rendered,
        "disable_web_page_preview": disable_web_page_preview,
    }
    if parse_mode:
        payload_base["parse_mode"] = parse_mode
    if topic_id is not None:
        payload_base["message_thread_id"] = topic_id

    chunks = list(_split_text(rendered)) if auto_split else [rendered]
    results: list[JSONDict] = []
    for chunk in chunks:
        p = dict(payload_base)
        p["text"] = chunk
        r = await client.post(api, json=p)
        results.append(_check(r))
    return results


class TelegramNotifier:
    """Deliver notifications to a single Telegram chat (optionally a topic)."""

    def __init__(
        self,
        token: str,
        chat_id: int | str,
        topic_id: Optional[int] = None,
        *,
        parse_mode: str | None = "Markdown",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self.chat_id = chat_id
        self.topic_id = topic_id
        self.parse_mode = parse_mode
        self._transport = transport

    async def send(self, text: str) -> DeliveryResult:
        if not self.token or not self.chat_id:
            return DeliveryResult(
                success=False,
                error="Telegram bot token or chat id is not configured",
            )
        try:
            async with httpx.AsyncClient(
                timeout=HTTP_TIMEOUT_SECONDS, transport=self._transport
            ) as client:
                await send_message(
                    client,
                    self.token,
                    self.chat_id,
                    text,
                    topic_id=self.topic_id,
                    parse_mode=self.parse_mode,
                )
        except (TelegramError, httpx.HTTPError) as exc:
            # httpx errors embed the request URL, which carries the token.
            error = str(exc).replace(self.token, "***")
            logger.warning("telegram_send_failed", chat_id=str(self.chat_id), error=error)
            return DeliveryResult(success=False, error=error)
        return DeliveryResult(success=True)


class InMemoryNotifier:
    """Test double that records sent texts for assertions."""

    def __init__(self, result: DeliveryResult | None = None) -> None:
        self.sent: list[str] = []
        self.result = result or DeliveryResult(success=True)

    async def send(self, text: str) -> DeliveryResult:
        self.sent.append(text)
        return self.result
