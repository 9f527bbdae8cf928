"""Shared fixtures: fixed clock, recording notifier and an ASGI test client."""

import datetime as dt
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.app import app
from app.dependencies import get_clock, get_notifier, get_webhook_secret
from app.services.telegram import InMemoryNotifier
from app.timezone import Clock

WEBHOOK_SECRET = "test-secret"
FIXED_NOW = dt.datetime(2025, 3, 14, 9, 26, 53, 589793, tzinfo=dt.timezone.utc)


@pytest.fixture
def fixed_clock() -> Clock:
    """Clock frozen at ``FIXED_NOW``."""
    return lambda: FIXED_NOW


@pytest.fixture
def notifier() -> InMemoryNotifier:
    """Fresh notifier that records every delivered text."""
    return InMemoryNotifier()


@pytest.fixture
def webhook_secret() -> str:
    return WEBHOOK_SECRET


@pytest.fixture
async def client(
    notifier: InMemoryNotifier,
    fixed_clock: Clock,
    webhook_secret: str,
) -> AsyncGenerator[AsyncClient, None]:
    """Yield an httpx AsyncClient with secret, notifier and clock overridden."""
    app.dependency_overrides[get_webhook_secret] = lambda: webhook_secret
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
