"""Tests for the health and help endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_help_lists_webhook_endpoint(client: AsyncClient) -> None:
    response = await client.get("/help")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "POST /api/webhook/github" in response.text
    assert "GITHUB_WEBHOOK_SECRET" in response.text
