"""API Schemas"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class DeliveryResult(BaseModel):
    """
    Outcome of handing a notification to the chat platform.
    ``error`` is only set when ``success`` is False.
    """

    success: bool
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check body."""

    status: str = "ok"
