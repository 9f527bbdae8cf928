"""Clock helpers."""

from __future__ import annotations

import datetime as dt
from typing import Callable

Clock = Callable[[], dt.datetime]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> dt.datetime:
    """Current timezone-aware datetime in UTC."""

    return dt.datetime.now(dt.timezone.utc)


def format_utc(moment: dt.datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DD HH:MM:SS UTC``.

    Naive datetimes are taken to already be in UTC.
    """

    if moment.tzinfo is not None:
        moment = moment.astimezone(dt.timezone.utc)
    return f"{moment.strftime(TIMESTAMP_FORMAT)} UTC"
