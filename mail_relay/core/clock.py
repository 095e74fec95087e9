"""Time helpers shared by the renderer and the HTTP responses."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def local_now() -> datetime:
    return datetime.now().astimezone()


def utc_timestamp(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-05T14:03:07.123Z``."""

    value = moment or datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def snapshot_date(moment: datetime) -> str:
    """Format ``moment`` as ``Jan 5, 2025``."""

    return f"{_MONTHS[moment.month - 1]} {moment.day}, {moment.year}"


__all__ = ["Clock", "local_now", "utc_timestamp", "snapshot_date"]
