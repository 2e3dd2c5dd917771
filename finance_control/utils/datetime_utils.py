from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_naive() -> datetime:
    """Current UTC time without tzinfo, matching the naive DateTime columns."""
    return utc_now().replace(tzinfo=None)


def iso_utc_now() -> str:
    return utc_now().isoformat().replace("+00:00", "Z")


def as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)
