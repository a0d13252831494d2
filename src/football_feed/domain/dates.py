from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Any


def utc_today() -> date:
    return datetime.now(UTC).date()


def utc_now() -> datetime:
    return datetime.now(UTC)


def fixture_window(today: date, days: int) -> tuple[str, str]:
    """Return the (dateFrom, dateTo) pair, as YYYY-MM-DD, for [today - days, today + days]."""

    date_from = today - timedelta(days=days)
    date_to = today + timedelta(days=days)
    return date_from.isoformat(), date_to.isoformat()


def season_label(year: int) -> str:
    """Season string used by the secondary standings provider, e.g. 2026 -> "2025/2026"."""

    return f"{year - 1}/{year}"


def parse_utc_datetime(value: Any) -> datetime:
    """
    Parse a provider ISO timestamp into a tz-aware UTC datetime.

    Supports "2025-09-07T20:20:00Z" and explicit offsets; naive values are treated as UTC.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing/invalid timestamp: {value!r}")

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    dt = datetime.fromisoformat(v)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
