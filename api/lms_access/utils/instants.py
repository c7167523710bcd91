"""Helpers for timezone-aware instants."""

from datetime import UTC, datetime


def ensure_utc_aware(dt: datetime | None) -> datetime | None:
    """Ensure datetime is timezone-aware, assuming UTC for naive values."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def format_instant(dt: datetime) -> str:
    """Render an instant as ISO 8601 for response payloads."""
    return dt.isoformat()
