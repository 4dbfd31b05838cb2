"""Column helpers shared by the table models."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timestamp default with microsecond resolution, so creation order is stable."""
    return datetime.now(timezone.utc)
