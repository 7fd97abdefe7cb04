# app/core/clock.py
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current time, injected into handlers so tests can pin it."""
    return datetime.now(timezone.utc)
