"""Time utilities."""
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    """Return current UTC time with timezone awareness."""

    return datetime.now(tz=UTC)


def not_before(value: datetime, floor: datetime) -> datetime:
    """Return ``value`` unless the clock stepped back past ``floor``."""

    return value if value >= floor else floor


__all__ = ["Clock", "utcnow", "not_before"]
