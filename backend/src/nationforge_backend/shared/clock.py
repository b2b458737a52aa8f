"""Time sources used to drive lazy resource advancement."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Protocol describing a provider of the current wall-clock time."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""


class SystemClock:
    """Clock backed by the host system time."""

    def now(self) -> datetime:
        return datetime.now(tz=UTC)


class FixedClock:
    """Manually driven clock, useful for deterministic tests and replays."""

    def __init__(self, start: datetime) -> None:
        self._current = _ensure_aware(start)

    def now(self) -> datetime:
        return self._current

    def set(self, moment: datetime) -> None:
        """Move the clock to *moment*."""
        self._current = _ensure_aware(moment)

    def advance(self, delta: timedelta) -> datetime:
        """Move the clock forward by *delta* and return the new time."""
        self._current = self._current + delta
        return self._current


def _ensure_aware(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        msg = "Clock times must be timezone-aware."
        raise ValueError(msg)
    return moment.astimezone(UTC)


__all__ = ["Clock", "FixedClock", "SystemClock"]
