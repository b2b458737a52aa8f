"""Tests for clock implementations."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from nationforge_backend.shared import FixedClock, SystemClock


def test_fixed_clock_moves_only_when_told() -> None:
    start = datetime(2024, 1, 1, tzinfo=UTC)
    clock = FixedClock(start)

    assert clock.now() == start
    assert clock.advance(timedelta(hours=2)) == start + timedelta(hours=2)
    clock.set(datetime(2024, 1, 1, 5, tzinfo=timezone(timedelta(hours=2))))
    assert clock.now() == datetime(2024, 1, 1, 3, tzinfo=UTC)
    assert clock.now().tzinfo is UTC


def test_fixed_clock_rejects_naive_times() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        FixedClock(datetime(2024, 1, 1))  # noqa: DTZ001


def test_system_clock_is_timezone_aware() -> None:
    assert SystemClock().now().tzinfo is not None
