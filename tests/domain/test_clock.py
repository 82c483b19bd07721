"""Tests for the injectable clocks."""

from datetime import datetime, timedelta, timezone

from payroll_kernel.domain.clock import DeterministicClock, SystemClock


def test_system_clock_is_utc_aware():
    now = SystemClock().now()
    assert now.tzinfo is not None
    assert now.utcoffset() == timedelta(0)


def test_deterministic_clock_is_fixed_until_advanced():
    start = datetime(2026, 1, 31, tzinfo=timezone.utc)
    clock = DeterministicClock(start)
    assert clock.now() == clock.now() == start

    clock.advance(30)
    assert clock.now() == start + timedelta(seconds=30)
    assert clock.tick() == start + timedelta(seconds=31)


def test_deterministic_clock_set_time_resets_offset():
    clock = DeterministicClock()
    clock.advance(100)
    target = datetime(2030, 6, 1, tzinfo=timezone.utc)
    clock.set_time(target)
    assert clock.now() == target
