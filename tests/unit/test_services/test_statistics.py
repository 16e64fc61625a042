"""Tests for month-over-month statistics helpers."""

import pytest
from datetime import datetime, timedelta, timezone
from estate_admin.services.statistics import (
    build_stats,
    count_between,
    created_window_stats,
    percentage_change,
    round_half_up,
    window_bounds,
)

NOW = datetime(2024, 12, 9, 12, tzinfo=timezone.utc)


@pytest.mark.unit
def test_window_bounds_are_rolling():
    current_start, previous_start = window_bounds(NOW)

    assert current_start == NOW - timedelta(days=30)
    assert previous_start == NOW - timedelta(days=60)


@pytest.mark.unit
def test_count_between_half_open():
    """Test that the start bound is inclusive and the end bound exclusive."""
    start = NOW - timedelta(days=30)
    timestamps = [start, NOW, start - timedelta(seconds=1), None]

    assert count_between(timestamps, start=start) == 2
    assert count_between(timestamps, end=start) == 1
    assert count_between(timestamps, start=start, end=NOW) == 1


@pytest.mark.unit
def test_percentage_change_zero_previous():
    assert percentage_change(0, 0) == 100
    assert percentage_change(5, 0) == 100


@pytest.mark.unit
def test_percentage_change_signed():
    assert percentage_change(3, 2) == pytest.approx(50)
    assert percentage_change(1, 2) == pytest.approx(-50)


@pytest.mark.unit
def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-66.67) == -67
    assert round_half_up(-2.5) == -2


@pytest.mark.unit
def test_build_stats_magnitude_and_direction():
    """Test that monthly_change is a magnitude and the sign moves to is_positive."""
    stats = build_stats(total=10, current=1, previous=3)

    assert stats.total == 10
    assert stats.monthly_change == 67
    assert stats.is_positive is False


@pytest.mark.unit
def test_build_stats_no_change_is_positive():
    stats = build_stats(total=4, current=2, previous=2)

    assert stats.monthly_change == 0
    assert stats.is_positive is True


@pytest.mark.unit
def test_created_window_stats():
    timestamps = [
        NOW - timedelta(days=40),
        NOW - timedelta(days=45),
        NOW - timedelta(days=1),
        NOW - timedelta(days=400),
    ]

    stats = created_window_stats(timestamps, now=NOW)

    assert stats.total == 4
    assert stats.monthly_change == 50
    assert stats.is_positive is False
