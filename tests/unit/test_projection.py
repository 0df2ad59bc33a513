"""Unit tests for completion projection"""

import pytest
from datetime import date
from goal_optimizer.domain.projection import project_completion
from goal_optimizer.utils.date_utils import add_months, days_between


def test_add_months_clamps_to_month_end():
    """Test calendar month arithmetic"""
    assert add_months(date(2025, 1, 15), 3) == date(2025, 4, 15)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2025, 11, 30), 3) == date(2026, 2, 28)


def test_days_between():
    assert days_between(date(2025, 1, 1), date(2025, 1, 31)) == 30
    assert days_between(date(2025, 1, 31), date(2025, 1, 1)) == -30


def test_project_completion_rounds_months_up():
    """Test 2.5 months of contributions projects three months out"""
    projection = project_completion(1000.0, 400.0, date(2025, 1, 15))

    assert projection.months_to_complete == pytest.approx(2.5)
    assert projection.estimated_completion_date == date(2025, 4, 15)
    assert projection.on_track is True  # No deadline


def test_project_completion_on_deadline_is_on_track():
    """Test finishing exactly on the deadline counts as on track"""
    as_of = date(2025, 1, 15)

    on_time = project_completion(1000.0, 500.0, as_of, deadline=date(2025, 3, 15))
    late = project_completion(1000.0, 500.0, as_of, deadline=date(2025, 3, 14))

    assert on_time.estimated_completion_date == date(2025, 3, 15)
    assert on_time.on_track is True
    assert late.on_track is False


def test_project_completion_zero_contribution_never_completes():
    """Test zero monthly amount yields the never sentinel"""
    as_of = date(2025, 1, 15)

    with_deadline = project_completion(1000.0, 0.0, as_of, deadline=date(2025, 12, 31))
    without_deadline = project_completion(1000.0, 0.0, as_of)

    for projection in (with_deadline, without_deadline):
        assert projection.estimated_completion_date is None
        assert projection.months_to_complete is None

    # Only a goal with a deadline can miss it
    assert with_deadline.on_track is False
    assert without_deadline.on_track is True


def test_project_completion_beyond_calendar_never_completes():
    """Test a finish date past date.max is reported as never instead of raising"""
    as_of = date(2025, 1, 15)

    # $100k at $0.60/month is ~166,667 months, past year 9999
    with_deadline = project_completion(100000.0, 0.6, as_of, deadline=date(2030, 1, 1))
    without_deadline = project_completion(100000.0, 0.6, as_of)

    for projection in (with_deadline, without_deadline):
        assert projection.estimated_completion_date is None
        assert projection.months_to_complete is None
    assert with_deadline.on_track is False
    assert without_deadline.on_track is True


def test_project_completion_non_finite_months():
    """Test an infinite remaining amount or a subnormal contribution does not overflow"""
    as_of = date(2025, 1, 15)

    assert project_completion(float("inf"), 100.0, as_of).estimated_completion_date is None
    assert project_completion(1000.0, 5e-324, as_of).estimated_completion_date is None


def test_project_completion_nothing_remaining():
    """Test a goal with nothing left is complete as of today"""
    as_of = date(2025, 1, 15)
    projection = project_completion(0.0, 0.0, as_of, deadline=date(2024, 12, 31))

    assert projection.estimated_completion_date == as_of
    assert projection.on_track is True
