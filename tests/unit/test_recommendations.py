"""Unit tests for recommendation rules against synthetic allocation sets"""

import pytest
from datetime import date
from typing import Optional
from goal_optimizer.domain.models import Allocation, RecommendationType, RecommendationPriority
from goal_optimizer.domain.policy import AllocationPolicy
from goal_optimizer.domain.recommendations import (
    calculate_utilization_rate,
    consolidate_small_goals,
    flag_off_track_goals,
    check_underutilized_budget,
    check_no_capacity,
    suggest_diversification,
    generate_recommendations,
)


def _allocation(
    goal_id: str,
    remaining: float = 1000.0,
    monthly: float = 100.0,
    on_track: bool = True,
    deadline: Optional[date] = None,
) -> Allocation:
    return Allocation(
        goal_id=goal_id,
        goal_name=goal_id.title(),
        current_amount=0.0,
        target_amount=remaining,
        remaining_amount=remaining,
        suggested_monthly_amount=monthly,
        suggested_weekly_amount=monthly / 4,
        estimated_completion_date=date(2026, 1, 1) if monthly > 0 else None,
        months_to_complete=remaining / monthly if monthly > 0 else None,
        priority_score=1.0,
        pace_cap=remaining,
        deadline=deadline,
        on_track=on_track,
    )


def test_calculate_utilization_rate():
    allocations = [_allocation("a", monthly=300.0), _allocation("b", monthly=300.0)]

    assert calculate_utilization_rate(allocations, 1200.0) == pytest.approx(0.5)
    assert calculate_utilization_rate(allocations, 0.0) == 0.0


def test_consolidate_fires_for_two_small_goals():
    """Test two goals under $500 remaining trigger consolidation"""
    allocations = [
        _allocation("gift", remaining=200.0),
        _allocation("concert", remaining=499.99),
        _allocation("car", remaining=8000.0),
    ]

    recommendation = consolidate_small_goals(allocations)

    assert recommendation is not None
    assert recommendation.type is RecommendationType.CONSOLIDATE
    assert recommendation.priority is RecommendationPriority.HIGH
    assert "2 small goals" in recommendation.description


def test_consolidate_needs_at_least_two():
    """Test one small goal, or one exactly at the threshold, does not fire"""
    allocations = [_allocation("gift", remaining=200.0), _allocation("even", remaining=500.0)]
    assert consolidate_small_goals(allocations) is None


def test_consolidate_threshold_from_policy():
    allocations = [_allocation("a", remaining=800.0), _allocation("b", remaining=900.0)]
    assert consolidate_small_goals(allocations, AllocationPolicy(small_goal_threshold=1000.0)) is not None


def test_urgency_fires_for_off_track_goal():
    """Test any off-track goal raises a critical recommendation"""
    allocations = [_allocation("a"), _allocation("b", on_track=False), _allocation("c", on_track=False)]

    recommendation = flag_off_track_goals(allocations)

    assert recommendation.type is RecommendationType.URGENCY
    assert recommendation.priority is RecommendationPriority.CRITICAL
    assert recommendation.description.startswith("2 goal(s)")


def test_urgency_silent_when_all_on_track():
    assert flag_off_track_goals([_allocation("a"), _allocation("b")]) is None


def test_underutilized_fires_below_seventy_percent():
    """Test utilization under 0.7 suggests adding the unused headroom"""
    allocations = [_allocation("a", monthly=500.0)]

    recommendation = check_underutilized_budget(allocations, budget=1000.0)

    assert recommendation.type is RecommendationType.UNDERUTILIZED
    assert recommendation.priority is RecommendationPriority.MEDIUM
    assert "50%" in recommendation.description
    assert recommendation.action == "Add $500.00/month to goals"


def test_underutilized_silent_at_threshold_and_zero_budget():
    assert check_underutilized_budget([_allocation("a", monthly=700.0)], budget=1000.0) is None
    assert check_underutilized_budget([_allocation("a", monthly=0.0)], budget=0.0) is None


def test_no_capacity_fires_for_zero_budget():
    """Test zero budget with active goals is surfaced rather than ignored"""
    allocations = [_allocation("a", monthly=0.0, on_track=False)]

    recommendation = check_no_capacity(allocations, budget=0.0)

    assert recommendation.type is RecommendationType.NO_CAPACITY
    assert recommendation.priority is RecommendationPriority.HIGH
    assert check_no_capacity(allocations, budget=100.0) is None
    assert check_no_capacity([], budget=0.0) is None


def test_diversify_fires_below_three_goals():
    recommendation = suggest_diversification([_allocation("a"), _allocation("b")])

    assert recommendation.type is RecommendationType.DIVERSIFY
    assert recommendation.priority is RecommendationPriority.LOW
    assert suggest_diversification([_allocation("a"), _allocation("b"), _allocation("c")]) is None


def test_generate_recommendations_multiple_fire():
    """Test rules are independent and can fire together, in a fixed order"""
    allocations = [
        _allocation("gift", remaining=100.0, monthly=50.0),
        _allocation("concert", remaining=300.0, monthly=50.0, on_track=False),
    ]

    recommendations = generate_recommendations(allocations, budget=1000.0)

    assert [r.type for r in recommendations] == [
        RecommendationType.CONSOLIDATE,
        RecommendationType.URGENCY,
        RecommendationType.UNDERUTILIZED,
        RecommendationType.DIVERSIFY,
    ]


def test_generate_recommendations_empty_allocations():
    assert generate_recommendations([], budget=1000.0) == []
