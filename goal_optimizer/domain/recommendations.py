"""Recommendation generator - advisory checks over an allocation set"""

from typing import List, Optional
from goal_optimizer.domain.models import (
    Allocation,
    Recommendation,
    RecommendationType,
    RecommendationPriority,
)
from goal_optimizer.domain.policy import AllocationPolicy, DEFAULT_POLICY


def total_allocated(allocations: List[Allocation]) -> float:
    return sum(a.suggested_monthly_amount for a in allocations)


def calculate_utilization_rate(allocations: List[Allocation], budget: float) -> float:
    """Share of the goal budget actually assigned (0.0 when there is no budget)"""
    if budget <= 0:
        return 0.0
    return total_allocated(allocations) / budget


def consolidate_small_goals(
    allocations: List[Allocation], policy: AllocationPolicy = DEFAULT_POLICY
) -> Optional[Recommendation]:
    small_goals = [a for a in allocations if a.remaining_amount < policy.small_goal_threshold]
    if len(small_goals) < policy.min_small_goals:
        return None

    return Recommendation(
        type=RecommendationType.CONSOLIDATE,
        priority=RecommendationPriority.HIGH,
        title="Consolidate Small Goals",
        description=f"Focus on completing {len(small_goals)} small goals first to build momentum",
        action="Increase allocation to small goals temporarily",
        impact="Reduce cognitive load and achieve quick wins",
    )


def flag_off_track_goals(allocations: List[Allocation]) -> Optional[Recommendation]:
    off_track = [a for a in allocations if not a.on_track]
    if not off_track:
        return None

    return Recommendation(
        type=RecommendationType.URGENCY,
        priority=RecommendationPriority.CRITICAL,
        title="Urgent Goals Need Attention",
        description=f"{len(off_track)} goal(s) won't meet deadline at current pace",
        action="Increase monthly allocation or extend deadline",
        impact="Avoid missing important financial targets",
    )


def check_underutilized_budget(
    allocations: List[Allocation],
    budget: float,
    policy: AllocationPolicy = DEFAULT_POLICY,
) -> Optional[Recommendation]:
    """Fires when less than 70% of a positive budget is assigned"""
    if budget <= 0:
        return None

    utilization_rate = calculate_utilization_rate(allocations, budget)
    if utilization_rate >= policy.underutilized_threshold:
        return None

    headroom = budget - total_allocated(allocations)
    return Recommendation(
        type=RecommendationType.UNDERUTILIZED,
        priority=RecommendationPriority.MEDIUM,
        title="Increase Savings Rate",
        description=f"You're only allocating {round(utilization_rate * 100)}% of available savings capacity",
        action=f"Add ${headroom:.2f}/month to goals",
        impact="Accelerate goal completion by 20-30%",
    )


def check_no_capacity(allocations: List[Allocation], budget: float) -> Optional[Recommendation]:
    """Active goals but nothing to allocate: expenses meet or exceed income"""
    if budget > 0 or not allocations:
        return None

    return Recommendation(
        type=RecommendationType.NO_CAPACITY,
        priority=RecommendationPriority.HIGH,
        title="No Savings Capacity",
        description=f"Expenses currently match or exceed income, so none of your {len(allocations)} goal(s) can be funded",
        action="Reduce monthly expenses or add income before committing to goals",
        impact="Restore progress toward every active goal",
    )


def suggest_diversification(
    allocations: List[Allocation], policy: AllocationPolicy = DEFAULT_POLICY
) -> Optional[Recommendation]:
    if len(allocations) >= policy.min_goal_count:
        return None

    return Recommendation(
        type=RecommendationType.DIVERSIFY,
        priority=RecommendationPriority.LOW,
        title="Diversify Your Goals",
        description="Consider adding different goal types (emergency fund, vacation, etc.)",
        action="Create 1-2 additional goals in different categories",
        impact="Build a more balanced financial foundation",
    )


def generate_recommendations(
    allocations: List[Allocation],
    budget: float,
    policy: AllocationPolicy = DEFAULT_POLICY,
) -> List[Recommendation]:
    """
    Run every check independently; several may fire at once.

    Order: consolidate, urgency, underutilized / no capacity, diversify.
    An empty allocation set yields no recommendations.
    """
    if not allocations:
        return []

    candidates = [
        consolidate_small_goals(allocations, policy),
        flag_off_track_goals(allocations),
        check_underutilized_budget(allocations, budget, policy),
        check_no_capacity(allocations, budget),
        suggest_diversification(allocations, policy),
    ]
    return [r for r in candidates if r is not None]
