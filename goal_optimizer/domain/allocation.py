"""Allocation distributor - splits the goal budget across ranked goals"""

from typing import List
from goal_optimizer.domain.models import ScoredGoal, GoalShare
from goal_optimizer.domain.policy import AllocationPolicy, DEFAULT_POLICY


def calculate_budget(disposable_income: float, policy: AllocationPolicy = DEFAULT_POLICY) -> float:
    """Portion of disposable income earmarked for goals; never negative"""
    return max(0.0, disposable_income) * policy.budget_ratio


def calculate_pace_cap(scored_goal: ScoredGoal, policy: AllocationPolicy = DEFAULT_POLICY) -> float:
    """Monthly amount that finishes the goal exactly at its own deadline"""
    periods = scored_goal.days_until_deadline / policy.days_per_period
    return scored_goal.remaining_amount / periods


def distribute(
    ranked_goals: List[ScoredGoal],
    disposable_income: float,
    policy: AllocationPolicy = DEFAULT_POLICY,
) -> List[GoalShare]:
    """
    Greedy, priority-ordered, capped proportional allocation.

    Goals are served in the given order (highest priority first) out of a
    shared pool:
    - ratio = priority_score / total_priority (equal share if total is 0)
    - suggested = min(remaining_budget * ratio, pace_cap)
    - remaining_budget shrinks by suggested before the next goal

    Guarantees:
    - sum(suggested) <= budget
    - suggested <= pace_cap for every goal
    """
    if not ranked_goals:
        return []

    budget = calculate_budget(disposable_income, policy)
    total_priority = sum(g.priority_score for g in ranked_goals)
    equal_share = 1 / len(ranked_goals)

    remaining_budget = budget
    shares = []
    for scored_goal in ranked_goals:
        if total_priority > 0:
            allocation_ratio = scored_goal.priority_score / total_priority
        else:
            allocation_ratio = equal_share

        pace_cap = calculate_pace_cap(scored_goal, policy)
        suggested_monthly = max(0.0, min(remaining_budget * allocation_ratio, pace_cap))

        shares.append(
            GoalShare(
                scored_goal=scored_goal,
                suggested_monthly_amount=suggested_monthly,
                suggested_weekly_amount=suggested_monthly / policy.weeks_per_month,
                pace_cap=pace_cap,
            )
        )
        remaining_budget -= suggested_monthly

    return shares
