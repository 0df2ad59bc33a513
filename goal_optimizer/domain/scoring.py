"""Goal scoring engine - ranks active goals by urgency, completion and size"""

from datetime import date
from typing import List
from goal_optimizer.domain.models import Goal, ScoredGoal
from goal_optimizer.domain.policy import AllocationPolicy, DEFAULT_POLICY
from goal_optimizer.utils.date_utils import days_between


def active_goals(goals: List[Goal]) -> List[Goal]:
    """Goals still short of their target, in input order"""
    return [g for g in goals if g.is_active]


def days_until_deadline(goal: Goal, as_of: date, policy: AllocationPolicy = DEFAULT_POLICY) -> int:
    """
    Horizon in days used for urgency and pace.

    - No deadline: policy default horizon (365 days)
    - Overdue or due today: clamped to 1 day, i.e. maximally urgent
    """
    if goal.deadline is None:
        return policy.default_horizon_days
    return max(1, days_between(as_of, goal.deadline))


def calculate_urgency_score(days: int, policy: AllocationPolicy = DEFAULT_POLICY) -> float:
    """Inverse of the number of 30-day periods left"""
    return 1 / (days / policy.days_per_period)


def calculate_completion_score(goal: Goal) -> float:
    return goal.current_amount / goal.target_amount


def calculate_size_score(remaining_amount: float, policy: AllocationPolicy = DEFAULT_POLICY) -> float:
    """Smaller remaining amounts score higher (quick wins)"""
    return 1 / (remaining_amount / policy.size_scale)


def score_goal(goal: Goal, as_of: date, policy: AllocationPolicy = DEFAULT_POLICY) -> ScoredGoal:
    """Score a single active goal"""
    remaining = goal.target_amount - goal.current_amount
    days = days_until_deadline(goal, as_of, policy)

    urgency_score = calculate_urgency_score(days, policy)
    completion_score = calculate_completion_score(goal)
    size_score = calculate_size_score(remaining, policy)

    priority_score = (
        (policy.urgency_weight * urgency_score)
        + (policy.completion_weight * completion_score)
        + (policy.size_weight * size_score)
    )

    return ScoredGoal(
        goal=goal,
        remaining_amount=remaining,
        days_until_deadline=days,
        urgency_score=urgency_score,
        completion_score=completion_score,
        size_score=size_score,
        priority_score=priority_score,
    )


def score_goals(goals: List[Goal], as_of: date, policy: AllocationPolicy = DEFAULT_POLICY) -> List[ScoredGoal]:
    """
    Score every active goal and rank them by priority, highest first.

    Completed goals are dropped. sorted() is stable, so goals with equal
    priority keep their input order.
    """
    scored = [score_goal(g, as_of, policy) for g in active_goals(goals)]
    return sorted(scored, key=lambda s: s.priority_score, reverse=True)
