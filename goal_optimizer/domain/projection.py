"""Completion projection for allocated goals"""

import math
from datetime import date
from typing import Optional
from goal_optimizer.domain.models import CompletionProjection, GoalShare, Allocation
from goal_optimizer.utils.date_utils import add_months


def project_completion(
    remaining_amount: float,
    suggested_monthly_amount: float,
    as_of: date,
    deadline: Optional[date] = None,
) -> CompletionProjection:
    """
    Estimate when a goal finishes at its suggested monthly pace.

    - No contribution, or a finish date beyond the calendar: never
      completes (date None); on track only when there is no deadline
    - Otherwise: as_of + ceil(remaining / monthly) calendar months,
      on track if there is no deadline or the estimate lands on/before it
    """
    if remaining_amount <= 0:
        return CompletionProjection(estimated_completion_date=as_of, months_to_complete=0.0, on_track=True)

    never = CompletionProjection(estimated_completion_date=None, months_to_complete=None, on_track=deadline is None)

    if suggested_monthly_amount <= 0:
        return never

    months_to_complete = remaining_amount / suggested_monthly_amount
    if not math.isfinite(months_to_complete):
        return never

    try:
        estimated = add_months(as_of, math.ceil(months_to_complete))
    except (ValueError, OverflowError):
        # Past date.max
        return never

    on_track = deadline is None or estimated <= deadline

    return CompletionProjection(
        estimated_completion_date=estimated,
        months_to_complete=months_to_complete,
        on_track=on_track,
    )


def build_allocation(share: GoalShare, as_of: date) -> Allocation:
    """Attach a completion projection to a goal share"""
    scored = share.scored_goal
    goal = scored.goal
    projection = project_completion(
        scored.remaining_amount,
        share.suggested_monthly_amount,
        as_of,
        goal.deadline,
    )

    return Allocation(
        goal_id=goal.id,
        goal_name=goal.name,
        current_amount=goal.current_amount,
        target_amount=goal.target_amount,
        remaining_amount=scored.remaining_amount,
        suggested_monthly_amount=share.suggested_monthly_amount,
        suggested_weekly_amount=share.suggested_weekly_amount,
        estimated_completion_date=projection.estimated_completion_date,
        months_to_complete=projection.months_to_complete,
        priority_score=scored.priority_score,
        pace_cap=share.pace_cap,
        deadline=goal.deadline,
        on_track=projection.on_track,
    )
