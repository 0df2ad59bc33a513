"""Optimizer entry point - scoring, allocation, projection and recommendations in one pass"""

from datetime import date
from typing import List, Optional
from goal_optimizer.domain.models import (
    Goal,
    CashFlowSummary,
    Allocation,
    OptimizationReport,
    OptimizationSummary,
)
from goal_optimizer.domain.policy import AllocationPolicy, DEFAULT_POLICY
from goal_optimizer.domain.scoring import score_goals
from goal_optimizer.domain.allocation import distribute, calculate_budget
from goal_optimizer.domain.projection import build_allocation
from goal_optimizer.domain.recommendations import (
    generate_recommendations,
    calculate_utilization_rate,
    total_allocated,
)
from goal_optimizer.domain.validation import validate_goals, validate_cash_flow

NO_ACTIVE_GOALS_MESSAGE = "No active goals to optimize"


def calculate_average_completion(allocations: List[Allocation]) -> float:
    """Mean months to completion over goals that will finish (0.0 if none will)"""
    months = [a.months_to_complete for a in allocations if a.months_to_complete is not None]
    if not months:
        return 0.0
    return sum(months) / len(months)


def optimize(
    goals: List[Goal],
    cash_flow: CashFlowSummary,
    as_of: Optional[date] = None,
    policy: AllocationPolicy = DEFAULT_POLICY,
) -> OptimizationReport:
    """
    Main entry point: turn a goal snapshot and cash flow into an allocation report.

    Pure function of its inputs; pass as_of for reproducible results.

    Raises:
        InvalidGoalError: malformed goal snapshot
        InvalidTransactionDataError: negative income or expense figures
    """
    validate_goals(goals)
    validate_cash_flow(cash_flow)

    if as_of is None:
        as_of = date.today()

    disposable = cash_flow.disposable_income
    budget = calculate_budget(disposable, policy)

    ranked = score_goals(goals, as_of, policy)
    if not ranked:
        return OptimizationReport(
            allocations=[],
            recommendations=[],
            summary=OptimizationSummary(
                total_goals=0,
                monthly_disposable=disposable,
                total_monthly_allocation=0.0,
                average_completion_months=0.0,
                budget=budget,
                utilization_rate=0.0,
            ),
            message=NO_ACTIVE_GOALS_MESSAGE,
            as_of=as_of,
        )

    shares = distribute(ranked, disposable, policy)
    allocations = [build_allocation(share, as_of) for share in shares]
    recommendations = generate_recommendations(allocations, budget, policy)

    summary = OptimizationSummary(
        total_goals=len(allocations),
        monthly_disposable=disposable,
        total_monthly_allocation=total_allocated(allocations),
        average_completion_months=calculate_average_completion(allocations),
        budget=budget,
        utilization_rate=calculate_utilization_rate(allocations, budget),
    )

    return OptimizationReport(
        allocations=allocations,
        recommendations=recommendations,
        summary=summary,
        as_of=as_of,
    )
