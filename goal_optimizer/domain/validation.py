"""Boundary validation for optimizer inputs"""

import math
from typing import List
from goal_optimizer.domain.models import Goal, Transaction, CashFlowSummary
from goal_optimizer.domain.exceptions import InvalidGoalError, InvalidTransactionDataError

TRANSACTION_TYPES = ("credit", "debit")


def validate_goals(goals: List[Goal]) -> None:
    """
    Reject malformed goal snapshots before scoring.

    Goals with current_amount >= target_amount are complete, not malformed,
    and are filtered out later by the scorer.
    """
    seen_ids = set()
    for goal in goals:
        if not goal.id or not str(goal.id).strip():
            raise InvalidGoalError("Goal id is required")
        if goal.id in seen_ids:
            raise InvalidGoalError(f"Duplicate goal id: {goal.id}")
        seen_ids.add(goal.id)

        if goal.target_amount is None or not math.isfinite(goal.target_amount) or goal.target_amount <= 0:
            raise InvalidGoalError(f"Goal {goal.id}: target_amount must be a finite, positive number")
        if goal.current_amount is None or not math.isfinite(goal.current_amount) or goal.current_amount < 0:
            raise InvalidGoalError(f"Goal {goal.id}: current_amount must be a finite, non-negative number")


def validate_cash_flow(cash_flow: CashFlowSummary) -> None:
    """Income and expenses are finite magnitudes; only their difference may be negative"""
    if not (math.isfinite(cash_flow.monthly_income) and math.isfinite(cash_flow.monthly_expenses)):
        raise InvalidTransactionDataError("monthly_income and monthly_expenses must be finite")
    if cash_flow.monthly_income < 0 or cash_flow.monthly_expenses < 0:
        raise InvalidTransactionDataError("monthly_income and monthly_expenses must be non-negative")


def validate_transactions(transactions: List[Transaction]) -> None:
    for txn in transactions:
        if txn.type not in TRANSACTION_TYPES:
            raise InvalidTransactionDataError(
                f"Transaction {txn.transaction_id}: unknown type {txn.type!r}"
            )
        if not math.isfinite(txn.amount) or txn.amount < 0:
            raise InvalidTransactionDataError(
                f"Transaction {txn.transaction_id}: amount must be a finite, non-negative magnitude"
            )
