"""Cash-flow summarizer - reduces recent transactions to monthly income and expenses"""

from datetime import date
from typing import List
from goal_optimizer.domain.models import Transaction, CashFlowSummary
from goal_optimizer.domain.policy import DEFAULT_POLICY
from goal_optimizer.utils.date_utils import days_between


def summarize_cash_flow(
    transactions: List[Transaction],
    as_of: date,
    window_days: int = DEFAULT_POLICY.cash_flow_window_days,
) -> CashFlowSummary:
    """
    Sum income and expense magnitudes over the trailing window ending at as_of.

    Convention:
    - type "credit" = income inflow, type "debit" = expense outflow
    - amount is always a magnitude; abs() guards against signed feeds
    - Transactions dated after as_of are not part of the window
    """
    recent = [
        t for t in transactions
        if 0 <= days_between(t.date, as_of) <= window_days
    ]

    monthly_income = sum(abs(t.amount) for t in recent if t.type == "credit")
    monthly_expenses = sum(abs(t.amount) for t in recent if t.type == "debit")

    return CashFlowSummary(
        monthly_income=float(monthly_income),
        monthly_expenses=float(monthly_expenses),
    )
