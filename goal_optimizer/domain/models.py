"""Domain models - pure Python dataclasses representing goals, cash flow and optimization output"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class Goal:
    """Savings goal snapshot supplied by the caller"""

    id: str
    name: str
    target_amount: float
    current_amount: float
    deadline: Optional[date] = None

    @property
    def is_active(self) -> bool:
        return self.current_amount < self.target_amount


@dataclass(frozen=True)
class Transaction:
    """Classified transaction from the transactions API"""

    transaction_id: str
    date: date
    amount: float
    type: str  # "credit" (income) or "debit" (expense)
    description: str = ""
    category: str = ""


@dataclass(frozen=True)
class CashFlowSummary:
    """Income and expenses over the trailing window"""

    monthly_income: float
    monthly_expenses: float

    @property
    def disposable_income(self) -> float:
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class ScoredGoal:
    """Active goal annotated with its priority factors"""

    goal: Goal
    remaining_amount: float
    days_until_deadline: int
    urgency_score: float
    completion_score: float
    size_score: float
    priority_score: float


@dataclass(frozen=True)
class GoalShare:
    """Monthly contribution assigned to a scored goal"""

    scored_goal: ScoredGoal
    suggested_monthly_amount: float
    suggested_weekly_amount: float
    pace_cap: float


@dataclass(frozen=True)
class CompletionProjection:
    """Projected finish date; None means the goal never completes at this pace"""

    estimated_completion_date: Optional[date]
    months_to_complete: Optional[float]
    on_track: bool


@dataclass(frozen=True)
class Allocation:
    """Per-goal allocation returned to the caller"""

    goal_id: str
    goal_name: str
    current_amount: float
    target_amount: float
    remaining_amount: float
    suggested_monthly_amount: float
    suggested_weekly_amount: float
    estimated_completion_date: Optional[date]
    months_to_complete: Optional[float]
    priority_score: float
    pace_cap: float
    deadline: Optional[date]
    on_track: bool


class RecommendationType(str, Enum):
    CONSOLIDATE = "consolidate"
    URGENCY = "urgency"
    UNDERUTILIZED = "underutilized"
    DIVERSIFY = "diversify"
    NO_CAPACITY = "no_capacity"


class RecommendationPriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Recommendation:
    """Advisory note derived from the allocation set"""

    type: RecommendationType
    priority: RecommendationPriority
    title: str
    description: str
    action: str
    impact: str


@dataclass(frozen=True)
class OptimizationSummary:
    """Aggregate figures for a single optimization run"""

    total_goals: int
    monthly_disposable: float
    total_monthly_allocation: float
    average_completion_months: float
    budget: float
    utilization_rate: float


@dataclass(frozen=True)
class OptimizationReport:
    """Output of optimize()"""

    allocations: List[Allocation]
    recommendations: List[Recommendation]
    summary: OptimizationSummary
    message: Optional[str] = None
    as_of: Optional[date] = None
