"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, model_validator

from goal_optimizer.domain.models import (
    Goal,
    Transaction,
    CashFlowSummary,
    Allocation,
    Recommendation,
    OptimizationSummary,
)


class GoalSchema(BaseModel):
    """Goal snapshot supplied by the caller"""

    id: str = Field(..., min_length=1, description="Goal identifier, unique per user")
    name: str = Field("", description="Display label")
    target_amount: float = Field(..., gt=0, allow_inf_nan=False, description="Amount needed to complete the goal")
    current_amount: float = Field(0.0, ge=0, allow_inf_nan=False, description="Amount saved so far")
    deadline: Optional[date] = None

    def to_domain(self) -> Goal:
        return Goal(
            id=self.id,
            name=self.name,
            target_amount=self.target_amount,
            current_amount=self.current_amount,
            deadline=self.deadline,
        )


class TransactionSchema(BaseModel):
    """Classified transaction; amount is a magnitude"""

    transaction_id: str = Field(..., min_length=1)
    date: date
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    type: Literal["credit", "debit"]
    description: str = ""
    category: str = ""

    def to_domain(self) -> Transaction:
        return Transaction(
            transaction_id=self.transaction_id,
            date=self.date,
            amount=self.amount,
            type=self.type,
            description=self.description,
            category=self.category,
        )


class CashFlowSchema(BaseModel):
    """Pre-aggregated monthly figures"""

    monthly_income: float = Field(..., ge=0, allow_inf_nan=False)
    monthly_expenses: float = Field(..., ge=0, allow_inf_nan=False)

    def to_domain(self) -> CashFlowSummary:
        return CashFlowSummary(monthly_income=self.monthly_income, monthly_expenses=self.monthly_expenses)


class OptimizeRequest(BaseModel):
    """Request body for POST /v1/optimize"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    goals: List[GoalSchema] = Field(default_factory=list)
    cash_flow: Optional[CashFlowSchema] = None
    transactions: Optional[List[TransactionSchema]] = None
    as_of: Optional[date] = Field(None, description="Evaluation date (default: today)")

    @model_validator(mode="after")
    def check_single_cash_flow_source(self) -> "OptimizeRequest":
        if self.cash_flow is not None and self.transactions is not None:
            raise ValueError("Provide either cash_flow or transactions, not both")
        return self


class AllocationSchema(BaseModel):
    """Suggested contribution for one goal"""

    goal_id: str
    goal_name: str
    current_amount: float
    target_amount: float
    remaining_amount: float
    suggested_monthly_amount: float
    suggested_weekly_amount: float
    estimated_completion_date: Optional[date] = None
    priority_score: float
    on_track: bool

    @classmethod
    def from_domain(cls, allocation: Allocation) -> "AllocationSchema":
        return cls(
            goal_id=allocation.goal_id,
            goal_name=allocation.goal_name,
            current_amount=round(allocation.current_amount, 2),
            target_amount=round(allocation.target_amount, 2),
            remaining_amount=round(allocation.remaining_amount, 2),
            suggested_monthly_amount=round(allocation.suggested_monthly_amount, 2),
            suggested_weekly_amount=round(allocation.suggested_weekly_amount, 2),
            estimated_completion_date=allocation.estimated_completion_date,
            priority_score=round(allocation.priority_score, 2),
            on_track=allocation.on_track,
        )


class RecommendationSchema(BaseModel):
    """Advisory recommendation"""

    type: str
    priority: str
    title: str
    description: str
    action: str
    impact: str

    @classmethod
    def from_domain(cls, recommendation: Recommendation) -> "RecommendationSchema":
        return cls(
            type=recommendation.type.value,
            priority=recommendation.priority.value,
            title=recommendation.title,
            description=recommendation.description,
            action=recommendation.action,
            impact=recommendation.impact,
        )


class SummarySchema(BaseModel):
    """Aggregate figures for a run"""

    total_goals: int
    monthly_disposable: float
    total_monthly_allocation: float
    average_completion_months: float
    budget: float
    utilization_rate: float

    @classmethod
    def from_domain(cls, summary: OptimizationSummary) -> "SummarySchema":
        return cls(
            total_goals=summary.total_goals,
            monthly_disposable=round(summary.monthly_disposable, 2),
            total_monthly_allocation=round(summary.total_monthly_allocation, 2),
            average_completion_months=round(summary.average_completion_months, 1),
            budget=round(summary.budget, 2),
            utilization_rate=round(summary.utilization_rate, 3),
        )


class OptimizeResponse(BaseModel):
    """Response for POST /v1/optimize"""

    run_id: str
    as_of: date
    allocations: List[AllocationSchema]
    recommendations: List[RecommendationSchema]
    summary: SummarySchema
    message: Optional[str] = None


class RunResponse(BaseModel):
    """Response for GET /v1/runs/{run_id}"""

    run_id: str
    user_id: str
    as_of: date
    allocations: List[AllocationSchema]
    recommendations: List[RecommendationSchema]
    summary: SummarySchema
    message: Optional[str] = None
    created_at: str


class HistoryItem(BaseModel):
    """Single run in history"""

    run_id: str
    as_of: date
    total_goals: int
    total_monthly_allocation: float
    recommendation_count: int
    created_at: str


class HistoryResponse(BaseModel):
    """Response for GET /v1/optimize/history"""

    user_id: str
    runs: List[HistoryItem]
