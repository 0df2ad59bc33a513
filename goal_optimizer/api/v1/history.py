"""GET /v1/optimize/history - Fetch user's optimization history"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from goal_optimizer.api.v1.schemas import HistoryResponse, HistoryItem
from goal_optimizer.config import settings
from goal_optimizer.infrastructure.database.session import get_db
from goal_optimizer.infrastructure.database.repositories import OptimizationRepository

router = APIRouter()


@router.get("/optimize/history", response_model=HistoryResponse)
def get_optimization_history(
    user_id: str = Query(..., description="User identifier"),
    db: Session = Depends(get_db),
):
    """
    Retrieve recent optimization runs for a user.

    Returns:
        Runs, newest first, with headline figures
    """
    run_repo = OptimizationRepository(db)
    runs = run_repo.get_runs_by_user(user_id, limit=settings.history_limit)

    history_items = [
        HistoryItem(
            run_id=str(r.id),
            as_of=r.as_of,
            total_goals=r.total_goals,
            total_monthly_allocation=round(r.total_monthly_allocation, 2),
            recommendation_count=len(r.recommendations or []),
            created_at=r.created_at.isoformat(),
        )
        for r in runs
    ]

    return HistoryResponse(user_id=user_id, runs=history_items)
