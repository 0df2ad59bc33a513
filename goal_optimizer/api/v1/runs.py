"""GET /v1/runs/{run_id} - Fetch a persisted optimization run"""

import uuid
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from goal_optimizer.api.v1.schemas import RunResponse, AllocationSchema, RecommendationSchema, SummarySchema
from goal_optimizer.infrastructure.database.session import get_db
from goal_optimizer.infrastructure.database.repositories import OptimizationRepository

router = APIRouter()


@router.get("/runs/{run_id}", response_model=RunResponse)
def get_run(run_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a run with its allocations in priority order.
    """
    try:
        run_uuid = uuid.UUID(run_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid run ID format")

    run_repo = OptimizationRepository(db)
    run = run_repo.get_run_by_id(run_uuid)

    if not run:
        raise HTTPException(status_code=404, detail="Run not found")

    allocations = [
        AllocationSchema(
            goal_id=a.goal_id,
            goal_name=a.goal_name,
            current_amount=round(a.current_amount, 2),
            target_amount=round(a.target_amount, 2),
            remaining_amount=round(a.remaining_amount, 2),
            suggested_monthly_amount=round(a.suggested_monthly_amount, 2),
            suggested_weekly_amount=round(a.suggested_weekly_amount, 2),
            estimated_completion_date=a.estimated_completion_date,
            priority_score=round(a.priority_score, 2),
            on_track=a.on_track,
        )
        for a in run.allocations
    ]

    return RunResponse(
        run_id=str(run.id),
        user_id=run.user_id,
        as_of=run.as_of,
        allocations=allocations,
        recommendations=[RecommendationSchema(**r) for r in run.recommendations or []],
        summary=SummarySchema(
            total_goals=run.total_goals,
            monthly_disposable=round(run.monthly_disposable, 2),
            total_monthly_allocation=round(run.total_monthly_allocation, 2),
            average_completion_months=round(run.average_completion_months, 1),
            budget=round(run.budget, 2),
            utilization_rate=round(run.utilization_rate, 3),
        ),
        message=run.message,
        created_at=run.created_at.isoformat(),
    )
