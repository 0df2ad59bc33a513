"""Data access layer for optimization runs"""

import uuid
from typing import List, Optional
from sqlalchemy.orm import Session
from goal_optimizer.infrastructure.database.models import OptimizationRun, GoalAllocationRecord
from goal_optimizer.domain.models import OptimizationReport


class OptimizationRepository:
    """Repository for optimization runs and their allocations"""

    def __init__(self, db: Session):
        self.db = db

    def create_run(self, user_id: str, report: OptimizationReport) -> OptimizationRun:
        """Persist a report with one row per allocation"""
        summary = report.summary
        db_run = OptimizationRun(
            user_id=user_id,
            as_of=report.as_of,
            total_goals=summary.total_goals,
            monthly_disposable=summary.monthly_disposable,
            budget=summary.budget,
            total_monthly_allocation=summary.total_monthly_allocation,
            average_completion_months=summary.average_completion_months,
            utilization_rate=summary.utilization_rate,
            recommendations=[
                {
                    "type": r.type.value,
                    "priority": r.priority.value,
                    "title": r.title,
                    "description": r.description,
                    "action": r.action,
                    "impact": r.impact,
                }
                for r in report.recommendations
            ],
            message=report.message,
        )
        self.db.add(db_run)
        self.db.flush()  # Get ID without committing

        for rank, allocation in enumerate(report.allocations):
            self.db.add(
                GoalAllocationRecord(
                    run_id=db_run.id,
                    rank=rank,
                    goal_id=allocation.goal_id,
                    goal_name=allocation.goal_name,
                    current_amount=allocation.current_amount,
                    target_amount=allocation.target_amount,
                    remaining_amount=allocation.remaining_amount,
                    suggested_monthly_amount=allocation.suggested_monthly_amount,
                    suggested_weekly_amount=allocation.suggested_weekly_amount,
                    estimated_completion_date=allocation.estimated_completion_date,
                    priority_score=allocation.priority_score,
                    on_track=allocation.on_track,
                )
            )

        return db_run

    def get_runs_by_user(self, user_id: str, limit: int = 10) -> List[OptimizationRun]:
        """Fetch recent runs for a user"""
        return (
            self.db.query(OptimizationRun)
            .filter(OptimizationRun.user_id == user_id)
            .order_by(OptimizationRun.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_run_by_id(self, run_id: uuid.UUID) -> Optional[OptimizationRun]:
        """Fetch run with allocations"""
        return (
            self.db.query(OptimizationRun)
            .filter(OptimizationRun.id == run_id)
            .first()
        )
