"""SQLAlchemy ORM models for persisted optimization runs"""

import uuid
from sqlalchemy import Column, String, Boolean, Float, DateTime, Date, Integer, ForeignKey, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class OptimizationRun(Base):
    """One optimize() invocation and its summary"""

    __tablename__ = "optimization_run"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    as_of = Column(Date, nullable=False)
    total_goals = Column(Integer, nullable=False)
    monthly_disposable = Column(Float, nullable=False)
    budget = Column(Float, nullable=False)
    total_monthly_allocation = Column(Float, nullable=False)
    average_completion_months = Column(Float, nullable=False)
    utilization_rate = Column(Float, nullable=False)
    recommendations = Column(JSON, nullable=False)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    allocations = relationship(
        "GoalAllocationRecord",
        back_populates="run",
        cascade="all, delete-orphan",
        order_by="GoalAllocationRecord.rank",
    )


class GoalAllocationRecord(Base):
    """Suggested contribution for one goal within a run"""

    __tablename__ = "goal_allocation"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    run_id = Column(Uuid(as_uuid=True), ForeignKey("optimization_run.id", ondelete="CASCADE"), nullable=False)
    rank = Column(Integer, nullable=False)
    goal_id = Column(String(255), nullable=False)
    goal_name = Column(Text, nullable=False)
    current_amount = Column(Float, nullable=False)
    target_amount = Column(Float, nullable=False)
    remaining_amount = Column(Float, nullable=False)
    suggested_monthly_amount = Column(Float, nullable=False)
    suggested_weekly_amount = Column(Float, nullable=False)
    estimated_completion_date = Column(Date, nullable=True)
    priority_score = Column(Float, nullable=False)
    on_track = Column(Boolean, nullable=False)

    run = relationship("OptimizationRun", back_populates="allocations")
