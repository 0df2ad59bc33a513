"""Allocation policy constants - the tunable knobs of the optimizer"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AllocationPolicy:
    """
    Policy values that shape scoring, allocation and recommendations.

    Scoring weights:
    - 50%: Urgency (fewer 30-day periods until deadline is better)
    - 30%: Completion (closer to target is better, rewards momentum)
    - 20%: Size (smaller remaining amount is better, quick wins)

    Budget:
    - Only budget_ratio of disposable income is earmarked for goals,
      the rest is left for other discretionary spending.
    """

    urgency_weight: float = 0.5
    completion_weight: float = 0.3
    size_weight: float = 0.2

    budget_ratio: float = 0.6

    # Recommendation thresholds
    small_goal_threshold: float = 500.0
    min_small_goals: int = 2
    underutilized_threshold: float = 0.7
    min_goal_count: int = 3

    # Time and scale
    default_horizon_days: int = 365
    days_per_period: int = 30
    size_scale: float = 1000.0
    weeks_per_month: int = 4
    cash_flow_window_days: int = 30


DEFAULT_POLICY = AllocationPolicy()
