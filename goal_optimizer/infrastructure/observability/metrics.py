"""Prometheus metrics for monitoring optimization outcomes and upstream health"""

from prometheus_client import Counter, Histogram

from goal_optimizer.domain.models import OptimizationReport

# Optimization metrics
optimization_counter = Counter(
    "goal_optimizer_runs_total",
    "Total goal optimization runs",
    ["outcome"],  # allocated | no_capacity | no_goals
)

recommendation_counter = Counter(
    "goal_optimizer_recommendations_total",
    "Recommendations emitted by type",
    ["type"],
)

monthly_allocation_histogram = Histogram(
    "goal_optimizer_monthly_allocation",
    "Total suggested monthly allocation per run",
    buckets=[0, 50, 100, 250, 500, 1000, 2500, 5000, 10000],
)

# Transactions API metrics
transactions_fetch_failures_counter = Counter(
    "transactions_fetch_failures_total",
    "Failed transactions API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def optimization_outcome(report: OptimizationReport) -> str:
    if not report.allocations:
        return "no_goals"
    if report.summary.budget <= 0:
        return "no_capacity"
    return "allocated"


def record_optimization(report: OptimizationReport) -> None:
    """Record run outcome, recommendation mix and allocation size"""
    optimization_counter.labels(outcome=optimization_outcome(report)).inc()

    for recommendation in report.recommendations:
        recommendation_counter.labels(type=recommendation.type.value).inc()

    monthly_allocation_histogram.observe(report.summary.total_monthly_allocation)
