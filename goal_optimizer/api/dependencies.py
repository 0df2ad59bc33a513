"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from goal_optimizer.config import settings
from goal_optimizer.domain.policy import AllocationPolicy
from goal_optimizer.infrastructure.clients.transactions import TransactionsClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_transactions_client() -> TransactionsClient:
    """Provide transactions API client instance"""
    return TransactionsClient()


def get_allocation_policy() -> AllocationPolicy:
    """Provide the configured allocation policy"""
    return settings.allocation_policy()
