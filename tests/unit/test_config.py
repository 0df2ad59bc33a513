"""Unit tests for settings and policy overrides"""

from goal_optimizer.config import Settings
from goal_optimizer.domain.policy import AllocationPolicy, DEFAULT_POLICY


def test_default_settings_match_default_policy():
    assert Settings().allocation_policy() == DEFAULT_POLICY


def test_policy_overrides_from_environment(monkeypatch):
    """Test POLICY_* environment variables reach the domain policy"""
    monkeypatch.setenv("POLICY_BUDGET_RATIO", "0.75")
    monkeypatch.setenv("POLICY_SMALL_GOAL_THRESHOLD", "250")
    monkeypatch.setenv("POLICY_URGENCY_WEIGHT", "0.6")

    policy = Settings().allocation_policy()

    assert isinstance(policy, AllocationPolicy)
    assert policy.budget_ratio == 0.75
    assert policy.small_goal_threshold == 250.0
    assert policy.urgency_weight == 0.6
    assert policy.completion_weight == DEFAULT_POLICY.completion_weight
