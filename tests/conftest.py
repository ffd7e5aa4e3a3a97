"""Pytest configuration and fixtures."""

import pytest

from criterion.profiles.registry import InMemoryProfileRegistry
from criterion.rules.engine import Engine
from criterion.rules.models import Decision
from decisions import build_eligibility_decision, build_risk_decision


@pytest.fixture
def engine() -> Engine:
    """Fresh engine with the default validator."""
    return Engine()


@pytest.fixture
def risk_decision() -> Decision:
    return build_risk_decision()


@pytest.fixture
def eligibility_decision() -> Decision:
    return build_eligibility_decision()


@pytest.fixture
def registry() -> InMemoryProfileRegistry:
    """Registry with a US and an EU risk profile."""
    reg = InMemoryProfileRegistry()
    reg.register("us", {"high_threshold": 10000, "medium_threshold": 5000})
    reg.register("eu", {"high_threshold": 8000, "medium_threshold": 3000})
    return reg
