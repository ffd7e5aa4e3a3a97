"""Deterministic decision rules engine.

Decisions bundle schemas with an ordered list of rules; the engine evaluates
them first-match-wins and returns an explainable, auditable result.
"""

from criterion.rules.engine import Engine, default_engine, evaluate_decision
from criterion.rules.explain import explain
from criterion.rules.models import (
    Decision,
    DecisionMeta,
    Rule,
    always,
    create_rule,
    define_decision,
)

__all__ = [
    "Engine",
    "default_engine",
    "evaluate_decision",
    "explain",
    "Decision",
    "DecisionMeta",
    "Rule",
    "always",
    "create_rule",
    "define_decision",
]
