"""Helpers for testing decisions: case tables, coverage and fuzzing."""

from criterion.testing.coverage import (
    CoverageReport,
    coverage,
    detect_dead_rules,
    format_coverage_report,
    meets_coverage_threshold,
)
from criterion.testing.fuzz import FuzzError, FuzzResult, default_context_strategy, fuzz
from criterion.testing.harness import (
    DEFAULT_PROFILE,
    CaseFailure,
    DecisionCase,
    DecisionCheckResult,
    FailureType,
    verify_decision,
)

__all__ = [
    "CoverageReport",
    "coverage",
    "detect_dead_rules",
    "format_coverage_report",
    "meets_coverage_threshold",
    "FuzzError",
    "FuzzResult",
    "default_context_strategy",
    "fuzz",
    "DEFAULT_PROFILE",
    "CaseFailure",
    "DecisionCase",
    "DecisionCheckResult",
    "FailureType",
    "verify_decision",
]
