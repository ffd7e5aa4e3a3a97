"""Validation capability, result models and JSON Schema export."""

from criterion.schemas.result import Result, ResultMeta, ResultStatus, RuleTrace
from criterion.schemas.validation import (
    PydanticValidator,
    SchemaValidator,
    ValidationFailure,
    ValidationOutcome,
    ValidationSuccess,
    Violation,
    format_violations,
)

__all__ = [
    "Result",
    "ResultMeta",
    "ResultStatus",
    "RuleTrace",
    "PydanticValidator",
    "SchemaValidator",
    "ValidationFailure",
    "ValidationOutcome",
    "ValidationSuccess",
    "Violation",
    "format_violations",
]
