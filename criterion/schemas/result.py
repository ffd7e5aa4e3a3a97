"""Result and trace models returned by the engine."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResultStatus(str, Enum):
    """Terminal classification of an evaluation."""

    OK = "OK"
    NO_MATCH = "NO_MATCH"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_OUTPUT = "INVALID_OUTPUT"


class _ResultModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
    )


class RuleTrace(_ResultModel):
    """One rule checked during an evaluation."""

    rule_id: str
    matched: bool
    explanation: str | None = None


class ResultMeta(_ResultModel):
    """Audit metadata attached to every result."""

    decision_id: str
    decision_version: str
    profile_id: str | None = None
    matched_rule: str | None = None
    evaluated_rules: list[RuleTrace]
    explanation: str
    evaluated_at: str


class Result(_ResultModel):
    """Outcome of one evaluation.

    ``data`` holds the validated rule output when ``status`` is ``OK`` and is
    ``None`` otherwise.
    """

    status: ResultStatus
    data: Any = None
    meta: ResultMeta

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.OK

    @property
    def matched_rule(self) -> str | None:
        return self.meta.matched_rule

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
