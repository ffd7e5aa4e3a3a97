"""JSON Schema export for decision schemas."""

from dataclasses import dataclass
from typing import Any

from criterion.rules.models import Decision
from criterion.schemas.validation import type_adapter


@dataclass(frozen=True)
class DecisionSchema:
    """JSON Schemas of a decision's input, output and profile."""

    id: str
    version: str
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]
    profile_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "version": self.version,
            "inputSchema": self.input_schema,
            "outputSchema": self.output_schema,
            "profileSchema": self.profile_schema,
        }


def to_json_schema(schema: Any) -> dict[str, Any]:
    """Convert a schema handle to a JSON Schema dict.

    Example:
        >>> class Applicant(BaseModel):
        ...     age: int
        >>> to_json_schema(Applicant)["required"]
        ['age']
    """
    return type_adapter(schema).json_schema()


def extract_decision_schema(decision: Decision) -> DecisionSchema:
    """Extract JSON Schemas from a decision."""
    return DecisionSchema(
        id=decision.id,
        version=decision.version,
        input_schema=to_json_schema(decision.input_schema),
        output_schema=to_json_schema(decision.output_schema),
        profile_schema=to_json_schema(decision.profile_schema),
    )
