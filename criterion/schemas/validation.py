"""Schema validation capability consumed by the engine.

The engine only depends on the ``SchemaValidator`` protocol: given a schema
handle and a value, return either the normalized value or a list of
field-level violations. ``PydanticValidator`` is the default implementation
and treats any type pydantic can validate against as a schema.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol, Union

from pydantic import TypeAdapter, ValidationError


@dataclass(frozen=True)
class Violation:
    """A single field-level schema violation."""

    path: tuple[str, ...]
    message: str

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True)
class ValidationSuccess:
    value: Any

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ValidationFailure:
    violations: tuple[Violation, ...]

    @property
    def success(self) -> bool:
        return False


ValidationOutcome = Union[ValidationSuccess, ValidationFailure]


class SchemaValidator(Protocol):
    """Validate a value against an opaque schema handle."""

    def validate(self, schema: Any, value: Any) -> ValidationOutcome:
        ...


class PydanticValidator:
    """Schema validator backed by pydantic v2.

    Any annotation pydantic understands is a schema: a ``BaseModel`` subclass
    (validated values are model instances), ``dict[str, Any]``,
    ``Annotated[int, Field(gt=0)]``, a ``TypedDict``...
    """

    def validate(self, schema: Any, value: Any) -> ValidationOutcome:
        try:
            validated = type_adapter(schema).validate_python(value)
        except ValidationError as exc:
            return ValidationFailure(violations=violations_from_error(exc))

        return ValidationSuccess(value=validated)


@lru_cache(maxsize=256)
def _cached_adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def type_adapter(schema: Any) -> TypeAdapter:
    """Get a ``TypeAdapter`` for ``schema``, reused across calls.

    Schemas that cannot be hashed (for example ``Annotated`` with list
    metadata) get a fresh adapter each time.
    """
    try:
        hash(schema)
    except TypeError:
        return TypeAdapter(schema)
    return _cached_adapter(schema)


def violations_from_error(exc: ValidationError) -> tuple[Violation, ...]:
    """Convert a pydantic ``ValidationError`` into violations."""
    return tuple(
        Violation(
            path=tuple(str(part) for part in error.get("loc", ())),
            message=error.get("msg", ""),
        )
        for error in exc.errors()
    )


def format_violations(subject: str, violations: Sequence[Violation]) -> str:
    """Render violations as ``"<Subject> validation failed: a.b: msg, c: msg"``.

    Args:
        subject: ``Input``, ``Profile`` or ``Output``
        violations: Violations reported by the validator

    Returns:
        Single-line explanation string
    """
    issues = ", ".join(
        f"{v.dotted_path}: {v.message}" if v.path else v.message
        for v in violations
    )
    return f"{subject} validation failed: {issues}"
