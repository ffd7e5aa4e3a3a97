"""Rule and decision data models."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any


Condition = Callable[[Any, Any], bool]
Emitter = Callable[[Any, Any], Any]
Explainer = Callable[[Any, Any], str]


def always(context: Any, profile: Any) -> bool:
    """Catch-all condition. Rules declared after one using it are unreachable."""
    return True


@dataclass(frozen=True)
class Rule:
    """A named condition with its output and explanation.

    All three callables receive the validated ``(context, profile)`` pair.
    They must not mutate it or perform I/O.
    """

    id: str
    condition: Condition
    emit: Emitter
    explain: Explainer


@dataclass(frozen=True)
class DecisionMeta:
    """Free-form metadata. Carried through, never inspected by the engine."""

    owner: str | None = None
    tags: tuple[str, ...] = ()
    tier: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class Decision:
    """A versioned bundle of schemas and ordered rules.

    Rule order is significant: the first rule whose condition holds wins.
    A decision without a catch-all rule is valid and may return ``NO_MATCH``.
    """

    id: str
    version: str
    input_schema: Any
    output_schema: Any
    profile_schema: Any
    rules: Sequence[Rule] = field(default_factory=tuple)
    meta: DecisionMeta | None = None

    def __post_init__(self) -> None:
        # Freeze the rule list so a shared decision cannot be mutated
        object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def rule_ids(self) -> list[str]:
        return [rule.id for rule in self.rules]


def define_decision(decision: Decision) -> Decision:
    """Return ``decision`` unchanged.

    Authoring helper so decision modules read uniformly::

        risk = define_decision(Decision(id="risk", version="1.0.0", ...))
    """
    return decision


def create_rule(rule: Rule) -> Rule:
    """Return ``rule`` unchanged."""
    return rule
