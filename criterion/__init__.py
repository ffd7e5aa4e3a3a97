"""Criterion: a deterministic, explainable decision engine.

Example:
    >>> from pydantic import BaseModel
    >>> from criterion import Decision, Rule, always, evaluate_decision
    >>> class Applicant(BaseModel):
    ...     age: int
    ...     verified: bool
    >>> class Tier(BaseModel):
    ...     tier: str
    >>> class TierProfile(BaseModel):
    ...     min_age: int
    >>> user_tier = Decision(
    ...     id="user-tier",
    ...     version="1.0.0",
    ...     input_schema=Applicant,
    ...     output_schema=Tier,
    ...     profile_schema=TierProfile,
    ...     rules=[
    ...         Rule(
    ...             id="premium",
    ...             condition=lambda ctx, p: ctx.verified and ctx.age >= p.min_age,
    ...             emit=lambda ctx, p: {"tier": "premium"},
    ...             explain=lambda ctx, p: "Verified adult user",
    ...         ),
    ...         Rule(
    ...             id="basic",
    ...             condition=always,
    ...             emit=lambda ctx, p: {"tier": "basic"},
    ...             explain=lambda ctx, p: "Default tier",
    ...         ),
    ...     ],
    ... )
    >>> result = evaluate_decision(
    ...     user_tier, {"age": 25, "verified": True}, profile={"min_age": 18}
    ... )
    >>> result.meta.matched_rule
    'premium'
"""

from criterion.profiles import (
    InMemoryProfileRegistry,
    ProfileRegistry,
    create_profile_registry,
    is_inline_profile,
)
from criterion.rules import (
    Decision,
    DecisionMeta,
    Engine,
    Rule,
    always,
    create_rule,
    default_engine,
    define_decision,
    evaluate_decision,
    explain,
)
from criterion.schemas import (
    PydanticValidator,
    Result,
    ResultMeta,
    ResultStatus,
    RuleTrace,
    SchemaValidator,
)

__version__ = "0.1.0"

__all__ = [
    "Decision",
    "DecisionMeta",
    "Engine",
    "Rule",
    "always",
    "create_rule",
    "default_engine",
    "define_decision",
    "evaluate_decision",
    "explain",
    "InMemoryProfileRegistry",
    "ProfileRegistry",
    "create_profile_registry",
    "is_inline_profile",
    "PydanticValidator",
    "Result",
    "ResultMeta",
    "ResultStatus",
    "RuleTrace",
    "SchemaValidator",
]
