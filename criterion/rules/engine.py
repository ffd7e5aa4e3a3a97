"""Deterministic decision engine.

The engine evaluates a decision's rules against a context and a profile and
always returns a ``Result``. Every evaluation is:
- Deterministic (same decision, context and profile = same result, except
  for ``evaluated_at``)
- Explainable (the matched rule's own explanation plus a trace of every rule
  checked)
- Total (failures in validation or in rule code become result statuses,
  nothing is raised to the caller)

Rules are checked strictly in declaration order and evaluation stops at the
first match.
"""

import logging
from typing import Any, NoReturn

from criterion.errors import ProfileResolutionError
from criterion.profiles.registry import ProfileRegistry
from criterion.profiles.resolver import is_inline_profile, resolve_profile
from criterion.rules.explain import explain as format_explanation
from criterion.rules.models import Decision
from criterion.schemas.result import Result, ResultMeta, ResultStatus, RuleTrace
from criterion.schemas.validation import (
    PydanticValidator,
    SchemaValidator,
    format_violations,
)
from criterion.utils.time import format_timestamp, utc_now

logger = logging.getLogger(__name__)

NO_MATCH_EXPLANATION = "No rule matched the given context"


class _Halt(Exception):
    """Internal signal carrying a terminal non-OK status."""

    def __init__(self, status: ResultStatus, explanation: str) -> None:
        super().__init__(explanation)
        self.status = status
        self.explanation = explanation


def _describe(exc: BaseException) -> str:
    """Render an exception as ``"<Type>: <message>"``.

    Exceptions from rule code may fail to stringify; those fall back to the
    type name alone.
    """
    name = type(exc).__name__
    try:
        return f"{name}: {exc}"
    except Exception:
        return name


class Engine:
    """Stateless decision engine.

    An instance holds only its schema validator, so one engine may be shared
    across threads as long as the decisions and registries passed in are not
    mutated during a call.
    """

    def __init__(self, validator: SchemaValidator | None = None) -> None:
        """Initialize engine.

        Args:
            validator: Schema validator; defaults to ``PydanticValidator``
        """
        self.validator: SchemaValidator = validator or PydanticValidator()

    def run(
        self,
        decision: Decision,
        context: Any,
        *,
        profile: Any,
        registry: ProfileRegistry | None = None,
    ) -> Result:
        """Evaluate a decision.

        Args:
            decision: Decision to evaluate
            context: Input value, validated against ``decision.input_schema``
            profile: Inline profile value, or a string id looked up in
                ``registry``
            registry: Profile registry used for string ids

        Returns:
            Result with status, data and trace. Never raises.
        """
        evaluated_at = format_timestamp(utc_now())
        evaluated_rules: list[RuleTrace] = []
        profile_id = None if is_inline_profile(profile) else profile

        try:
            data, matched_rule, explanation = self._evaluate(
                decision, context, profile, registry, evaluated_rules
            )
        except _Halt as halt:
            return self._build_result(
                halt.status,
                decision,
                evaluated_rules,
                evaluated_at,
                halt.explanation,
                profile_id=profile_id,
            )
        except Exception as e:
            # Malformed decisions or registries; keep run() total
            logger.exception(f"Unexpected evaluation failure: {_describe(e)}")
            return self._build_result(
                ResultStatus.INVALID_INPUT,
                decision,
                evaluated_rules,
                evaluated_at,
                f"Evaluation error: {_describe(e)}",
                profile_id=profile_id,
            )

        return self._build_result(
            ResultStatus.OK,
            decision,
            evaluated_rules,
            evaluated_at,
            explanation,
            profile_id=profile_id,
            matched_rule=matched_rule,
            data=data,
        )

    def explain(self, result: Result) -> str:
        """Format a result for display."""
        return format_explanation(result)

    def _evaluate(
        self,
        decision: Decision,
        context: Any,
        profile: Any,
        registry: ProfileRegistry | None,
        evaluated_rules: list[RuleTrace],
    ) -> tuple[Any, str, str]:
        """Run the pipeline, appending to ``evaluated_rules`` as rules are checked.

        Returns:
            Tuple of (validated output, matched rule id, explanation)

        Raises:
            _Halt: On any non-OK terminal state
        """
        try:
            resolved = resolve_profile(profile, registry)
        except ProfileResolutionError as e:
            self._halt(decision, ResultStatus.INVALID_INPUT, e.describe())

        validated_context = self._validate(
            decision, decision.input_schema, context, "Input", ResultStatus.INVALID_INPUT
        )
        validated_profile = self._validate(
            decision, decision.profile_schema, resolved.profile, "Profile", ResultStatus.INVALID_INPUT
        )

        for rule in decision.rules:
            explanation: str | None = None
            try:
                matched = bool(rule.condition(validated_context, validated_profile))
                if matched:
                    explanation = str(rule.explain(validated_context, validated_profile))
            except Exception as e:
                logger.warning(
                    f"Rule {rule.id} raised during evaluation: {_describe(e)}",
                    extra={"decision_id": decision.id, "rule_id": rule.id},
                )
                self._halt(
                    decision,
                    ResultStatus.INVALID_INPUT,
                    f"Rule evaluation error in {rule.id}: {_describe(e)}",
                )

            evaluated_rules.append(
                RuleTrace(rule_id=rule.id, matched=matched, explanation=explanation)
            )

            if not matched:
                continue

            try:
                output = rule.emit(validated_context, validated_profile)
            except Exception as e:
                logger.warning(
                    f"Rule {rule.id} raised during emit: {_describe(e)}",
                    extra={"decision_id": decision.id, "rule_id": rule.id},
                )
                self._halt(
                    decision,
                    ResultStatus.INVALID_OUTPUT,
                    f"Rule emit error in {rule.id}: {_describe(e)}",
                )

            validated_output = self._validate(
                decision, decision.output_schema, output, "Output", ResultStatus.INVALID_OUTPUT
            )
            logger.debug(
                f"Decision {decision.id} matched rule {rule.id}",
                extra={"decision_id": decision.id, "rule_id": rule.id, "status": "OK"},
            )
            return validated_output, rule.id, explanation or ""

        self._halt(decision, ResultStatus.NO_MATCH, NO_MATCH_EXPLANATION)

    def _validate(
        self,
        decision: Decision,
        schema: Any,
        value: Any,
        subject: str,
        status: ResultStatus,
    ) -> Any:
        """Validate ``value`` and return the normalized value.

        A validator that raises is reported like a schema violation.
        """
        try:
            outcome = self.validator.validate(schema, value)
        except Exception as e:
            self._halt(decision, status, f"{subject} validation failed: {_describe(e)}")

        if not outcome.success:
            self._halt(decision, status, format_violations(subject, outcome.violations))

        return outcome.value

    def _halt(self, decision: Decision, status: ResultStatus, explanation: str) -> NoReturn:
        logger.debug(
            f"Decision {decision.id} halted with {status.value}: {explanation}",
            extra={"decision_id": decision.id, "status": status.value},
        )
        raise _Halt(status, explanation)

    def _build_result(
        self,
        status: ResultStatus,
        decision: Decision,
        evaluated_rules: list[RuleTrace],
        evaluated_at: str,
        explanation: str,
        profile_id: str | None = None,
        matched_rule: str | None = None,
        data: Any = None,
    ) -> Result:
        """Assemble the result; non-OK statuses never carry data."""
        return Result(
            status=status,
            data=data if status == ResultStatus.OK else None,
            meta=ResultMeta(
                decision_id=str(getattr(decision, "id", "")),
                decision_version=str(getattr(decision, "version", "")),
                profile_id=profile_id,
                matched_rule=matched_rule,
                evaluated_rules=list(evaluated_rules),
                explanation=explanation,
                evaluated_at=evaluated_at,
            ),
        )


default_engine = Engine()


def evaluate_decision(
    decision: Decision,
    context: Any,
    *,
    profile: Any,
    registry: ProfileRegistry | None = None,
    validator: SchemaValidator | None = None,
) -> Result:
    """Convenience function to evaluate a decision.

    Uses the shared default engine unless a validator is given.

    Example:
        >>> result = evaluate_decision(risk_decision, {"amount": 7500}, profile={})
        >>> result.meta.matched_rule
        'medium-risk'
    """
    engine = Engine(validator) if validator is not None else default_engine
    return engine.run(decision, context, profile=profile, registry=registry)
