"""Human-readable rendering of evaluation results.

Only reads what is already recorded in ``result.meta``; nothing is
re-evaluated. Accepts ``Result`` models as well as plain mappings (for
example results replayed from exported JSON, with either snake_case or
camelCase keys). Missing fields are left out of the output.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

MATCHED_MARK = "✓"
UNMATCHED_MARK = "✗"


def _field(obj: Any, name: str, alias: str | None = None) -> Any:
    """Read ``name`` (or its camelCase ``alias``) from a model or mapping."""
    if obj is None:
        return None
    try:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
            return obj.get(alias) if alias else None
        return getattr(obj, name, None)
    except Exception:
        return None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    try:
        return str(value)
    except Exception:
        return None


def explain(result: Any) -> str:
    """Format a result for display.

    Layout::

        Decision: <id> v<version>
        Profile: <profile id>
        Status: <status>
        Matched: <rule id>        (OK only)
        Reason: <explanation>     (OK only)
        Error: <explanation>      (other statuses)

        Evaluation trace:
          ✓ <rule id>
          ✗ <rule id>

    Args:
        result: Result model or mapping

    Returns:
        Multi-line string; never raises
    """
    meta = _field(result, "meta")
    status = _text(_field(result, "status"))
    lines: list[str] = []

    decision_id = _text(_field(meta, "decision_id", "decisionId"))
    decision_version = _text(_field(meta, "decision_version", "decisionVersion"))
    if decision_id is not None:
        header = f"Decision: {decision_id}"
        if decision_version is not None:
            header += f" v{decision_version}"
        lines.append(header)

    profile_id = _text(_field(meta, "profile_id", "profileId"))
    if profile_id:
        lines.append(f"Profile: {profile_id}")

    if status is not None:
        lines.append(f"Status: {status}")

    matched_rule = _text(_field(meta, "matched_rule", "matchedRule"))
    explanation = _text(_field(meta, "explanation"))
    if status == "OK":
        if matched_rule:
            lines.append(f"Matched: {matched_rule}")
            if explanation is not None:
                lines.append(f"Reason: {explanation}")
    elif status is not None and explanation is not None:
        lines.append(f"Error: {explanation}")

    evaluated_rules = _field(meta, "evaluated_rules", "evaluatedRules")
    if isinstance(evaluated_rules, (list, tuple)):
        lines.append("")
        lines.append("Evaluation trace:")
        for entry in evaluated_rules:
            rule_id = _text(_field(entry, "rule_id", "ruleId"))
            if rule_id is None:
                continue
            mark = MATCHED_MARK if _field(entry, "matched") is True else UNMATCHED_MARK
            lines.append(f"  {mark} {rule_id}")

    return "\n".join(lines)
