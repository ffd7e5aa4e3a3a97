"""Export collected traces as JSON or Markdown."""

import json
from typing import Any, Literal

from pydantic import BaseModel

from criterion.devtools.collector import Trace


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def trace_to_dict(trace: Trace, include_data: bool = True) -> dict[str, Any]:
    """Wire representation of a trace.

    Without ``include_data`` the context, profile and output are left out and
    only identifying fields and the outcome remain.
    """
    if not include_data:
        return {
            "id": trace.id,
            "timestamp": trace.timestamp,
            "decisionId": trace.decision_id,
            "decisionVersion": trace.decision_version,
            "status": trace.result.status.value,
            "matchedRule": trace.result.meta.matched_rule,
            "durationMs": trace.duration_ms,
        }

    return {
        "id": trace.id,
        "timestamp": trace.timestamp,
        "decisionId": trace.decision_id,
        "decisionVersion": trace.decision_version,
        "input": _jsonable(trace.context),
        "profile": _jsonable(trace.profile),
        "profileId": trace.profile_id,
        "result": trace.result.to_dict(),
        "durationMs": trace.duration_ms,
    }


def export_to_json(
    traces: list[Trace],
    pretty: bool = True,
    include_data: bool = True,
) -> str:
    """Serialize traces to a JSON array."""
    data = [trace_to_dict(t, include_data=include_data) for t in traces]
    return json.dumps(data, indent=2 if pretty else None, default=str)


def export_trace(trace: Trace, format: Literal["json", "markdown"] = "json") -> str:
    """Export a single trace for debugging."""
    if format == "markdown":
        return format_trace_as_markdown(trace)
    return json.dumps(trace_to_dict(trace), indent=2, default=str)


def format_trace_as_markdown(trace: Trace) -> str:
    meta = trace.result.meta
    lines = [
        f"# Trace: {trace.decision_id}",
        "",
        f"- **Version:** {trace.decision_version}",
        f"- **Status:** {trace.result.status.value}",
        f"- **Duration:** {trace.duration_ms:.2f}ms",
        f"- **Timestamp:** {trace.timestamp}",
    ]
    if trace.profile_id:
        lines.append(f"- **Profile:** {trace.profile_id}")

    lines += [
        "",
        "## Rule Evaluation",
        "",
        "| Rule | Matched | Explanation |",
        "|------|---------|-------------|",
    ]
    for entry in meta.evaluated_rules:
        matched = "Yes" if entry.matched else "No"
        lines.append(f"| {entry.rule_id} | {matched} | {entry.explanation or '-'} |")

    lines += [
        "",
        "## Explanation",
        "",
        meta.explanation,
        "",
        "## Input",
        "",
        "```json",
        json.dumps(_jsonable(trace.context), indent=2, default=str),
        "```",
    ]
    if trace.result.data is not None:
        lines += [
            "",
            "## Output",
            "",
            "```json",
            json.dumps(_jsonable(trace.result.data), indent=2, default=str),
            "```",
        ]

    return "\n".join(lines)
