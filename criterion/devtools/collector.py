"""Trace collection around engine runs.

The collector is a host-side wrapper: it keeps recent evaluations in memory
for inspection and export. The engine itself stays stateless.
"""

import time
import uuid
from collections import deque
from dataclasses import dataclass
from typing import Any

from criterion.core.config import settings
from criterion.core.logging import audit_logger
from criterion.errors import ProfileResolutionError
from criterion.profiles.registry import ProfileRegistry
from criterion.profiles.resolver import is_inline_profile, resolve_profile
from criterion.rules.engine import Engine
from criterion.rules.models import Decision
from criterion.schemas.result import Result
from criterion.utils.time import format_timestamp, utc_now


@dataclass
class Trace:
    """A recorded evaluation."""

    id: str
    timestamp: str
    decision_id: str
    decision_version: str
    context: Any
    profile: Any
    profile_id: str | None
    result: Result
    duration_ms: float


@dataclass
class TraceSummary:
    total_traces: int
    by_decision: dict[str, int]
    by_status: dict[str, int]
    by_rule: dict[str, int]
    avg_duration_ms: float


def generate_trace_id() -> str:
    return f"trace_{uuid.uuid4().hex[:12]}"


class TraceCollector:
    """Runs decisions through an engine and records each evaluation."""

    def __init__(
        self,
        max_traces: int | None = None,
        auto_log: bool | None = None,
        engine: Engine | None = None,
    ) -> None:
        """Initialize collector.

        Args:
            max_traces: Buffer size; oldest traces are dropped first.
                Defaults to ``settings.trace_max_traces``
            auto_log: Log each trace through the audit logger. Defaults to
                ``settings.trace_auto_log``
            engine: Engine to delegate to
        """
        self.max_traces = max_traces if max_traces is not None else settings.trace_max_traces
        self.auto_log = auto_log if auto_log is not None else settings.trace_auto_log
        self.engine = engine or Engine()
        self._traces: deque[Trace] = deque(maxlen=self.max_traces)

    def run(
        self,
        decision: Decision,
        context: Any,
        *,
        profile: Any,
        registry: ProfileRegistry | None = None,
    ) -> Result:
        """Evaluate through the engine and record the trace."""
        start = time.perf_counter()
        result = self.engine.run(decision, context, profile=profile, registry=registry)
        duration_ms = (time.perf_counter() - start) * 1000

        trace = Trace(
            id=generate_trace_id(),
            timestamp=format_timestamp(utc_now()),
            decision_id=decision.id,
            decision_version=decision.version,
            context=context,
            profile=self._recorded_profile(profile, registry),
            profile_id=None if is_inline_profile(profile) else profile,
            result=result,
            duration_ms=duration_ms,
        )
        self._traces.append(trace)

        if self.auto_log:
            audit_logger.log(
                decision_id=trace.decision_id,
                status=result.status.value,
                matched_rule=result.meta.matched_rule,
                duration_ms=duration_ms,
                trace_id=trace.id,
            )

        return result

    @staticmethod
    def _recorded_profile(profile: Any, registry: ProfileRegistry | None) -> Any:
        try:
            return resolve_profile(profile, registry).profile
        except ProfileResolutionError:
            return None

    @property
    def traces(self) -> list[Trace]:
        """Collected traces, oldest first."""
        return list(self._traces)

    def traces_for_decision(self, decision_id: str) -> list[Trace]:
        return [t for t in self._traces if t.decision_id == decision_id]

    def last_trace(self) -> Trace | None:
        return self._traces[-1] if self._traces else None

    def summary(self) -> TraceSummary:
        """Aggregate counts over the collected traces."""
        by_decision: dict[str, int] = {}
        by_status: dict[str, int] = {}
        by_rule: dict[str, int] = {}
        total_duration = 0.0

        for trace in self._traces:
            status = trace.result.status.value
            rule = trace.result.meta.matched_rule or "NO_MATCH"
            by_decision[trace.decision_id] = by_decision.get(trace.decision_id, 0) + 1
            by_status[status] = by_status.get(status, 0) + 1
            by_rule[rule] = by_rule.get(rule, 0) + 1
            total_duration += trace.duration_ms

        count = len(self._traces)
        return TraceSummary(
            total_traces=count,
            by_decision=by_decision,
            by_status=by_status,
            by_rule=by_rule,
            avg_duration_ms=total_duration / count if count else 0.0,
        )

    def clear(self) -> None:
        self._traces.clear()

    @property
    def count(self) -> int:
        return len(self._traces)
