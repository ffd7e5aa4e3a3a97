"""Trace collection and export for debugging and audit."""

from criterion.devtools.collector import Trace, TraceCollector, TraceSummary, generate_trace_id
from criterion.devtools.export import (
    export_to_json,
    export_trace,
    format_trace_as_markdown,
    trace_to_dict,
)

__all__ = [
    "Trace",
    "TraceCollector",
    "TraceSummary",
    "export_to_json",
    "export_trace",
    "format_trace_as_markdown",
    "generate_trace_id",
    "trace_to_dict",
]
