"""Bounded, redacted decision traces for reproducing a run."""
from __future__ import annotations

from style_engine.trace.errors import normalize_trace_error, trace_error
from style_engine.trace.models import TraceErrorInfo, TraceEvent, TraceRun, TraceSelection
from style_engine.trace.recorder import TraceRecorder, create_recorder, maybe_create_recorder
from style_engine.trace.redact import (
    TruncationResult,
    redact_secrets_deep,
    redact_secrets_in_text,
    truncate_text_with_marker,
)
from style_engine.trace.size_cap import enforce_trace_size_cap

__all__ = [
    "TraceRecorder",
    "create_recorder",
    "maybe_create_recorder",
    "TraceRun",
    "TraceEvent",
    "TraceSelection",
    "TraceErrorInfo",
    "TruncationResult",
    "truncate_text_with_marker",
    "redact_secrets_in_text",
    "redact_secrets_deep",
    "enforce_trace_size_cap",
    "normalize_trace_error",
    "trace_error",
]
