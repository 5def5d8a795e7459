"""Persisted-size cap for finalized trace runs.

A run that serializes above the cap is degraded one step at a time, cheapest
information first, until it fits:

1. drop LLM message bodies and raw response text
2. drop ``run.end`` events
3. drop LLM attempt history, then provider options
4. drop decision candidate previews and rolls
5. compact text fields
6. drop error events (``hadErrors`` stays set)
7. compact text fields harder
8. keep only the earliest 25 decisions, then 10

``persistedBytes`` is part of the payload it measures, so it is solved as a
small fixed point.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from style_engine import logging_util
from style_engine.settings import TRACE_PERSISTED_BYTES_CAP
from style_engine.trace.models import (
    TraceDecisionEvent,
    TraceErrorEvent,
    TraceEvent,
    TraceLLMCallEvent,
    TraceRun,
    TraceRunEvent,
)
from style_engine.trace.redact import truncate_text_with_marker

__all__ = [
    "byte_length_utf8",
    "persisted_bytes",
    "enforce_trace_size_cap",
]

LOGGER = logging_util.get_logger(__name__)

_FIXED_POINT_ROUNDS = 6


def byte_length_utf8(text: str) -> int:
    return len(text.encode('utf-8'))


def persisted_bytes(run: TraceRun) -> int:
    """UTF-8 size of ``run`` exported with its own size filled in."""
    size = 0
    for _ in range(_FIXED_POINT_ROUNDS):
        candidate = run.model_copy(update={'stats': run.stats.model_copy(update={'persisted_bytes': size})})
        measured = byte_length_utf8(candidate.to_json())
        if measured == size:
            return size
        size = measured
    return size


def _finalize(run: TraceRun, truncated: bool, had_errors_baseline: bool) -> TraceRun:
    llm_calls = sum(1 for e in run.events if isinstance(e, TraceLLMCallEvent))
    decisions = sum(1 for e in run.events if isinstance(e, TraceDecisionEvent))
    has_errors = any(isinstance(e, TraceErrorEvent) for e in run.events)
    stats = run.stats.model_copy(update={
        'event_count': len(run.events),
        'llm_call_count': llm_calls,
        'decision_count': decisions,
        'had_errors': has_errors or had_errors_baseline,
        'truncated_for_cap': truncated,
        'persisted_bytes': 0,
    })
    base = run.model_copy(update={'stats': stats})
    size = persisted_bytes(base)
    return base.model_copy(update={'stats': stats.model_copy(update={'persisted_bytes': size})})


def _map_events(run: TraceRun, fn: Callable[[TraceEvent], Optional[TraceEvent]]) -> TraceRun:
    events: List[TraceEvent] = []
    for event in run.events:
        mapped = fn(event)
        if mapped is not None:
            events.append(mapped)
    return run.model_copy(update={'events': events})


def _drop_llm_bodies(event: TraceEvent) -> TraceEvent:
    if not isinstance(event, TraceLLMCallEvent):
        return event
    return event.model_copy(update={
        'request': event.request.model_copy(update={'messages': None}),
        'response': event.response.model_copy(update={'raw_text': None}),
    })


def _drop_run_end(event: TraceEvent) -> Optional[TraceEvent]:
    if isinstance(event, TraceRunEvent) and event.type == 'run.end':
        return None
    return event


def _drop_attempts(event: TraceEvent) -> TraceEvent:
    if isinstance(event, TraceLLMCallEvent):
        return event.model_copy(update={'attempts': None})
    return event


def _drop_provider_options(event: TraceEvent) -> TraceEvent:
    if isinstance(event, TraceLLMCallEvent):
        return event.model_copy(update={'request': event.request.model_copy(update={'provider_options': None})})
    return event


def _drop_selection_details(event: TraceEvent) -> TraceEvent:
    if isinstance(event, TraceDecisionEvent) and event.selection is not None:
        return event.model_copy(update={
            'selection': event.selection.model_copy(update={'candidates_preview': None, 'rolls': None}),
        })
    return event


def _drop_errors(event: TraceEvent) -> Optional[TraceEvent]:
    return None if isinstance(event, TraceErrorEvent) else event


def _compactor(preview: int, why: int, branch: int, summary: int, label: int) -> Callable[[TraceEvent], TraceEvent]:
    def cut(text: str, limit: int) -> str:
        return truncate_text_with_marker(text, limit).text

    def compact(event: TraceEvent) -> TraceEvent:
        if isinstance(event, TraceLLMCallEvent):
            request = event.request.model_copy(update={
                'input_summary': event.request.input_summary.model_copy(
                    update={'preview': cut(event.request.input_summary.preview, preview)}
                ),
            })
            response = event.response.model_copy(update={'preview_text': cut(event.response.preview_text, preview)})
            return event.model_copy(update={'label': cut(event.label, label), 'request': request, 'response': response})
        if isinstance(event, TraceDecisionEvent):
            return event.model_copy(update={
                'branch_taken': cut(event.branch_taken, branch),
                'why': cut(event.why, why),
            })
        if isinstance(event, TraceRunEvent):
            return event.model_copy(update={'summary': cut(event.summary, summary)})
        if isinstance(event, TraceErrorEvent):
            return event.model_copy(update={'error': event.error.model_copy(update={'message': cut(event.error.message, why)})})
        return event

    return compact


def _keep_first_decisions(limit: int) -> Callable[[TraceEvent], Optional[TraceEvent]]:
    seen = 0

    def keep(event: TraceEvent) -> Optional[TraceEvent]:
        nonlocal seen
        if not isinstance(event, TraceDecisionEvent):
            return event
        seen += 1
        return event if seen <= limit else None

    return keep


def enforce_trace_size_cap(run: TraceRun, cap_bytes: int = TRACE_PERSISTED_BYTES_CAP) -> TraceRun:
    """Return ``run`` with accurate stats, degraded as needed to fit ``cap_bytes``.

    The result may still exceed the cap when the remaining events alone are too
    large; ``truncatedForCap`` is set whenever any step was applied.
    """
    cap = max(1, int(cap_bytes))
    baseline_errors = run.stats.had_errors or any(isinstance(e, TraceErrorEvent) for e in run.events)

    current = _finalize(run, False, baseline_errors)
    if current.stats.persisted_bytes <= cap:
        return current

    steps: List[Callable[[TraceEvent], Optional[TraceEvent]]] = [
        _drop_llm_bodies,
        _drop_run_end,
        _drop_attempts,
        _drop_provider_options,
        _drop_selection_details,
        _compactor(preview=300, why=300, branch=200, summary=200, label=120),
        _drop_errors,
        _compactor(preview=120, why=120, branch=120, summary=120, label=80),
    ]
    original_size = current.stats.persisted_bytes
    for step in steps:
        current = _finalize(_map_events(current, step), True, baseline_errors)
        if current.stats.persisted_bytes <= cap:
            break
    else:
        current = _finalize(_map_events(current, _keep_first_decisions(25)), True, baseline_errors)
        if current.stats.persisted_bytes > cap:
            current = _finalize(_map_events(current, _keep_first_decisions(10)), True, baseline_errors)

    LOGGER.info(
        "trace_size_capped run_id=%s cap=%d before=%d after=%d events=%d",
        current.run_id, cap, original_size, current.stats.persisted_bytes, current.stats.event_count,
    )
    return current
