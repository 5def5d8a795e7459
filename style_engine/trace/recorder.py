"""Trace/decision recorder.

One recorder per run. Callers that do not trace pass ``None`` and guard each
call site with ``if recorder is not None``; nothing here is touched otherwise.

Every event gets a sequence id (``<run_id>.<n>``), an ISO-8601 UTC timestamp
and its offset from run start. Text is scrubbed of credentials and bounded
before it is stored, so the finalized run is always safe to export.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from style_engine import logging_util
from style_engine.cache_util import Clock, system_clock_ms
from style_engine.settings import (
    TRACE_BRANCH_MAX_CHARS,
    TRACE_CANDIDATE_ITEM_MAX_CHARS,
    TRACE_CANDIDATES_PREVIEW_MAX,
    TRACE_ERROR_MESSAGE_MAX_CHARS,
    TRACE_KEY_MAX_CHARS,
    TRACE_LABEL_MAX_CHARS,
    TRACE_PREVIEW_MAX_CHARS,
    TRACE_ROLLS_MAX,
    TRACE_SUMMARY_MAX_CHARS,
    TRACE_WHY_MAX_CHARS,
)
from style_engine.trace.models import (
    TraceDecisionEvent,
    TraceErrorEvent,
    TraceErrorInfo,
    TraceEvent,
    TraceLLMCallEvent,
    TraceLLMRequest,
    TraceLLMResponse,
    TraceProviderInfo,
    TraceRng,
    TraceRun,
    TraceRunEvent,
    TraceSelection,
    TraceStats,
    TraceTelemetry,
)
from style_engine.trace.redact import redact_secrets_deep, redact_secrets_in_text, scrub
from style_engine.type_definitions import RunEventKind, SeedInfo, TraceDecisionDomain, TraceErrorType

__all__ = [
    "TraceRecorder",
    "create_recorder",
    "maybe_create_recorder",
    "iso_timestamp",
]

LOGGER = logging_util.get_logger(__name__)


def iso_timestamp(ms: float) -> str:
    """``2026-01-01T00:00:00.000Z`` for an epoch offset in milliseconds."""
    moment = datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)
    return moment.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def _bounded_selection(selection: Union[TraceSelection, Mapping[str, Any], None]) -> Optional[TraceSelection]:
    if selection is None:
        return None
    parsed = selection if isinstance(selection, TraceSelection) else TraceSelection.model_validate(dict(selection))
    update: Dict[str, Any] = {}
    if parsed.candidates_preview is not None:
        update['candidates_preview'] = [
            scrub(item, TRACE_CANDIDATE_ITEM_MAX_CHARS)
            for item in parsed.candidates_preview[:TRACE_CANDIDATES_PREVIEW_MAX]
        ]
    if parsed.rolls is not None and len(parsed.rolls) > TRACE_ROLLS_MAX:
        update['rolls'] = list(parsed.rolls[:TRACE_ROLLS_MAX])
    return parsed.model_copy(update=update) if update else parsed


def _scrubbed_request(request: TraceLLMRequest) -> TraceLLMRequest:
    update: Dict[str, Any] = {
        'input_summary': request.input_summary.model_copy(
            update={'preview': scrub(request.input_summary.preview, TRACE_PREVIEW_MAX_CHARS)}
        ),
    }
    if request.provider_options is not None:
        update['provider_options'] = redact_secrets_deep(request.provider_options)
    if request.messages is not None:
        # full message text is kept (advanced view); only secrets are removed
        update['messages'] = [
            message.model_copy(update={'content': redact_secrets_in_text(message.content)})
            for message in request.messages
        ]
    return request.model_copy(update=update)


def _scrubbed_response(response: TraceLLMResponse) -> TraceLLMResponse:
    update: Dict[str, Any] = {'preview_text': scrub(response.preview_text, TRACE_PREVIEW_MAX_CHARS)}
    if response.raw_text is not None:
        update['raw_text'] = redact_secrets_in_text(response.raw_text)
    return response.model_copy(update=update)


class TraceRecorder:
    """Collects bounded, redacted trace events for one run."""

    enabled = True

    def __init__(
        self,
        run_id: str,
        metadata: Optional[Mapping[str, Any]] = None,
        seed_info: Optional[SeedInfo] = None,
        clock: Optional[Clock] = None,
    ):
        if not run_id:
            raise ValueError("run_id must be a non-empty string")
        self.run_id = str(run_id)
        self.metadata: Dict[str, Any] = redact_secrets_deep(dict(metadata or {}))
        self.seed_info = seed_info
        self._clock: Clock = clock or system_clock_ms
        self._start_ms = self._clock()
        self.captured_at = iso_timestamp(self._start_ms)
        self._events: List[TraceEvent] = []
        self._counter = 0
        self._decision_count = 0
        self._llm_call_count = 0
        self._had_errors = False

    # ------------------------------------------------------------------
    # Event helpers
    # ------------------------------------------------------------------
    def _base(self) -> Dict[str, Any]:
        self._counter += 1
        now = self._clock()
        return {
            'id': f"{self.run_id}.{self._counter}",
            'ts': iso_timestamp(now),
            't_ms': max(0, int(now - self._start_ms)),
        }

    @property
    def events(self) -> List[TraceEvent]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    # ------------------------------------------------------------------
    # Recording API
    # ------------------------------------------------------------------
    def record_run_event(self, kind: RunEventKind, summary: str) -> TraceRunEvent:
        event = TraceRunEvent(**self._base(), type=kind, summary=scrub(summary, TRACE_SUMMARY_MAX_CHARS))
        self._events.append(event)
        return event

    def record_decision(
        self,
        domain: TraceDecisionDomain,
        key: str,
        branch_taken: str,
        why: str,
        selection: Union[TraceSelection, Mapping[str, Any], None] = None,
    ) -> TraceDecisionEvent:
        event = TraceDecisionEvent(
            **self._base(),
            domain=domain,
            key=scrub(key, TRACE_KEY_MAX_CHARS) or 'unknown',
            branch_taken=scrub(branch_taken, TRACE_BRANCH_MAX_CHARS),
            why=scrub(why, TRACE_WHY_MAX_CHARS),
            selection=_bounded_selection(selection),
        )
        self._events.append(event)
        self._decision_count += 1
        return event

    def record_llm_call(
        self,
        label: str,
        provider: Union[TraceProviderInfo, Mapping[str, Any]],
        request: Union[TraceLLMRequest, Mapping[str, Any]],
        response: Union[TraceLLMResponse, Mapping[str, Any]],
        telemetry: Union[TraceTelemetry, Mapping[str, Any], None] = None,
        attempts: Optional[Sequence[Mapping[str, Any]]] = None,
    ) -> TraceLLMCallEvent:
        """Record a model call made by the surrounding application.

        The engine never calls a model itself; this exists so one trace can
        hold both the random decisions and the calls they fed into.
        """
        parsed_request = request if isinstance(request, TraceLLMRequest) else TraceLLMRequest.model_validate(dict(request))
        parsed_response = (
            response if isinstance(response, TraceLLMResponse) else TraceLLMResponse.model_validate(dict(response))
        )
        event = TraceLLMCallEvent.model_validate({
            **self._base(),
            'type': 'llm.call',
            'label': scrub(label, TRACE_LABEL_MAX_CHARS) or 'llm',
            'provider': provider,
            'request': _scrubbed_request(parsed_request),
            'response': _scrubbed_response(parsed_response),
            'telemetry': telemetry,
            'attempts': redact_secrets_deep(list(attempts)) if attempts is not None else None,
        })
        self._events.append(event)
        self._llm_call_count += 1
        return event

    def record_error(
        self,
        error_type: TraceErrorType,
        message: str,
        status: Optional[int] = None,
        provider_request_id: Optional[str] = None,
    ) -> TraceErrorEvent:
        info = TraceErrorInfo(
            type=error_type,
            message=scrub(message, TRACE_ERROR_MESSAGE_MAX_CHARS),
            status=status,
            provider_request_id=provider_request_id,
        )
        event = TraceErrorEvent(**self._base(), error=info)
        self._events.append(event)
        self._had_errors = True
        return event

    def finalize(self, cap_bytes: Optional[int] = None) -> TraceRun:
        """Snapshot the run. Counters come from running totals, not a rescan.

        With ``cap_bytes`` the snapshot is also passed through
        :func:`style_engine.trace.size_cap.enforce_trace_size_cap`.
        """
        rng = None
        if self.seed_info and 'seed' in self.seed_info:
            rng = TraceRng(seed=int(self.seed_info['seed']), algorithm=self.seed_info.get('algorithm', 'mulberry32'))
        run = TraceRun(
            run_id=self.run_id,
            captured_at=self.captured_at,
            metadata=self.metadata,
            rng=rng,
            stats=TraceStats(
                event_count=len(self._events),
                llm_call_count=self._llm_call_count,
                decision_count=self._decision_count,
                had_errors=self._had_errors,
            ),
            events=list(self._events),
        )
        LOGGER.debug(
            "trace_finalized run_id=%s events=%d decisions=%d errors=%s",
            self.run_id, len(self._events), self._decision_count, self._had_errors,
        )
        if cap_bytes is not None:
            from style_engine.trace.size_cap import enforce_trace_size_cap

            return enforce_trace_size_cap(run, cap_bytes)
        return run


def create_recorder(
    run_id: str,
    metadata: Optional[Mapping[str, Any]] = None,
    seed_info: Optional[SeedInfo] = None,
    clock: Optional[Clock] = None,
) -> TraceRecorder:
    return TraceRecorder(run_id, metadata=metadata, seed_info=seed_info, clock=clock)


def maybe_create_recorder(
    enabled: bool,
    run_id: str,
    metadata: Optional[Mapping[str, Any]] = None,
    seed_info: Optional[SeedInfo] = None,
    clock: Optional[Clock] = None,
) -> Optional[TraceRecorder]:
    """A recorder when tracing is on, else ``None`` so call sites skip recording."""
    if not enabled:
        return None
    return create_recorder(run_id, metadata=metadata, seed_info=seed_info, clock=clock)
