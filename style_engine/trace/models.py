"""Pydantic models for exported trace runs.

Field names are snake_case in Python and camelCase on the wire
(``model_dump(by_alias=True)``). Unknown keys are rejected, so
``TraceRun.model_validate(json.loads(text))`` doubles as a strict check of an
exported file.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from style_engine.type_definitions import (
    RngAlgorithm,
    RunEventKind,
    SelectionMethod,
    TraceDecisionDomain,
    TraceErrorType,
)

__all__ = [
    "TraceSelection",
    "TraceRunEvent",
    "TraceDecisionEvent",
    "TraceProviderInfo",
    "TraceInputSummary",
    "TraceMessage",
    "TraceLLMRequest",
    "TraceLLMResponse",
    "TraceTelemetry",
    "TraceAttemptError",
    "TraceAttempt",
    "TraceLLMCallEvent",
    "TraceErrorInfo",
    "TraceErrorEvent",
    "TraceEvent",
    "TraceRng",
    "TraceStats",
    "TraceRun",
]


class TraceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='forbid',
        frozen=True,
    )


class TraceSelection(TraceModel):
    method: SelectionMethod
    chosen_index: Optional[int] = Field(None, ge=0)
    candidates_count: Optional[int] = Field(None, ge=0)
    candidates_preview: Optional[List[str]] = None
    rolls: Optional[List[float]] = None


class TraceBaseEvent(TraceModel):
    id: str = Field(..., min_length=1)
    ts: str = Field(..., min_length=1)
    t_ms: int = Field(..., ge=0)


class TraceRunEvent(TraceBaseEvent):
    type: RunEventKind
    summary: str


class TraceDecisionEvent(TraceBaseEvent):
    type: Literal['decision'] = 'decision'
    domain: TraceDecisionDomain
    key: str = Field(..., min_length=1)
    branch_taken: str
    why: str
    selection: Optional[TraceSelection] = None


class TraceProviderInfo(TraceModel):
    id: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    locality: Literal['cloud', 'local']


class TraceInputSummary(TraceModel):
    message_count: int = Field(..., ge=0)
    total_chars: int = Field(..., ge=0)
    preview: str


class TraceMessage(TraceModel):
    role: Literal['system', 'user', 'assistant', 'tool']
    content: str


class TraceLLMRequest(TraceModel):
    temperature: Optional[float] = None
    max_tokens: Optional[int] = Field(None, gt=0)
    max_retries: Optional[int] = Field(None, ge=0)
    provider_options: Optional[Dict[str, Any]] = None
    input_summary: TraceInputSummary
    messages: Optional[List[TraceMessage]] = None


class TraceLLMResponse(TraceModel):
    preview_text: str
    raw_text: Optional[str] = None


class TraceTelemetry(TraceModel):
    latency_ms: Optional[int] = Field(None, ge=0)
    finish_reason: Optional[str] = None
    tokens_in: Optional[int] = Field(None, ge=0)
    tokens_out: Optional[int] = Field(None, ge=0)


class TraceAttemptError(TraceModel):
    type: str = Field(..., min_length=1)
    message: str
    status: Optional[int] = None
    provider_request_id: Optional[str] = None


class TraceAttempt(TraceModel):
    attempt: int = Field(..., gt=0)
    started_at: str = Field(..., min_length=1)
    ended_at: str = Field(..., min_length=1)
    latency_ms: int = Field(..., ge=0)
    error: Optional[TraceAttemptError] = None


class TraceLLMCallEvent(TraceBaseEvent):
    type: Literal['llm.call'] = 'llm.call'
    label: str = Field(..., min_length=1)
    provider: TraceProviderInfo
    request: TraceLLMRequest
    response: TraceLLMResponse
    telemetry: Optional[TraceTelemetry] = None
    attempts: Optional[List[TraceAttempt]] = None


class TraceErrorInfo(TraceModel):
    type: TraceErrorType
    message: str
    status: Optional[int] = None
    provider_request_id: Optional[str] = None


class TraceErrorEvent(TraceBaseEvent):
    type: Literal['error'] = 'error'
    error: TraceErrorInfo


TraceEvent = Annotated[
    Union[TraceRunEvent, TraceDecisionEvent, TraceLLMCallEvent, TraceErrorEvent],
    Field(discriminator='type'),
]


class TraceRng(TraceModel):
    seed: int
    algorithm: RngAlgorithm


class TraceStats(TraceModel):
    event_count: int = Field(..., ge=0)
    llm_call_count: int = Field(..., ge=0)
    decision_count: int = Field(..., ge=0)
    had_errors: bool
    persisted_bytes: int = Field(0, ge=0)
    truncated_for_cap: bool = False


class TraceRun(TraceModel):
    version: Literal[1] = 1
    run_id: str = Field(..., min_length=1)
    captured_at: str = Field(..., min_length=1)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    rng: Optional[TraceRng] = None
    stats: TraceStats
    events: List[TraceEvent] = Field(default_factory=list)

    def to_json(self) -> str:
        """Compact camelCase JSON; unset optional fields are omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
