"""Map exceptions onto the trace error vocabulary."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import ValidationError

from style_engine.exceptions import (
    DefinitionError,
    InvariantError,
    RegistryIntegrityError,
    StyleEngineError,
    TableLoadError,
)
from style_engine.settings import TRACE_ERROR_MESSAGE_MAX_CHARS
from style_engine.trace.models import TraceErrorInfo
from style_engine.trace.redact import scrub
from style_engine.type_definitions import TraceErrorType

if TYPE_CHECKING:
    from style_engine.trace.recorder import TraceRecorder

__all__ = ["normalize_trace_error", "trace_error"]

# Fallback for engine errors matched by code rather than class
ERROR_CODE_MAP: Dict[str, TraceErrorType] = {
    'INVARIANT_VIOLATION': 'invariant',
    'EMPTY_CANDIDATES': 'invariant',
    'SAMPLE_SIZE': 'invariant',
    'REGISTRY_INTEGRITY': 'validation',
    'DEFINITION_ERR': 'validation',
    'VALIDATION_ERROR': 'validation',
    'STORAGE_ERROR': 'storage',
}


def _error_type(exc: BaseException) -> TraceErrorType:
    if isinstance(exc, InvariantError):
        return 'invariant'
    if isinstance(exc, TableLoadError):
        return 'storage' if exc.kind == 'missing' else 'validation'
    if isinstance(exc, (DefinitionError, RegistryIntegrityError, ValidationError)):
        return 'validation'
    if isinstance(exc, StyleEngineError):
        return ERROR_CODE_MAP.get(exc.code, 'unknown')
    if isinstance(exc, TimeoutError):
        return 'timeout'
    if isinstance(exc, ConnectionError):
        return 'unavailable'
    if isinstance(exc, OSError):
        return 'storage'
    if isinstance(exc, ValueError):
        return 'validation'
    return 'unknown'


def _http_status(exc: BaseException) -> Optional[int]:
    response = getattr(exc, 'response', None)
    for value in (getattr(exc, 'status', None), getattr(exc, 'status_code', None), getattr(response, 'status_code', None)):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _provider_request_id(exc: BaseException) -> Optional[str]:
    for attr in ('request_id', 'provider_request_id'):
        value: Any = getattr(exc, attr, None)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _message(exc: BaseException) -> str:
    if isinstance(exc, StyleEngineError):
        # the bare message; str() would append the details dict
        return exc.message
    text = str(exc)
    return text or type(exc).__name__ or 'Unknown error'


def normalize_trace_error(exc: BaseException) -> TraceErrorInfo:
    return TraceErrorInfo(
        type=_error_type(exc),
        message=scrub(_message(exc), TRACE_ERROR_MESSAGE_MAX_CHARS),
        status=_http_status(exc),
        provider_request_id=_provider_request_id(exc),
    )


def trace_error(recorder: Optional["TraceRecorder"], exc: BaseException) -> TraceErrorInfo:
    """Normalize ``exc`` and record it when a recorder is attached."""
    info = normalize_trace_error(exc)
    if recorder is not None:
        recorder.record_error(info.type, info.message, status=info.status, provider_request_id=info.provider_request_id)
    return info
