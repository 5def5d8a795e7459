"""Credential scrubbing and bounded text for persisted traces.

Anything that may end up in an exported trace passes through here first: a
trace must be safe to share even when a prompt or error message echoed an
API key.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Pattern, Tuple

from style_engine.settings import TRACE_REDACTION_TOKEN, TRUNCATION_MARKER

__all__ = [
    "TruncationResult",
    "truncate_text_with_marker",
    "redact_secrets_in_text",
    "redact_secrets_deep",
    "scrub",
]


@dataclass(frozen=True)
class TruncationResult:
    text: str
    truncated: bool


def truncate_text_with_marker(text: str, max_chars: int, marker: str = TRUNCATION_MARKER) -> TruncationResult:
    """Cut ``text`` to at most ``max_chars`` characters, ending in ``marker`` when cut."""
    if text is None:
        return TruncationResult('', False)
    limit = max(0, int(max_chars))
    if len(text) <= limit:
        return TruncationResult(text, False)
    keep = limit - len(marker)
    if keep <= 0:
        return TruncationResult(text[:limit], True)
    return TruncationResult(text[:keep] + marker, True)


def _keep_prefix(match: re.Match[str]) -> str:
    return match.group(1) + TRACE_REDACTION_TOKEN


def _keep_quotes(match: re.Match[str]) -> str:
    return match.group(1) + TRACE_REDACTION_TOKEN + match.group(3)


# Order matters: provider-specific keys before the generic header/kv forms.
_RULES: Tuple[Tuple[str, Pattern[str], Callable[[re.Match[str]], str]], ...] = (
    ('openai-key', re.compile(r'\bsk-[A-Za-z0-9]{20,}\b'), lambda _m: TRACE_REDACTION_TOKEN),
    ('anthropic-key', re.compile(r'\bsk-ant-[A-Za-z0-9_-]{20,}\b'), lambda _m: TRACE_REDACTION_TOKEN),
    ('groq-key', re.compile(r'\bgsk_[A-Za-z0-9]{20,}\b'), lambda _m: TRACE_REDACTION_TOKEN),
    (
        'authorization-bearer',
        re.compile(r'(\bAuthorization\s*:\s*Bearer\s+)([A-Za-z0-9._~+/=-]{10,})', re.IGNORECASE),
        _keep_prefix,
    ),
    ('bearer-token', re.compile(r'(\bBearer\s+)([A-Za-z0-9._~+/=-]{10,})', re.IGNORECASE), _keep_prefix),
    ('json-api-key', re.compile(r'("apiKey"\s*:\s*")([^"]+)(")', re.IGNORECASE), _keep_quotes),
    ('json-authorization', re.compile(r'("authorization"\s*:\s*")([^"]+)(")', re.IGNORECASE), _keep_quotes),
    ('x-api-key-header', re.compile(r'(\bx-api-key\s*:\s*)([^\s,;]+)', re.IGNORECASE), _keep_prefix),
    ('kv-api-key', re.compile(r'(\bapiKey\b\s*[:=]\s*)([^\s,;]+)', re.IGNORECASE), _keep_prefix),
)


def redact_secrets_in_text(text: str) -> str:
    output = text
    for _name, pattern, replace in _RULES:
        output = pattern.sub(replace, output)
    return output


def redact_secrets_deep(value: Any) -> Any:
    """Redact every string inside nested dicts/lists; other values pass through."""
    if isinstance(value, str):
        return redact_secrets_in_text(value)
    if isinstance(value, (list, tuple)):
        return [redact_secrets_deep(item) for item in value]
    if isinstance(value, dict):
        return {key: redact_secrets_deep(inner) for key, inner in value.items()}
    return value


def scrub(text: Any, max_chars: int) -> str:
    """Redact then truncate; the form every free-text trace field is stored in."""
    return truncate_text_with_marker(redact_secrets_in_text(str(text or '')), max_chars).text
