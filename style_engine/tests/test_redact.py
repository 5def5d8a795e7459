from __future__ import annotations

import pytest

from style_engine.settings import TRACE_REDACTION_TOKEN, TRUNCATION_MARKER
from style_engine.trace.redact import redact_secrets_deep, redact_secrets_in_text, scrub, truncate_text_with_marker


def test_truncate_under_limit_unchanged():
    result = truncate_text_with_marker('hello', 10)
    assert result.text == 'hello'
    assert result.truncated is False


def test_truncate_appends_marker_within_limit():
    result = truncate_text_with_marker('a' * 40, 20)
    assert result.truncated is True
    assert len(result.text) == 20
    assert result.text == 'a' * (20 - len(TRUNCATION_MARKER)) + TRUNCATION_MARKER


def test_truncate_limit_smaller_than_marker_hard_cuts():
    result = truncate_text_with_marker('abcdefghijklmnop', 3)
    assert result.text == 'abc'
    assert result.truncated is True


def test_truncate_handles_none_and_negative_limits():
    assert truncate_text_with_marker(None, 5).text == ''  # type: ignore[arg-type]
    assert truncate_text_with_marker('abc', -4).text == ''


@pytest.mark.parametrize(
    'text, expected',
    [
        ('key sk-' + 'a' * 24, 'key ' + TRACE_REDACTION_TOKEN),
        ('sk-ant-' + 'b' * 24, TRACE_REDACTION_TOKEN),
        ('gsk_' + 'c' * 24, TRACE_REDACTION_TOKEN),
        ('Authorization: Bearer abcdefghijklmnop', 'Authorization: Bearer ' + TRACE_REDACTION_TOKEN),
        ('token bearer abcdefghijklmnop', 'token bearer ' + TRACE_REDACTION_TOKEN),
        ('{"apiKey": "hunter2"}', '{"apiKey": "' + TRACE_REDACTION_TOKEN + '"}'),
        ('{"authorization":"Basic xyz"}', '{"authorization":"' + TRACE_REDACTION_TOKEN + '"}'),
        ('x-api-key: abc123, next', 'x-api-key: ' + TRACE_REDACTION_TOKEN + ', next'),
        ('apiKey=abc123;', 'apiKey=' + TRACE_REDACTION_TOKEN + ';'),
    ],
)
def test_redaction_rules(text, expected):
    assert redact_secrets_in_text(text) == expected


def test_ordinary_text_untouched():
    text = 'warm Rhodes over brushed drums, 84 bpm; sk-short stays'
    assert redact_secrets_in_text(text) == text


def test_redact_deep_walks_containers():
    value = {'a': ('Bearer abcdefghijkl', 3), 'b': {'c': 'sk-' + 'x' * 24}, 'd': None}
    assert redact_secrets_deep(value) == {
        'a': ['Bearer ' + TRACE_REDACTION_TOKEN, 3],
        'b': {'c': TRACE_REDACTION_TOKEN},
        'd': None,
    }


def test_scrub_redacts_before_truncating():
    assert scrub('sk-' + 'a' * 40, 15) == TRACE_REDACTION_TOKEN
    assert scrub(None, 10) == ''
    assert scrub(42, 10) == '42'
