from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from style_engine.settings import TRUNCATION_MARKER
from style_engine.trace.models import TraceDecisionEvent, TraceRun
from style_engine.trace.recorder import TraceRecorder, create_recorder, iso_timestamp, maybe_create_recorder
from style_engine.trace.size_cap import byte_length_utf8

OPENAI_KEY = 'sk-' + 'A1b2C3d4' * 4


def _llm_payload():
    provider = {'id': 'openai', 'model': 'gpt-test', 'locality': 'cloud'}
    request = {
        'temperature': 0.7,
        'max_tokens': 256,
        'input_summary': {'message_count': 1, 'total_chars': 40, 'preview': f'use {OPENAI_KEY} please'},
        'messages': [{'role': 'user', 'content': 'Authorization: Bearer abcdefghijklmnop'}],
        'provider_options': {'headers': 'x-api-key: abc123', 'retries': 2},
    }
    response = {'preview_text': 'ok', 'raw_text': f'echo {OPENAI_KEY}'}
    return provider, request, response


def test_iso_timestamp_format():
    assert iso_timestamp(0) == '1970-01-01T00:00:00.000Z'
    assert iso_timestamp(1_700_000_000_123) == '2023-11-14T22:13:20.123Z'


def test_empty_run_id_rejected():
    with pytest.raises(ValueError):
        TraceRecorder('')


def test_maybe_create_recorder():
    assert maybe_create_recorder(False, 'run-x') is None
    recorder = maybe_create_recorder(True, 'run-x')
    assert isinstance(recorder, TraceRecorder)
    assert recorder.enabled


def test_event_ids_and_offsets(fake_clock):
    recorder = create_recorder('run-1', clock=fake_clock)
    recorder.record_run_event('run.start', 'starting')
    fake_clock.advance(250)
    recorder.record_decision('genre', 'genre.pick', 'jazz', 'only option')
    fake_clock.advance(1000)
    recorder.record_run_event('run.end', 'done')

    events = recorder.events
    assert [e.id for e in events] == ['run-1.1', 'run-1.2', 'run-1.3']
    assert [e.t_ms for e in events] == [0, 250, 1250]
    assert events[1].ts == '2023-11-14T22:13:20.250Z'
    assert len(recorder) == 3
    assert recorder.captured_at == '2023-11-14T22:13:20.000Z'


def test_stats_track_events(fake_clock):
    recorder = create_recorder('run-2', clock=fake_clock)
    recorder.record_run_event('run.start', 'go')
    recorder.record_decision('bpm', 'bpm.range', '90', 'genre default')
    recorder.record_decision('mood', 'mood.pick', 'calm', 'seeded')
    recorder.record_error('validation', 'bad input')
    provider, request, response = _llm_payload()
    recorder.record_llm_call('style', provider, request, response)

    run = recorder.finalize()
    assert run.stats.event_count == 5
    assert run.stats.decision_count == 2
    assert run.stats.llm_call_count == 1
    assert run.stats.had_errors is True
    assert run.stats.persisted_bytes == 0
    assert run.stats.truncated_for_cap is False


def test_long_text_is_bounded():
    recorder = create_recorder('run-3')
    event = recorder.record_decision('other', 'k' * 300, 'b' * 1000, 'w' * 1000)
    assert len(event.key) == 120
    assert len(event.branch_taken) == 240
    assert len(event.why) == 500
    assert event.why.endswith(TRUNCATION_MARKER)


def test_blank_key_gets_placeholder():
    event = create_recorder('run-3').record_decision('other', '', 'x', 'y')
    assert event.key == 'unknown'


def test_selection_preview_and_rolls_are_capped():
    recorder = create_recorder('run-4')
    event = recorder.record_decision(
        'instruments',
        'pool',
        'added: a',
        'test',
        selection={
            'method': 'shuffleSlice',
            'candidates_count': 10,
            'candidates_preview': ['y' * 200] + [f'item{i}' for i in range(9)],
            'rolls': [0.5] * 100,
        },
    )
    assert len(event.selection.candidates_preview) == 5
    assert len(event.selection.candidates_preview[0]) == 80
    assert len(event.selection.rolls) == 64
    assert event.selection.candidates_count == 10


def test_secrets_are_redacted_everywhere():
    recorder = create_recorder('run-5', metadata={'note': f'key {OPENAI_KEY}'})
    provider, request, response = _llm_payload()
    event = recorder.record_llm_call('style', provider, request, response)
    recorder.record_error('unknown', f'failed with {OPENAI_KEY}')

    dumped = recorder.finalize().to_json()
    assert OPENAI_KEY not in dumped
    assert 'abcdefghijklmnop' not in dumped
    assert 'abc123' not in dumped
    assert event.request.messages[0].content == 'Authorization: Bearer [REDACTED]'
    assert event.request.provider_options == {'headers': 'x-api-key: [REDACTED]', 'retries': 2}


def test_seed_info_becomes_rng():
    run = create_recorder('run-6', seed_info={'seed': 42, 'algorithm': 'mulberry32'}).finalize()
    assert run.rng.seed == 42
    assert run.rng.algorithm == 'mulberry32'
    assert create_recorder('run-6').finalize().rng is None


def test_export_is_camel_case_and_round_trips(fake_clock):
    recorder = create_recorder('run-7', metadata={'action': 'generate'}, clock=fake_clock)
    recorder.record_run_event('run.start', 'go')
    recorder.record_decision(
        'instruments', 'ambient.pool.pads', 'added: pad', 'rolled',
        selection={'method': 'pick', 'chosen_index': 1, 'rolls': [0.25]},
    )
    provider, request, response = _llm_payload()
    recorder.record_llm_call(
        'style', provider, request, response,
        telemetry={'latency_ms': 120, 'tokens_in': 10},
        attempts=[{'attempt': 1, 'started_at': 'a', 'ended_at': 'b', 'latency_ms': 5}],
    )
    recorder.record_error('timeout', 'slow', status=504)
    run = recorder.finalize()

    data = run.to_dict()
    assert data['runId'] == 'run-7'
    assert data['stats']['eventCount'] == 4
    assert data['events'][1]['branchTaken'] == 'added: pad'
    assert data['events'][1]['selection']['chosenIndex'] == 1
    assert data['events'][0]['tMs'] == 0
    assert 'rng' not in data

    parsed = TraceRun.model_validate(json.loads(run.to_json()))
    assert parsed.to_dict() == data
    assert isinstance(parsed.events[1], TraceDecisionEvent)


def test_unknown_keys_rejected_on_import():
    payload = json.loads(create_recorder('run-8').finalize().to_json())
    payload['surprise'] = True
    with pytest.raises(ValidationError):
        TraceRun.model_validate(payload)


def test_finalize_with_cap_fills_persisted_bytes():
    recorder = create_recorder('run-9')
    recorder.record_decision('genre', 'genre.pick', 'jazz', 'seeded')
    run = recorder.finalize(cap_bytes=64 * 1024)
    assert run.stats.persisted_bytes == byte_length_utf8(run.to_json())
    assert run.stats.truncated_for_cap is False
