"""Pytest configuration, shared fixtures and sys.path adjustments for local runs."""

# Ensure package imports resolve when running tests directly
import os
import sys
from typing import Iterable, List

import pytest

# Repository root (two levels up from this file)
ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


class ScriptedSource:
    """Random source that replays fixed values (cycling) and counts draws."""

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = list(values)
        if not self.values:
            raise ValueError("ScriptedSource needs at least one value")
        self.calls = 0

    def __call__(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: float = 1_700_000_000_000.0):
        self.now = float(start_ms)

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def scripted():
    """Factory: ``scripted([0.1, 0.9])`` returns a ScriptedSource."""
    return ScriptedSource


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def ensure_test_environment():
    """Keep engine env overrides from leaking between tests."""
    original_env = os.environ.copy()
    for key in list(os.environ):
        if key.startswith('STYLE_ENGINE_'):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)
