"""Caller-owned TTL cache values.

A cache here is a plain immutable value ``CachedValue(result, checked_at_ms)``
held by whoever needs it. Freshness is judged against an injected clock, so
tests control time exactly and nothing lives at module level.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]


def system_clock_ms() -> float:
    return time.time() * 1000.0


@dataclass(frozen=True)
class CachedValue(Generic[T]):
    result: T
    checked_at_ms: float

    def age_ms(self, clock: Clock = system_clock_ms) -> float:
        return max(0.0, clock() - self.checked_at_ms)


def is_fresh(cached: Optional[CachedValue[T]], ttl_ms: float, clock: Clock = system_clock_ms) -> bool:
    if cached is None:
        return False
    return (clock() - cached.checked_at_ms) < ttl_ms


def refresh_if_stale(
    cached: Optional[CachedValue[T]],
    produce: Callable[[], T],
    ttl_ms: float,
    clock: Clock = system_clock_ms,
) -> CachedValue[T]:
    """Return ``cached`` while fresh, otherwise a new value stamped with ``clock()``."""
    if cached is not None and is_fresh(cached, ttl_ms, clock):
        return cached
    result = produce()
    return CachedValue(result=result, checked_at_ms=clock())
