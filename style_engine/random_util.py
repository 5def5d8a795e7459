"""
Seeded random source and combinatorial primitives.

Contract (minimal):
- create_seeded_source(seed): a Mulberry32 source; same seed -> same infinite sequence.
- default_source(): a non-reproducible source, for outermost call sites only.
- shuffle / pick_one / select_one / select_n / draw_int_inclusive / roll_chance:
  pure given their inputs; the only state they touch is the source passed in.

No globals/state: every source is an independent object owned by the caller.
"""
from __future__ import annotations

import hashlib
import secrets
import random
from typing import Callable, List, Optional, Sequence, TypeVar, Union

from style_engine.exceptions import EmptyCandidatesError, SampleSizeError

T = TypeVar("T")

RandomSource = Callable[[], float]
SeedLike = Union[int, str]

_MASK32 = 0xFFFFFFFF
_MULBERRY_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


class Mulberry32:
    """Mulberry32 generator over 32-bit integer state.

    Callable like a plain source function; ``random()`` is provided so the
    object also fits code written against ``random.Random``.
    """

    algorithm = "mulberry32"

    def __init__(self, seed: int):
        self.seed = int(seed) & _MASK32
        self._state = self.seed

    def __call__(self) -> float:
        self._state = (self._state + _MULBERRY_INCREMENT) & _MASK32
        t = self._state
        x = _imul(t ^ (t >> 15), t | 1)
        x ^= (x + _imul(x ^ (x >> 7), x | 61)) & _MASK32
        return ((x ^ (x >> 14)) & _MASK32) / _TWO_POW_32

    def random(self) -> float:
        return self()

    def __repr__(self) -> str:
        return f"Mulberry32(seed={self.seed})"


class RecordingSource:
    """Pass-through source that remembers every value it hands out.

    Consumption is identical to the wrapped source, so attaching one never
    changes what a selection returns.
    """

    def __init__(self, source: RandomSource):
        self._source = source
        self.rolls: List[float] = []

    def __call__(self) -> float:
        value = self._source()
        self.rolls.append(value)
        return value

    def random(self) -> float:
        return self()

    def take(self) -> List[float]:
        """Return the rolls gathered so far and start a fresh list."""
        rolls, self.rolls = self.rolls, []
        return rolls


def _to_bytes(s: str) -> bytes:
    try:
        return s.encode("utf-8", errors="strict")
    except Exception:
        # Best-effort fallback
        return s.encode("utf-8", errors="ignore")


def derive_seed_from_string(seed: SeedLike) -> int:
    """Derive a stable unsigned 32-bit seed from a string or int.

    - int inputs are reduced modulo 2**32 (two's complement for negatives).
    - str inputs use SHA-256 to generate a deterministic 32-bit value.
    """
    if isinstance(seed, int):
        return int(seed) & _MASK32
    data = _to_bytes(str(seed))
    h = hashlib.sha256(data).digest()
    return int.from_bytes(h[:4], byteorder="big", signed=False)


def create_seeded_source(seed: SeedLike) -> Mulberry32:
    """Return a new deterministic source for ``seed``."""
    return Mulberry32(derive_seed_from_string(seed))


def default_source() -> RandomSource:
    """Return a fresh non-reproducible source.

    Only outermost convenience entry points should call this; engine internals
    always receive their source explicitly.
    """
    return random.Random().random


def get_random(seed: SeedLike | None = None) -> RandomSource:
    """Return a seeded source when a seed is given, else a default source."""
    if seed is None:
        return default_source()
    return create_seeded_source(seed)


def generate_seed() -> int:
    """Return a high-entropy unsigned 32-bit integer suitable for seeding."""
    return secrets.randbits(32)


def shuffle(items: Sequence[T], source: RandomSource) -> List[T]:
    """Fisher-Yates shuffle returning a new list; ``items`` is never mutated."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(source() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def pick_one(items: Sequence[T], source: RandomSource) -> Optional[T]:
    """Uniformly pick one item, or ``None`` for an empty sequence.

    Consumes no randomness when ``items`` is empty.
    """
    if not items:
        return None
    return items[int(source() * len(items))]


def select_one(items: Sequence[T], source: RandomSource) -> T:
    """Uniformly pick one item from a sequence that must not be empty.

    Raises:
        EmptyCandidatesError: if ``items`` is empty.
    """
    if not items:
        raise EmptyCandidatesError("select_one")
    return items[int(source() * len(items))]


def select_n(items: Sequence[T], count: int, source: RandomSource) -> List[T]:
    """Pick ``count`` distinct positions from ``items`` via a full shuffle.

    Raises:
        SampleSizeError: if ``count`` exceeds ``len(items)``.
    """
    if count > len(items):
        raise SampleSizeError(count, len(items), details={"operation": "select_n"})
    if count <= 0:
        return []
    return shuffle(items, source)[:count]


def draw_int_inclusive(low: int, high: int, source: RandomSource) -> int:
    """Return an integer in ``[low, high]``."""
    return low + int(source() * (high - low + 1))


def roll_chance(chance: Optional[float], source: RandomSource) -> bool:
    """Roll a probability check; ``None`` means certain and draws nothing."""
    if chance is None:
        return True
    return source() <= chance
