"""Frequency-weighted blending across several source definitions.

Given the keys of the sources being blended (for example the genres of a
"jazz rock" request) and each source's candidate list, pick one shared value
that leans toward candidates common to many sources while still letting rarer
source-specific values through now and then.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from style_engine import logging_util
from style_engine.random_util import RandomSource, RecordingSource, pick_one
from style_engine.settings import TOP_HALF_SELECTION_WEIGHT, TRACE_CANDIDATES_PREVIEW_MAX
from style_engine.type_definitions import TraceDecisionDomain

if TYPE_CHECKING:
    from style_engine.trace.recorder import TraceRecorder

__all__ = [
    "candidate_lists",
    "frequency_ranking",
    "blend",
    "collect_all",
    "collect_and_pick",
]

LOGGER = logging_util.get_logger(__name__)


def candidate_lists(
    source_keys: Iterable[str],
    source_to_candidates: Mapping[str, Sequence[str]],
    default_candidates: Optional[Sequence[str]],
) -> List[Sequence[str]]:
    """Resolve each source key to its candidate list.

    Keys missing from the mapping fall back to ``default_candidates``; when the
    default is ``None`` such keys are skipped entirely.
    """
    lists: List[Sequence[str]] = []
    for key in source_keys:
        candidates = source_to_candidates.get(key)
        if candidates is None:
            candidates = default_candidates
        if candidates is None:
            continue
        lists.append(candidates)
    return lists


def frequency_ranking(lists: Iterable[Sequence[str]]) -> List[Tuple[str, int]]:
    """Distinct values with their counts, most frequent first.

    Ties keep first-encountered order (``sorted`` is stable).
    """
    counts: Dict[str, int] = {}
    for candidates in lists:
        for value in candidates:
            counts[value] = counts.get(value, 0) + 1
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)


def collect_all(
    source_keys: Iterable[str],
    source_to_candidates: Mapping[str, Sequence[str]],
    default_candidates: Optional[Sequence[str]],
) -> List[str]:
    """Deduplicated union of all candidates, in discovery order."""
    seen: set[str] = set()
    out: List[str] = []
    for candidates in candidate_lists(source_keys, source_to_candidates, default_candidates):
        for value in candidates:
            if value in seen:
                continue
            seen.add(value)
            out.append(value)
    return out


def blend(
    source_keys: Sequence[str],
    source_to_candidates: Mapping[str, Sequence[str]],
    default_candidates: Optional[Sequence[str]],
    source: RandomSource,
    top_half_bias: float = TOP_HALF_SELECTION_WEIGHT,
    recorder: Optional["TraceRecorder"] = None,
    key: str = "blend",
    domain: TraceDecisionDomain = "other",
) -> Optional[str]:
    """Pick one value, biased toward candidates shared by many sources.

    Returns ``None`` when no source contributes any candidate; no randomness is
    consumed in that case. Otherwise exactly two values are drawn: the bias roll
    (``draw < top_half_bias`` selects the top half) and the uniform pick.
    """
    ranking = frequency_ranking(candidate_lists(source_keys, source_to_candidates, default_candidates))
    if not ranking:
        LOGGER.debug("blend_empty key=%s sources=%d", key, len(source_keys))
        return None

    ordered = [value for value, _ in ranking]
    top_half = ordered[: math.ceil(len(ordered) / 2)]

    draw_source: RandomSource = source
    recording: Optional[RecordingSource] = None
    if recorder is not None:
        recording = RecordingSource(source)
        draw_source = recording

    use_top_half = draw_source() < top_half_bias
    pool = top_half if use_top_half and top_half else ordered
    chosen = pick_one(pool, draw_source)

    LOGGER.debug(
        "blend_picked key=%s distinct=%d top_half=%s value=%s",
        key, len(ordered), use_top_half, chosen,
    )
    if recorder is not None and recording is not None:
        recorder.record_decision(
            domain=domain,
            key=key,
            branch_taken=str(chosen),
            why=(
                f"{'top half' if use_top_half else 'full list'} of {len(pool)} "
                f"from {len(source_keys)} sources, bias {top_half_bias:g}"
            ),
            selection={
                "method": "weightedChance",
                "candidates_count": len(pool),
                "candidates_preview": pool[:TRACE_CANDIDATES_PREVIEW_MAX],
                "rolls": recording.take(),
            },
        )
    return chosen


def collect_and_pick(
    source_keys: Sequence[str],
    source_to_candidates: Mapping[str, Sequence[str]],
    default_candidates: Optional[Sequence[str]],
    source: RandomSource,
) -> Optional[str]:
    """Uniform pick from the deduplicated union (no frequency weighting)."""
    return pick_one(collect_all(source_keys, source_to_candidates, default_candidates), source)
