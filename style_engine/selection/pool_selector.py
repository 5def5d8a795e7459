"""Constrained pool selection.

Walks a definition's pools in order and fills a bounded, duplicate-free,
exclusion-safe list of items. Every random draw goes through the source the
caller passes in, so a seeded source makes the whole selection reproducible.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from style_engine import logging_util
from style_engine.exceptions import DefinitionError
from style_engine.random_util import (
    RandomSource,
    RecordingSource,
    default_source,
    draw_int_inclusive,
    roll_chance,
    shuffle,
)
from style_engine.selection.definitions import ExclusionRule, PickRange, Pool, SelectionDefinition
from style_engine.selection.registry import CanonicalRegistry, default_registry
from style_engine.settings import TRACE_CANDIDATES_PREVIEW_MAX

if TYPE_CHECKING:
    from style_engine.trace.recorder import TraceRecorder

__all__ = [
    "has_exclusion",
    "select",
    "select_instruments_for_genre",
]

LOGGER = logging_util.get_logger(__name__)


def has_exclusion(selected: Iterable[str], candidate: str, rules: Sequence[ExclusionRule]) -> bool:
    """True when ``candidate`` conflicts with any already selected item."""
    if not rules:
        return False
    for existing in selected:
        for rule in rules:
            if rule.conflicts(existing, candidate):
                return True
    return False


def _compute_pick_count(pick: PickRange, remaining_slots: int, source: RandomSource) -> int:
    if remaining_slots <= 0:
        return 0
    desired = draw_int_inclusive(pick.min, pick.max, source)
    return min(desired, remaining_slots)


def _identity(item: str, registry: Optional[CanonicalRegistry]) -> str:
    """Comparison key: canonical name when a registry is given, case-folded."""
    name = registry.normalize(item) if registry is not None else item
    return name.lower()


def _pick_unique(
    candidates: Sequence[str],
    selected: Sequence[str],
    count: int,
    rules: Sequence[ExclusionRule],
    registry: Optional[CanonicalRegistry] = None,
) -> List[str]:
    if count <= 0:
        return []
    picks: List[str] = []
    seen = {_identity(item, registry) for item in selected}
    for token in candidates:
        if len(picks) >= count:
            break
        key = _identity(token, registry)
        if key in seen:
            continue
        # earlier picks from this pool count too
        if has_exclusion([*selected, *picks], token, rules):
            continue
        picks.append(token)
        seen.add(key)
    return picks


def _pick_from_pool(
    pool: Pool,
    selected: Sequence[str],
    remaining_slots: int,
    rules: Sequence[ExclusionRule],
    source: RandomSource,
    registry: Optional[CanonicalRegistry],
) -> Tuple[List[str], List[str], str]:
    """Return ``(picks, shuffled_candidates, outcome)`` for one pool."""
    if not roll_chance(pool.chance_to_include, source):
        return [], [], "skipped"

    count = _compute_pick_count(pool.pick, remaining_slots, source)
    if count <= 0:
        return [], [], "zero_count"

    items = [registry.normalize(item) for item in pool.items] if registry is not None else list(pool.items)
    available = [item for item in items if not has_exclusion(selected, item, rules)]
    shuffled = shuffle(available, source)
    picks = _pick_unique(shuffled, selected, count, rules, registry)
    if not picks:
        return [], shuffled, "exhausted"
    return picks, shuffled, "picked"


def _dedupe_must_use(items: Iterable[str], registry: Optional[CanonicalRegistry] = None) -> List[str]:
    out: List[str] = []
    seen: set[str] = set()
    for raw in items:
        text = str(raw or "").strip()
        if not text:
            continue
        # aliases of one canonical item collapse; the caller's spelling is kept
        key = _identity(text, registry)
        if key in seen:
            continue
        seen.add(key)
        out.append(text)
    return out


_OUTCOME_BRANCH = {
    "skipped": "skipped: inclusion roll failed",
    "zero_count": "skipped: drew zero picks",
    "exhausted": "skipped: no eligible candidates",
}


def _record_pool_decision(
    recorder: "TraceRecorder",
    definition: SelectionDefinition,
    pool_name: str,
    pool: Pool,
    picks: Sequence[str],
    shuffled: Sequence[str],
    outcome: str,
    rolls: List[float],
) -> None:
    branch = f"added: {', '.join(picks)}" if picks else _OUTCOME_BRANCH.get(outcome, outcome)
    chance = "always" if pool.chance_to_include is None else f"chance {pool.chance_to_include:g}"
    recorder.record_decision(
        domain="instruments",
        key=f"{definition.name.lower()}.pool.{pool_name}",
        branch_taken=branch,
        why=f"pick {pool.pick.min}-{pool.pick.max}, {chance}, {len(shuffled)} eligible candidates",
        selection={
            "method": "shuffleSlice",
            "candidates_count": len(shuffled),
            "candidates_preview": list(shuffled[:TRACE_CANDIDATES_PREVIEW_MAX]),
            "rolls": rolls,
        },
    )


def select(
    definition: SelectionDefinition,
    *,
    source: RandomSource,
    must_use: Sequence[str] = (),
    max_total: Optional[int] = None,
    registry: Optional[CanonicalRegistry] = None,
    recorder: Optional["TraceRecorder"] = None,
) -> List[str]:
    """Select items for ``definition``.

    Args:
        definition: Pools, processing order, budget and exclusion rules.
        source: Random source; pass a seeded one for reproducible output.
        must_use: Caller-required items placed first, in order, within budget.
            They count toward the budget and toward exclusion checks.
        max_total: Budget override; defaults to ``definition.max_total``.
        registry: When given, pool items are resolved to canonical names
            (unknown tokens are kept verbatim) and must-use items are matched
            against pool items by canonical name.
        recorder: Optional trace recorder; one decision per pool visited.

    Returns:
        Ordered unique items, at most ``max_total`` long, with no pair
        violating an exclusion rule introduced by the pools.
    """
    budget = definition.max_total if max_total is None else int(max_total)
    if budget <= 0:
        return []
    rules = definition.exclusion_rules

    selected: List[str] = _dedupe_must_use(must_use, registry)[:budget]
    draw_source: RandomSource = source
    recording: Optional[RecordingSource] = None
    if recorder is not None:
        recording = RecordingSource(source)
        draw_source = recording

    for pool_name in definition.pool_order:
        if len(selected) >= budget:
            break
        pool = definition.pools[pool_name]
        picks, shuffled, outcome = _pick_from_pool(
            pool, selected, budget - len(selected), rules, draw_source, registry
        )
        selected = [*selected, *picks][:budget]
        LOGGER.debug(
            "pool_selected definition=%s pool=%s outcome=%s picks=%d",
            definition.name, pool_name, outcome, len(picks),
        )
        if recorder is not None and recording is not None:
            _record_pool_decision(recorder, definition, pool_name, pool, picks, shuffled, outcome, recording.take())

    return selected


def select_instruments_for_genre(
    genre: str,
    *,
    user_instruments: Sequence[str] = (),
    max_tags: Optional[int] = None,
    source: Optional[RandomSource] = None,
    recorder: Optional["TraceRecorder"] = None,
) -> List[str]:
    """Convenience entry point over the bundled genre definitions.

    This is the one place a default (non-reproducible) source is supplied.
    """
    from style_engine.selection.genre_definitions import GENRE_REGISTRY

    definition = GENRE_REGISTRY.get(str(genre or "").strip().lower())
    if definition is None:
        raise DefinitionError(str(genre), "unknown genre", details={"known": sorted(GENRE_REGISTRY)})
    return select(
        definition,
        source=source if source is not None else default_source(),
        must_use=user_instruments,
        max_total=max_tags,
        registry=default_registry(),
        recorder=recorder,
    )
