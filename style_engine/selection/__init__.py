"""Registry, pool selection and blending over static selection tables."""
from __future__ import annotations

from style_engine.selection.articulation import articulate_instrument, articulate_instrument_with_themes
from style_engine.selection.blender import blend, collect_all, collect_and_pick
from style_engine.selection.definitions import ExclusionRule, PickRange, Pool, SelectionDefinition
from style_engine.selection.genre_definitions import GENRE_REGISTRY
from style_engine.selection.genre_mappings import (
    get_all_blended_harmonic_styles,
    get_all_blended_polyrhythms,
    get_all_blended_time_signatures,
    get_blended_harmonic_style,
    get_blended_polyrhythm,
    get_blended_time_signature,
)
from style_engine.selection.genre_parser import parse_genre_components
from style_engine.selection.pool_selector import has_exclusion, select, select_instruments_for_genre
from style_engine.selection.registry import (
    NOT_FOUND,
    CanonicalRegistry,
    RegistryEntry,
    default_registry,
    get_category,
    is_valid_instrument,
    to_canonical,
)

__all__ = [
    "NOT_FOUND",
    "CanonicalRegistry",
    "RegistryEntry",
    "default_registry",
    "to_canonical",
    "is_valid_instrument",
    "get_category",
    "PickRange",
    "Pool",
    "ExclusionRule",
    "SelectionDefinition",
    "GENRE_REGISTRY",
    "select",
    "has_exclusion",
    "select_instruments_for_genre",
    "blend",
    "collect_all",
    "collect_and_pick",
    "parse_genre_components",
    "get_blended_time_signature",
    "get_all_blended_time_signatures",
    "get_blended_harmonic_style",
    "get_all_blended_harmonic_styles",
    "get_blended_polyrhythm",
    "get_all_blended_polyrhythms",
    "articulate_instrument",
    "articulate_instrument_with_themes",
]
