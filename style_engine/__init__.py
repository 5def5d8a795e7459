"""Constrained procedural selection engine.

Reproducible selection of instruments and musical attributes from static
tables: a canonical alias registry, a seeded random source, a quota and
exclusion constrained pool selector, a frequency-weighted blender and an
optional decision trace.
"""
from __future__ import annotations

from style_engine.exceptions import (
    DefinitionError,
    EmptyCandidatesError,
    InvariantError,
    RegistryIntegrityError,
    SampleSizeError,
    StyleEngineError,
    TableLoadError,
)
from style_engine.random_util import (
    Mulberry32,
    RandomSource,
    create_seeded_source,
    derive_seed_from_string,
    draw_int_inclusive,
    generate_seed,
    get_random,
    pick_one,
    roll_chance,
    select_n,
    select_one,
    shuffle,
)
from style_engine.selection import (
    NOT_FOUND,
    CanonicalRegistry,
    SelectionDefinition,
    blend,
    collect_all,
    get_category,
    is_valid_instrument,
    select,
    select_instruments_for_genre,
    to_canonical,
)
from style_engine.trace import TraceRecorder, TraceRun, create_recorder, maybe_create_recorder

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "StyleEngineError",
    "InvariantError",
    "EmptyCandidatesError",
    "SampleSizeError",
    "RegistryIntegrityError",
    "DefinitionError",
    "TableLoadError",
    "Mulberry32",
    "RandomSource",
    "create_seeded_source",
    "derive_seed_from_string",
    "generate_seed",
    "get_random",
    "shuffle",
    "pick_one",
    "select_one",
    "select_n",
    "draw_int_inclusive",
    "roll_chance",
    "NOT_FOUND",
    "CanonicalRegistry",
    "SelectionDefinition",
    "to_canonical",
    "is_valid_instrument",
    "get_category",
    "select",
    "select_instruments_for_genre",
    "blend",
    "collect_all",
    "TraceRecorder",
    "TraceRun",
    "create_recorder",
    "maybe_create_recorder",
]
