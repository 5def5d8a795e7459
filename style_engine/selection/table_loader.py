"""Load selection tables from YAML.

The file is validated once, at this boundary, with pydantic models. Callers get
a typed result they can match on instead of probing dict shapes:

    result = load_selection_tables(path)
    if isinstance(result, TablesLoaded):
        tables = result.tables
    else:
        handle(result.kind)          # missing | parse | schema | integrity

Sections are all optional; an ``instruments`` section replaces the bundled
registry, otherwise the default registry is used.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from style_engine import logging_util
from style_engine.cache_util import CachedValue, Clock, refresh_if_stale, system_clock_ms
from style_engine.exceptions import DefinitionError, TableLoadError
from style_engine.selection.definitions import PickRange, Pool, SelectionDefinition
from style_engine.selection.registry import (
    CanonicalRegistry,
    RegistryEntry,
    default_registry,
    find_integrity_violations,
)
from style_engine.settings import TABLE_CACHE_TTL_MS, tables_path
from style_engine.type_definitions import InstrumentCategory, LoadFailureKind

__all__ = [
    "BlendTable",
    "SelectionTables",
    "TablesLoaded",
    "TablesLoadFailed",
    "LoadResult",
    "load_selection_tables",
    "load_selection_tables_or_raise",
    "load_selection_tables_cached",
]

LOGGER = logging_util.get_logger(__name__)


# ----------------------------------------------------------------------------------
# FILE SCHEMA
# ----------------------------------------------------------------------------------

class PickRangeModel(BaseModel):
    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)

    model_config = ConfigDict(extra='forbid')

    @model_validator(mode='after')
    def _ordered(self) -> "PickRangeModel":
        if self.min > self.max:
            raise ValueError(f"pick.min ({self.min}) exceeds pick.max ({self.max})")
        return self


class PoolModel(BaseModel):
    pick: PickRangeModel
    items: List[str] = Field(default_factory=list)
    chance_to_include: Optional[float] = Field(None, ge=0.0, le=1.0)

    model_config = ConfigDict(extra='forbid')


class DefinitionModel(BaseModel):
    description: str = ''
    max_total: int = Field(..., ge=0)
    pool_order: List[str]
    pools: Dict[str, PoolModel]
    exclusion_rules: List[Tuple[str, str]] = Field(default_factory=list)

    model_config = ConfigDict(extra='forbid')


class InstrumentModel(BaseModel):
    canonical: str = Field(..., min_length=1)
    category: InstrumentCategory
    aliases: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra='forbid')


class BlendModel(BaseModel):
    # None: sources without a mapping are skipped instead of using a fallback
    default: Optional[List[str]] = None
    sources: Dict[str, List[str]] = Field(default_factory=dict)

    model_config = ConfigDict(extra='forbid')


class TablesFileModel(BaseModel):
    version: int = 1
    instruments: Optional[List[InstrumentModel]] = None
    definitions: Dict[str, DefinitionModel] = Field(default_factory=dict)
    blends: Dict[str, BlendModel] = Field(default_factory=dict)

    model_config = ConfigDict(extra='forbid')


# ----------------------------------------------------------------------------------
# RESULT TYPES
# ----------------------------------------------------------------------------------

@dataclass(frozen=True)
class BlendTable:
    sources: Dict[str, Tuple[str, ...]]
    default: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class SelectionTables:
    registry: CanonicalRegistry
    definitions: Dict[str, SelectionDefinition] = field(default_factory=dict)
    blends: Dict[str, BlendTable] = field(default_factory=dict)
    version: int = 1
    path: str = ''


@dataclass(frozen=True)
class TablesLoaded:
    tables: SelectionTables
    ok: bool = True


@dataclass(frozen=True)
class TablesLoadFailed:
    kind: LoadFailureKind
    message: str
    path: str = ''
    ok: bool = False


LoadResult = Union[TablesLoaded, TablesLoadFailed]


def _failed(kind: LoadFailureKind, message: str, path: Path) -> TablesLoadFailed:
    LOGGER.warning("selection_tables_failed kind=%s path=%s error=%s", kind, path, message)
    return TablesLoadFailed(kind=kind, message=message, path=str(path))


def _build_definition(name: str, model: DefinitionModel) -> SelectionDefinition:
    pools = {
        pool_name: Pool(
            pick=PickRange(pool.pick.min, pool.pick.max),
            items=tuple(pool.items),
            chance_to_include=pool.chance_to_include,
        )
        for pool_name, pool in model.pools.items()
    }
    return SelectionDefinition.build(
        name,
        pools,
        model.pool_order,
        model.max_total,
        exclusion_rules=model.exclusion_rules,
        description=model.description,
    )


def load_selection_tables(path: str | os.PathLike[str] | None = None) -> LoadResult:
    """Read, validate and build selection tables. Never raises for bad input files."""
    resolved = Path(tables_path(str(path) if path else None))
    if not resolved.exists():
        return _failed("missing", f"selection tables not found: {resolved}", resolved)

    try:
        with resolved.open('r', encoding='utf-8') as handle:
            raw = yaml.safe_load(handle)
    except (OSError, yaml.YAMLError) as exc:
        return _failed("parse", str(exc), resolved)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return _failed("parse", f"top-level YAML must be a mapping, got {type(raw).__name__}", resolved)

    try:
        model = TablesFileModel.model_validate(raw)
    except ValidationError as exc:
        return _failed("schema", str(exc), resolved)

    if model.instruments is None:
        registry = default_registry()
    else:
        entries = [RegistryEntry(i.canonical, i.category, tuple(i.aliases)) for i in model.instruments]
        violations = find_integrity_violations(entries)
        if violations:
            return _failed("integrity", "; ".join(violations), resolved)
        registry = CanonicalRegistry.from_entries(entries)

    try:
        definitions = {name: _build_definition(name, d) for name, d in model.definitions.items()}
    except (DefinitionError, ValueError) as exc:
        return _failed("schema", str(exc), resolved)

    blends = {
        name: BlendTable(
            sources={key: tuple(values) for key, values in blend.sources.items()},
            default=tuple(blend.default) if blend.default is not None else None,
        )
        for name, blend in model.blends.items()
    }
    tables = SelectionTables(
        registry=registry,
        definitions=definitions,
        blends=blends,
        version=model.version,
        path=str(resolved),
    )
    LOGGER.info(
        "selection_tables_loaded definitions=%d blends=%d instruments=%d path=%s",
        len(definitions), len(blends), len(registry), resolved,
    )
    return TablesLoaded(tables=tables)


def load_selection_tables_or_raise(path: str | os.PathLike[str] | None = None) -> SelectionTables:
    result = load_selection_tables(path)
    if isinstance(result, TablesLoadFailed):
        raise TableLoadError(result.kind, result.message, details={"path": result.path})
    return result.tables


def load_selection_tables_cached(
    path: str | os.PathLike[str] | None = None,
    cached: Optional[CachedValue[LoadResult]] = None,
    clock: Clock = system_clock_ms,
    ttl_ms: float = TABLE_CACHE_TTL_MS,
) -> CachedValue[LoadResult]:
    """Return ``cached`` while it is fresh, else reload and stamp a new value.

    The cache belongs to the caller; failures are cached too so a missing file
    is not re-checked on every call within the TTL.
    """
    return refresh_if_stale(cached, lambda: load_selection_tables(path), ttl_ms, clock)
