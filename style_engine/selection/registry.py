"""Canonical instrument registry.

Resolves free-form aliases to one canonical name plus a category. Matching is
case-insensitive and exact (no fuzzy matching): the alias table is built once
from a static sequence of entries and is read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from style_engine import logging_util
from style_engine.exceptions import RegistryIntegrityError
from style_engine.type_definitions import INSTRUMENT_CATEGORIES, InstrumentCategory

__all__ = [
    "NOT_FOUND",
    "RegistryEntry",
    "CanonicalRegistry",
    "normalize_token",
    "find_integrity_violations",
    "default_registry",
    "to_canonical",
    "is_valid_instrument",
    "get_category",
]

LOGGER = logging_util.get_logger(__name__)

# Sentinel returned for unknown tokens. Callers decide whether to keep the raw
# token or drop it.
NOT_FOUND = None


def normalize_token(value: str) -> str:
    return " ".join(str(value or "").split()).lower()


@dataclass(frozen=True)
class RegistryEntry:
    canonical: str
    category: InstrumentCategory
    aliases: Tuple[str, ...] = ()

    def keys(self) -> List[str]:
        """Lowercased lookup keys: the canonical name first, then each alias once."""
        seen: set[str] = set()
        out: List[str] = []
        for raw in (self.canonical, *self.aliases):
            key = normalize_token(raw)
            if not key or key in seen:
                continue
            seen.add(key)
            out.append(key)
        return out


def find_integrity_violations(entries: Iterable[RegistryEntry]) -> List[str]:
    """Describe every case-insensitive collision between entries.

    An entry may list its own canonical name among its aliases; that is not a
    collision. Unknown categories are reported as well.
    """
    owner: Dict[str, str] = {}
    violations: List[str] = []
    for entry in entries:
        if entry.category not in INSTRUMENT_CATEGORIES:
            violations.append(f"'{entry.canonical}' has unknown category '{entry.category}'")
        if not normalize_token(entry.canonical):
            violations.append("entry with empty canonical name")
            continue
        for key in entry.keys():
            previous = owner.get(key)
            if previous is not None and previous != entry.canonical:
                violations.append(f"'{key}' maps to both '{previous}' and '{entry.canonical}'")
                continue
            owner[key] = entry.canonical
    return violations


class CanonicalRegistry:
    """Alias -> canonical lookup with O(1) resolution.

    Build with :meth:`from_entries`; construction fails with
    :class:`RegistryIntegrityError` when two entries share a canonical name or
    alias (case-insensitively), so every instance satisfies the uniqueness
    invariant by construction.
    """

    def __init__(self, entries: Sequence[RegistryEntry]):
        violations = find_integrity_violations(entries)
        if violations:
            raise RegistryIntegrityError(violations, details={"entries": len(entries)})
        self._entries: Tuple[RegistryEntry, ...] = tuple(entries)
        self._alias_to_entry: Dict[str, RegistryEntry] = {}
        for entry in self._entries:
            for key in entry.keys():
                self._alias_to_entry[key] = entry
        LOGGER.debug("registry_built entries=%d aliases=%d", len(self._entries), len(self._alias_to_entry))

    @classmethod
    def from_entries(cls, entries: Iterable[RegistryEntry]) -> "CanonicalRegistry":
        return cls(list(entries))

    @property
    def entries(self) -> Tuple[RegistryEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.is_valid_instrument(token)

    def _lookup(self, token: str) -> Optional[RegistryEntry]:
        if not isinstance(token, str):
            return None
        return self._alias_to_entry.get(normalize_token(token))

    def to_canonical(self, token: str) -> Optional[str]:
        entry = self._lookup(token)
        return entry.canonical if entry is not None else NOT_FOUND

    def is_valid_instrument(self, token: str) -> bool:
        return self._lookup(token) is not None

    def get_category(self, token: str) -> Optional[InstrumentCategory]:
        entry = self._lookup(token)
        return entry.category if entry is not None else NOT_FOUND

    def canonical_names(self) -> List[str]:
        return [entry.canonical for entry in self._entries]

    def instruments_by_category(self, category: InstrumentCategory) -> List[str]:
        return [entry.canonical for entry in self._entries if entry.category == category]

    def normalize(self, token: str) -> str:
        """Canonical name for ``token`` when known, else the token unchanged."""
        canonical = self.to_canonical(token)
        return canonical if canonical is not None else token


@lru_cache(maxsize=1)
def default_registry() -> CanonicalRegistry:
    """Registry over the bundled instrument table, built once per process."""
    from style_engine.selection.registry_data import INSTRUMENT_REGISTRY

    registry = CanonicalRegistry.from_entries(INSTRUMENT_REGISTRY)
    LOGGER.info("instrument_registry_loaded entries=%d", len(registry))
    return registry


def to_canonical(token: str) -> Optional[str]:
    return default_registry().to_canonical(token)


def is_valid_instrument(token: str) -> bool:
    return default_registry().is_valid_instrument(token)


def get_category(token: str) -> Optional[InstrumentCategory]:
    return default_registry().get_category(token)
