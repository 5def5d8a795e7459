from __future__ import annotations

import re
from typing import FrozenSet, List, Tuple

__all__ = [
    "KNOWN_GENRES",
    "GENRE_ALIASES",
    "is_valid_genre",
    "parse_genre_components",
]

# Genre keys understood by the blended mappings. Keys are single tokens so a
# compound request can be split on whitespace.
KNOWN_GENRES: FrozenSet[str] = frozenset({
    'afrobeat', 'ambient', 'blues', 'chillwave', 'cinematic', 'classical',
    'country', 'disco', 'downtempo', 'dreampop', 'drill', 'electronic', 'folk',
    'funk', 'house', 'hyperpop', 'indie', 'jazz', 'latin', 'lofi',
    'melodictechno', 'metal', 'newage', 'pop', 'punk', 'reggae', 'retro', 'rnb',
    'rock', 'soul', 'symphonic', 'synthwave', 'trance', 'trap', 'videogame',
})

# Multi-word spellings folded to their single-token key before splitting.
# Longer phrases first so "lo-fi" wins over any shorter overlap.
GENRE_ALIASES: Tuple[Tuple[str, str], ...] = (
    ('melodic techno', 'melodictechno'),
    ('video game', 'videogame'),
    ('dream pop', 'dreampop'),
    ('new age', 'newage'),
    ('r&b', 'rnb'),
    ('lo-fi', 'lofi'),
    ('lo fi', 'lofi'),
)

_SEPARATORS = re.compile(r"\s+and\s+|\s*&\s*|[\s,\-/]+")


def is_valid_genre(genre: str) -> bool:
    return isinstance(genre, str) and genre.strip().lower() in KNOWN_GENRES


def parse_genre_components(genre: str) -> List[str]:
    """Extract recognized genre keys from a free-form genre string.

    "ambient symphonic rock" -> ["ambient", "symphonic", "rock"];
    "ambient, metal" -> ["ambient", "metal"]. Unrecognized parts are dropped,
    order is kept. A repeated genre is kept each time it appears, so it weighs
    more in a frequency-weighted blend.
    """
    if not isinstance(genre, str) or not genre.strip():
        return []
    normalized = " ".join(genre.lower().split())
    if normalized in KNOWN_GENRES:
        return [normalized]
    for phrase, key in GENRE_ALIASES:
        normalized = normalized.replace(phrase, key)

    recognized: List[str] = []
    for part in _SEPARATORS.split(normalized):
        if part in KNOWN_GENRES:
            recognized.append(part)
    return recognized
