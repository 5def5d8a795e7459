"""Per-genre musical attributes and their blended getters.

Each mapping lists the values typical for a genre, most characteristic first.
The getters accept a free-form genre string ("jazz rock", "ambient, metal"),
split it into known genres and blend the per-genre lists:

- time signatures use frequency-weighted blending, so meters shared by several
  genres win most of the time;
- harmonic styles and polyrhythms draw uniformly from the combined pool;
- polyrhythms have no default, so genres without a tradition contribute nothing.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from style_engine.random_util import RandomSource, default_source
from style_engine.selection.blender import blend, collect_all, collect_and_pick
from style_engine.selection.genre_parser import parse_genre_components
from style_engine.settings import TOP_HALF_SELECTION_WEIGHT

if TYPE_CHECKING:
    from style_engine.trace.recorder import TraceRecorder

__all__ = [
    "GENRE_TIME_SIGNATURES",
    "DEFAULT_TIME_SIGNATURES",
    "GENRE_HARMONIC_STYLES",
    "DEFAULT_HARMONIC_STYLES",
    "GENRE_POLYRHYTHMS",
    "DEFAULT_POLYRHYTHMS",
    "get_blended_time_signature",
    "get_all_blended_time_signatures",
    "get_blended_harmonic_style",
    "get_all_blended_harmonic_styles",
    "get_blended_polyrhythm",
    "get_all_blended_polyrhythms",
]

GENRE_TIME_SIGNATURES: Dict[str, Tuple[str, ...]] = {
    'jazz': ('time_4_4', 'time_5_4', 'time_3_4', 'time_6_8', 'time_9_8'),
    'rock': ('time_4_4', 'time_6_8'),
    'metal': ('time_4_4', 'time_7_8', 'time_6_8'),
    'classical': ('time_4_4', 'time_3_4', 'time_6_8', 'time_9_8'),
    'folk': ('time_4_4', 'time_3_4', 'time_6_8', 'time_9_8'),
    'country': ('time_4_4', 'time_3_4', 'time_6_8'),
    'latin': ('time_4_4', 'time_6_8', 'time_3_4'),
    'afrobeat': ('time_4_4', 'time_6_8'),
    'electronic': ('time_4_4',),
    'pop': ('time_4_4', 'time_6_8'),
    'ambient': ('time_4_4', 'time_6_8', 'time_3_4'),
    'blues': ('time_4_4', 'time_6_8', 'time_3_4'),
    'punk': ('time_4_4',),
    'symphonic': ('time_4_4', 'time_3_4', 'time_6_8', 'time_9_8'),
    'cinematic': ('time_4_4', 'time_3_4', 'time_6_8', 'time_5_4'),
    'lofi': ('time_4_4', 'time_6_8'),
    'trap': ('time_4_4',),
    'house': ('time_4_4',),
    'trance': ('time_4_4',),
    'downtempo': ('time_4_4', 'time_6_8', 'time_3_4'),
    'dreampop': ('time_4_4', 'time_6_8'),
    'indie': ('time_4_4', 'time_6_8', 'time_3_4', 'time_5_4'),
    'funk': ('time_4_4',),
    'disco': ('time_4_4',),
    'rnb': ('time_4_4', 'time_6_8'),
    'soul': ('time_4_4', 'time_6_8', 'time_3_4'),
    'reggae': ('time_4_4',),
    'synthwave': ('time_4_4',),
    'videogame': ('time_4_4', 'time_3_4', 'time_6_8', 'time_5_4', 'time_7_8'),
    'retro': ('time_4_4', 'time_3_4', 'time_6_8'),
    'melodictechno': ('time_4_4',),
    'chillwave': ('time_4_4', 'time_6_8'),
    'newage': ('time_4_4', 'time_6_8', 'time_3_4'),
    'hyperpop': ('time_4_4',),
    'drill': ('time_4_4',),
}
DEFAULT_TIME_SIGNATURES: Tuple[str, ...] = ('time_4_4',)

GENRE_HARMONIC_STYLES: Dict[str, Tuple[str, ...]] = {
    'jazz': ('dorian', 'mixolydian', 'lydian_dominant', 'melodic_minor'),
    'metal': ('phrygian', 'aeolian', 'harmonic_minor', 'locrian'),
    'classical': ('ionian', 'aeolian', 'harmonic_minor', 'lydian'),
    'latin': ('dorian', 'phrygian', 'mixolydian'),
    'ambient': ('lydian', 'aeolian', 'ionian'),
    'blues': ('mixolydian', 'dorian', 'aeolian'),
    'rock': ('mixolydian', 'aeolian', 'ionian', 'dorian'),
    'electronic': ('aeolian', 'dorian', 'phrygian'),
    'folk': ('ionian', 'dorian', 'mixolydian', 'aeolian'),
    'pop': ('ionian', 'lydian', 'mixolydian'),
    'synthwave': ('dorian', 'aeolian', 'lydian'),
    'cinematic': ('lydian', 'aeolian', 'harmonic_minor', 'lydian_augmented'),
    'lofi': ('dorian', 'lydian', 'mixolydian'),
    'trap': ('aeolian', 'phrygian', 'dorian'),
    'punk': ('aeolian', 'mixolydian', 'ionian'),
    'soul': ('dorian', 'mixolydian', 'aeolian'),
    'rnb': ('dorian', 'mixolydian', 'lydian'),
    'country': ('ionian', 'mixolydian', 'dorian'),
    'reggae': ('dorian', 'mixolydian', 'aeolian'),
    'afrobeat': ('dorian', 'mixolydian', 'aeolian'),
    'house': ('dorian', 'mixolydian', 'ionian'),
    'trance': ('aeolian', 'lydian', 'dorian'),
    'downtempo': ('dorian', 'aeolian', 'lydian'),
    'dreampop': ('lydian', 'ionian', 'dorian'),
    'chillwave': ('dorian', 'lydian', 'mixolydian'),
    'newage': ('lydian', 'ionian', 'dorian'),
    'hyperpop': ('lydian', 'phrygian', 'aeolian'),
    'drill': ('phrygian', 'aeolian', 'locrian'),
    'melodictechno': ('dorian', 'aeolian', 'phrygian'),
    'indie': ('ionian', 'dorian', 'lydian', 'mixolydian'),
    'funk': ('dorian', 'mixolydian'),
    'disco': ('ionian', 'dorian', 'mixolydian'),
    'retro': ('ionian', 'dorian', 'mixolydian'),
    'symphonic': ('aeolian', 'harmonic_minor', 'lydian', 'ionian'),
    'videogame': ('lydian', 'dorian', 'aeolian', 'ionian'),
}
DEFAULT_HARMONIC_STYLES: Tuple[str, ...] = ('ionian', 'dorian', 'aeolian')

# Only genres with a real polyrhythmic tradition are listed.
GENRE_POLYRHYTHMS: Dict[str, Tuple[str, ...]] = {
    'afrobeat': ('afrobeat', 'african_compound', 'hemiola'),
    'latin': ('hemiola', 'reverse_hemiola', 'afrobeat'),
    'jazz': ('hemiola', 'reverse_hemiola'),
    'metal': ('shifting', 'evolving', 'limping'),
    'funk': ('hemiola', 'reverse_hemiola'),
    'soul': ('hemiola',),
    'blues': ('hemiola', 'reverse_hemiola'),
    'electronic': ('hemiola', 'afrobeat'),
    'folk': ('hemiola', 'reverse_hemiola'),
    'classical': ('hemiola', 'reverse_hemiola'),
    'ambient': ('reverse_hemiola',),
    'reggae': ('hemiola',),
    'downtempo': ('hemiola', 'reverse_hemiola', 'afrobeat'),
    'house': ('hemiola', 'afrobeat'),
    'videogame': ('hemiola', 'shifting', 'reverse_hemiola'),
    'symphonic': ('hemiola', 'reverse_hemiola', 'evolving'),
    'cinematic': ('hemiola', 'reverse_hemiola', 'evolving'),
    'indie': ('hemiola', 'shifting'),
}
DEFAULT_POLYRHYTHMS: Optional[Tuple[str, ...]] = None


def get_blended_time_signature(
    genre_string: str,
    source: Optional[RandomSource] = None,
    *,
    top_half_bias: float = TOP_HALF_SELECTION_WEIGHT,
    recorder: Optional["TraceRecorder"] = None,
) -> Optional[str]:
    components = parse_genre_components(genre_string)
    if not components:
        return None
    return blend(
        components,
        GENRE_TIME_SIGNATURES,
        DEFAULT_TIME_SIGNATURES,
        source if source is not None else default_source(),
        top_half_bias=top_half_bias,
        recorder=recorder,
        key="rhythm.timeSignature",
        domain="rhythm",
    )


def get_all_blended_time_signatures(genre_string: str) -> List[str]:
    return collect_all(parse_genre_components(genre_string), GENRE_TIME_SIGNATURES, DEFAULT_TIME_SIGNATURES)


def get_blended_harmonic_style(genre_string: str, source: Optional[RandomSource] = None) -> Optional[str]:
    components = parse_genre_components(genre_string)
    if not components:
        return None
    return collect_and_pick(
        components,
        GENRE_HARMONIC_STYLES,
        DEFAULT_HARMONIC_STYLES,
        source if source is not None else default_source(),
    )


def get_all_blended_harmonic_styles(genre_string: str) -> List[str]:
    return collect_all(parse_genre_components(genre_string), GENRE_HARMONIC_STYLES, DEFAULT_HARMONIC_STYLES)


def get_blended_polyrhythm(genre_string: str, source: Optional[RandomSource] = None) -> Optional[str]:
    components = parse_genre_components(genre_string)
    if not components:
        return None
    return collect_and_pick(
        components,
        GENRE_POLYRHYTHMS,
        DEFAULT_POLYRHYTHMS,
        source if source is not None else default_source(),
    )


def get_all_blended_polyrhythms(genre_string: str) -> List[str]:
    return collect_all(parse_genre_components(genre_string), GENRE_POLYRHYTHMS, DEFAULT_POLYRHYTHMS)
