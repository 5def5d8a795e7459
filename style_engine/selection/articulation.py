"""Optional articulation prefixes for selected instruments.

"Fingerpicked acoustic guitar" reads better than a bare instrument name, but
only some of the time; ``ARTICULATION_CHANCE`` controls how often.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence, Tuple

from style_engine.random_util import RandomSource, pick_one
from style_engine.settings import ARTICULATION_CHANCE

__all__ = [
    "ARTICULATIONS",
    "INSTRUMENT_FAMILIES",
    "THEME_ARTICULATION_BIAS",
    "THEME_ARTICULATION_BIAS_CHANCE",
    "instrument_family",
    "get_articulation_for_instrument",
    "articulate_instrument",
    "articulate_instrument_with_themes",
]

ARTICULATIONS: Dict[str, Tuple[str, ...]] = {
    'guitar': (
        'Arpeggiated', 'Strummed', 'Picked', 'Palm Muted', 'Fingerpicked',
        'Jangly', 'Clean', 'Overdriven', 'Crunchy', 'Chorus Drenched',
        'Reverb Soaked', 'Tremolo', 'Slide', 'Wah',
    ),
    'piano': ('Comping', 'Arpeggiated', 'Block Chords', 'Stride Style', 'Sparse', 'Rolling', 'Gentle', 'Dramatic'),
    'bass': ('Walking', 'Slapped', 'Picked', 'Round', 'Deep', 'Punchy', 'Subby', 'Groovy', 'Syncopated', 'Root Note'),
    'drums': ('Brushed', 'Tight', 'Punchy', 'Laid Back', 'Driving', 'Snappy', 'Tom Heavy', 'Minimal', 'Busy', 'Loose'),
    'strings': ('Legato', 'Staccato', 'Pizzicato', 'Tremolo', 'Swelling', 'Lush', 'Warm', 'Soaring', 'Mournful'),
    'brass': ('Muted', 'Bold', 'Fanfare', 'Stabs', 'Swells', 'Punchy', 'Warm', 'Bright'),
    'woodwind': ('Legato', 'Staccato', 'Soft', 'Bright', 'Warm', 'Solo', 'Ornamented', 'Runs'),
    'synth': ('Sidechained', 'Evolving', 'Plucky', 'Warm', 'Bright', 'Detuned', 'Filtered', 'Pulsing', 'Shimmering'),
    'organ': ('Swelling', 'Comping', 'Warm', 'Bright', 'Full', 'Sparse', 'Churchy'),
    'percussion': ('Tight', 'Loose', 'Syncopated', 'Soft', 'Driving', 'Minimal', 'Busy', 'Latin'),
}

# Articulation family per instrument; keys are lowercase.
INSTRUMENT_FAMILIES: Dict[str, str] = {
    'guitar': 'guitar',
    'acoustic guitar': 'guitar',
    'electric guitar': 'guitar',
    'nylon string guitar': 'guitar',
    'hollowbody guitar': 'guitar',
    'fender stratocaster': 'guitar',
    'telecaster': 'guitar',
    'distorted guitar': 'guitar',
    'clean guitar': 'guitar',
    'fretless guitar': 'guitar',
    'piano': 'piano',
    'grand piano': 'piano',
    'felt piano': 'piano',
    'prepared piano': 'piano',
    'rhodes': 'piano',
    'wurlitzer': 'piano',
    'electric piano': 'piano',
    'synth piano': 'piano',
    'bass': 'bass',
    'upright bass': 'bass',
    'walking bass': 'bass',
    'electric bass': 'bass',
    'synth bass': 'bass',
    '808': 'bass',
    'drums': 'drums',
    'jazz brushes': 'drums',
    'kick drum': 'drums',
    'snare': 'drums',
    'hi-hat': 'drums',
    'ride cymbal': 'drums',
    'toms': 'drums',
    'strings': 'strings',
    'violin': 'strings',
    'viola': 'strings',
    'cello': 'strings',
    'string ensemble': 'strings',
    'trumpet': 'brass',
    'muted trumpet': 'brass',
    'trombone': 'brass',
    'french horn': 'brass',
    'tuba': 'brass',
    'brass section': 'brass',
    'saxophone': 'woodwind',
    'tenor sax': 'woodwind',
    'alto sax': 'woodwind',
    'clarinet': 'woodwind',
    'flute': 'woodwind',
    'oboe': 'woodwind',
    'synth': 'synth',
    'synth pad': 'synth',
    'analog synth': 'synth',
    'fm synth': 'synth',
    'moog synth': 'synth',
    'arpeggiator': 'synth',
    'supersaw': 'synth',
    'organ': 'organ',
    'hammond organ': 'organ',
    'pipe organ': 'organ',
    'congas': 'percussion',
    'bongos': 'percussion',
    'shaker': 'percussion',
    'tambourine': 'percussion',
    'handclaps': 'percussion',
    'timpani': 'percussion',
}

THEME_ARTICULATION_BIAS_CHANCE = 0.6

# theme keyword -> family -> preferred articulations
THEME_ARTICULATION_BIAS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    'gentle': {'guitar': ('Fingerpicked', 'Clean'), 'piano': ('Gentle', 'Sparse')},
    'aggressive': {'guitar': ('Crunchy', 'Overdriven'), 'drums': ('Punchy', 'Driving')},
    'dreamy': {'guitar': ('Reverb Soaked', 'Chorus Drenched'), 'synth': ('Shimmering', 'Evolving')},
    'intimate': {'piano': ('Sparse', 'Gentle'), 'strings': ('Warm', 'Legato')},
    'soft': {'guitar': ('Clean', 'Fingerpicked'), 'piano': ('Gentle', 'Sparse')},
    'hard': {'guitar': ('Crunchy', 'Overdriven'), 'drums': ('Punchy', 'Driving')},
    'ethereal': {'synth': ('Shimmering', 'Evolving'), 'strings': ('Swelling', 'Lush')},
    'warm': {'piano': ('Gentle',), 'strings': ('Warm', 'Legato'), 'bass': ('Round', 'Deep')},
    'energetic': {'drums': ('Driving', 'Punchy'), 'bass': ('Punchy', 'Groovy')},
    'melancholic': {'piano': ('Sparse', 'Gentle'), 'strings': ('Mournful', 'Legato')},
}


def instrument_family(instrument: str, families: Mapping[str, str] = INSTRUMENT_FAMILIES) -> Optional[str]:
    if not isinstance(instrument, str):
        return None
    return families.get(instrument.strip().lower())


def get_articulation_for_instrument(instrument: str, source: RandomSource) -> Optional[str]:
    """Uniformly drawn articulation for the instrument's family, or None.

    Draws nothing when the instrument has no family.
    """
    family = instrument_family(instrument)
    if family is None:
        return None
    return pick_one(ARTICULATIONS.get(family, ()), source)


def articulate_instrument(instrument: str, source: RandomSource, chance: float = ARTICULATION_CHANCE) -> str:
    if source() > chance:
        return instrument
    articulation = get_articulation_for_instrument(instrument, source)
    if not articulation:
        return instrument
    return f"{articulation} {instrument}"


def articulate_instrument_with_themes(
    instrument: str,
    source: RandomSource,
    themes: Sequence[str] = (),
    chance: float = ARTICULATION_CHANCE,
    bias_chance: float = THEME_ARTICULATION_BIAS_CHANCE,
) -> str:
    """Like :func:`articulate_instrument`, leaning on theme-specific articulations.

    The first theme with a preference for the instrument's family gets a
    ``bias_chance`` shot at choosing from that preference; otherwise the
    standard uniform articulation is used.
    """
    if source() > chance:
        return instrument
    family = instrument_family(instrument)
    if family is None:
        return instrument

    for theme in themes:
        preferred = THEME_ARTICULATION_BIAS.get(str(theme).strip().lower(), {}).get(family)
        if not preferred:
            continue
        if source() < bias_chance:
            chosen = pick_one(preferred, source)
            if chosen:
                return f"{chosen} {instrument}"
        break

    articulation = pick_one(ARTICULATIONS.get(family, ()), source)
    if not articulation:
        return instrument
    return f"{articulation} {instrument}"
