from __future__ import annotations

from style_engine.random_util import create_seeded_source
from style_engine.selection.articulation import (
    ARTICULATIONS,
    INSTRUMENT_FAMILIES,
    THEME_ARTICULATION_BIAS,
    articulate_instrument,
    articulate_instrument_with_themes,
    get_articulation_for_instrument,
    instrument_family,
)


def test_family_tables_are_consistent():
    assert set(INSTRUMENT_FAMILIES.values()) <= set(ARTICULATIONS)
    assert all(key == key.lower() for key in INSTRUMENT_FAMILIES)
    for families in THEME_ARTICULATION_BIAS.values():
        for family, preferred in families.items():
            assert set(preferred) <= set(ARTICULATIONS[family])


def test_instrument_family_lookup():
    assert instrument_family('  Acoustic Guitar ') == 'guitar'
    assert instrument_family('Rhodes') == 'piano'
    assert instrument_family('theremin') is None
    assert instrument_family(None) is None  # type: ignore[arg-type]


def test_articulation_applied_when_roll_passes(scripted):
    assert articulate_instrument('acoustic guitar', scripted([0.1, 0.0])) == 'Arpeggiated acoustic guitar'


def test_roll_equal_to_chance_still_applies(scripted):
    assert articulate_instrument('cello', scripted([0.4, 0.0]), chance=0.4) == 'Legato cello'


def test_articulation_skipped_when_roll_fails(scripted):
    src = scripted([0.9])
    assert articulate_instrument('acoustic guitar', src) == 'acoustic guitar'
    assert src.calls == 1


def test_unknown_instrument_is_returned_unchanged(scripted):
    src = scripted([0.1])
    assert articulate_instrument('theremin', src) == 'theremin'
    assert get_articulation_for_instrument('theremin', src) is None
    assert src.calls == 1


def test_articulation_comes_from_family_list():
    for seed in range(30):
        articulation = get_articulation_for_instrument('trumpet', create_seeded_source(seed))
        assert articulation in ARTICULATIONS['brass']


def test_theme_bias_prefers_theme_articulations(scripted):
    result = articulate_instrument_with_themes('acoustic guitar', scripted([0.1, 0.0, 0.0]), themes=['Gentle'])
    assert result == 'Fingerpicked acoustic guitar'


def test_theme_bias_miss_falls_back_to_uniform(scripted):
    result = articulate_instrument_with_themes('acoustic guitar', scripted([0.1, 0.9, 0.0]), themes=['gentle'])
    assert result == 'Arpeggiated acoustic guitar'


def test_theme_without_family_preference_is_ignored(scripted):
    # 'energetic' has no guitar preference: base roll, then the uniform pick
    src = scripted([0.1, 0.0])
    assert articulate_instrument_with_themes('acoustic guitar', src, themes=['energetic']) == 'Arpeggiated acoustic guitar'
    assert src.calls == 2


def test_themed_articulation_without_themes_matches_plain():
    for seed in range(20):
        plain = articulate_instrument('grand piano', create_seeded_source(seed))
        themed = articulate_instrument_with_themes('grand piano', create_seeded_source(seed))
        assert plain == themed
