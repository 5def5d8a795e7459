from __future__ import annotations

import pytest

from style_engine.exceptions import DefinitionError
from style_engine.selection.definitions import ExclusionRule, PickRange, Pool, SelectionDefinition, pool_from_dict
from style_engine.selection.genre_definitions import GENRE_REGISTRY
from style_engine.selection.genre_parser import KNOWN_GENRES


def test_registry_keys_are_known_lowercase_genres():
    for key in GENRE_REGISTRY:
        assert key == key.lower()
        assert key in KNOWN_GENRES


@pytest.mark.parametrize('key', sorted(GENRE_REGISTRY))
def test_bundled_definition_is_well_formed(key):
    definition = GENRE_REGISTRY[key]
    assert definition.max_total > 0
    assert definition.pool_order
    assert set(definition.pool_order) <= set(definition.pools)
    for pool in definition.pools.values():
        assert 0 <= pool.pick.min <= pool.pick.max
        assert pool.items
    bpm = definition.extras.get('bpm')
    assert bpm and bpm['min'] <= bpm['typical'] <= bpm['max']


def test_pool_from_dict_reads_table_keys():
    pool = pool_from_dict({'pick': {'min': 0, 'max': 2}, 'chanceToInclude': 0.25, 'items': ['a', 'b']})
    assert pool == Pool(pick=PickRange(0, 2), items=('a', 'b'), chance_to_include=0.25)
    assert pool_from_dict({'items': ['x']}).pick == PickRange(0, 0)


def test_invalid_definitions_rejected():
    good_pool = {'pick': {'min': 1, 'max': 1}, 'items': ['a']}
    with pytest.raises(DefinitionError):
        SelectionDefinition.build('neg', {'p': good_pool}, ['p'], -1)
    with pytest.raises(DefinitionError):
        SelectionDefinition.build('order', {'p': good_pool}, ['q'], 1)
    with pytest.raises(DefinitionError):
        SelectionDefinition.build('range', {'p': {'pick': {'min': 2, 'max': 1}, 'items': ['a']}}, ['p'], 1)
    with pytest.raises(DefinitionError):
        SelectionDefinition.build('chance', {'p': {**good_pool, 'chanceToInclude': 1.5}}, ['p'], 1)
    with pytest.raises(ValueError):
        ExclusionRule.from_pair(('a', 'b', 'c'))


def test_exclusion_rule_is_symmetric_and_case_insensitive():
    rule = ExclusionRule('Rhodes', 'Hammond')
    assert rule.conflicts('fender rhodes', 'HAMMOND organ')
    assert rule.conflicts('Hammond organ', 'Rhodes')
    assert not rule.conflicts('Rhodes', 'Wurlitzer')
