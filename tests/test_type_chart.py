from pokezone.battle.type_chart import (
    ALL_TYPES, TYPE_CHART, defensive_profile, effectiveness_label, get_type_effectiveness, has_stab_bonus,
)


def test_chart_covers_eighteen_types():
    assert len(ALL_TYPES) == 18
    for attack, row in TYPE_CHART.items():
        assert set(row) <= set(ALL_TYPES), attack


def test_single_and_dual_type_products():
    assert get_type_effectiveness('fire', ['grass']) == 2
    assert get_type_effectiveness('fire', ['grass', 'bug']) == 4
    assert get_type_effectiveness('fire', ['grass', 'water']) == 1
    assert get_type_effectiveness('water', ['grass', 'dragon']) == 0.25


def test_any_immunity_zeroes_the_product():
    assert get_type_effectiveness('electric', ['water', 'ground']) == 0
    assert get_type_effectiveness('normal', ['ghost']) == 0
    assert get_type_effectiveness('dragon', ['fairy']) == 0


def test_unknown_types_are_neutral():
    assert get_type_effectiveness('shadow', ['grass']) == 1
    assert get_type_effectiveness('fire', ['shadow']) == 1
    assert get_type_effectiveness('fire', []) == 1


def test_effectiveness_labels():
    assert effectiveness_label(4) == 'super_effective'
    assert effectiveness_label(2) == 'super_effective'
    assert effectiveness_label(1) == 'neutral'
    assert effectiveness_label(0.5) == 'not_very_effective'
    assert effectiveness_label(0) == 'not_very_effective'


def test_stab_is_case_insensitive():
    assert has_stab_bonus('Fire', ['fire', 'flying'])
    assert has_stab_bonus('flying', ['FIRE', 'Flying'])
    assert not has_stab_bonus('water', ['fire'])


def test_defensive_profile_lists_every_attack_type():
    prof = defensive_profile(['water', 'ground'])
    assert prof['grass'] == 4
    assert prof['electric'] == 0
    assert set(prof) == set(ALL_TYPES)
