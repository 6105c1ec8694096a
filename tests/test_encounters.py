import pytest

from pokezone.core.errors import ValidationError
from pokezone.data.loader import SpeciesRecord, SpeciesRepository
from pokezone.data.zones import (
    ZONES, all_zones, get_difficulty_constraints, get_difficulty_description, get_zone_by_id,
    is_valid_battle_difficulty, is_valid_zone_difficulty, is_valid_zone_id,
)
from pokezone.encounters.wild import WildPokemonGenerator

# Zone table

def test_zone_table():
    assert len(ZONES) == 8
    assert all(len(z.types) == 3 for z in all_zones())
    assert get_zone_by_id('volcano').types == ('fire', 'rock', 'ground')
    assert get_zone_by_id('moon') is None
    assert is_valid_zone_id('dojo') and not is_valid_zone_id('moon')


def test_difficulty_names():
    assert is_valid_zone_difficulty('medium') and not is_valid_zone_difficulty('normal')
    assert is_valid_battle_difficulty('normal') and not is_valid_battle_difficulty('medium')
    assert get_difficulty_constraints('hard').min_level_offset == 4
    assert 'SR' in get_difficulty_description('easy')
    with pytest.raises(ValidationError):
        get_difficulty_constraints('nightmare')

# Legacy difficulty mode

def test_legacy_generation_is_deterministic(species):
    gen = WildPokemonGenerator(species)
    assert gen.generate_wild_pokemon('normal', 5, 'battle_x') == gen.generate_wild_pokemon('normal', 5, 'battle_x')


def test_legacy_rarity_band_and_level_window(species):
    gen = WildPokemonGenerator(species)
    for i in range(40):
        w = gen.generate_wild_pokemon('difficult', 9, f'seed-{i}')
        assert 2 <= w.rarity <= 10
        assert 9 <= w.level <= 10
        assert w.current_hp == 100
        e = gen.generate_wild_pokemon('easy', 1, f'seed-{i}')
        assert e.rarity <= 2
        assert e.level == 1


def test_legacy_empty_band_falls_back_to_full_pool():
    repo = SpeciesRepository([SpeciesRecord(id=150, name='Mewtwo', types=('psychic',), rarity=15)])
    w = WildPokemonGenerator(repo).generate_wild_pokemon('easy', 5, 'seed')
    assert w.species_id == 150


def test_legacy_errors(species):
    with pytest.raises(ValidationError):
        WildPokemonGenerator(species).generate_wild_pokemon('medium', 5, 'seed')
    with pytest.raises(ValidationError):
        WildPokemonGenerator(SpeciesRepository([])).generate_wild_pokemon('easy', 5, 'seed')

# Zone mode

def test_zone_filters(species):
    gen = WildPokemonGenerator(species)
    assert [r.name for r in gen.filter_by_zone_and_difficulty('ocean', 'easy', 0.5)] == ['Squirtle', 'Eevee']
    assert [r.name for r in gen.filter_by_zone_and_difficulty('ocean', 'hard', 0.5)] == ['Squirtle', 'Eevee', 'Vaporeon']
    assert gen.filter_by_zone_and_difficulty('moon', 'easy', 0.5) == []
    assert gen.count_zone_pokemon('ocean', 'easy', 0.5) == 2


def test_zone_levels_follow_difficulty(species):
    gen = WildPokemonGenerator(species)
    for i in range(40):
        easy = gen.generate_zone_wild_pokemon('ocean', 'easy', 5, 0.5, f'z-{i}')
        assert easy.name in ('Squirtle', 'Eevee')
        assert 2 <= easy.level <= 5
        medium = gen.generate_zone_wild_pokemon('ocean', 'medium', 5, 0.5, f'z-{i}')
        assert 5 <= medium.level <= 8
        # zone levels are not capped at the owned-Pokemon maximum
        hard = gen.generate_zone_wild_pokemon('ocean', 'hard', 6, 0.5, f'z-{i}')
        assert 10 <= hard.level <= 12
        low = gen.generate_zone_wild_pokemon('ocean', 'easy', 1, 0.5, f'z-{i}')
        assert low.level == 1


def test_zone_generation_is_deterministic(species):
    gen = WildPokemonGenerator(species)
    a = gen.generate_zone_wild_pokemon('jungle', 'medium', 4, 1, 'battle_z')
    assert a == gen.generate_zone_wild_pokemon('jungle', 'medium', 4, 1, 'battle_z')


def test_zone_fallbacks():
    repo = SpeciesRepository([
        SpeciesRecord(id=3, name='Venusaur', types=('grass', 'poison'), rarity=6),
        SpeciesRecord(id=4, name='Charmander', types=('fire',), rarity=0.5),
    ])
    gen = WildPokemonGenerator(repo)
    # rarity cap empties the jungle pool; the zone's types are kept
    for i in range(10):
        assert gen.generate_zone_wild_pokemon('jungle', 'easy', 5, 0.5, f'f-{i}').name == 'Venusaur'
    # no zone match at all, or unknown zone: anything goes
    names = {gen.generate_zone_wild_pokemon('dragon-shrine', 'easy', 5, 0.5, f'f-{i}').name for i in range(30)}
    assert names == {'Venusaur', 'Charmander'}
    assert gen.generate_zone_wild_pokemon('moon', 'hard', 5, 0.5, 'f').name in ('Venusaur', 'Charmander')


def test_zone_unknown_difficulty(species):
    with pytest.raises(ValidationError):
        WildPokemonGenerator(species).generate_zone_wild_pokemon('ocean', 'normal', 5, 0.5, 'seed')


def test_zone_examples(species):
    gen = WildPokemonGenerator(species)
    assert gen.zone_example_pokemon('ocean', 'hard', 0.5) == ['Squirtle', 'Eevee', 'Vaporeon']
    assert gen.zone_example_pokemon('ocean', 'hard', 0.5, count=2) == ['Squirtle', 'Eevee']
    assert gen.zone_example_pokemon('moon', 'hard', 0.5) == []
