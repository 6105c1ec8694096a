from pokezone.battle.rng import (
    create_battle_rng, create_capture_rng, create_capture_seed, create_rng, create_seed,
    generate_battle_seed, roll_d20,
)


def test_seed_formats():
    assert create_seed('battle_1', 3) == 'battle_1:3'
    assert create_capture_seed('battle_1', 2) == 'battle_1:capture:2'


def test_same_seed_same_rolls():
    a = [roll_d20(create_battle_rng('battle_abc', n)) for n in range(1, 30)]
    b = [roll_d20(create_battle_rng('battle_abc', n)) for n in range(1, 30)]
    assert a == b


def test_round_and_capture_streams_differ():
    r1 = create_battle_rng('battle_abc', 1).random()
    r2 = create_capture_rng('battle_abc', 1).random()
    assert r1 != r2


def test_d20_range():
    rng = create_rng('range-check')
    rolls = {roll_d20(rng) for _ in range(2000)}
    assert rolls == set(range(1, 21))


def test_generated_seeds_are_unique():
    seeds = {generate_battle_seed() for _ in range(50)}
    assert len(seeds) == 50
    assert all(s.startswith('battle_') for s in seeds)
