import pytest

from pokezone.data.loader import MoveRecord, MoveRepository, SpeciesRecord, SpeciesRepository


def _sp(id, name, types, rarity, evolution="", moves=None, evolves_to=None):
    return SpeciesRecord(id=id, name=name, types=tuple(types), rarity=rarity, evolution=evolution,
                         moves=moves or {}, evolves_to=evolves_to)


FIXTURE_SPECIES = [
    _sp(1, "Bulbasaur", ("grass", "poison"), 0.5, "Stage 1 of 3",
        {"start": ("tackle", "vine-whip"), "level2": ("poison-powder",)}),
    _sp(2, "Ivysaur", ("grass", "poison"), 2, "Stage 2 of 3", {"start": ("razor-leaf",)}),
    _sp(3, "Venusaur", ("grass", "poison"), 6, "Stage 3 of 3", {"start": ("solar-beam",)}),
    _sp(4, "Charmander", ("fire",), 0.5, "Stage 1 of 2",
        {"start": ("scratch", "ember"), "level6": ("flamethrower",)}),
    _sp(5, "Charmeleon", ("fire",), 3, "Stage 2 of 2", {"start": ("fire-fang",)}),
    # 7 -> 8 is not a chain: 8 starts a three-stage line
    _sp(7, "Squirtle", ("water",), 0.5, "Stage 1 of 2", {"start": ("water-gun", "tackle")}),
    _sp(8, "Geodude", ("rock", "ground"), 1, "Stage 1 of 3", {"start": ("tackle", "rock-throw")}),
    _sp(25, "Pikachu", ("electric",), 1, "", {"start": ("thunder-shock", "quick-attack")}),
    _sp(92, "Gastly", ("ghost", "poison"), 1, "Stage 1 of 3", {"start": ("lick",)}),
    _sp(133, "Eevee", ("normal",), 0.5, "Stage 1 of 2", {"start": ("tackle", "quick-attack")},
        evolves_to=(134, 135)),
    _sp(134, "Vaporeon", ("water",), 5, "Stage 2 of 2", {"start": ("water-gun",)}),
    _sp(135, "Jolteon", ("electric",), 5, "Stage 2 of 2", {"start": ("thunder-shock",)}),
]

FIXTURE_MOVES = [
    MoveRecord("tackle", "Tackle", "normal"),
    MoveRecord("scratch", "Scratch", "normal"),
    MoveRecord("quick-attack", "Quick Attack", "normal"),
    MoveRecord("vine-whip", "Vine Whip", "grass"),
    MoveRecord("razor-leaf", "Razor Leaf", "grass"),
    MoveRecord("solar-beam", "Solar Beam", "grass"),
    MoveRecord("poison-powder", "Poison Powder", "poison"),
    MoveRecord("ember", "Ember", "fire"),
    MoveRecord("flamethrower", "Flamethrower", "fire"),
    MoveRecord("fire-fang", "Fire Fang", "fire"),
    MoveRecord("water-gun", "Water Gun", "water"),
    MoveRecord("thunder-shock", "Thunder Shock", "electric"),
    MoveRecord("lick", "Lick", "ghost"),
    # no rock-throw: Geodude references an unknown move
]


@pytest.fixture
def species():
    return SpeciesRepository(FIXTURE_SPECIES)


@pytest.fixture
def moves():
    return MoveRepository(FIXTURE_MOVES)
