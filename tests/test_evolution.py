import pytest

from pokezone.battle.evolution import (
    EvolutionEvaluator, EvolutionGraph, get_evolution_threshold, parse_evolution_stage,
)
from pokezone.battle.models import OwnedPokemon
from pokezone.core.errors import EvolutionError
from pokezone.data.loader import SpeciesRecord, SpeciesRepository


def test_parse_stage_strings():
    assert parse_evolution_stage('Stage 2 of 3') == (2, 3)
    assert parse_evolution_stage('Does not evolve') is None
    assert parse_evolution_stage('Stage x of y') is None
    assert parse_evolution_stage('') is None
    assert parse_evolution_stage(None) is None


def test_thresholds():
    assert get_evolution_threshold(1, 2) == 5
    assert get_evolution_threshold(1, 3) == 3
    assert get_evolution_threshold(2, 3) == 6
    assert get_evolution_threshold(3, 3) is None
    assert get_evolution_threshold(1, 1) is None
    assert get_evolution_threshold(1, 4) is None


def test_two_stage_evolves_at_five(species):
    ev = EvolutionEvaluator(species)
    assert not ev.check_evolution_eligibility(4, 4).can_evolve
    info = ev.check_evolution_eligibility(4, 5)
    assert info.can_evolve
    assert info.evolves_at_level == 5
    assert (info.next_evolution_id, info.next_evolution_name) == (5, 'Charmeleon')


def test_three_stage_chain(species):
    ev = EvolutionEvaluator(species)
    assert ev.check_evolution_eligibility(1, 3).next_evolution_id == 2
    assert not ev.check_evolution_eligibility(2, 5).can_evolve
    assert ev.check_evolution_eligibility(2, 6).next_evolution_id == 3
    final = ev.check_evolution_eligibility(3, 10)
    assert not final.can_evolve and final.evolves_at_level is None


def test_adjacent_id_from_other_line_is_not_an_evolution(species):
    ev = EvolutionEvaluator(species)
    # Squirtle (1 of 2) sits next to Geodude (1 of 3)
    info = ev.check_evolution_eligibility(7, 10)
    assert not info.can_evolve
    assert ev.get_next_evolution(7) is None
    # Gastly has no successor in the data at all
    assert ev.get_next_evolution(92) is None


def test_no_evolution_text_and_unknown_species(species):
    ev = EvolutionEvaluator(species)
    assert not ev.check_evolution_eligibility(25, 10).can_evolve
    assert not ev.check_evolution_eligibility(999, 10).can_evolve


def test_branching_is_never_auto_resolved(species):
    ev = EvolutionEvaluator(species)
    info = ev.check_evolution_eligibility(133, 5)
    assert info.can_evolve
    assert info.has_multiple_evolutions
    assert info.next_evolution_id is None
    assert [o.id for o in info.evolution_options] == [134, 135]
    assert ev.get_next_evolution(133) is None
    assert ev.get_next_evolution(133, target_id=135).name == 'Jolteon'
    assert ev.get_next_evolution(133, target_id=5) is None


def test_evolve(species):
    ev = EvolutionEvaluator(species)
    pm = OwnedPokemon(species_id=4, level=5, experience=3, can_evolve=True, selected_moves=('ember',))
    out = ev.evolve(pm)
    assert out.species_id == 5
    assert not out.can_evolve
    assert (out.level, out.experience, out.selected_moves) == (5, 3, ('ember',))


def test_evolve_errors(species):
    ev = EvolutionEvaluator(species)
    with pytest.raises(EvolutionError):
        ev.evolve(OwnedPokemon(species_id=4, level=4))
    eevee = OwnedPokemon(species_id=133, level=6)
    with pytest.raises(EvolutionError):
        ev.evolve(eevee)
    with pytest.raises(EvolutionError):
        ev.evolve(eevee, target_id=2)
    assert ev.evolve(eevee, target_id=134).species_id == 134


def test_pre_evolution_through_graph(species):
    ev = EvolutionEvaluator(species)
    assert ev.get_pre_evolution(2).id == 1
    assert ev.get_pre_evolution(135).id == 133
    assert ev.get_pre_evolution(1) is None
    assert ev.get_pre_evolution(8) is None


def test_can_evolve_flag_needs_a_level_up(species):
    ev = EvolutionEvaluator(species)
    assert ev.can_evolve_after_level_up(4, 5, 1)
    assert not ev.can_evolve_after_level_up(4, 5, 0)
    assert not ev.can_evolve_after_level_up(4, 4, 1)


def test_unknown_explicit_targets_are_dropped():
    repo = SpeciesRepository([
        SpeciesRecord(id=50, name='Diglett', types=('ground',), rarity=1, evolution='Stage 1 of 2',
                      evolves_to=(51, 999)),
        SpeciesRecord(id=51, name='Dugtrio', types=('ground',), rarity=3, evolution='Stage 2 of 2'),
    ])
    graph = EvolutionGraph.from_repository(repo)
    assert graph.successors(50) == (51,)
    assert graph.predecessor(51) == 50
