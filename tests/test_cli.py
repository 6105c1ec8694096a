import pytest

from pokezone.cli import build_parser, run
from pokezone.system.settings import Settings, SettingsData


@pytest.fixture
def settings(tmp_path):
    return Settings(SettingsData(log_level='ERROR'), tmp_path / 'settings.json')


def test_matchup(settings, capsys):
    assert run(['matchup', 'fire', 'grass', 'bug'], settings=settings) == 0
    assert 'x4' in capsys.readouterr().out


def test_round_breakdown(settings, capsys):
    argv = ['round', '--player', 'charmander', '--level', '5', '--wild', 'bulbasaur',
            '--wild-level', '5', '--move', 'ember', '--battle-id', 'battle_cli']
    assert run(argv, settings=settings) == 0
    out = capsys.readouterr().out
    assert 'Win chance' in out
    assert 'battle_cli' in out


def test_evolution_lists_branches(settings, capsys):
    assert run(['evolution', 'eevee', '--level', '5'], settings=settings) == 0
    out = capsys.readouterr().out
    assert 'Vaporeon' in out and 'Flareon' in out


def test_simulate_and_zones(settings):
    assert run(['simulate', '--player', '4', '--level', '5', '--battle-id', 'battle_sim', '--capture'],
               settings=settings) == 0
    assert run(['simulate', '--player', 'pikachu', '--zone', 'ocean', '--difficulty', 'medium'],
               settings=settings) == 0
    assert run(['zones', '--player', 'pikachu'], settings=settings) == 0


def test_bad_input_exit_codes(settings):
    assert run(['evolution', 'missingno', '--level', '5'], settings=settings) == 1
    assert run(['evolution', '9999', '--level', '5'], settings=settings) == 2
    assert run(['simulate', '--player', '4', '--difficulty', 'nightmare'], settings=settings) == 1


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
