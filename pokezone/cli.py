"""Developer CLI: inspect round odds, capture odds, matchups, zones and evolutions,
or auto-play a whole battle from a seed.

    python main.py round --player charmander --level 5 --wild bulbasaur --wild-level 5 --move ember
    python main.py simulate --player pikachu --level 4 --zone ocean --difficulty medium --capture
"""
from __future__ import annotations
import argparse
from typing import List, Optional, Sequence

from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pokezone.battle.capture import CaptureContext, attempt_capture, calculate_capture_dc, capture_difficulty_description
from pokezone.battle.evolution import EvolutionEvaluator
from pokezone.battle.experience import format_experience_display
from pokezone.battle.models import OwnedPokemon
from pokezone.battle.rng import create_battle_rng, generate_battle_seed, roll_d20
from pokezone.battle.round import RoundContext, calculate_round_win_chance, resolve_round
from pokezone.battle.service import BattleService, BattleState
from pokezone.battle.type_chart import get_type_effectiveness, effectiveness_label
from pokezone.core.errors import PokezoneError, SpeciesNotFound, ValidationError
from pokezone.core.logging import logger
from pokezone.core.types import effectiveness_markup, format_zone_types, rich_type_markup
from pokezone.data.loader import SpeciesRecord, SpeciesRepository
from pokezone.data.zones import BATTLE_DIFFICULTIES, ZONE_DIFFICULTIES, all_zones, get_difficulty_description
from pokezone.system.settings import Settings

console = Console()


def resolve_species(species: SpeciesRepository, ident: str) -> SpeciesRecord:
    s = str(ident).strip()
    if s.isdigit():
        return species.require(int(s))
    rec = species.find_by_name(s)
    if rec is None:
        raise ValidationError(f"Unknown species '{ident}'")
    return rec


def _pct(v: float) -> str:
    return f"{v * 100:+.0f}%"

# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_round(service: BattleService, args: argparse.Namespace) -> int:
    player = resolve_species(service.species, args.player)
    wild = resolve_species(service.species, args.wild)
    move = service.catalog.require_move(args.move)
    calc = calculate_round_win_chance(RoundContext(
        player_level=args.level, player_rarity=player.rarity, player_types=player.types,
        wild_level=args.wild_level, wild_rarity=wild.rarity, wild_types=wild.types,
        move_type=move.type,
    ))
    table = Table(title=f"{player.name} Lv{args.level} vs {wild.name} Lv{args.wild_level}", box=ROUNDED)
    table.add_column("Component", style="bright_white")
    table.add_column("Value", justify="right")
    table.add_row("Base", f"{calc.base_chance * 100:.0f}%")
    table.add_row("Level", _pct(calc.level_bonus))
    table.add_row("Rarity", _pct(calc.rarity_bonus))
    table.add_row(f"Type ({move.name}, x{calc.type_effectiveness:g})",
                  effectiveness_markup(calc.effectiveness_label, _pct(calc.type_bonus)))
    table.add_row("STAB", _pct(calc.stab_bonus))
    table.add_row("[bold]Win chance[/bold]", f"[bold]{calc.total_chance * 100:.0f}%[/bold]")
    table.add_row("DC", str(calc.dc))
    console.print(table)
    if args.battle_id:
        roll = roll_d20(create_battle_rng(args.battle_id, args.round))
        won = resolve_round(roll, calc.total_chance)
        verdict = "[green]player wins[/green]" if won else "[red]wild wins[/red]"
        console.print(f"Round {args.round} of {args.battle_id}: rolled {roll} vs DC {calc.dc} -> {verdict}")
    return 0


def cmd_capture(service: BattleService, args: argparse.Namespace) -> int:
    player = resolve_species(service.species, args.player)
    wild = resolve_species(service.species, args.wild)
    ctx = CaptureContext(
        player_level=args.level, player_rarity=player.rarity,
        wild_level=args.wild_level, wild_rarity=wild.rarity,
        player_round_wins=args.wins,
    )
    dc = calculate_capture_dc(ctx)
    console.print(f"Capture DC {dc} ({capture_difficulty_description(dc)})")
    if args.battle_id:
        res = attempt_capture(ctx, args.battle_id, args.attempt)
        if res.success:
            console.print(f"Rolled {res.roll}: [green]{wild.name} was caught![/green]")
        elif res.fled:
            console.print(f"Rolled {res.roll}: [red]{wild.name} broke free and fled.[/red]")
        else:
            console.print(f"Rolled {res.roll}: [yellow]{wild.name} broke free.[/yellow]")
    return 0


def cmd_matchup(service: BattleService, args: argparse.Namespace) -> int:
    mult = get_type_effectiveness(args.attack, args.defender)
    label = effectiveness_label(mult)
    console.print(f"{rich_type_markup([args.attack])} -> {rich_type_markup(args.defender)}: "
                  f"x{mult:g} " + effectiveness_markup(label, label.replace("_", " ")))
    return 0


def cmd_zones(service: BattleService, args: argparse.Namespace) -> int:
    player = resolve_species(service.species, args.player)
    table = Table(title=f"Zones for {player.name} (SR {player.rarity:g})", box=ROUNDED)
    table.add_column("Zone", style="bright_cyan")
    table.add_column("Types")
    for d in ZONE_DIFFICULTIES:
        table.add_column(d.capitalize())
    for zone in all_zones():
        cells = []
        for d in ZONE_DIFFICULTIES:
            count = service.generator.count_zone_pokemon(zone.id, d, player.rarity)
            examples = service.generator.zone_example_pokemon(zone.id, d, player.rarity)
            cells.append(f"{count} species\n{', '.join(examples) or '-'}")
        table.add_row(zone.name, format_zone_types(zone.types), *cells)
    console.print(table)
    for d in ZONE_DIFFICULTIES:
        console.print(f"[dim]{d}: {get_difficulty_description(d)}[/dim]")
    return 0


def cmd_evolution(service: BattleService, args: argparse.Namespace) -> int:
    evaluator: EvolutionEvaluator = service.evolution
    rec = resolve_species(service.species, args.species)
    info = evaluator.check_evolution_eligibility(rec.id, args.level)
    lines = [f"Stage {info.current_stage} of {info.total_stages}"]
    if info.evolves_at_level is None:
        lines.append("Final form: does not evolve")
    else:
        lines.append(f"Evolves at level {info.evolves_at_level}")
    if info.has_multiple_evolutions:
        lines.append("Options: " + ", ".join(o.name for o in info.evolution_options))
    elif info.next_evolution_name:
        lines.append(f"Next: {info.next_evolution_name}")
    lines.append("[green]Ready to evolve[/green]" if info.can_evolve else "[dim]Not ready[/dim]")
    console.print(Panel("\n".join(lines), title=f"{rec.name} Lv{args.level}", box=ROUNDED))
    return 0


def _best_move(service: BattleService, state: BattleState) -> str:
    rec = service.species.require(state.player.species_id)
    best, best_chance = state.player.selected_moves[0], -1.0
    for mid in state.player.selected_moves:
        mv = service.moves.get(mid)
        if mv is None:
            continue
        calc = calculate_round_win_chance(RoundContext(
            player_level=state.player.level, player_rarity=rec.rarity, player_types=rec.types,
            wild_level=state.wild.level, wild_rarity=state.wild.rarity, wild_types=state.wild.types,
            move_type=mv.type,
        ))
        if calc.total_chance > best_chance:
            best, best_chance = mid, calc.total_chance
    return best


def cmd_simulate(service: BattleService, args: argparse.Namespace, debug: bool = False) -> int:
    rec = resolve_species(service.species, args.player)
    moves = service.catalog.default_moves(rec.id)
    if not moves:
        raise ValidationError(f"{rec.name} has no usable moves")
    player = OwnedPokemon(species_id=rec.id, level=args.level, selected_moves=moves, is_active=True)
    battle_id = args.battle_id or generate_battle_seed()
    state = service.start_battle(battle_id, player, args.difficulty, zone_id=args.zone, seed=args.seed)
    console.print(Panel(
        f"A wild [bold]{state.wild.name}[/bold] Lv{state.wild.level} ({rich_type_markup(state.wild.types)}) appeared!\n"
        f"Go, {rec.name} Lv{player.level}!",
        title=f"Battle {battle_id}", box=ROUNDED,
    ))
    log = Table(box=ROUNDED)
    for col in ("Round", "Move", "Roll", "DC", "Winner", "Score"):
        log.add_column(col)
    while state.is_active:
        outcome = service.play_round(state, _best_move(service, state))
        state = outcome.state
        score = f"{state.player_wins}-{state.wild_wins}"
        winner = "[green]player[/green]" if outcome.winner == "player" else "[red]wild[/red]"
        log.add_row(str(outcome.round_number), outcome.move.name, str(outcome.roll), str(outcome.dc), winner, score)
        if debug:
            c = outcome.calculation
            log.add_row("", f"[dim]lvl {_pct(c.level_bonus)} sr {_pct(c.rarity_bonus)} "
                            f"type {_pct(c.type_bonus)} stab {_pct(c.stab_bonus)}[/dim]", "", "", "", "")
        if args.capture and state.is_active and state.player_wins >= 1:
            cap = service.attempt_capture(state)
            state = cap.state
            verdict = "caught" if cap.result.success else ("fled" if cap.result.fled else "broke free")
            log.add_row("", f"Capture #{cap.attempt_number}", str(cap.result.roll), str(cap.result.dc), verdict,
                        f"{state.player_wins}-{state.wild_wins}")
    console.print(log)
    console.print(f"Result: [bold]{state.status}[/bold] - {rec.name} Lv{state.player.level} "
                  f"({format_experience_display(state.player)})")
    if state.player.can_evolve:
        console.print("[green]Your Pokemon can evolve![/green]")
    return 0

# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pokezone", description="Battle & capture rules engine tools")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("round", help="Show a round's win chance breakdown")
    p.add_argument("--player", required=True)
    p.add_argument("--level", type=int, required=True)
    p.add_argument("--wild", required=True)
    p.add_argument("--wild-level", type=int, required=True)
    p.add_argument("--move", required=True, help="move id, e.g. ember")
    p.add_argument("--battle-id", help="also roll the round from this battle id")
    p.add_argument("--round", type=int, default=1)

    p = sub.add_parser("capture", help="Show capture DC, optionally roll an attempt")
    p.add_argument("--player", required=True)
    p.add_argument("--level", type=int, required=True)
    p.add_argument("--wild", required=True)
    p.add_argument("--wild-level", type=int, required=True)
    p.add_argument("--wins", type=int, default=1)
    p.add_argument("--battle-id")
    p.add_argument("--attempt", type=int, default=1)

    p = sub.add_parser("matchup", help="Type effectiveness of an attack")
    p.add_argument("attack")
    p.add_argument("defender", nargs="+")

    p = sub.add_parser("zones", help="Zone preview for a player species")
    p.add_argument("--player", required=True)

    p = sub.add_parser("evolution", help="Evolution eligibility")
    p.add_argument("species")
    p.add_argument("--level", type=int, required=True)

    p = sub.add_parser("simulate", help="Auto-play a battle")
    p.add_argument("--player", required=True)
    p.add_argument("--level", type=int, default=5)
    p.add_argument("--difficulty", default="normal",
                   help=f"legacy: {', '.join(BATTLE_DIFFICULTIES)}; zone: {', '.join(ZONE_DIFFICULTIES)}")
    p.add_argument("--zone")
    p.add_argument("--battle-id")
    p.add_argument("--seed")
    p.add_argument("--capture", action="store_true", help="attempt a capture after each round once ahead")
    return parser


def run(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or Settings.load()
    settings.apply_log_level()
    args = build_parser().parse_args(argv)
    try:
        service = BattleService.from_settings(settings)
        if args.command == "simulate":
            return cmd_simulate(service, args, debug=settings.data.debug)
        handlers = {
            "round": cmd_round,
            "capture": cmd_capture,
            "matchup": cmd_matchup,
            "zones": cmd_zones,
            "evolution": cmd_evolution,
        }
        return handlers[args.command](service, args)
    except SpeciesNotFound as e:
        console.print(f"[red]{e}[/red]")
        return 2
    except PokezoneError as e:
        logger.error("CommandFailed", command=args.command, error=str(e))
        console.print(f"[red]{e}[/red]")
        return 1


def main(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(run(argv))

if __name__ == "__main__":
    main()
