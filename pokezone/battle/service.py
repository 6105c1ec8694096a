"""Battle service: the game's battle flow as pure state transitions.

Starting a battle, playing a round and attempting a capture each take an
immutable :class:`BattleState` and return an outcome carrying the next state.
Nothing is stored here; the caller records each outcome once per
(battle, round number) or (battle, attempt number).

Policy applied on top of the resolvers:
- the first side to ``rounds_to_win`` round wins ends the battle
- battle end awards XP to the player's Pokemon: the level-difference gain on a
  win, a flat 1 XP on a loss
- a capture needs at least one round win; success awards a flat 1 XP
- a failed capture that does not flee counts as a wild round win and can end
  the battle as ``wild_won`` (no XP)
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Literal, Optional, Tuple

from pokezone.core.errors import BattleNotActive, InvalidMove, NotEnoughWins
from pokezone.core.logging import logger
from pokezone.data.loader import (
    MoveRecord, MoveRepository, SpeciesRepository, default_move_repository, default_species_repository,
)
from pokezone.data.zones import ZoneRegistry
from pokezone.encounters.wild import WildPokemonGenerator
from pokezone.system.settings import Settings
from .capture import CaptureAttemptResult, CaptureContext, attempt_capture as resolve_capture_attempt
from .evolution import EvolutionEvaluator
from .experience import apply_experience, calculate_experience_gained, clamp_level
from .models import OwnedPokemon, WildPokemon
from .moves import MoveCatalog
from .rng import create_battle_rng, roll_d20
from .round import RoundCalculation, RoundContext, calculate_round_win_chance, resolve_round

BattleStatus = Literal["active", "player_won", "wild_won", "captured", "fled"]
Winner = Literal["player", "wild"]

DEFAULT_ROUNDS_TO_WIN = 3
LOSS_XP = 1
CAPTURE_XP = 1

@dataclass(frozen=True)
class BattleState:
    battle_id: str
    player: OwnedPokemon
    wild: WildPokemon
    difficulty: str
    seed: str
    zone: Optional[str] = None
    player_wins: int = 0
    wild_wins: int = 0
    capture_attempts: int = 0
    status: BattleStatus = "active"

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @property
    def next_round_number(self) -> int:
        return self.player_wins + self.wild_wins + 1

@dataclass(frozen=True)
class ExperienceAward:
    xp_awarded: int
    previous_level: int
    new_level: int
    previous_experience: int
    new_experience: int
    levels_gained: int
    evolution_available: bool = False

@dataclass(frozen=True)
class RoundOutcome:
    round_number: int
    move: MoveRecord
    winner: Winner
    roll: int
    dc: int
    calculation: RoundCalculation
    state: BattleState
    experience: Optional[ExperienceAward] = None

    @property
    def battle_ended(self) -> bool:
        return not self.state.is_active

@dataclass(frozen=True)
class CaptureOutcome:
    result: CaptureAttemptResult
    attempt_number: int
    state: BattleState
    captured: Optional[OwnedPokemon] = None
    experience: Optional[ExperienceAward] = None


class BattleService:
    def __init__(self, species: SpeciesRepository, moves: MoveRepository, *,
                 zones: Optional[ZoneRegistry] = None, rounds_to_win: int = DEFAULT_ROUNDS_TO_WIN):
        self.species = species
        self.moves = moves
        self.evolution = EvolutionEvaluator(species)
        self.catalog = MoveCatalog(species, moves, self.evolution)
        self.generator = WildPokemonGenerator(species, zones)
        self.rounds_to_win = rounds_to_win

    @classmethod
    def from_settings(cls, settings: Settings) -> "BattleService":
        d = settings.data
        return cls(
            default_species_repository(d.species_file),
            default_move_repository(d.moves_file),
            rounds_to_win=d.rounds_to_win,
        )

    # ------------------------------------------------------------------
    def start_battle(self, battle_id: str, player: OwnedPokemon, difficulty: str, *,
                     zone_id: Optional[str] = None, seed: Optional[str] = None) -> BattleState:
        rec = self.species.require(player.species_id)
        seed = seed or battle_id
        if zone_id is not None:
            wild = self.generator.generate_zone_wild_pokemon(zone_id, difficulty, player.level, rec.rarity, seed)
        else:
            wild = self.generator.generate_wild_pokemon(difficulty, player.level, seed)
        logger.info("BattleStart", battle_id=battle_id, zone=zone_id or "-", difficulty=difficulty,
                    wild=wild.species_id, level=wild.level)
        return BattleState(battle_id=battle_id, player=player, wild=wild, difficulty=difficulty,
                           seed=seed, zone=zone_id)

    def play_round(self, state: BattleState, move_id: str) -> RoundOutcome:
        if not state.is_active:
            raise BattleNotActive(state.battle_id, state.status)
        if move_id not in state.player.selected_moves:
            raise InvalidMove(move_id, "not in the selected moveset")
        move = self.moves.get(move_id)
        if move is None:
            raise InvalidMove(move_id, "unknown move id")
        rec = self.species.require(state.player.species_id)

        round_number = state.next_round_number
        roll = roll_d20(create_battle_rng(state.battle_id, round_number))
        calc = calculate_round_win_chance(RoundContext(
            player_level=state.player.level,
            player_rarity=rec.rarity,
            player_types=rec.types,
            wild_level=state.wild.level,
            wild_rarity=state.wild.rarity,
            wild_types=state.wild.types,
            move_type=move.type,
        ))
        won = resolve_round(roll, calc.total_chance)
        player_wins = state.player_wins + (1 if won else 0)
        wild_wins = state.wild_wins + (0 if won else 1)
        status: BattleStatus = "active"
        if player_wins >= self.rounds_to_win:
            status = "player_won"
        elif wild_wins >= self.rounds_to_win:
            status = "wild_won"
        logger.debug("BattleRound", battle_id=state.battle_id, round=round_number, roll=roll, dc=calc.dc,
                     chance=round(calc.total_chance, 2), winner="player" if won else "wild")

        player = state.player
        award = None
        if status != "active":
            xp = calculate_experience_gained(player.level, state.wild.level) if won else LOSS_XP
            player, award = self.award_experience(player, xp)
            logger.info("BattleEnd", battle_id=state.battle_id, status=status, xp=xp)
        new_state = replace(state, player=player, player_wins=player_wins, wild_wins=wild_wins, status=status)
        return RoundOutcome(
            round_number=round_number,
            move=move,
            winner="player" if won else "wild",
            roll=roll,
            dc=calc.dc,
            calculation=calc,
            state=new_state,
            experience=award,
        )

    def attempt_capture(self, state: BattleState) -> CaptureOutcome:
        if not state.is_active:
            raise BattleNotActive(state.battle_id, state.status)
        if state.player_wins < 1:
            raise NotEnoughWins("At least 1 round win is needed to attempt a capture")
        rec = self.species.require(state.player.species_id)
        attempt_number = state.capture_attempts + 1
        ctx = CaptureContext(
            player_level=state.player.level,
            player_rarity=rec.rarity,
            wild_level=state.wild.level,
            wild_rarity=state.wild.rarity,
            player_round_wins=state.player_wins,
            capture_attempts=state.capture_attempts,
        )
        result = resolve_capture_attempt(ctx, state.battle_id, attempt_number)
        new_state = replace(state, capture_attempts=attempt_number)
        captured = None
        award = None
        if result.success:
            captured = OwnedPokemon(
                species_id=state.wild.species_id,
                level=clamp_level(state.wild.level),
                selected_moves=self.catalog.default_moves(state.wild.species_id),
            )
            player, award = self.award_experience(state.player, CAPTURE_XP)
            new_state = replace(new_state, player=player, status="captured")
        elif result.fled:
            new_state = replace(new_state, status="fled")
        else:
            # a broken-free attempt counts as a round won by the wild Pokemon
            wild_wins = state.wild_wins + 1
            new_state = replace(new_state, wild_wins=wild_wins,
                                status="wild_won" if wild_wins >= self.rounds_to_win else "active")
        logger.info("CaptureAttempt", battle_id=state.battle_id, attempt=attempt_number, roll=result.roll,
                    dc=result.dc, success=result.success, fled=result.fled)
        return CaptureOutcome(result=result, attempt_number=attempt_number, state=new_state,
                              captured=captured, experience=award)

    def award_experience(self, pokemon: OwnedPokemon, xp: int) -> Tuple[OwnedPokemon, ExperienceAward]:
        """Apply ``xp`` and flag ``can_evolve`` when a level-up made the Pokemon eligible."""
        res = apply_experience(pokemon, xp)
        evolvable = self.evolution.can_evolve_after_level_up(pokemon.species_id, res.new_level, res.levels_gained)
        updated = replace(pokemon, level=res.new_level, experience=res.new_experience,
                          can_evolve=pokemon.can_evolve or evolvable)
        award = ExperienceAward(
            xp_awarded=xp,
            previous_level=pokemon.level,
            new_level=res.new_level,
            previous_experience=pokemon.experience,
            new_experience=res.new_experience,
            levels_gained=res.levels_gained,
            evolution_available=evolvable,
        )
        return updated, award

__all__ = [
    "BattleService","BattleState","RoundOutcome","CaptureOutcome","ExperienceAward",
    "DEFAULT_ROUNDS_TO_WIN","LOSS_XP","CAPTURE_XP",
]
