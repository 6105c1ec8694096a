"""Round resolution: win chance composition and d20 Difficulty Class checks.

Win chance starts at 50% and adds independently clamped components:
  level   +/-5% per level difference      (max +/-25%)
  rarity  +/-2% per SR point difference   (max +/-20%)
  type    +15% super effective, -10% not very effective, -30% immune
  STAB    +10% when the move shares a type with the attacker
The total is clamped to [10%, 90%] and converted to a DC: 21 - chance*20.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
import math

from .type_chart import get_type_effectiveness, effectiveness_label, has_stab_bonus, EffectivenessLabel

BASE_CHANCE = 0.5
LEVEL_STEP, LEVEL_CAP = 0.05, 0.25
RARITY_STEP, RARITY_CAP = 0.02, 0.20
SUPER_EFFECTIVE_BONUS = 0.15
NOT_VERY_EFFECTIVE_PENALTY = -0.10
IMMUNE_PENALTY = -0.30
STAB_BONUS = 0.10
MIN_CHANCE, MAX_CHANCE = 0.10, 0.90


def clamp(lo: float, hi: float, value: float) -> float:
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class RoundContext:
    player_level: int
    player_rarity: float
    player_types: Sequence[str]
    wild_level: int
    wild_rarity: float
    wild_types: Sequence[str]
    move_type: str


@dataclass(frozen=True)
class RoundCalculation:
    base_chance: float
    level_bonus: float
    rarity_bonus: float
    type_effectiveness: float  # raw multiplier
    type_bonus: float
    stab_bonus: float
    total_chance: float
    effectiveness_label: EffectivenessLabel
    has_stab: bool

    @property
    def dc(self) -> int:
        return win_chance_to_dc(self.total_chance)


def type_bonus_for(multiplier: float) -> float:
    if multiplier >= 2:
        return SUPER_EFFECTIVE_BONUS
    if multiplier == 0:
        return IMMUNE_PENALTY
    if multiplier < 1:
        return NOT_VERY_EFFECTIVE_PENALTY
    return 0.0


def calculate_round_win_chance(ctx: RoundContext) -> RoundCalculation:
    level_bonus = clamp(-LEVEL_CAP, LEVEL_CAP, (ctx.player_level - ctx.wild_level) * LEVEL_STEP)
    rarity_bonus = clamp(-RARITY_CAP, RARITY_CAP, (ctx.player_rarity - ctx.wild_rarity) * RARITY_STEP)
    multiplier = get_type_effectiveness(ctx.move_type, ctx.wild_types)
    type_bonus = type_bonus_for(multiplier)
    stab = has_stab_bonus(ctx.move_type, ctx.player_types)
    stab_bonus = STAB_BONUS if stab else 0.0
    total = clamp(MIN_CHANCE, MAX_CHANCE, BASE_CHANCE + level_bonus + rarity_bonus + type_bonus + stab_bonus)
    return RoundCalculation(
        base_chance=BASE_CHANCE,
        level_bonus=level_bonus,
        rarity_bonus=rarity_bonus,
        type_effectiveness=multiplier,
        type_bonus=type_bonus,
        stab_bonus=stab_bonus,
        total_chance=total,
        effectiveness_label=effectiveness_label(multiplier),
        has_stab=stab,
    )


def win_chance_to_dc(win_chance: float) -> int:
    """50% -> DC 11, 90% -> DC 3, 10% -> DC 19 (halves round up)."""
    return math.floor(21 - win_chance * 20 + 0.5)


def resolve_round(roll: int, win_chance: float) -> bool:
    return roll >= win_chance_to_dc(win_chance)


__all__ = [
    "RoundContext","RoundCalculation","calculate_round_win_chance",
    "win_chance_to_dc","resolve_round","clamp",
]
