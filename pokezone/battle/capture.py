"""Capture & flee mechanics (d20 against a capture Difficulty Class)."""
from __future__ import annotations
from dataclasses import dataclass
import math
import random

from .rng import create_capture_rng, roll_d20

BASE_CAPTURE_DC = 15
MIN_CAPTURE_DC = 5
MAX_CAPTURE_DC = 25
DC_PER_ROUND_WIN = 3
FLEE_CHANCE = 0.25

@dataclass(frozen=True)
class CaptureContext:
    player_level: int
    player_rarity: float
    wild_level: int
    wild_rarity: float
    player_round_wins: int
    capture_attempts: int = 0

@dataclass(frozen=True)
class CaptureAttemptResult:
    success: bool
    roll: int
    dc: int
    fled: bool


def calculate_capture_dc(ctx: CaptureContext) -> int:
    """Base 15, +1 per level/SR point the wild Pokemon is ahead, -3 per round won; clamped to [5, 25]."""
    dc = BASE_CAPTURE_DC
    dc += math.ceil(ctx.wild_level - ctx.player_level)
    dc += math.ceil(ctx.wild_rarity - ctx.player_rarity)
    dc -= ctx.player_round_wins * DC_PER_ROUND_WIN
    return max(MIN_CAPTURE_DC, min(MAX_CAPTURE_DC, dc))


def check_flee(rng: random.Random) -> bool:
    return rng.random() < FLEE_CHANCE


def attempt_capture(ctx: CaptureContext, battle_id: str, attempt_number: int) -> CaptureAttemptResult:
    # The flee draw continues the attempt's own stream so the whole attempt
    # replays from (battle_id, attempt_number).
    rng = create_capture_rng(battle_id, attempt_number)
    dc = calculate_capture_dc(ctx)
    roll = roll_d20(rng)
    success = roll >= dc
    fled = False
    if not success:
        fled = check_flee(rng)
    return CaptureAttemptResult(success=success, roll=roll, dc=dc, fled=fled)


def capture_difficulty_description(dc: int) -> str:
    if dc <= 7:
        return "Very Easy"
    if dc <= 10:
        return "Easy"
    if dc <= 13:
        return "Moderate"
    if dc <= 16:
        return "Difficult"
    if dc <= 19:
        return "Very Difficult"
    return "Extremely Difficult"

__all__ = [
    "CaptureContext","CaptureAttemptResult","calculate_capture_dc",
    "attempt_capture","check_flee","capture_difficulty_description",
]
