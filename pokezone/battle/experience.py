"""Experience calculation, level thresholds & level-up handling.

XP formula:      max(1, wild level - player level)
Level threshold: level * 2 + 10 (experience resets to the remainder on level-up)
Levels are capped at MAX_LEVEL; experience keeps accumulating past the cap.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

MIN_LEVEL = 1
MAX_LEVEL = 10

@dataclass(frozen=True)
class LevelUpResult:
    new_level: int
    new_experience: int
    levels_gained: int

@dataclass(frozen=True)
class ExperienceInfo:
    current: int
    required: int
    is_max_level: bool


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(int(level), MAX_LEVEL))


def calculate_experience_gained(player_level: int, wild_level: int) -> int:
    return max(1, wild_level - player_level)


def calculate_experience_threshold(level: int) -> int:
    return level * 2 + 10


def apply_experience(pokemon: Any, xp_gained: int) -> LevelUpResult:
    """Apply XP to an OwnedPokemon-like object (``level``, ``experience``).

    Handles several level-ups in one call. The input is not modified; callers
    persist the returned level and experience.
    """
    level = pokemon.level
    experience = (getattr(pokemon, "experience", 0) or 0) + xp_gained
    levels_gained = 0
    while level < MAX_LEVEL:
        threshold = calculate_experience_threshold(level)
        if experience < threshold:
            break
        experience -= threshold
        level += 1
        levels_gained += 1
    if level > MAX_LEVEL:
        level = MAX_LEVEL
    return LevelUpResult(new_level=level, new_experience=experience, levels_gained=levels_gained)


def experience_info(pokemon: Any) -> ExperienceInfo:
    is_max = pokemon.level >= MAX_LEVEL
    return ExperienceInfo(
        current=getattr(pokemon, "experience", 0) or 0,
        required=0 if is_max else calculate_experience_threshold(pokemon.level),
        is_max_level=is_max,
    )


def format_experience_display(pokemon: Any) -> str:
    info = experience_info(pokemon)
    if info.is_max_level:
        return "MAX LEVEL"
    return f"{info.current} / {info.required} XP"


def experience_to_next(pokemon: Any) -> int:
    info = experience_info(pokemon)
    if info.is_max_level:
        return 0
    return info.required - info.current

__all__ = [
    "MIN_LEVEL","MAX_LEVEL","LevelUpResult","ExperienceInfo","clamp_level",
    "calculate_experience_gained","calculate_experience_threshold","apply_experience",
    "experience_info","format_experience_display","experience_to_next",
]
