"""Static type matchup table and lookups.

Attacking type -> {defending type: multiplier}; pairs not listed are neutral (1.0).
"""
from __future__ import annotations
from typing import Dict, Iterable, Literal

EffectivenessLabel = Literal["super_effective", "neutral", "not_very_effective"]

TYPE_CHART: Dict[str, Dict[str, float]] = {
    "normal":  {"rock": 0.5, "ghost": 0.0, "steel": 0.5},
    "fire":    {"fire": 0.5, "water": 0.5, "grass": 2.0, "ice": 2.0, "bug": 2.0, "rock": 0.5, "dragon": 0.5, "steel": 2.0},
    "water":   {"fire": 2.0, "water": 0.5, "grass": 0.5, "ground": 2.0, "rock": 2.0, "dragon": 0.5},
    "grass":   {"fire": 0.5, "water": 2.0, "grass": 0.5, "poison": 0.5, "ground": 2.0, "flying": 0.5, "bug": 0.5, "rock": 2.0, "dragon": 0.5, "steel": 0.5},
    "electric":{"water": 2.0,"electric": 0.5,"grass": 0.5,"ground": 0.0,"flying": 2.0,"dragon": 0.5},
    "ice":     {"fire": 0.5,"water": 0.5,"grass": 2.0,"ice": 0.5,"ground": 2.0,"flying": 2.0,"dragon": 2.0,"steel": 0.5},
    "fighting":{"normal": 2.0,"ice": 2.0,"rock": 2.0,"dark": 2.0,"steel": 2.0,"poison": 0.5,"flying": 0.5,"psychic": 0.5,"bug": 0.5,"fairy": 0.5,"ghost": 0.0},
    "poison":  {"grass": 2.0,"fairy": 2.0,"poison": 0.5,"ground": 0.5,"rock": 0.5,"ghost": 0.5,"steel": 0.0},
    "ground":  {"fire": 2.0,"electric": 2.0,"poison": 2.0,"rock": 2.0,"steel": 2.0,"grass": 0.5,"bug": 0.5,"flying": 0.0},
    "flying":  {"grass": 2.0,"fighting": 2.0,"bug": 2.0,"electric": 0.5,"rock": 0.5,"steel": 0.5},
    "psychic": {"fighting": 2.0,"poison": 2.0,"psychic": 0.5,"steel": 0.5,"dark": 0.0},
    "bug":     {"grass": 2.0,"psychic": 2.0,"dark": 2.0,"fire": 0.5,"fighting": 0.5,"poison": 0.5,"flying": 0.5,"ghost": 0.5,"steel": 0.5,"fairy": 0.5},
    "rock":    {"fire": 2.0,"ice": 2.0,"flying": 2.0,"bug": 2.0,"fighting": 0.5,"ground": 0.5,"steel": 0.5},
    "ghost":   {"ghost": 2.0,"psychic": 2.0,"dark": 0.5,"normal": 0.0},
    "dragon":  {"dragon": 2.0,"steel": 0.5,"fairy": 0.0},
    "dark":    {"ghost": 2.0,"psychic": 2.0,"fighting": 0.5,"dark": 0.5,"fairy": 0.5},
    "steel":   {"ice": 2.0,"rock": 2.0,"fairy": 2.0,"fire": 0.5,"water": 0.5,"electric": 0.5,"steel": 0.5},
    "fairy":   {"fighting": 2.0,"dragon": 2.0,"dark": 2.0,"fire": 0.5,"poison": 0.5,"steel": 0.5},
}

ALL_TYPES = tuple(TYPE_CHART.keys())


def get_type_effectiveness(attack_type: str, defender_types: Iterable[str]) -> float:
    """Multiplier (0, 0.25, 0.5, 1, 2 or 4) for ``attack_type`` hitting ``defender_types``.

    Unknown attacking types are neutral. Any immunity makes the whole matchup 0.
    """
    offense = TYPE_CHART.get(attack_type.lower())
    if offense is None:
        return 1.0
    mult = 1.0
    for t in defender_types:
        m = offense.get(t.lower(), 1.0)
        if m == 0.0:
            return 0.0
        mult *= m
    return mult


def effectiveness_label(multiplier: float) -> EffectivenessLabel:
    if multiplier >= 2:
        return "super_effective"
    if multiplier < 1:
        return "not_very_effective"
    return "neutral"


def has_stab_bonus(move_type: str, pokemon_types: Iterable[str]) -> bool:
    mt = move_type.lower()
    return any(t.lower() == mt for t in pokemon_types)


def defensive_profile(defender_types: Iterable[str]) -> Dict[str, float]:
    """Multiplier of every attacking type against ``defender_types``."""
    types = tuple(defender_types)
    return {atk: get_type_effectiveness(atk, types) for atk in ALL_TYPES}


__all__ = [
    "TYPE_CHART","ALL_TYPES","EffectivenessLabel",
    "get_type_effectiveness","effectiveness_label","has_stab_bonus","defensive_profile",
]
