"""Zone configuration and difficulty constraints for zone encounters.

Eight themed zones of three types each (no zone hosts dark types). Each zone
difficulty bounds the wild Pokemon's rarity and level relative to the player's
active Pokemon:
  easy:   up to +2 SR, same level or lower
  medium: up to +5 SR, +0 to +3 levels
  hard:   any SR, +4 to +6 levels
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional, Tuple

from pokezone.core.errors import ValidationError

ZoneDifficulty = Literal["easy", "medium", "hard"]
BattleDifficulty = Literal["easy", "normal", "difficult"]

ZONE_DIFFICULTIES: Tuple[str, ...] = ("easy", "medium", "hard")
BATTLE_DIFFICULTIES: Tuple[str, ...] = ("easy", "normal", "difficult")

@dataclass(frozen=True)
class Zone:
    id: str
    name: str
    description: str
    types: Tuple[str, ...]
    color: str = "blue"

@dataclass(frozen=True)
class DifficultyConstraints:
    max_rarity_offset: float      # max SR above the player's (inf for hard)
    min_level_offset: float       # -inf for easy: anything at or below the player's level
    max_level_offset: int

ZONES: Tuple[Zone, ...] = (
    Zone("jungle", "Jungle", "Dense vegetation filled with bugs, plants, and venomous creatures",
         ("bug", "grass", "poison"), "green"),
    Zone("ocean", "Ocean", "Coastal and aquatic environments with sea creatures",
         ("water", "flying", "normal"), "blue"),
    Zone("volcano", "Volcano", "Volcanic terrain with fire and rock dwellers",
         ("fire", "rock", "ground"), "red"),
    Zone("power-plant", "Power Plant", "Industrial facilities housing electric and steel types",
         ("electric", "steel", "normal"), "yellow"),
    Zone("haunted-tower", "Haunted Tower", "Abandoned structures with supernatural presence",
         ("ghost", "psychic", "poison"), "purple"),
    Zone("frozen-cave", "Frozen Cave", "Frozen underground caverns with ice and rock types",
         ("ice", "rock", "ground"), "cyan"),
    Zone("dojo", "Dojo", "Martial arts training grounds with fighting spirit",
         ("fighting", "normal", "flying"), "orange"),
    Zone("dragon-shrine", "Dragon Shrine", "Ancient mystical location housing legendary creatures",
         ("dragon", "fairy", "psychic"), "indigo"),
)

DIFFICULTY_CONSTRAINTS: Dict[str, DifficultyConstraints] = {
    "easy": DifficultyConstraints(max_rarity_offset=2, min_level_offset=-math.inf, max_level_offset=0),
    "medium": DifficultyConstraints(max_rarity_offset=5, min_level_offset=0, max_level_offset=3),
    "hard": DifficultyConstraints(max_rarity_offset=math.inf, min_level_offset=4, max_level_offset=6),
}

DIFFICULTY_DESCRIPTIONS: Dict[str, str] = {
    "easy": "Pokemon at your level or lower, up to +2 SR above yours",
    "medium": "Pokemon 0-3 levels higher, up to +5 SR above yours",
    "hard": "Pokemon 4-6 levels higher, any SR - maximum challenge!",
}

# Legacy (zone-less) battles: SR band and level offset per difficulty
LEGACY_RARITY_RANGE: Dict[str, Tuple[float, float]] = {
    "easy": (0, 2),
    "normal": (0, 5),
    "difficult": (2, 10),
}
LEGACY_LEVEL_OFFSET: Dict[str, Tuple[int, int]] = {
    "easy": (-2, 0),
    "normal": (-1, 1),
    "difficult": (0, 2),
}


class ZoneRegistry:
    """Read-only zone lookup; the module-level helpers use the built-in table."""

    def __init__(self, zones: Iterable[Zone] = ZONES):
        self._zones: Dict[str, Zone] = {z.id: z for z in zones}

    def get(self, zone_id: str) -> Optional[Zone]:
        return self._zones.get(zone_id)

    def all(self) -> List[Zone]:
        return list(self._zones.values())

    def ids(self) -> List[str]:
        return list(self._zones)

    def is_valid(self, zone_id: str) -> bool:
        return zone_id in self._zones

_DEFAULT_REGISTRY = ZoneRegistry()


def get_zone_by_id(zone_id: str) -> Optional[Zone]:
    return _DEFAULT_REGISTRY.get(zone_id)


def all_zones() -> List[Zone]:
    return _DEFAULT_REGISTRY.all()


def is_valid_zone_id(zone_id: str) -> bool:
    return _DEFAULT_REGISTRY.is_valid(zone_id)


def is_valid_zone_difficulty(difficulty: str) -> bool:
    return difficulty in DIFFICULTY_CONSTRAINTS


def is_valid_battle_difficulty(difficulty: str) -> bool:
    return difficulty in LEGACY_RARITY_RANGE


def get_difficulty_constraints(difficulty: str) -> DifficultyConstraints:
    try:
        return DIFFICULTY_CONSTRAINTS[difficulty]
    except KeyError:
        raise ValidationError(
            f"Unknown zone difficulty '{difficulty}' (expected one of {', '.join(ZONE_DIFFICULTIES)})"
        ) from None


def get_difficulty_description(difficulty: str) -> str:
    get_difficulty_constraints(difficulty)
    return DIFFICULTY_DESCRIPTIONS[difficulty]


__all__ = [
    "Zone","DifficultyConstraints","ZoneRegistry","ZONES","DIFFICULTY_CONSTRAINTS",
    "DIFFICULTY_DESCRIPTIONS","LEGACY_RARITY_RANGE","LEGACY_LEVEL_OFFSET",
    "ZONE_DIFFICULTIES","BATTLE_DIFFICULTIES","ZoneDifficulty","BattleDifficulty",
    "get_zone_by_id","all_zones","is_valid_zone_id","is_valid_zone_difficulty",
    "is_valid_battle_difficulty","get_difficulty_constraints","get_difficulty_description",
]
