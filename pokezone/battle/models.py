from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from pokezone.core.errors import ValidationError

MAX_SELECTED_MOVES = 4
WILD_STARTING_HP = 100  # simplified HP model: only round wins/losses drive a battle

@dataclass(frozen=True)
class OwnedPokemon:
    species_id: int
    level: int = 1
    experience: int = 0
    selected_moves: Tuple[str, ...] = field(default_factory=tuple)
    is_active: bool = False
    is_starter: bool = False
    can_evolve: bool = False
    nickname: str | None = None

    def __post_init__(self):
        # Normalize lists coming from JSON rows into tuples
        moves = tuple(self.selected_moves)
        if len(moves) > MAX_SELECTED_MOVES:
            raise ValidationError(
                f"Species {self.species_id} has {len(moves)} selected moves (max {MAX_SELECTED_MOVES})"
            )
        object.__setattr__(self, "selected_moves", moves)

@dataclass(frozen=True)
class WildPokemon:
    species_id: int
    name: str
    level: int
    rarity: float
    types: Tuple[str, ...]
    sprite_url: str = ""
    current_hp: int = WILD_STARTING_HP

__all__ = ["OwnedPokemon","WildPokemon","MAX_SELECTED_MOVES","WILD_STARTING_HP"]
