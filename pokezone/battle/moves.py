"""Move availability and selection for owned Pokemon.

Every tier move is available regardless of level, and an evolved form also
keeps the full moveset of its pre-evolution.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from pokezone.data.loader import MoveRecord, MoveRepository, SpeciesRepository
from .evolution import EvolutionEvaluator
from .models import MAX_SELECTED_MOVES


class MoveCatalog:
    def __init__(self, species: SpeciesRepository, moves: MoveRepository,
                 evolution: Optional[EvolutionEvaluator] = None):
        self.species = species
        self.moves = moves
        self.evolution = evolution or EvolutionEvaluator(species)

    def get_move(self, move_id: str) -> Optional[MoveRecord]:
        return self.moves.get(move_id)

    def require_move(self, move_id: str) -> MoveRecord:
        return self.moves.require(move_id)

    def _move_ids(self, species_id: int) -> List[str]:
        rec = self.species.get(species_id)
        if rec is None:
            return []
        ids = rec.tier_moves()
        pre = self.evolution.get_pre_evolution(species_id)
        if pre is not None:
            for mv in pre.tier_moves():
                if mv not in ids:
                    ids.append(mv)
        return ids

    def available_moves(self, species_id: int) -> List[MoveRecord]:
        # ids missing from the move table are skipped
        return [m for m in (self.moves.get(i) for i in self._move_ids(species_id)) if m is not None]

    def default_moves(self, species_id: int) -> Tuple[str, ...]:
        return tuple(m.id for m in self.available_moves(species_id)[:MAX_SELECTED_MOVES])

    def validate_selected_moves(self, species_id: int, selected: Sequence[str]) -> Tuple[bool, List[str]]:
        """(valid, invalid ids). A selection must be exactly four available moves."""
        if len(selected) != MAX_SELECTED_MOVES:
            return False, []
        available = {m.id for m in self.available_moves(species_id)}
        invalid = [mv for mv in selected if mv not in available]
        return not invalid, invalid

__all__ = ["MoveCatalog"]
