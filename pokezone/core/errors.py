"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class PokezoneError(Exception):
    pass

class DataLoadError(PokezoneError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ValidationError(PokezoneError):
    pass

class SpeciesNotFound(PokezoneError):
    def __init__(self, species_id: int):
        super().__init__(f"Species id {species_id} not found")
        self.species_id = species_id

class MoveNotFound(PokezoneError):
    def __init__(self, move_id: str):
        super().__init__(f"Invalid move: {move_id}")
        self.move_id = move_id

class BattleError(PokezoneError):
    pass

class BattleNotActive(BattleError):
    def __init__(self, battle_id: str, status: str):
        super().__init__(f"Battle {battle_id} is not active (status={status})")
        self.battle_id = battle_id
        self.status = status

class InvalidMove(BattleError):
    def __init__(self, move_id: str, detail: str):
        super().__init__(f"Invalid move '{move_id}': {detail}")
        self.move_id = move_id
        self.detail = detail

class NotEnoughWins(BattleError):
    pass

class EvolutionError(PokezoneError):
    pass
