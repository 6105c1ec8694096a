"""Wild Pokemon generation for legacy difficulty battles and zone battles.

Both modes are deterministic for a given seed: the species pick and the level
offset are drawn, in that order, from one ``random.Random`` seeded with the
battle seed.
"""
from __future__ import annotations
import math
import random
from typing import List, Optional, Sequence

from pokezone.battle.experience import MAX_LEVEL, MIN_LEVEL
from pokezone.battle.models import WildPokemon
from pokezone.battle.rng import create_rng
from pokezone.core.errors import ValidationError
from pokezone.core.logging import logger
from pokezone.data.loader import SpeciesRecord, SpeciesRepository
from pokezone.data.zones import (
    Zone, ZoneRegistry, LEGACY_LEVEL_OFFSET, LEGACY_RARITY_RANGE, get_difficulty_constraints,
)

# "Same level or lower" on easy is drawn from a bounded window
EASY_LEVEL_OFFSET_FLOOR = -3
DEFAULT_EXAMPLE_COUNT = 3


def _to_wild(rec: SpeciesRecord, level: int) -> WildPokemon:
    return WildPokemon(
        species_id=rec.id,
        name=rec.name,
        level=level,
        rarity=rec.rarity,
        types=rec.types,
        sprite_url=rec.sprite_url,
    )


def zone_level_offset(difficulty: str, rng: random.Random) -> int:
    c = get_difficulty_constraints(difficulty)
    lo = EASY_LEVEL_OFFSET_FLOOR if c.min_level_offset == -math.inf else int(c.min_level_offset)
    return rng.randint(lo, c.max_level_offset)


class WildPokemonGenerator:
    def __init__(self, species: SpeciesRepository, zones: Optional[ZoneRegistry] = None):
        self.species = species
        self.zones = zones or ZoneRegistry()

    # ---------------- Legacy difficulty mode -----------------
    def generate_wild_pokemon(self, difficulty: str, player_level: int, seed: str) -> WildPokemon:
        if difficulty not in LEGACY_RARITY_RANGE:
            raise ValidationError(f"Unknown battle difficulty '{difficulty}'")
        rng = create_rng(seed)
        lo, hi = LEGACY_RARITY_RANGE[difficulty]
        pool = [r for r in self.species.all() if lo <= r.rarity <= hi]
        if not pool:
            logger.debug("WildPoolFallback", difficulty=difficulty, reason="rarity_band_empty")
            pool = self.species.all()
        selected = self._pick(pool, rng)
        off_lo, off_hi = LEGACY_LEVEL_OFFSET[difficulty]
        offset = rng.randint(off_lo, off_hi)
        level = max(MIN_LEVEL, min(MAX_LEVEL, player_level + offset))
        return _to_wild(selected, level)

    # ---------------- Zone mode -----------------
    def filter_by_zone(self, zone: Zone) -> List[SpeciesRecord]:
        allowed = {t.lower() for t in zone.types}
        return [r for r in self.species.all() if any(t in allowed for t in r.types)]

    def filter_by_zone_and_difficulty(self, zone_id: str, difficulty: str, player_rarity: float) -> List[SpeciesRecord]:
        constraints = get_difficulty_constraints(difficulty)
        zone = self.zones.get(zone_id)
        if zone is None:
            return []
        max_rarity = player_rarity + constraints.max_rarity_offset
        return [r for r in self.filter_by_zone(zone) if r.rarity <= max_rarity]

    def generate_zone_wild_pokemon(self, zone_id: str, difficulty: str, player_level: int,
                                   player_rarity: float, seed: str) -> WildPokemon:
        """Wild Pokemon for a zone battle; never fails on an empty pool.

        Fallbacks: relax the rarity cap but keep the zone's types, then the full pool.
        """
        rng = create_rng(seed)
        zone = self.zones.get(zone_id)
        pool = self.filter_by_zone_and_difficulty(zone_id, difficulty, player_rarity)
        if not pool and zone is not None:
            logger.debug("ZonePoolFallback", zone=zone_id, difficulty=difficulty, reason="rarity_cap")
            pool = self.filter_by_zone(zone)
        if not pool:
            logger.debug("ZonePoolFallback", zone=zone_id, difficulty=difficulty, reason="no_zone_match")
            pool = self.species.all()
        selected = self._pick(pool, rng)
        level = max(MIN_LEVEL, player_level + zone_level_offset(difficulty, rng))
        return _to_wild(selected, level)

    # ---------------- Zone previews -----------------
    def zone_example_pokemon(self, zone_id: str, difficulty: str, player_rarity: float,
                             count: int = DEFAULT_EXAMPLE_COUNT) -> List[str]:
        """Names of up to ``count`` evenly spaced species (by rarity) for a zone preview."""
        eligible = sorted(self.filter_by_zone_and_difficulty(zone_id, difficulty, player_rarity),
                          key=lambda r: r.rarity)
        step = max(1, len(eligible) // max(1, count))
        examples: List[str] = []
        i = 0
        while i < count and i * step < len(eligible):
            examples.append(eligible[i * step].name)
            i += 1
        return examples

    def count_zone_pokemon(self, zone_id: str, difficulty: str, player_rarity: float) -> int:
        return len(self.filter_by_zone_and_difficulty(zone_id, difficulty, player_rarity))

    @staticmethod
    def _pick(pool: Sequence[SpeciesRecord], rng: random.Random) -> SpeciesRecord:
        if not pool:
            raise ValidationError("Species repository is empty; cannot generate a wild Pokemon")
        return pool[math.floor(rng.random() * len(pool))]

__all__ = ["WildPokemonGenerator","zone_level_offset","EASY_LEVEL_OFFSET_FLOOR"]
