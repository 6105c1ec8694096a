"""Evolution stages, thresholds and the species evolution graph.

Species carry a stage string such as ``"Stage 2 of 3"``. Level thresholds
depend only on (stage, total):
  2-stage lines evolve at level 5
  3-stage lines evolve at level 3 (stage 1) and level 6 (stage 2)

Successor edges come from a species' explicit ``evolves_to`` list. Species
without one get the sequential rule instead: species id+1 is the successor when
its stage string is exactly (stage+1, same total). The rule is applied once,
when the graph is built, so lookups never depend on id ordering.

Branching species (several successors) are never resolved automatically; the
caller must name the target.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple
import re

from pokezone.core.errors import EvolutionError
from pokezone.core.logging import logger
from pokezone.data.loader import SpeciesRecord, SpeciesRepository
from .models import OwnedPokemon

_STAGE_RE = re.compile(r"Stage (\d+) of (\d+)")

@dataclass(frozen=True)
class EvolutionTarget:
    id: int
    name: str

@dataclass(frozen=True)
class EvolutionInfo:
    can_evolve: bool
    current_stage: int = 1
    total_stages: int = 1
    evolves_at_level: Optional[int] = None
    next_evolution_id: Optional[int] = None
    next_evolution_name: Optional[str] = None
    has_multiple_evolutions: bool = False
    evolution_options: Tuple[EvolutionTarget, ...] = field(default_factory=tuple)

NO_EVOLUTION = EvolutionInfo(can_evolve=False)


def parse_evolution_stage(text: str | None) -> Optional[Tuple[int, int]]:
    if not text:
        return None
    m = _STAGE_RE.search(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def get_evolution_threshold(stage: int, total: int) -> Optional[int]:
    if stage >= total or total == 1:
        return None
    if total == 2:
        return 5
    if total == 3:
        if stage == 1:
            return 3
        if stage == 2:
            return 6
    return None


class EvolutionGraph:
    """Directed species graph: one node per species, edges to its next forms."""

    def __init__(self, successors: Dict[int, Tuple[int, ...]]):
        self._succ = {k: tuple(v) for k, v in successors.items() if v}
        self._pred: Dict[int, int] = {}
        for src, targets in self._succ.items():
            for t in targets:
                self._pred.setdefault(t, src)

    @classmethod
    def from_repository(cls, species: SpeciesRepository) -> "EvolutionGraph":
        succ: Dict[int, Tuple[int, ...]] = {}
        for rec in species.all():
            if rec.evolves_to is not None:
                known = tuple(t for t in rec.evolves_to if t in species)
                if len(known) != len(rec.evolves_to):
                    logger.warn("EvolutionTargetUnknown", species=rec.id, targets=list(rec.evolves_to))
                succ[rec.id] = known
                continue
            nxt = _sequential_successor(rec, species)
            if nxt is not None:
                succ[rec.id] = (nxt,)
        logger.debug("EvolutionGraphBuilt", edges=sum(len(v) for v in succ.values()))
        return cls(succ)

    def successors(self, species_id: int) -> Tuple[int, ...]:
        return self._succ.get(species_id, ())

    def predecessor(self, species_id: int) -> Optional[int]:
        return self._pred.get(species_id)


def _sequential_successor(rec: SpeciesRecord, species: SpeciesRepository) -> Optional[int]:
    stages = parse_evolution_stage(rec.evolution)
    if not stages or stages[0] >= stages[1]:
        return None
    nxt = species.get(rec.id + 1)
    if nxt is None:
        return None
    nxt_stages = parse_evolution_stage(nxt.evolution)
    if nxt_stages != (stages[0] + 1, stages[1]):
        return None
    return nxt.id


class EvolutionEvaluator:
    def __init__(self, species: SpeciesRepository, graph: Optional[EvolutionGraph] = None):
        self.species = species
        self.graph = graph or EvolutionGraph.from_repository(species)

    def evolution_options(self, species_id: int) -> Tuple[EvolutionTarget, ...]:
        out = []
        for sid in self.graph.successors(species_id):
            rec = self.species.get(sid)
            if rec is not None:
                out.append(EvolutionTarget(rec.id, rec.name))
        return tuple(out)

    def get_next_evolution(self, species_id: int, target_id: Optional[int] = None) -> Optional[EvolutionTarget]:
        """The next form of ``species_id``, or None at a final stage.

        For branching species only an explicit ``target_id`` among the options resolves.
        """
        rec = self.species.get(species_id)
        if rec is None:
            return None
        stages = parse_evolution_stage(rec.evolution)
        if not stages or stages[0] >= stages[1]:
            return None
        options = self.evolution_options(species_id)
        if target_id is not None:
            return next((o for o in options if o.id == target_id), None)
        if len(options) == 1:
            return options[0]
        return None

    def get_pre_evolution(self, species_id: int) -> Optional[SpeciesRecord]:
        pred = self.graph.predecessor(species_id)
        return self.species.get(pred) if pred is not None else None

    def check_evolution_eligibility(self, species_id: int, level: int) -> EvolutionInfo:
        rec = self.species.get(species_id)
        if rec is None:
            return NO_EVOLUTION
        stages = parse_evolution_stage(rec.evolution)
        if not stages:
            return NO_EVOLUTION
        stage, total = stages
        threshold = get_evolution_threshold(stage, total)
        options = self.evolution_options(species_id) if stage < total else ()
        nxt = options[0] if len(options) == 1 else None
        can_evolve = threshold is not None and level >= threshold and bool(options)
        return EvolutionInfo(
            can_evolve=can_evolve,
            current_stage=stage,
            total_stages=total,
            evolves_at_level=threshold,
            next_evolution_id=nxt.id if nxt else None,
            next_evolution_name=nxt.name if nxt else None,
            has_multiple_evolutions=len(options) > 1,
            evolution_options=options,
        )

    def evolve(self, pokemon: OwnedPokemon, target_id: Optional[int] = None) -> OwnedPokemon:
        """Return ``pokemon`` as its next form with ``can_evolve`` cleared."""
        info = self.check_evolution_eligibility(pokemon.species_id, pokemon.level)
        if not info.can_evolve:
            raise EvolutionError(f"Species {pokemon.species_id} at level {pokemon.level} is not eligible to evolve")
        if info.has_multiple_evolutions and target_id is None:
            options = ", ".join(f"{o.id}:{o.name}" for o in info.evolution_options)
            raise EvolutionError(f"Species {pokemon.species_id} has multiple evolutions; choose one of {options}")
        target = self.get_next_evolution(pokemon.species_id, target_id)
        if target is None:
            raise EvolutionError(f"Species {target_id} is not an evolution of {pokemon.species_id}")
        logger.debug("Evolved", species=pokemon.species_id, into=target.id, level=pokemon.level)
        return replace(pokemon, species_id=target.id, can_evolve=False)

    def can_evolve_after_level_up(self, species_id: int, new_level: int, levels_gained: int) -> bool:
        return levels_gained > 0 and self.check_evolution_eligibility(species_id, new_level).can_evolve


__all__ = [
    "EvolutionTarget","EvolutionInfo","EvolutionGraph","EvolutionEvaluator",
    "parse_evolution_stage","get_evolution_threshold",
]
