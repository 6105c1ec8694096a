"""Reference data loading: species and moves.

Records are fixed-schema, immutable values validated when the JSON is read, so
malformed reference data fails at load time instead of leaking ``None`` into
gameplay math. Repositories are plain read-only lookups passed to the engine
components that need them; tests build them straight from record lists.
"""
from __future__ import annotations
import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from pokezone.core.errors import DataLoadError, SpeciesNotFound, MoveNotFound
from pokezone.core.logging import logger
from pokezone.core.paths import SPECIES_FILE, MOVES_FILE

MOVE_TIERS: Tuple[str, ...] = ("start", "level2", "level6", "level10", "level14", "level18")

@dataclass(frozen=True)
class SpeciesRecord:
    id: int
    name: str
    types: Tuple[str, ...]
    rarity: float
    min_level: int = 1
    evolution: str = ""
    sprite_url: str = ""
    image_url: str = ""
    moves: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)
    evolves_to: Tuple[int, ...] | None = None

    def tier_moves(self) -> List[str]:
        """All move ids across tiers, in tier order, without duplicates."""
        seen: List[str] = []
        for tier in MOVE_TIERS:
            for mv in self.moves.get(tier, ()):
                if mv not in seen:
                    seen.append(mv)
        return seen

@dataclass(frozen=True)
class MoveRecord:
    id: str
    name: str
    type: str
    description: str = ""


class SpeciesRepository:
    def __init__(self, records: Iterable[SpeciesRecord]):
        self._by_id: Dict[int, SpeciesRecord] = {}
        for r in records:
            if r.id in self._by_id:
                raise ValueError(f"Duplicate species id {r.id}")
            self._by_id[r.id] = r

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self) -> Iterator[SpeciesRecord]:
        return iter(self.all())

    def __contains__(self, species_id: object) -> bool:
        return species_id in self._by_id

    def get(self, species_id: int) -> Optional[SpeciesRecord]:
        return self._by_id.get(species_id)

    def require(self, species_id: int) -> SpeciesRecord:
        rec = self._by_id.get(species_id)
        if rec is None:
            raise SpeciesNotFound(species_id)
        return rec

    def all(self) -> List[SpeciesRecord]:
        return [self._by_id[k] for k in sorted(self._by_id)]

    def find_by_name(self, name: str) -> Optional[SpeciesRecord]:
        name_lower = name.strip().lower()
        for rec in self.all():
            if rec.name.lower() == name_lower:
                return rec
        return None


class MoveRepository:
    def __init__(self, records: Iterable[MoveRecord]):
        self._by_id: Dict[str, MoveRecord] = {}
        for r in records:
            if r.id in self._by_id:
                raise ValueError(f"Duplicate move id {r.id}")
            self._by_id[r.id] = r

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, move_id: object) -> bool:
        return move_id in self._by_id

    def get(self, move_id: str) -> Optional[MoveRecord]:
        return self._by_id.get(move_id)

    def require(self, move_id: str) -> MoveRecord:
        rec = self._by_id.get(move_id)
        if rec is None:
            raise MoveNotFound(move_id)
        return rec

    def all(self) -> List[MoveRecord]:
        return list(self._by_id.values())

# Parsing -------------------------------------------------------------

def _require(raw: Mapping[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    if key not in raw:
        raise ValueError(f"{where}: missing required field '{key}'")
    val = raw[key]
    if not isinstance(val, kind) or isinstance(val, bool):
        raise ValueError(f"{where}: field '{key}' has invalid value {val!r}")
    return val


def parse_species(raw: Mapping[str, Any]) -> SpeciesRecord:
    """Build a SpeciesRecord from one entry of the species JSON.

    Accepts the exported field names (``number``, ``type``, ``sr``, ``minLevel``,
    ``media``) as well as the record's own names.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"species entry must be an object, got {type(raw).__name__}")
    sid = _require(raw, "number" if "number" in raw else "id", int, "species")
    where = f"species {sid}"
    name = _require(raw, "name", str, where)
    types_raw = _require(raw, "type" if "type" in raw else "types", list, where)
    if not types_raw or not all(isinstance(t, str) and t for t in types_raw):
        raise ValueError(f"{where}: type list must contain at least one type name")
    rarity = _require(raw, "sr" if "sr" in raw else "rarity", (int, float), where)
    media = raw.get("media") or {}
    moves_raw = raw.get("moves") or {}
    if not isinstance(moves_raw, Mapping):
        raise ValueError(f"{where}: moves must be an object of tier -> list")
    moves: Dict[str, Tuple[str, ...]] = {}
    for tier, ids in moves_raw.items():
        if not isinstance(ids, list) or not all(isinstance(m, str) for m in ids):
            raise ValueError(f"{where}: move tier '{tier}' must be a list of move ids")
        moves[tier] = tuple(ids)
    evolves_to = raw.get("evolves_to")
    if evolves_to is not None:
        if not isinstance(evolves_to, list) or not all(isinstance(i, int) for i in evolves_to):
            raise ValueError(f"{where}: evolves_to must be a list of species ids")
        evolves_to = tuple(evolves_to)
    return SpeciesRecord(
        id=sid,
        name=name,
        types=tuple(t.lower() for t in types_raw),
        rarity=float(rarity),
        min_level=int(raw.get("minLevel", raw.get("min_level", 1))),
        evolution=str(raw.get("evolution") or ""),
        sprite_url=str(media.get("sprite") or raw.get("sprite_url") or ""),
        image_url=str(media.get("main") or raw.get("image_url") or ""),
        moves=moves,
        evolves_to=evolves_to,
    )


def parse_move(raw: Mapping[str, Any]) -> MoveRecord:
    if not isinstance(raw, Mapping):
        raise ValueError(f"move entry must be an object, got {type(raw).__name__}")
    mid = _require(raw, "id", str, "move")
    where = f"move {mid}"
    return MoveRecord(
        id=mid,
        name=_require(raw, "name", str, where),
        type=_require(raw, "type", str, where).lower(),
        description=str(raw.get("flavor") or raw.get("description") or ""),
    )


def _read_json_list(path: Path) -> list:
    if not path.exists():
        raise DataLoadError(str(path), "file does not exist")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DataLoadError(str(path), f"invalid JSON ({e})") from e
    if not isinstance(data, list):
        raise DataLoadError(str(path), "expected a JSON list of records")
    return data


def load_species(path: Path | str = SPECIES_FILE) -> SpeciesRepository:
    p = Path(path)
    try:
        repo = SpeciesRepository(parse_species(entry) for entry in _read_json_list(p))
    except ValueError as e:
        raise DataLoadError(str(p), str(e)) from e
    logger.debug("SpeciesLoaded", path=str(p), count=len(repo))
    return repo


def load_moves(path: Path | str = MOVES_FILE) -> MoveRepository:
    p = Path(path)
    try:
        repo = MoveRepository(parse_move(entry) for entry in _read_json_list(p))
    except ValueError as e:
        raise DataLoadError(str(p), str(e)) from e
    logger.debug("MovesLoaded", path=str(p), count=len(repo))
    return repo


@lru_cache(maxsize=None)
def default_species_repository(path: str | None = None) -> SpeciesRepository:
    return load_species(path or SPECIES_FILE)


@lru_cache(maxsize=None)
def default_move_repository(path: str | None = None) -> MoveRepository:
    return load_moves(path or MOVES_FILE)


__all__ = [
    "MOVE_TIERS","SpeciesRecord","MoveRecord","SpeciesRepository","MoveRepository",
    "parse_species","parse_move","load_species","load_moves",
    "default_species_repository","default_move_repository",
]
