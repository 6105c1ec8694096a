"""Seeded randomness for reproducible battle rolls.

Every round and capture attempt gets its own stream derived from a string seed,
so an outcome can be re-derived later from the stored (seed, roll) alone.
``random.Random`` hashes str seeds with SHA-512, so the mapping is stable across
processes and independent of PYTHONHASHSEED.
"""
from __future__ import annotations
import math
import random
import time
import uuid


def create_seed(battle_id: str, round_number: int) -> str:
    return f"{battle_id}:{round_number}"


def create_capture_seed(battle_id: str, attempt_number: int) -> str:
    return f"{battle_id}:capture:{attempt_number}"


def create_rng(seed: str) -> random.Random:
    return random.Random(seed)


def create_battle_rng(battle_id: str, round_number: int) -> random.Random:
    return create_rng(create_seed(battle_id, round_number))


def create_capture_rng(battle_id: str, attempt_number: int) -> random.Random:
    return create_rng(create_capture_seed(battle_id, attempt_number))


def roll_d20(rng: random.Random) -> int:
    """Draw one value from ``rng`` and map it to 1..20."""
    return math.floor(rng.random() * 20) + 1


def generate_battle_seed() -> str:
    """Fresh, unique seed for a new battle."""
    return f"battle_{int(time.time() * 1000)}_{uuid.uuid4().hex[:13]}"


__all__ = [
    "create_seed","create_capture_seed","create_rng","create_battle_rng",
    "create_capture_rng","roll_d20","generate_battle_seed",
]
