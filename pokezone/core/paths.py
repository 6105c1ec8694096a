"""
Centralized path helpers (works with the flat layout).
"""
from __future__ import annotations
from pathlib import Path

# This file lives at pokezone/core/paths.py
ROOT = Path(__file__).resolve().parents[2]   # project root (one up from 'pokezone')
ASSETS = ROOT / "assets"
POKEMON = ASSETS / "pokemon"
MOVES = ASSETS / "moves"
SPECIES_FILE = POKEMON / "species.json"
MOVES_FILE = MOVES / "moves.json"
