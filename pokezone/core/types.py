"""Type colours and rich markup for terminal output.

Provides:
  TYPE_COLORS_HEX: mapping type -> hex color string (#RRGGBB)
  EFFECTIVENESS_STYLES: rich style per effectiveness label
  helpers building rich markup for type lists and matchup labels.
"""
from __future__ import annotations
from typing import Dict, Iterable

TYPE_COLORS_HEX: Dict[str, str] = {
    "normal": "#A8A77A",
    "fire": "#EE8130",
    "water": "#6390F0",
    "electric": "#F7D02C",
    "grass": "#7AC74C",
    "ice": "#96D9D6",
    "fighting": "#C22E28",
    "poison": "#A33EA1",
    "ground": "#E2BF65",
    "flying": "#A98FF3",
    "psychic": "#F95587",
    "bug": "#A6B91A",
    "rock": "#B6A136",
    "ghost": "#735797",
    "dragon": "#6F35FC",
    "dark": "#705746",
    "steel": "#B7B7CE",
    "fairy": "#D685AD",
}

EFFECTIVENESS_STYLES: Dict[str, str] = {
    "super_effective": "bold green",
    "neutral": "white",
    "not_very_effective": "bold red",
}

def rich_type_markup(types: Iterable[str]) -> str:
    """Rich console markup for a type list, e.g. ``[#EE8130]Fire[/]/[#A98FF3]Flying[/]``."""
    parts = []
    for t in types:
        hex_val = TYPE_COLORS_HEX.get(t.lower())
        label = t.capitalize()
        parts.append(f"[{hex_val}]{label}[/]" if hex_val else label)
    return '/'.join(parts)

def effectiveness_markup(label: str, text: str) -> str:
    style = EFFECTIVENESS_STYLES.get(label)
    return f"[{style}]{text}[/{style}]" if style else text

def format_zone_types(types: Iterable[str]) -> str:
    return ', '.join(t.capitalize() for t in types)

__all__ = [
    'TYPE_COLORS_HEX','EFFECTIVENESS_STYLES','rich_type_markup','effectiveness_markup','format_zone_types',
]
