"""
Battle rules package.
Modules:
- type_chart.py (type matchups, STAB)
- rng.py (seeded d20 rolls)
- round.py (round win chance & resolution)
- capture.py (capture DC, capture & flee rolls)
- experience.py (XP gain & level-ups)
- evolution.py (evolution stages & graph)
- moves.py (move availability & selection)
- service.py (battle flow as pure state transitions)
"""
from .rng import create_seed, create_battle_rng, roll_d20
from .round import RoundContext, RoundCalculation, calculate_round_win_chance, resolve_round
from .capture import CaptureContext, CaptureAttemptResult, calculate_capture_dc, attempt_capture
from .experience import MAX_LEVEL, LevelUpResult, calculate_experience_gained, apply_experience

__all__ = [
    "create_seed","create_battle_rng","roll_d20",
    "RoundContext","RoundCalculation","calculate_round_win_chance","resolve_round",
    "CaptureContext","CaptureAttemptResult","calculate_capture_dc","attempt_capture",
    "MAX_LEVEL","LevelUpResult","calculate_experience_gained","apply_experience",
]
