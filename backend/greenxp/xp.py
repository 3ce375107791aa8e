# backend/greenxp/xp.py
from typing import Optional

DIFFICULTY_XP = {
    "easy": 10,
    "medium": 25,
    "hard": 50,
}

DEFAULT_DIFFICULTY = "easy"


def resolve_xp(difficulty: Optional[str], xp: Optional[int] = None) -> int:
    """XP awarded for a mission.

    A known difficulty tier always wins over a client-supplied ``xp``;
    any other difficulty (or none) keeps the client value, defaulting to 0.
    """
    if difficulty in DIFFICULTY_XP:
        return DIFFICULTY_XP[difficulty]
    return int(xp or 0)
