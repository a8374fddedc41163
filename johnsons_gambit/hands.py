# hands.py -- the three hands a player can pick
from __future__ import annotations

from enum import IntEnum
from typing import Dict, Optional


class Hand(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


HAND_VALUES = frozenset(int(h) for h in Hand)

_LABELS: Dict[int, str] = {
    Hand.LEFT: "Left Hand 🖐",
    Hand.MIDDLE: "Middle Hand ✋",
    Hand.RIGHT: "Right Hand 🤚",
}

_ALIASES: Dict[str, Hand] = {
    "1": Hand.LEFT,
    "left": Hand.LEFT,
    "2": Hand.MIDDLE,
    "middle": Hand.MIDDLE,
    "3": Hand.RIGHT,
    "right": Hand.RIGHT,
}


def hand_name(value: object) -> str:
    """Friendly label for a hand number; anything unexpected is ``Unknown Hand``."""
    if isinstance(value, bool):
        return "Unknown Hand"
    return _LABELS.get(value, "Unknown Hand")  # type: ignore[arg-type]


def parse_hand(text: Optional[str]) -> Optional[Hand]:
    """
    Resolve ``1``/``2``/``3`` or ``left``/``middle``/``right`` (any case).
    Returns None when the text names no hand.
    """
    if text is None:
        return None
    return _ALIASES.get(text.strip().lower())
