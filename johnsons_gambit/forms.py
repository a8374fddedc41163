"""Form input handling for a Monty round.

Everything the resolver assumes about its input is enforced here, in the
order the original game page checked it: pick first, then the wager.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

from .errors import RoundInputError
from .hands import Hand, parse_hand
from .resolver import WIN_MULTIPLIER

MSG_NO_HAND = "Choose a hand first, strategist. Johnson's Gambit requires a decision."
MSG_UNKNOWN_HAND = "That hand does not exist. Pick the left, middle or right hand."
MSG_BAD_WAGER = "Your wager must be a number of bars."
MSG_NEGATIVE_WAGER = (
    "Your wager cannot be negative. Even in Johnson's Gambit, the math must be fair."
)


@dataclass(frozen=True)
class RoundRequest:
    pick: Hand
    wager: float


def parse_wager(raw: Union[str, float, int, None]) -> float:
    """
    Blank means a zero wager. Anything that is not a finite number, or whose
    winning payout would not be finite, is rejected.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        raise RoundInputError(MSG_BAD_WAGER)
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            raise RoundInputError(MSG_BAD_WAGER) from None
    else:
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            raise RoundInputError(MSG_BAD_WAGER) from None
    if not math.isfinite(value):
        raise RoundInputError(MSG_BAD_WAGER)
    if value < 0:
        raise RoundInputError(MSG_NEGATIVE_WAGER)
    if not math.isfinite(value * WIN_MULTIPLIER):
        raise RoundInputError(MSG_BAD_WAGER)
    return value


def parse_round_form(hand: Optional[str], wager: Union[str, float, int, None]) -> RoundRequest:
    if hand is None or not str(hand).strip():
        raise RoundInputError(MSG_NO_HAND)
    pick = parse_hand(str(hand))
    if pick is None:
        raise RoundInputError(MSG_UNKNOWN_HAND)
    return RoundRequest(pick=pick, wager=parse_wager(wager))
