# resolver.py -- one round of 3 Hand Monty
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from .hands import hand_name
from .rng import ChoiceSource
from .stats import SessionStats

log = logging.getLogger(__name__)

WIN_MULTIPLIER = 2


@dataclass(frozen=True)
class Outcome:
    pick: int
    winning: int
    won: bool
    wager: float
    payout: float  # signed net change: +2x wager on a hit, -wager on a miss

    @property
    def pick_name(self) -> str:
        return hand_name(self.pick)

    @property
    def winning_name(self) -> str:
        return hand_name(self.winning)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pick": self.pick,
            "pick_name": self.pick_name,
            "winning": self.winning,
            "winning_name": self.winning_name,
            "won": self.won,
            "wager": self.wager,
            "payout": self.payout,
        }


def resolve_round(pick: int, wager: float, stats: SessionStats, source: ChoiceSource) -> Outcome:
    """
    Draw the winning hand, settle the wager and fold the result into ``stats``.

    The caller has already checked that ``pick`` is 1, 2 or 3 and that
    ``wager >= 0``; nothing is re-validated here.
    """
    winning = int(source.next_choice())
    won = int(pick) == winning
    if won:
        payout = wager * WIN_MULTIPLIER
    else:
        # a zero wager loses nothing (avoid -0.0)
        payout = -wager if wager else 0.0

    outcome = Outcome(pick=int(pick), winning=winning, won=won, wager=wager, payout=payout)
    stats.record(outcome)
    log.debug(
        "round %d: pick=%d winning=%d won=%s payout=%s",
        stats.rounds_played,
        outcome.pick,
        winning,
        won,
        payout,
    )
    return outcome
