# -*- coding: utf-8 -*-
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .resolver import Outcome


def win_rate(rounds_played: int, rounds_won: int) -> int:
    """Whole-number win percentage; 0 before any round. Halves round up."""
    if rounds_played <= 0:
        return 0
    return int(math.floor(rounds_won / rounds_played * 100 + 0.5))


@dataclass
class SessionStats:
    """
    Per-session round counters. Owned by whoever runs the session (a CLI
    process, a web app instance) and handed to the resolver explicitly.
    """
    rounds_played: int = 0
    rounds_won: int = 0

    @property
    def win_rate(self) -> int:
        return win_rate(self.rounds_played, self.rounds_won)

    def record(self, outcome: "Outcome") -> None:
        self.rounds_played += 1
        if outcome.won:
            self.rounds_won += 1

    def snapshot(self) -> Dict[str, Any]:
        return {
            "rounds_played": self.rounds_played,
            "rounds_won": self.rounds_won,
            "win_rate": self.win_rate,
        }
