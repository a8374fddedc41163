"""Plain-text rendering for the CLI, plus the filters the HTML templates share."""

from __future__ import annotations

from typing import List

from .config import CURRENCY_DEFAULT
from .resolver import Outcome
from .security_gate import Clearance
from .stats import SessionStats


def format_amount(value: float) -> str:
    """``20.0`` → ``20``; fractional amounts keep their decimals."""
    value = float(value)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def payout_label(payout: float) -> str:
    if payout >= 0:
        return "+" + format_amount(payout)
    return "-" + format_amount(-payout)


def result_headline(outcome: Outcome) -> str:
    if outcome.won:
        lead = "You WIN the gambit!"
    else:
        lead = "House outplays you this time."
    return f"{lead} The latinum was under {outcome.winning_name}."


def round_lines(outcome: Outcome, currency: str = CURRENCY_DEFAULT) -> List[str]:
    return [
        f"You chose: {outcome.pick_name}",
        result_headline(outcome),
        f"Your wager: {format_amount(outcome.wager)} {currency}.",
        f"This round result: {payout_label(outcome.payout)} bars.",
    ]


def stats_lines(stats: SessionStats) -> List[str]:
    return [
        f"Rounds played: {stats.rounds_played}",
        f"Rounds won: {stats.rounds_won}",
        f"Win rate: {stats.win_rate}%",
    ]


def clearance_lines(clearance: Clearance) -> List[str]:
    return [
        clearance.greeting,
        "SG1 Secret Message:",
        f'"{clearance.secret}"',
    ]
