# -*- coding: utf-8 -*-
from johnsons_gambit import ScriptedChoiceSource, SessionStats, check_clearance, resolve_round
from johnsons_gambit.render import (
    clearance_lines,
    format_amount,
    payout_label,
    round_lines,
    stats_lines,
)


def test_payout_labels():
    assert payout_label(20.0) == "+20"
    assert payout_label(-5) == "-5"
    assert payout_label(0.0) == "+0"
    assert payout_label(-0.0) == "+0"
    assert payout_label(2.5) == "+2.5"
    assert payout_label(-2.5) == "-2.5"


def test_format_amount():
    assert format_amount(10) == "10"
    assert format_amount(10.0) == "10"
    assert format_amount(0.25) == "0.25"


def test_round_lines_win_and_loss():
    stats = SessionStats()
    win = resolve_round(1, 10, stats, ScriptedChoiceSource([1]))
    lines = round_lines(win)
    assert lines[0] == "You chose: Left Hand 🖐"
    assert lines[1] == "You WIN the gambit! The latinum was under Left Hand 🖐."
    assert lines[2] == "Your wager: 10 bars of latinum."
    assert lines[3] == "This round result: +20 bars."

    loss = resolve_round(2, 5, stats, ScriptedChoiceSource([3]))
    lines = round_lines(loss)
    assert lines[1] == "House outplays you this time. The latinum was under Right Hand 🤚."
    assert lines[3] == "This round result: -5 bars."

    assert stats_lines(stats) == ["Rounds played: 2", "Rounds won: 1", "Win rate: 50%"]


def test_clearance_lines():
    lines = clearance_lines(check_clearance("Jo", "Smith", "12345"))
    assert lines[0].startswith("Clearance granted, Jo Smith.")
    assert lines[1] == "SG1 Secret Message:"
    assert "never trusting unchecked input" in lines[2]
