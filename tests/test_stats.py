# -*- coding: utf-8 -*-
from johnsons_gambit import SessionStats, win_rate


def test_win_rate_before_any_round_is_zero():
    assert SessionStats().win_rate == 0
    assert win_rate(0, 0) == 0


def test_win_rate_quarter():
    assert SessionStats(rounds_played=4, rounds_won=1).win_rate == 25


def test_win_rate_rounds_half_up():
    # 1/8 = 12.5% and 5/8 = 62.5% both round up, like the game page did
    assert win_rate(8, 1) == 13
    assert win_rate(8, 5) == 63
    assert win_rate(3, 1) == 33
    assert win_rate(3, 2) == 67


def test_snapshot_shape():
    stats = SessionStats(rounds_played=3, rounds_won=3)
    assert stats.snapshot() == {"rounds_played": 3, "rounds_won": 3, "win_rate": 100}
