# -*- coding: utf-8 -*-
import pytest

from johnsons_gambit import (
    Outcome,
    RandomChoiceSource,
    ScriptedChoiceSource,
    SessionStats,
    resolve_round,
)


def test_hit_pays_double_and_counts_a_win():
    stats = SessionStats()
    out = resolve_round(1, 10, stats, ScriptedChoiceSource([1]))

    assert isinstance(out, Outcome)
    assert out.won is True
    assert out.pick == 1 and out.winning == 1
    assert out.payout == 20
    assert (stats.rounds_played, stats.rounds_won) == (1, 1)


def test_miss_costs_the_wager_and_leaves_wins_alone():
    stats = SessionStats()
    out = resolve_round(2, 5, stats, ScriptedChoiceSource([3]))

    assert out.won is False
    assert out.winning == 3
    assert out.payout == -5
    assert (stats.rounds_played, stats.rounds_won) == (1, 0)


@pytest.mark.parametrize("winning", [1, 2, 3])
def test_zero_wager_pays_zero_either_way(winning):
    stats = SessionStats()
    out = resolve_round(1, 0, stats, ScriptedChoiceSource([winning]))
    assert out.payout == 0
    assert str(out.payout) in {"0", "0.0"}  # never -0.0
    assert out.won is (winning == 1)
    assert stats.rounds_played == 1


def test_zero_wager_hit_still_counts_as_win():
    stats = SessionStats()
    resolve_round(3, 0.0, stats, ScriptedChoiceSource([3]))
    assert stats.rounds_won == 1


def test_fractional_wagers():
    stats = SessionStats()
    assert resolve_round(1, 2.5, stats, ScriptedChoiceSource([1])).payout == 5.0
    assert resolve_round(1, 2.5, stats, ScriptedChoiceSource([2])).payout == -2.5


def test_rounds_played_grows_by_one_every_call():
    stats = SessionStats()
    source = ScriptedChoiceSource([1, 2, 3, 1, 1])
    wins = 0
    for i in range(1, 6):
        before_won = stats.rounds_won
        out = resolve_round(1, 4, stats, source)
        assert stats.rounds_played == i
        if out.won:
            wins += 1
            assert out.payout == 8
            assert stats.rounds_won == before_won + 1
        else:
            assert out.payout == -4
            assert stats.rounds_won == before_won
        assert stats.rounds_won <= stats.rounds_played
    assert wins == 3
    assert stats.win_rate == 60


def test_outcome_labels_and_dict():
    out = resolve_round(2, 1, SessionStats(), ScriptedChoiceSource([3]))
    assert out.pick_name == "Middle Hand ✋"
    assert out.winning_name == "Right Hand 🤚"
    d = out.to_dict()
    assert d["won"] is False and d["payout"] == -1
    assert d["winning_name"] == "Right Hand 🤚"


def test_random_source_only_draws_one_two_or_three():
    source = RandomChoiceSource()
    seen = {source.next_choice() for _ in range(3000)}
    assert seen == {1, 2, 3}


def test_seeded_random_source_is_reproducible():
    a = RandomChoiceSource(seed=42)
    b = RandomChoiceSource(seed=42)
    assert [a.next_choice() for _ in range(50)] == [b.next_choice() for _ in range(50)]


def test_separate_accumulators_do_not_share_state():
    s1, s2 = SessionStats(), SessionStats()
    resolve_round(1, 1, s1, ScriptedChoiceSource([1]))
    assert s2.rounds_played == 0
