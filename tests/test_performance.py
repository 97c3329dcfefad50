"""
Tests for the tournament performance rating.
"""

import logging

import numpy as np
import pytest

from fide_elo import DP_TABLE, GameRecord, performance_rating


def test_dp_table_shape():
    """The table covers every percentage from 0 to 100."""
    assert len(DP_TABLE) == 101
    assert DP_TABLE[0] == -800
    assert DP_TABLE[50] == 0
    assert DP_TABLE[70] == 149
    assert DP_TABLE[99] == 677
    assert DP_TABLE[100] == 800


def test_dp_table_monotonic_and_symmetric():
    """Rating differences grow with the score and mirror around 50%."""
    assert np.all(np.diff(DP_TABLE) > 0)
    assert np.all(DP_TABLE + DP_TABLE[::-1] == 0)


def test_dp_table_read_only():
    """The table cannot be modified."""
    with pytest.raises(ValueError):
        DP_TABLE[0] = 0


def test_performance_rating_empty():
    """An empty game list is rejected."""
    with pytest.raises(ValueError):
        performance_rating([])


def test_performance_rating_all_draws():
    """A 50% score performs at the average opponent rating."""
    games = [GameRecord(1400, 0.5), GameRecord(1600, 0.5)]
    assert performance_rating(games) == 1500


def test_performance_rating_all_losses():
    """A zero score performs 800 below the average."""
    games = [GameRecord(1400, 0), GameRecord(1600, 0)]
    assert performance_rating(games) == 700


def test_performance_rating_all_wins():
    """A perfect score performs 800 above the average."""
    games = [GameRecord(1400, 1), GameRecord(1600, 1)]
    assert performance_rating(games) == 2300


def test_performance_rating_mixed_results():
    """3 wins, 1 draw and 1 loss against 1600 gives 1749 as on the FIDE calculator."""
    games = [
        GameRecord(opponent_rating=1600, result=1),
        GameRecord(opponent_rating=1600, result=1),
        GameRecord(opponent_rating=1600, result=1),
        GameRecord(opponent_rating=1600, result=0.5),
        GameRecord(opponent_rating=1600, result=0),
    ]
    assert performance_rating(games) == 1749


def test_performance_rating_single_game():
    """Test a single won game."""
    assert performance_rating([GameRecord(1400, 1)]) == 2200


def test_performance_rating_rounds_average():
    """The average opponent rating is rounded to the nearest integer."""
    games = [GameRecord(1400, 0.5), GameRecord(1400, 0.5), GameRecord(1500, 0.5)]
    assert performance_rating(games) == 1433


def test_performance_rating_accepts_pairs():
    """Plain (opponent_rating, result) pairs and generators work too."""
    pairs = [(1600, 1), (1600, 1), (1600, 1), (1600, 0.5), (1600, 0)]
    assert performance_rating(pairs) == 1749
    assert performance_rating(pair for pair in pairs) == 1749


def test_performance_rating_order_independent():
    """The order of the games does not change the result."""
    games = [GameRecord(1720, 1), GameRecord(1810, 0.5), GameRecord(1655, 1), GameRecord(1930, 0)]
    assert performance_rating(games) == performance_rating(list(reversed(games)))
    assert performance_rating(games) == performance_rating(sorted(games))


@pytest.mark.parametrize("result", [2, -1])
def test_performance_rating_score_out_of_range(result):
    """Scores outside 0 to 1 have no table entry."""
    with pytest.raises(ValueError):
        performance_rating([GameRecord(1500, result)])


def test_performance_rating_logs_adjustment(caplog):
    """The table adjustment is logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="fide_elo.core.performance")
    performance_rating([GameRecord(1600, 1), GameRecord(1600, 0.5)])
    assert "dp 193" in caplog.text
