"""
FIDE Elo - Elo rating calculations following the FIDE rating handbook.
"""

from .core import (
    BLITZ,
    DP_TABLE,
    RAPID,
    STANDARD,
    Game,
    GameRecord,
    Player,
    delta,
    expected_score,
    k_factor,
    performance_rating,
    update_ratings,
)

__all__ = [
    "expected_score",
    "k_factor",
    "delta",
    "update_ratings",
    "performance_rating",
    "Player",
    "Game",
    "GameRecord",
    "DP_TABLE",
    "STANDARD",
    "RAPID",
    "BLITZ",
]
