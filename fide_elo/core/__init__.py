"""
Core FIDE Elo rating functionality.
"""

from .elo_rating import (
    BLITZ,
    RAPID,
    STANDARD,
    Game,
    Player,
    delta,
    expected_score,
    k_factor,
    round_half_up,
    update_ratings,
)
from .performance import DP_TABLE, GameRecord, performance_rating
