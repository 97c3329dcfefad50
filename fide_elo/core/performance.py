"""
Tournament performance rating following the FIDE procedure.
"""

import logging
from typing import Iterable, NamedTuple, Tuple, Union

import numpy as np

from .elo_rating import round_half_up

logger = logging.getLogger(__name__)

# FIDE Handbook B.02, table 8.1.1: rating difference dp for each score
# percentage, indexed by round(p * 100).
_DP_UPPER_HALF = [
    0, 7, 14, 21, 29, 36, 43, 50, 57, 65,
    72, 80, 87, 95, 102, 110, 117, 125, 133, 141,
    149, 158, 166, 175, 184, 193, 202, 211, 220, 230,
    240, 251, 262, 273, 284, 296, 309, 322, 336, 351,
    366, 383, 401, 422, 444, 470, 501, 538, 589, 677,
    800,
]

DP_TABLE = np.array(
    [-dp for dp in reversed(_DP_UPPER_HALF[1:])] + _DP_UPPER_HALF,
    dtype=np.int64,
)
DP_TABLE.setflags(write=False)


class GameRecord(NamedTuple):
    """One game of a tournament seen from the player being rated."""

    opponent_rating: float
    result: float


def performance_rating(games: Iterable[Union[GameRecord, Tuple[float, float]]]) -> int:
    """
    Estimate a performance rating from a set of games.

    The estimate is the average opponent rating plus the FIDE rating
    difference for the fraction of points scored. The order of the games
    does not matter.

    Args:
        games: GameRecords or (opponent_rating, result) pairs

    Returns:
        The performance rating, rounded to the nearest integer

    Raises:
        ValueError: If there are no games, or the score fraction falls outside
            the table (only possible with results outside 0, 0.5 and 1)
    """
    records = [GameRecord(*game) for game in games]
    if not records:
        raise ValueError("performance rating needs at least one game")

    opponent_ratings = np.array([record.opponent_rating for record in records], dtype=float)
    results = np.array([record.result for record in records], dtype=float)

    average_rating = float(opponent_ratings.mean())
    score_fraction = float(results.sum()) / len(records)

    index = round_half_up(score_fraction * 100)
    if index < 0 or index >= len(DP_TABLE):
        raise ValueError(
            f"score fraction {score_fraction} is outside the range 0 to 1"
        )
    dp = int(DP_TABLE[index])

    logger.debug(
        "%d games: average opponent %.2f, score %.4f, dp %d",
        len(records), average_rating, score_fraction, dp,
    )

    return round_half_up(average_rating + dp)
