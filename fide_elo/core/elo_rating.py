"""
Core implementation of the FIDE Elo rating rules.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

# FIDE Handbook B.02, section 8.3.1: a rating difference of more than 400
# points counts as though it were 400 points.
MAX_RATING_DIFF = 400.0

STANDARD = "standard"
RAPID = "rapid"
BLITZ = "blitz"

ADULT_AGE = 18
DEFAULT_AGE = ADULT_AGE
DEFAULT_GAMES = 32

JUNIOR_RATING_LIMIT = 2300
ELITE_RATING = 2400
NEW_PLAYER_GAMES = 30

K_NEW_PLAYER = 40
K_DEFAULT = 20
K_ELITE = 10


@dataclass(frozen=True)
class Player:
    """
    A rating together with the attributes that select its K-factor.

    Attributes:
        rating: Current Elo rating
        age: Age of the player in years
        games: Number of rated games played so far
        ever_reached_2400: Whether the rating has ever been 2400 or higher
        k: Explicit K-factor, overrides every other rule when set
    """

    rating: float
    age: float = DEFAULT_AGE
    games: int = DEFAULT_GAMES
    ever_reached_2400: bool = False
    k: Optional[float] = None


@dataclass(frozen=True)
class Game:
    """
    The outcome of a single game and the metadata shared by both players.

    Attributes:
        result: Score of the first player (1 for win, 0.5 for draw, 0 for loss)
        category: Time control, one of STANDARD, RAPID or BLITZ
        k: K-factor for both players, used when a player has no k of their own
    """

    result: float
    category: str = STANDARD
    k: Optional[float] = None


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity."""
    return int(math.floor(value + 0.5))


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B

    Returns:
        Expected score for player A (between 0 and 1)
    """
    diff = min(max(rating_b - rating_a, -MAX_RATING_DIFF), MAX_RATING_DIFF)
    if diff > 0:
        # The underdog gets the complement so both sides sum to exactly 1.
        return 1.0 - expected_score(rating_b, rating_a)
    return 1.0 / (1.0 + math.pow(10, diff / 400.0))


def k_factor(
    rating: float,
    age: float = DEFAULT_AGE,
    games: int = DEFAULT_GAMES,
    ever_reached_2400: bool = False,
    category: str = STANDARD,
) -> int:
    """
    Select the K-factor for one player in one game.

    The rules are checked in order and the first one that applies wins:
    rapid and blitz games always use 20, new players and juniors below
    2300 use 40, players who never reached 2400 use 20, everyone else 10.

    Args:
        rating: Current Elo rating
        age: Age of the player in years
        games: Number of rated games played so far
        ever_reached_2400: Whether the rating has ever been 2400 or higher
        category: Time control of the game

    Returns:
        The K-factor: 10, 20 or 40
    """
    if category in (RAPID, BLITZ):
        return K_DEFAULT

    if games <= NEW_PLAYER_GAMES or (age < ADULT_AGE and rating < JUNIOR_RATING_LIMIT):
        return K_NEW_PLAYER

    if rating < ELITE_RATING and not ever_reached_2400:
        return K_DEFAULT

    return K_ELITE


def delta(actual: float, expected: float, k: float) -> float:
    """
    Calculate the unrounded rating change for a single game.

    Args:
        actual: Actual score (0 for loss, 0.5 for draw, 1 for win)
        expected: Expected score (between 0 and 1)
        k: K-factor

    Returns:
        The rating change, positive when the player beat expectations
    """
    return k * (actual - expected)


def _as_player(player: Union[float, Player]) -> Player:
    if isinstance(player, Player):
        return player
    return Player(rating=player)


def _as_game(game: Union[float, Game]) -> Game:
    if isinstance(game, Game):
        return game
    return Game(result=game)


def _effective_k(player: Player, game: Game) -> float:
    if player.k is not None:
        return player.k
    if game.k is not None:
        return game.k
    return k_factor(
        player.rating,
        age=player.age,
        games=player.games,
        ever_reached_2400=player.ever_reached_2400,
        category=game.category,
    )


def update_ratings(
    player_a: Union[float, Player],
    player_b: Union[float, Player],
    game: Union[float, Game],
) -> Tuple[int, int]:
    """
    Calculate both players' ratings after a game between them.

    Either player may be given as a bare rating, in which case the default
    attributes apply, and the game may be given as a bare result for player A.
    Each new rating is rounded on its own, so one side's rounding never
    shifts the other's.

    Args:
        player_a: Rating or Player for the first player
        player_b: Rating or Player for the second player
        game: Result for player A (1 for win, 0.5 for draw, 0 for loss) or a Game

    Returns:
        Tuple of (new rating for player A, new rating for player B)
    """
    player_a = _as_player(player_a)
    player_b = _as_player(player_b)
    game = _as_game(game)

    k_a = _effective_k(player_a, game)
    k_b = _effective_k(player_b, game)

    expected_a = expected_score(player_a.rating, player_b.rating)
    expected_b = expected_score(player_b.rating, player_a.rating)

    new_rating_a = round_half_up(player_a.rating + delta(game.result, expected_a, k_a))
    new_rating_b = round_half_up(player_b.rating + delta(1 - game.result, expected_b, k_b))

    logger.debug(
        "%s game, result %s: A %s -> %d (k=%s), B %s -> %d (k=%s)",
        game.category, game.result,
        player_a.rating, new_rating_a, k_a,
        player_b.rating, new_rating_b, k_b,
    )

    return new_rating_a, new_rating_b
