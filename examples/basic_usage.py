"""
Basic usage example for the FIDE Elo functions.
"""

import logging

from fide_elo import (
    BLITZ,
    Game,
    GameRecord,
    Player,
    expected_score,
    k_factor,
    performance_rating,
    update_ratings,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    print(f"Expected score 1805 vs 1186: {expected_score(1805, 1186):.3f}")
    print(f"K-factor for a 15 year old rated 1650: {k_factor(1650, age=15)}")

    # A newcomer beats an established player
    newcomer = Player(rating=1500, games=8)
    print("Newcomer wins:", update_ratings(newcomer, 1600, 1))

    # Blitz games use K=20 for everyone
    print("Blitz draw:", update_ratings(2450, Player(2380, ever_reached_2400=True), Game(0.5, category=BLITZ)))

    tournament = [
        GameRecord(opponent_rating=1720, result=1),
        GameRecord(opponent_rating=1810, result=0.5),
        GameRecord(opponent_rating=1655, result=1),
        GameRecord(opponent_rating=1930, result=0),
        GameRecord(opponent_rating=1780, result=1),
    ]
    print(f"Tournament performance: {performance_rating(tournament)}")


if __name__ == "__main__":
    main()
