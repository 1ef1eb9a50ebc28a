"""
rules.py
Rule constants and small pure helpers for Knock Out!.
Related modules:
- player.py: Uses knockout_number_from_draw when a player is created.
- engine.py: Uses is_knockout and has_won to resolve each turn.
"""

from typing import Iterable

DIE_SIDES = 6
ROLLS_PER_TURN = 2
KNOCKOUT_NUMBERS = (6, 7, 8, 9)
WINNING_SCORE = 100

# Range of the default random source backing the die, independent of the face count.
SOURCE_LOW = 1
SOURCE_HIGH = 10

# Draws above this are rejected when picking a knockout number, so each of the four
# numbers is backed by the same count of source values.
KNOCKOUT_DRAW_LIMIT = SOURCE_HIGH - SOURCE_HIGH % len(KNOCKOUT_NUMBERS)


def accepts_knockout_draw(draw: int) -> bool:
    return SOURCE_LOW <= draw <= KNOCKOUT_DRAW_LIMIT


def knockout_number_from_draw(draw: int) -> int:
    """
    Map an accepted random draw onto one of the knockout numbers.
    Args:
        draw (int): Value produced by a RandomSource that passed accepts_knockout_draw.
    Returns:
        int: A knockout number in 6..9.
    """
    return KNOCKOUT_NUMBERS[draw % len(KNOCKOUT_NUMBERS)]


def is_knockout(roll_sum: int, knockout_number: int) -> bool:
    return roll_sum == knockout_number


def has_won(score: int) -> bool:
    return score >= WINNING_SCORE


def count_active(players: Iterable) -> int:
    """
    Count players that have not been knocked out.
    Args:
        players (iterable): Player records with an `eliminated` flag.
    Returns:
        int: Number of active players.
    """
    return sum(1 for p in players if not p.eliminated)
