"""
dice.py
Defines the Die and dice rolling utilities for the Knock Out! engine.
Related modules:
- random_source.py: Die maps raw draws from a RandomSource onto faces.
- engine.py: Uses roll_n to throw both dice each turn.
"""

from dataclasses import dataclass
from typing import List

from .errors import InvalidConfigurationError
from .random_source import RandomSource


@dataclass(frozen=True)
class Die:
    """
    A die with a fixed number of sides backed by a RandomSource.
    Faces are (draw % sides) + 1. With the default 1..10 source and 6 sides this is not
    uniform: faces 2, 3, 4 and 5 come up twice as often as 1 and 6.
    Fields:
        sides (int): Number of faces (must be positive).
        source (RandomSource): Source of raw draws.
    """
    sides: int
    source: RandomSource

    def __post_init__(self):
        if isinstance(self.sides, bool) or not isinstance(self.sides, int) or self.sides <= 0:
            raise InvalidConfigurationError(f"die sides must be a positive integer, got {self.sides!r}")

    def roll(self) -> int:
        """
        Roll the die once.
        Returns:
            int: Face value in [1, sides].
        Raises:
            RandomSourceFailure: Propagated from the source.
        """
        return (self.source.draw() % self.sides) + 1


def roll_n(n: int, die: Die) -> List[int]:
    """
    Roll the same die n times.
    Args:
        n (int): Number of rolls.
        die (Die): Die to roll.
    Returns:
        list[int]: Faces in the order they were rolled.
    """
    return [die.roll() for _ in range(n)]
