"""
random_source.py
Defines the RandomSource capability and its implementations.
All randomness in a game (knockout numbers and die rolls) flows through one injected source,
so a game can be made fully deterministic by passing a SequenceSource.
Related modules:
- dice.py: Die draws from a RandomSource.
- player.py: Player.create draws the knockout number from a RandomSource.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .errors import RandomSourceFailure
from .rules import SOURCE_LOW, SOURCE_HIGH


class RandomSource(ABC):
    """
    Produces integers uniformly distributed over a fixed inclusive range.
    """

    @abstractmethod
    def draw(self) -> int:
        """
        Return the next value.
        Raises:
            RandomSourceFailure: If the source cannot produce a value.
        """
        raise NotImplementedError


class OneThroughTen(RandomSource):
    """
    Default source: uniform integers in [1, 10] from a random.Random instance.
    Args:
        rng (random.Random|None): RNG to draw from. Takes precedence over seed.
        seed (int|None): Seed for a private RNG when rng is not given.
    """
    low = SOURCE_LOW
    high = SOURCE_HIGH

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng or random.Random(seed)

    def draw(self) -> int:
        return self.rng.randint(self.low, self.high)


class SequenceSource(RandomSource):
    """
    Deterministic source replaying a fixed sequence of values, for tests and replays.
    Raises RandomSourceFailure once the sequence is exhausted.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._position = 0

    @property
    def consumed(self) -> int:
        """Number of values handed out so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def draw(self) -> int:
        if self._position >= len(self._values):
            raise RandomSourceFailure(f"sequence exhausted after {len(self._values)} draws")
        value = self._values[self._position]
        self._position += 1
        return value
