"""
config.py
Defines the GameConfig dataclass, the only configurable surface of a Knock Out! game.
Related modules:
- engine.py: Validates GameConfig and builds the roster and the default random source from it.
- rules.py: Holds the fixed rule constants that are deliberately not configurable.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidConfigurationError


@dataclass(frozen=True)
class GameConfig:
    """
    Options for a single game.
    Fields:
        num_players (int): Number of players in the roster (must be positive).
        rng_seed (int|None): Seed for the default random source; None for a fresh game each run.
    """
    num_players: int = 2
    rng_seed: Optional[int] = None

    def validate(self) -> None:
        """
        Reject configurations the engine cannot run.
        Raises:
            InvalidConfigurationError: If num_players is not a positive integer.
        """
        if isinstance(self.num_players, bool) or not isinstance(self.num_players, int):
            raise InvalidConfigurationError(f"num_players must be an integer, got {self.num_players!r}")
        if self.num_players <= 0:
            raise InvalidConfigurationError(f"num_players must be positive, got {self.num_players}")
