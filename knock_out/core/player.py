"""
player.py
Defines the Player record tracked by the Knock Out! engine.
Related modules:
- rules.py: Maps a random draw to the player's knockout number.
- engine.py: The only code that mutates score and eliminated.
"""

from dataclasses import dataclass

from .errors import InvalidConfigurationError
from .random_source import RandomSource
from .rules import KNOCKOUT_NUMBERS, accepts_knockout_draw, knockout_number_from_draw


@dataclass
class Player:
    """
    One seat in the roster.
    Fields:
        player_id (int): 1-based position in the roster.
        knockout_number (int): Rolling exactly this sum knocks the player out (6..9).
        score (int): Running total of credited rolls.
        eliminated (bool): True once knocked out; never reset.
    """
    player_id: int
    knockout_number: int
    score: int = 0
    eliminated: bool = False

    def __post_init__(self):
        if self.knockout_number not in KNOCKOUT_NUMBERS:
            raise InvalidConfigurationError(
                f"knockout number must be one of {KNOCKOUT_NUMBERS}, got {self.knockout_number}"
            )

    @classmethod
    def create(cls, player_id: int, source: RandomSource) -> "Player":
        """
        Create a player whose knockout number is drawn uniformly from the given source.
        Draws outside the accepted range are discarded and drawn again.
        Args:
            player_id (int): Roster position.
            source (RandomSource): Source shared with the game's die.
        Returns:
            Player: A fresh player with score 0.
        """
        draw = source.draw()
        while not accepts_knockout_draw(draw):
            draw = source.draw()
        return cls(player_id=player_id, knockout_number=knockout_number_from_draw(draw))

    @property
    def active(self) -> bool:
        return not self.eliminated
