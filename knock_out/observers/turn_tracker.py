from .base import GameObserver
from . import register_observer
from ..core.engine import KnockOutGame


@register_observer("tracker")
class TurnTracker(GameObserver):
    """
    Counts the turns of a game and reports the total when it ends.
    Args:
        verbose (bool): If True, print the start and end messages.
    """
    def __init__(self, verbose=True):
        self.verbose = verbose
        self.num_turns = 0

    def on_game_start(self, game):
        self.num_turns = 0
        if self.verbose:
            if isinstance(game, KnockOutGame):
                print("Started a new game of Knock Out")
            print(f"The game is using a {game.die.sides}-sided die.")

    def on_turn(self, game, roll_sum):
        self.num_turns += 1

    def on_game_end(self, game):
        if self.verbose:
            print(f"The game lasted for {self.num_turns} turns.")
