from .base import GameObserver
from . import register_observer
from ..core.rules import count_active, is_knockout
from ..core.state import END_ALL_KNOCKED_OUT, END_SCORE


@register_observer("narrator")
class Narrator(GameObserver):
    """
    Prints commentary for knockouts and for the way the game ended.
    Args:
        show_rolls (bool): Also print every roll.
    """
    def __init__(self, show_rolls=False):
        self.show_rolls = show_rolls

    def on_game_start(self, game):
        print(f"{len(game.players)} players take their seats.")

    def on_turn(self, game, roll_sum):
        player = game.turn_player
        if self.show_rolls:
            print(f"Player {player.player_id} rolled {roll_sum}")
        if is_knockout(roll_sum, player.knockout_number):
            print(f"Player {player.player_id} is knocked out by rolling {roll_sum}, their score was {player.score}")

    def on_game_end(self, game):
        if game.state.end_reason == END_ALL_KNOCKED_OUT:
            print("All players have been knocked out.")
        elif game.state.end_reason == END_SCORE:
            winner = game.winner
            print(f"Player {winner.player_id} has won with a final score of {winner.score}.")
            print(f"Remaining players: {count_active(game.players)}")
