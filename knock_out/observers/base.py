from abc import ABC, abstractmethod


class GameObserver(ABC):
    """
    Abstract base class for objects notified about a game's lifecycle.
    The game calls on_game_start once, on_turn once per player-turn (including the final one),
    and on_game_end once, always in that order and synchronously. on_turn is called right
    after the dice are thrown, before a knockout or score is applied. Observers report on the
    game; they never influence it.
    """

    @abstractmethod
    def on_game_start(self, game):
        """
        Called once, before the first turn.
        Args:
            game (KnockOutGame): The game being played.
        """
        raise NotImplementedError

    @abstractmethod
    def on_turn(self, game, roll_sum: int):
        """
        Called after every player-turn.
        Args:
            game (KnockOutGame): The game being played; game.turn_player is the player who rolled.
            roll_sum (int): Sum of both dice for this turn.
        """
        raise NotImplementedError

    @abstractmethod
    def on_game_end(self, game):
        """
        Called once, after the last turn.
        Args:
            game (KnockOutGame): The finished game.
        """
        raise NotImplementedError
