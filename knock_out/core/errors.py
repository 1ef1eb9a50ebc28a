"""
errors.py
Defines the exception types raised by the Knock Out! engine.
Related modules:
- config.py: Raises InvalidConfigurationError from GameConfig.validate.
- random_source.py: Raises RandomSourceFailure when a source cannot produce a value.
- engine.py: Raises GameStateError on illegal lifecycle transitions.
"""


class KnockOutError(Exception):
    """
    Base class for every error raised by the game package.
    """
    pass


class InvalidConfigurationError(KnockOutError):
    """
    Raised when a game, die or player is constructed with invalid parameters
    (non-positive player count, non-positive die sides, knockout number out of range).
    """
    pass


class RandomSourceFailure(KnockOutError):
    """
    Raised when a random source cannot produce a value. Aborts the running game.
    """
    pass


class GameStateError(KnockOutError):
    """
    Raised when the game is asked to start, step or play from the wrong state.
    """
    pass
