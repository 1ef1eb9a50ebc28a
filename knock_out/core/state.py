"""
state.py
Defines the game state dataclasses for Knock Out!: GameState and TurnResult.
Related modules:
- engine.py: Mutates GameState while the game runs and records a TurnResult per turn.
- observers: Read game.state.last_turn to report what just happened.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

NOT_STARTED = "NOT_STARTED"
RUNNING = "RUNNING"
FINISHED = "FINISHED"

# end reasons
END_SCORE = "score"
END_ALL_KNOCKED_OUT = "all_knocked_out"


@dataclass(frozen=True)
class TurnResult:
    """
    Outcome of a single player-turn.
    Fields:
        round_index (int): Round the turn belongs to (1-based).
        turn_index (int): Turn number across the whole game (1-based).
        player_id (int): Player who rolled.
        faces (tuple[int, ...]): Individual die faces.
        roll (int): Sum of the faces.
        knocked_out (bool): True if the roll matched the player's knockout number.
        score (int): Player's score after the turn.
        game_over (bool): True if this turn ended the game.
    """
    round_index: int
    turn_index: int
    player_id: int
    faces: Tuple[int, ...]
    roll: int
    knocked_out: bool
    score: int
    game_over: bool


@dataclass
class GameState:
    """
    Progress of a game.
    Fields:
        status (str): NOT_STARTED | RUNNING | FINISHED.
        round_index (int): Current round (0 before the game starts).
        turn_index (int): Turns taken so far.
        cursor (int): Roster index of the next player to consider.
        end_reason (str|None): END_SCORE or END_ALL_KNOCKED_OUT once finished.
        winner (int|None): player_id of the player who reached the winning score.
        current_player (int|None): player_id of the player taking (or who last took) a turn.
        last_turn (TurnResult|None): Most recent resolved turn.
        aborted (bool): True once a random source failure interrupted the game.
    """
    status: str = NOT_STARTED
    round_index: int = 0
    turn_index: int = 0
    cursor: int = 0
    end_reason: Optional[str] = None
    winner: Optional[int] = None
    current_player: Optional[int] = None
    last_turn: Optional[TurnResult] = None
    aborted: bool = False
