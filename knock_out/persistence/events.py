"""
events.py
Defines the GameEvent dataclass recorded by RecordingObserver.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class GameEvent:
    """
    A single observed notification (game started, turn taken, game ended).
    Fields:
        game_id (str): Identifier of the game the event belongs to.
        event_type (str): 'GameStarted', 'TurnTaken' or 'GameEnded'.
        payload (dict): Event-specific data.
    """
    game_id: str
    event_type: str
    payload: Dict[str, Any]
