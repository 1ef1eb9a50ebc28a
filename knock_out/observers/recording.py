"""
recording.py
Observer that turns game notifications into GameEvent records.
Related modules:
- persistence/events.py: GameEvent type.
- persistence/recorder.py: InMemoryRecorder, the default sink.
"""

from .base import GameObserver
from . import register_observer
from ..core.rules import is_knockout
from ..persistence.events import GameEvent
from ..persistence.recorder import InMemoryRecorder


@register_observer("recording")
class RecordingObserver(GameObserver):
    """
    Records one GameEvent per notification, in the order the notifications arrive.
    Args:
        recorder: Object with record(event) and flush(); defaults to an InMemoryRecorder.
        game_id (str): Identifier stamped on every event.
    """
    def __init__(self, recorder=None, game_id="game"):
        self.recorder = recorder if recorder is not None else InMemoryRecorder()
        self.game_id = game_id

    def on_game_start(self, game):
        self.recorder.record(GameEvent(self.game_id, "GameStarted", {
            "players": [(p.player_id, p.knockout_number) for p in game.players],
            "die_sides": game.die.sides,
        }))

    def on_turn(self, game, roll_sum):
        player = game.turn_player
        self.recorder.record(GameEvent(self.game_id, "TurnTaken", {
            "round": game.state.round_index,
            "turn": game.state.turn_index,
            "player": player.player_id,
            "roll": roll_sum,
            "knocked_out": is_knockout(roll_sum, player.knockout_number),
            "score_before": player.score,
        }))

    def on_game_end(self, game):
        self.recorder.record(GameEvent(self.game_id, "GameEnded", {
            "reason": game.state.end_reason,
            "winner": game.state.winner,
            "turns": game.state.turn_index,
        }))
        self.recorder.flush()

    def event_types(self):
        """Return the event types recorded so far, in order."""
        return [e.event_type for e in self.recorder.events()]
