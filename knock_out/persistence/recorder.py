"""
recorder.py
Event sinks for GameEvent streams.
InMemoryRecorder is used by tests and by the experiment scripts before events are written out.
"""

from typing import List
from .events import GameEvent


class InMemoryRecorder:
    """
    Records GameEvent objects in memory for later retrieval.
    """
    def __init__(self):
        self._events: List[GameEvent] = []
        self.flushes = 0

    def record(self, event: GameEvent) -> None:
        self._events.append(event)

    def events(self):
        """Return all recorded events as a list."""
        return list(self._events)

    def of_type(self, event_type: str):
        return [e for e in self._events if e.event_type == event_type]

    def flush(self):
        """Nothing to write; counts calls so callers can check the game end was seen."""
        self.flushes += 1
