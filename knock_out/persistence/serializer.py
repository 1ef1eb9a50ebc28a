"""
serializer.py
JSON helpers for game results, snapshots and recorded events.
Dataclasses (GameEvent, TurnResult, GameState, Player) are written as plain dicts.
"""

import dataclasses
import json
from typing import Any


def _default(o: Any):
    if dataclasses.is_dataclass(o) and not isinstance(o, type):
        return dataclasses.asdict(o)
    if isinstance(o, (set, frozenset)):
        return sorted(o)
    return getattr(o, '__dict__', str(o))


def dumps(obj: Any, indent=None) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string.
    Args:
        obj: Object to serialize.
        indent (int|None): Passed through to json.dumps.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, default=_default, indent=indent)


def loads(s: str):
    return json.loads(s)
