"""
csv_io.py
Persistence utilities for writing Knock Out! game summaries to CSV files.
"""

import os
import csv
from typing import Dict, List, Any

from ..core.rules import count_active

SUMMARY_HEADER = [
    "game_id", "game_index", "timestamp", "num_players", "seed", "turns", "rounds",
    "end_reason", "winner", "winning_score", "knocked_out", "remaining", "error",
]


def summary_row(game, game_id: str, game_index: int = None, timestamp: str = None, error: str = None) -> Dict[str, Any]:
    """
    Build a SUMMARY_HEADER row describing a game (finished or aborted).
    Args:
        game (KnockOutGame): The game to summarize.
        game_id (str): Identifier for the game.
        game_index (int|None): Position in a batch.
        timestamp (str|None): ISO timestamp of the run.
        error (str|None): Error message if the game did not finish.
    Returns:
        dict: Row keyed by SUMMARY_HEADER.
    """
    winner = game.winner
    remaining = count_active(game.players)
    return {
        "game_id": game_id,
        "game_index": game_index,
        "timestamp": timestamp,
        "num_players": len(game.players),
        "seed": game.config.rng_seed,
        "turns": game.state.turn_index,
        "rounds": game.state.round_index,
        "end_reason": game.state.end_reason,
        "winner": None if winner is None else winner.player_id,
        "winning_score": None if winner is None else winner.score,
        "knocked_out": len(game.players) - remaining,
        "remaining": remaining,
        "error": error,
    }


def append_row_to_csv(row: Dict[str, Any], csv_path: str, header: List[str]):
    append_rows_to_csv([row], csv_path, header)


def append_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)


def read_rows(csv_path: str) -> List[Dict[str, str]]:
    with open(csv_path, newline='', encoding="utf-8") as f:
        return list(csv.DictReader(f))


def get_summary_header():
    return SUMMARY_HEADER.copy()
