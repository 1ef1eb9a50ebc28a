"""
Run a batch of seeded Knock Out! games, save each game's turn log as JSON and append a CSV summary.
Usage: python scripts/run_experiments.py --players 4 --games 20 --data-dir results
"""
import os
import argparse
import datetime
import hashlib
from typing import Any, Dict

from knock_out.core.config import GameConfig
from knock_out.core.engine import KnockOutGame
from knock_out.core.errors import KnockOutError
from knock_out.observers.recording import RecordingObserver
from knock_out.persistence import csv_io
from knock_out.persistence import serializer


def generate_game_id(num_players: int, seed: int, timestamp: str) -> str:
    raw = f"{timestamp}_{num_players}_{seed}"
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def run_game(cfg: GameConfig, game_index: int, timestamp: str) -> Dict[str, Any]:
    """
    Play one game and collect its log, recorded events and summary row.
    Args:
        cfg (GameConfig): Game configuration.
        game_index (int): Index of the game in the batch.
        timestamp (str): Batch timestamp.
    Returns:
        dict: Result with 'summary', 'turn_log', 'events' and 'observed'.
    """
    game_id = generate_game_id(cfg.num_players, cfg.rng_seed, timestamp)
    observer = RecordingObserver(game_id=game_id)
    game = KnockOutGame(cfg, observer=observer)
    error = None
    try:
        game.play()
    except KnockOutError as e:
        error = f"{type(e).__name__}: {e}"
    return {
        "summary": csv_io.summary_row(game, game_id, game_index, timestamp, error),
        "config": cfg,
        "turn_log": game.turn_log,
        "events": game.get_events(),
        "observed": observer.recorder.events(),
    }


def save_game_result(result: Dict[str, Any], out_dir: str) -> str:
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, f"game_{result['summary']['game_index']:04d}_{result['summary']['game_id']}.json")
    with open(path, "w", encoding="utf-8") as f:
        f.write(serializer.dumps(result))
    return path


def main():
    parser = argparse.ArgumentParser(description='Run a batch of Knock Out! games')
    parser.add_argument('--players', type=int, default=4, help='Players per game')
    parser.add_argument('--games', type=int, default=10, help='Number of games')
    parser.add_argument('--first-seed', type=int, default=0, help='Seed of the first game; later games count up')
    parser.add_argument('--data-dir', type=str, default='results', help='Directory for JSON and CSV output')
    args = parser.parse_args()

    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    summary_csv = os.path.join(args.data_dir, "game_summary.csv")
    rows = []
    for i in range(args.games):
        print(f"Running game {i+1}/{args.games}...", end=" ")
        try:
            cfg = GameConfig(num_players=args.players, rng_seed=args.first_seed + i)
            result = run_game(cfg, i, timestamp)
        except KnockOutError as e:
            raise SystemExit(str(e))
        path = save_game_result(result, args.data_dir)
        rows.append(result["summary"])
        print("done ->", os.path.basename(path))

    csv_io.append_rows_to_csv(rows, summary_csv, csv_io.get_summary_header())
    finished = [r for r in rows if r["error"] is None]
    by_score = sum(1 for r in finished if r["end_reason"] == "score")
    avg_turns = sum(r["turns"] for r in finished) / len(finished) if finished else 0.0
    print(f"All games finished. {by_score}/{len(rows)} ended on score, average length {avg_turns:.1f} turns.")
    print(f"Summary: {summary_csv}")


if __name__ == "__main__":
    main()
