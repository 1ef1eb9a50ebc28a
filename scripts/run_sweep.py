"""
Sweep the number of players, play several games per setting and chart the average game length.
Usage: python scripts/run_sweep.py --players 1,2,4,8,16 --games 50 --data-dir data
"""
import os
import argparse
from typing import Dict, List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from knock_out.core.config import GameConfig
from knock_out.core.engine import KnockOutGame
from knock_out.core.state import END_SCORE
from knock_out.persistence import csv_io

SWEEP_HEADER = ['num_players', 'games', 'avg_turns', 'avg_rounds', 'score_endings', 'score_ending_percent']


def sweep_point(num_players: int, games: int, first_seed: int = 0) -> Dict:
    turns = 0
    rounds = 0
    score_endings = 0
    for i in range(games):
        game = KnockOutGame(GameConfig(num_players=num_players, rng_seed=first_seed + i))
        game.play()
        turns += game.state.turn_index
        rounds += game.state.round_index
        if game.state.end_reason == END_SCORE:
            score_endings += 1
    return {
        'num_players': num_players,
        'games': games,
        'avg_turns': turns / games if games else 0.0,
        'avg_rounds': rounds / games if games else 0.0,
        'score_endings': score_endings,
        'score_ending_percent': f"{(score_endings / games * 100.0) if games else 0.0:.3f}",
    }


def plot_sweep(rows: List[Dict], out_path: str):
    labels = [str(r['num_players']) for r in rows]
    values = [r['avg_turns'] for r in rows]
    width = max(6, int(len(labels) * 0.6))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(labels, values, color='C0')
    plt.xlabel('Players')
    plt.ylabel('Average turns per game')
    plt.title('Knock Out!: game length by player count')
    for rect, val in zip(bars, values):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 0.5, f"{val:.1f}", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def parse_player_list(s: str) -> List[int]:
    return [int(x) for x in s.split(',') if x.strip()]


def main():
    parser = argparse.ArgumentParser(description='Sweep player counts for Knock Out!')
    parser.add_argument('--players', type=str, default='1,2,4,8,16,32', help='Comma-separated player counts')
    parser.add_argument('--games', type=int, default=50, help='Games per player count')
    parser.add_argument('--data-dir', type=str, default='data', help='Directory to save csv and chart')
    args = parser.parse_args()

    os.makedirs(args.data_dir, exist_ok=True)
    rows = [sweep_point(n, args.games) for n in parse_player_list(args.players)]
    sweep_csv = os.path.join(args.data_dir, 'player_sweep.csv')
    chart_png = os.path.join(args.data_dir, 'player_sweep.png')
    csv_io.append_rows_to_csv(rows, sweep_csv, SWEEP_HEADER)
    plot_sweep(rows, chart_png)
    print(f"Sweep finished. Results: {sweep_csv}")
    print(f"Chart: {chart_png}")


if __name__ == '__main__':
    main()
