"""
Play a game of Knock Out! in the terminal with observers attached.
Usage: python UI/cli.py --players 100 --observers tracker,narrator --seed 7
"""
import argparse
from typing import List

from knock_out.core.config import GameConfig
from knock_out.core.engine import KnockOutGame
from knock_out.core.errors import KnockOutError
from knock_out.observers import OBSERVER_MAP
from knock_out.observers.base import GameObserver


class ObserverGroup(GameObserver):
    """
    Fans notifications out to several observers, in the order given.
    """
    def __init__(self, observers: List[GameObserver]):
        self.observers = list(observers)

    def on_game_start(self, game):
        for o in self.observers:
            o.on_game_start(game)

    def on_turn(self, game, roll_sum):
        for o in self.observers:
            o.on_turn(game, roll_sum)

    def on_game_end(self, game):
        for o in self.observers:
            o.on_game_end(game)


def choose_observers(names: str) -> List[GameObserver]:
    """
    Return observer instances for a comma-separated list of registered names.
    Raises:
        ValueError: If a name is unknown.
    """
    observers = []
    for name in [x.strip().lower() for x in names.split(',') if x.strip()]:
        if name not in OBSERVER_MAP:
            raise ValueError(f"Unknown observer: {name}. Supported: {sorted(OBSERVER_MAP)}")
        observers.append(OBSERVER_MAP[name]())
    return observers


def print_summary(game: KnockOutGame):
    print("\n--- GAME OVER ---")
    print(f"Turns: {game.state.turn_index}, rounds: {game.state.round_index}")
    print(f"End reason: {game.state.end_reason}")
    standings = sorted(game.players, key=lambda p: p.score, reverse=True)
    for p in standings[:5]:
        status = "out" if p.eliminated else "in"
        print(f"  Player {p.player_id}: {p.score} points (knockout number {p.knockout_number}, {status})")


def main():
    parser = argparse.ArgumentParser(description='Play one game of Knock Out!')
    parser.add_argument('--players', type=int, default=100, help='Number of players')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the dice')
    parser.add_argument('--observers', type=str, default='tracker,narrator', help='Comma-separated observer names')
    args = parser.parse_args()

    try:
        observers = choose_observers(args.observers)
        game = KnockOutGame(GameConfig(num_players=args.players, rng_seed=args.seed), observer=ObserverGroup(observers))
    except (ValueError, KnockOutError) as e:
        raise SystemExit(str(e))
    game.play()
    print_summary(game)


if __name__ == "__main__":
    main()
