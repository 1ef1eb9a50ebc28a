import io
import unittest
from contextlib import redirect_stdout

from knock_out.core.config import GameConfig
from knock_out.core.engine import KnockOutGame
from knock_out.observers.base import GameObserver


class InvariantObserver(GameObserver):
    """
    Checks the per-turn invariants from inside the game and records the call sequence.
    on_turn fires before the roll is applied, so each call checks the previous turn's effect.
    """
    def __init__(self, test):
        self.test = test
        self.calls = []
        self.scores = {}
        self.out = set()
        self.pending = None

    def _check_previous_turn(self, game):
        t = self.test
        for p in game.players:
            before = self.scores[p.player_id]
            if self.pending is not None and p.player_id == self.pending[0]:
                player_id, roll, knocked_out = self.pending
                if knocked_out:
                    t.assertTrue(p.eliminated)
                    t.assertEqual(p.score, before)
                    self.out.add(player_id)
                else:
                    t.assertEqual(p.score, before + roll)
            else:
                t.assertEqual(p.score, before)
            if p.player_id in self.out:
                t.assertTrue(p.eliminated)
            self.scores[p.player_id] = p.score

    def on_game_start(self, game):
        self.calls.append("start")
        self.scores = {p.player_id: p.score for p in game.players}

    def on_turn(self, game, roll_sum):
        self.calls.append("turn")
        self._check_previous_turn(game)
        player = game.turn_player
        self.test.assertNotIn(player.player_id, self.out, "eliminated player rolled again")
        self.test.assertFalse(player.eliminated)
        self.pending = (player.player_id, roll_sum, roll_sum == player.knockout_number)

    def on_game_end(self, game):
        self.calls.append("end")
        self._check_previous_turn(game)


class TestGameProperties(unittest.TestCase):
    """
    Seeded games across roster sizes: every game terminates, notifications arrive in order,
    scores never decrease, eliminations are permanent, and the end condition holds.
    """

    def test_invariants_over_many_seeds(self):
        for num_players in (1, 2, 3, 7, 25):
            for seed in range(60):
                obs = InvariantObserver(self)
                game = KnockOutGame(GameConfig(num_players=num_players, rng_seed=seed), observer=obs)
                game.play()
                self.assertTrue(game.is_terminal())
                self.assertEqual(obs.calls[0], "start")
                self.assertEqual(obs.calls[-1], "end")
                self.assertEqual(obs.calls.count("start"), 1)
                self.assertEqual(obs.calls.count("end"), 1)
                self.assertEqual(obs.calls.count("turn"), game.state.turn_index)
                if game.state.end_reason == "score":
                    self.assertGreaterEqual(game.winner.score, 100)
                    self.assertFalse(game.winner.eliminated)
                    # nobody else reached the winning score first
                    others = [p for p in game.players if p is not game.winner]
                    self.assertTrue(all(p.score < 100 for p in others))
                else:
                    self.assertTrue(all(p.eliminated for p in game.players))

    def test_large_roster_terminates(self):
        game = KnockOutGame(GameConfig(num_players=100, rng_seed=2024))
        game.play()
        self.assertTrue(game.is_terminal())
        self.assertGreaterEqual(game.state.turn_index, 1)

    def test_no_observer_is_silent(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            KnockOutGame(GameConfig(num_players=3, rng_seed=4)).play()
        self.assertEqual(buf.getvalue(), "")


if __name__ == '__main__':
    unittest.main()
