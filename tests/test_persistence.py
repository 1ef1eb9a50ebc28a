import os
import tempfile
import unittest

from knock_out.core.config import GameConfig
from knock_out.core.engine import KnockOutGame
from knock_out.core.random_source import SequenceSource
from knock_out.observers.recording import RecordingObserver
from knock_out.persistence import csv_io, serializer


class TestPersistence(unittest.TestCase):
    def _won_game(self):
        game = KnockOutGame(GameConfig(num_players=2), source=SequenceSource([1, 1, 1, 2]))
        game.players[0].score = 98
        game.play()
        return game

    def test_summary_row(self):
        row = csv_io.summary_row(self._won_game(), "abc", game_index=3, timestamp="t")
        self.assertEqual(set(row), set(csv_io.get_summary_header()))
        self.assertEqual(row["winner"], 1)
        self.assertEqual(row["winning_score"], 103)
        self.assertEqual(row["turns"], 1)
        self.assertEqual(row["remaining"], 2)
        self.assertEqual(row["knocked_out"], 0)
        self.assertIsNone(row["error"])

    def test_append_writes_header_once(self):
        game = self._won_game()
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "summary.csv")
            header = csv_io.get_summary_header()
            csv_io.append_row_to_csv(csv_io.summary_row(game, "a"), path, header)
            csv_io.append_rows_to_csv([csv_io.summary_row(game, "b")], path, header)
            rows = csv_io.read_rows(path)
            with open(path, encoding="utf-8") as f:
                header_lines = [line for line in f if line.startswith("game_id,")]
        self.assertEqual(len(header_lines), 1)
        self.assertEqual([r["game_id"] for r in rows], ["a", "b"])
        self.assertEqual(rows[0]["winning_score"], "103")

    def test_serializer_handles_dataclasses(self):
        game = self._won_game()
        data = serializer.loads(serializer.dumps({"last": game.state.last_turn, "config": game.config}))
        self.assertEqual(data["last"]["faces"], [2, 3])
        self.assertEqual(data["last"]["roll"], 5)
        self.assertEqual(data["config"], {"num_players": 2, "rng_seed": None})

    def test_recorded_events_serialize(self):
        obs = RecordingObserver(game_id="x")
        KnockOutGame(GameConfig(num_players=1), source=SequenceSource([4, 2, 2]), observer=obs).play()
        data = serializer.loads(serializer.dumps(obs.recorder.events()))
        self.assertEqual([e["event_type"] for e in data], ["GameStarted", "TurnTaken", "GameEnded"])
        self.assertEqual(data[1]["payload"]["knocked_out"], True)


if __name__ == '__main__':
    unittest.main()
