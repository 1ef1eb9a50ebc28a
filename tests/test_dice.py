import unittest
from collections import Counter

from knock_out.core.dice import Die, roll_n
from knock_out.core.errors import InvalidConfigurationError, RandomSourceFailure
from knock_out.core.random_source import OneThroughTen, SequenceSource


class TestDie(unittest.TestCase):
    """
    Tests for `Die.roll`: faces stay within [1, sides] for any draw, faces follow
    (draw % sides) + 1, and source failures propagate.
    """

    def test_roll_in_range_for_all_sides_and_draws(self):
        for sides in range(1, 13):
            draws = list(range(-20, 40))
            die = Die(sides, SequenceSource(draws))
            for _ in draws:
                face = die.roll()
                self.assertGreaterEqual(face, 1)
                self.assertLessEqual(face, sides)

    def test_face_mapping(self):
        die = Die(6, SequenceSource([1, 2, 5, 6, 10]))
        self.assertEqual(roll_n(5, die), [2, 3, 6, 1, 5])

    def test_six_sided_die_over_one_through_ten_is_biased(self):
        die = Die(6, SequenceSource(range(1, 11)))
        counts = Counter(roll_n(10, die))
        self.assertEqual(counts, Counter({1: 1, 2: 2, 3: 2, 4: 2, 5: 2, 6: 1}))

    def test_rejects_non_positive_sides(self):
        for sides in (0, -1):
            with self.assertRaises(InvalidConfigurationError):
                Die(sides, OneThroughTen(seed=1))

    def test_source_failure_propagates(self):
        die = Die(6, SequenceSource([3]))
        die.roll()
        with self.assertRaises(RandomSourceFailure):
            die.roll()


class TestRandomSources(unittest.TestCase):
    def test_one_through_ten_range_and_coverage(self):
        src = OneThroughTen(seed=3)
        values = [src.draw() for _ in range(1000)]
        self.assertEqual(set(values), set(range(1, 11)))

    def test_one_through_ten_is_reproducible(self):
        a = OneThroughTen(seed=42)
        b = OneThroughTen(seed=42)
        self.assertEqual([a.draw() for _ in range(20)], [b.draw() for _ in range(20)])

    def test_sequence_source_tracks_consumption(self):
        src = SequenceSource([5, 6, 7])
        self.assertEqual(src.draw(), 5)
        self.assertEqual(src.consumed, 1)
        self.assertEqual(src.remaining, 2)


if __name__ == '__main__':
    unittest.main()
