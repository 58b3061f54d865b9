import unittest
import numpy as np

import qshoot
from qshoot import classical_turning_points, index_of_minimum, TurningPoints


class TestClassicalTurningPoints(unittest.TestCase):
    def setUp(self):
        self.well = np.array([5.0, 3.0, 1.0, 3.0, 5.0])

    def test_bound(self):
        self.assertEqual(classical_turning_points(self.well, 2.0), TurningPoints(2, 2))
        self.assertEqual(classical_turning_points(self.well, 4.0), TurningPoints(1, 3))

    def test_above_potential_everywhere(self):
        self.assertEqual(classical_turning_points(self.well, 10.0), TurningPoints(0, 4))

    def test_below_potential_everywhere(self):
        # the scans cross: fall back to the whole mesh
        self.assertEqual(classical_turning_points(self.well, 0.0), TurningPoints(0, 4))

    def test_ordering(self):
        rng = np.random.default_rng(13)
        for _ in range(50):
            potential = rng.random(rng.integers(3, 40))
            energy = rng.random() * 1.2 - 0.1
            tp = classical_turning_points(potential, energy)
            self.assertLessEqual(tp.left, tp.right)
            self.assertGreaterEqual(tp.left, 0)
            self.assertLess(tp.right, potential.shape[0])


class TestIndexOfMinimum(unittest.TestCase):
    def test_unique_minimum(self):
        self.assertEqual(index_of_minimum([4.0, 2.0, 1.0, 3.0]), 2)

    def test_tied_minimum(self):
        potential = np.ones(1025)
        potential[400] = potential[401] = 0.0
        self.assertIn(index_of_minimum(potential), {400, 401})

    def test_middle_of_three_ties(self):
        self.assertEqual(index_of_minimum([5.0, 0.0, 0.0, 0.0, 5.0]), 2)

    def test_clamped_away_from_edges(self):
        self.assertEqual(index_of_minimum([0.0, 1.0, 2.0, 3.0]), 1)
        self.assertEqual(index_of_minimum([3.0, 2.0, 1.0, 0.0]), 2)
        flat = np.zeros(7)
        self.assertNotIn(index_of_minimum(flat), {0, 6})

    def test_empty(self):
        with self.assertRaises(AssertionError):
            index_of_minimum([])


if __name__ == "__main__":
    unittest.main()
