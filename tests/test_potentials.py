import unittest
import numpy as np

import qshoot
from qshoot import potentials


class TestBuilders(unittest.TestCase):
    def test_simple_harmonic_oscillator(self):
        sho = potentials.simple_harmonic_oscillator
        self.assertAlmostEqual(sho(0.25, 0.5), 0.04)
        self.assertAlmostEqual(sho(0.25, 0.25), 1.0)
        self.assertAlmostEqual(sho(0.25, 0.75), 1.0)
        # parameters are folded about 0.5
        self.assertAlmostEqual(sho(0.75, 0.3), sho(0.25, 0.3))

    def test_square_wells(self):
        self.assertEqual(potentials.infinite_square_well(0.2, 0.1), 1000.0)
        self.assertEqual(potentials.infinite_square_well(0.2, 0.5), 0.05)
        self.assertEqual(potentials.infinite_square_well(0.8, 0.9), 1000.0)
        self.assertEqual(potentials.finite_square_well(0.2, 0.1), 0.8)
        self.assertEqual(potentials.finite_square_well(0.2, 0.5), 0.05)

    def test_two_square_wells(self):
        tsw = potentials.two_square_wells
        self.assertEqual(tsw(0.1, 0.05), 1000.0)
        self.assertEqual(tsw(0.1, 0.15), 0.05)
        self.assertEqual(tsw(0.1, 0.26), 0.85)
        self.assertEqual(tsw(0.1, 0.7), 0.05)
        self.assertEqual(tsw(0.1, 0.95), 1000.0)

    def test_sampled_potential(self):
        v = potentials.sampled_potential([(0.1, 0.0), (0.5, 1.0), (0.9, 0.0)])
        self.assertAlmostEqual(v(0.0, 0.3), 0.5)
        self.assertAlmostEqual(v(0.0, 0.5), 1.0)
        self.assertAlmostEqual(v(0.0, 0.7), 0.5)
        self.assertEqual(v(0.0, 0.05), 1000.0)
        self.assertEqual(v(0.0, 0.95), 1000.0)
        with self.assertRaises(AssertionError):
            potentials.sampled_potential([])

    def test_random_potential(self):
        v1 = potentials.random_potential(np.random.default_rng(42))
        v2 = potentials.random_potential(np.random.default_rng(42))
        mesh1 = qshoot.potential_mesh(v1, 0.0, 200)
        mesh2 = qshoot.potential_mesh(v2, 0.0, 200)
        np.testing.assert_array_equal(mesh1, mesh2)
        self.assertTrue(np.all(np.isfinite(mesh1)))
        self.assertAlmostEqual(mesh1[0], 1.0)


class TestPotentialMesh(unittest.TestCase):
    def test_sampling(self):
        mesh = qshoot.potential_mesh(potentials.finite_square_well, 0.25, 8)
        np.testing.assert_array_equal(
            mesh, [0.8, 0.8, 0.05, 0.05, 0.05, 0.05, 0.05, 0.8]
        )

    def test_too_small(self):
        with self.assertRaises(AssertionError):
            qshoot.potential_mesh(potentials.finite_square_well, 0.25, 2)

    def test_solvable(self):
        mesh = qshoot.potential_mesh(potentials.two_square_wells, 0.1, 400)
        psi = qshoot.classically_resolved_averaged_numerov(
            qshoot.IntegratorInput(mesh, 0.3, 25.0)
        )
        norm = np.sum(psi.values.res**2) * psi.dx
        self.assertAlmostEqual(norm, 1.0, places=6)


if __name__ == "__main__":
    unittest.main()
