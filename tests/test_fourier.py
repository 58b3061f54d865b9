import unittest
import numpy as np

import qshoot
from qshoot.constants import FOURIER_TOLERANCE
from qshoot.free_solutions import (
    harmonic_oscillator_eigenstate,
    harmonic_oscillator_momentum_eigenstate,
)


class TestFourierAgreement(unittest.TestCase):
    def check_agreement(self, values, center, dx, dfreq):
        fast = qshoot.fourier_transform(values, center, dx, dfreq)
        naive = qshoot.fourier_transform_naive(values, center, dx, dfreq)
        self.assertEqual(fast.length, values.shape[0])
        np.testing.assert_allclose(fast.res, naive.res, rtol=0, atol=FOURIER_TOLERANCE)
        np.testing.assert_allclose(fast.ims, naive.ims, rtol=0, atol=FOURIER_TOLERANCE)

    def test_even_packet(self):
        x = (np.arange(256) - 128) * 0.1
        self.check_agreement(np.exp(-x * x) * np.cos(3 * x), 128, 0.1, 0.05)

    def test_odd_packet(self):
        x = (np.arange(300) - 100) * 0.07
        self.check_agreement(x * np.exp(-0.5 * x * x), 100, 0.07, 0.035)

    def test_random_samples(self):
        rng = np.random.default_rng(7)
        self.check_agreement(rng.normal(size=400), 200, 25.0 / 400, 0.5 * 25.0 / 400)

    def test_center_bounds(self):
        with self.assertRaises(AssertionError):
            qshoot.fourier_transform(np.ones(4), 4, 0.1, 0.1)
        with self.assertRaises(AssertionError):
            qshoot.fourier_transform_naive(np.ones(0), 0, 0.1, 0.1)


class TestAnalyticTransform(unittest.TestCase):
    def setUp(self):
        self.center = 400
        self.dx = 0.05
        self.x = (np.arange(801) - self.center) * self.dx
        self.p = self.x.copy()

    def test_ground_state(self):
        psi = harmonic_oscillator_eigenstate(self.x, 0)
        phi = qshoot.fourier_transform(psi, self.center, self.dx, self.dx)
        expected = harmonic_oscillator_momentum_eigenstate(self.p, 0)
        np.testing.assert_allclose(phi.to_numpy(), expected, rtol=0, atol=1e-8)

    def test_first_excited_state(self):
        psi = harmonic_oscillator_eigenstate(self.x, 1)
        phi = qshoot.fourier_transform(psi, self.center, self.dx, self.dx)
        expected = harmonic_oscillator_momentum_eigenstate(self.p, 1)
        np.testing.assert_allclose(phi.to_numpy(), expected, rtol=0, atol=1e-8)


if __name__ == "__main__":
    unittest.main()
