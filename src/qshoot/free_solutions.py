"""
Analytic stationary states used to check the numerical solutions, in units
with hbar = m = 1.
"""

import numpy as np
from scipy.special import eval_hermite, factorial


def harmonic_oscillator_energy(n, omega=1.0):
    """
    E_n = omega (n + 1/2) for V(x) = omega^2 x^2 / 2
    """
    return omega * (n + 0.5)


def harmonic_oscillator_eigenstate(x, n, omega=1.0):
    r"""
    Normalized eigenstate
    $\psi_n(x) = (\omega/\pi)^{1/4} (2^n n!)^{-1/2} H_n(\sqrt{\omega} x) e^{-\omega x^2/2}$
    """
    xi = np.sqrt(omega) * np.asarray(x, dtype=np.double)
    prefactor = (omega / np.pi) ** 0.25 / np.sqrt(2.0**n * factorial(n))
    return prefactor * eval_hermite(n, xi) * np.exp(-0.5 * xi * xi)


def harmonic_oscillator_momentum_eigenstate(p, n, omega=1.0):
    r"""
    Momentum-space eigenstate,
    $\phi_n(p) = (-i)^n (1/(\pi\omega))^{1/4} (2^n n!)^{-1/2} H_n(p/\sqrt{\omega}) e^{-p^2/(2\omega)}$,
    with the convention $\phi(p) = (2\pi)^{-1/2} \int e^{-ipx} \psi(x) dx$
    """
    eta = np.asarray(p, dtype=np.double) / np.sqrt(omega)
    prefactor = (1.0 / (np.pi * omega)) ** 0.25 / np.sqrt(2.0**n * factorial(n))
    return (-1j) ** n * prefactor * eval_hermite(n, eta) * np.exp(-0.5 * eta * eta)


def infinite_square_well_energy(n, width):
    """
    E_n = n^2 pi^2 / (2 L^2), n = 1, 2, ...
    """
    assert n >= 1
    return (n * np.pi / width) ** 2 / 2.0


def infinite_square_well_eigenstate(x, n, width):
    """
    sqrt(2 / L) sin(n pi x / L) on [0, L], zero outside
    """
    assert n >= 1
    x = np.asarray(x, dtype=np.double)
    psi = np.sqrt(2.0 / width) * np.sin(n * np.pi * x / width)
    return np.where((x >= 0) & (x <= width), psi, 0.0)
