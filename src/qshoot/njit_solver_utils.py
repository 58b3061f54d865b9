r"""
Utilities for just-in-time (JIT) compilation of the shooting solver and of the
position-to-momentum transform
"""
import numpy as np
from numba import njit

from .constants import INV_SQRT_2PI


@njit
def numerov_f(potential: np.array, energy: np.double, dx: np.double):
    r"""Returns the Numerov weights $F(x) = 1 - \frac{dx^2}{12} 2 (V(x) - E)$ for the
        1D Schrödinger equation $\psi'' = 2 (V - E) \psi$ (with $\hbar = m = 1$)

    Parameters:
        potential (ndarray): potential mesh
        energy (double): trial energy
        dx (double): mesh spacing
    """
    ddx12 = dx * dx / 12.0
    return 1.0 - ddx12 * 2.0 * (potential - energy)


@njit(error_model="numpy")
def numerov_step(psi: np.array, f: np.array, index: np.int64, rightwards: bool):
    r"""Given that psi[index] and the neighbour behind it are set, sets psi[index + 1]
    if `rightwards`, else psi[index - 1], in place.
    """
    if rightwards:
        target = index + 1
        prev2 = index - 1
    else:
        target = index - 1
        prev2 = index + 1
    psi[target] = ((12.0 - 10.0 * f[index]) * psi[index] - f[prev2] * psi[prev2]) / f[
        target
    ]


@njit(error_model="numpy")
def numerov_from_center(f: np.array, start: np.int64, dx: np.double, even: bool):
    r"""Integrates outwards from `start`, first to the right edge and then to the left
        edge

    Returns:
        psi (ndarray) : raw, unnormalized values on every mesh point, psi[0] included

    Parameters:
        f (ndarray) : Numerov weights
        start (int) : index to start from; must satisfy 1 <= start <= N - 2
        dx (double) : mesh spacing
        even (bool) : even ansatz (psi[start] = 1, symmetric first step) or odd
            ansatz (psi[start] = 0, psi[start + 1] = dx)
    """
    n = f.shape[0]
    psi = np.zeros(n, dtype=np.double)
    if even:
        psi[start] = 1.0
        # half step: assumes psi[start - 1] == psi[start + 1]
        psi[start + 1] = 0.5 * (12.0 - 10.0 * f[start]) * psi[start] / f[start + 1]
    else:
        psi[start] = 0.0
        psi[start + 1] = dx

    for i in range(start + 1, n - 1):
        numerov_step(psi, f, i, True)
    # leftwards, using psi[start + 1] as the previous-previous value
    for i in range(start, 0, -1):
        numerov_step(psi, f, i, False)
    return psi


@njit(error_model="numpy")
def numerov_from_edge(f: np.array, start: np.int64, dx: np.double, even: bool):
    r"""Integrates inwards from both edges towards `start`, taking the wave function
        to vanish just outside the mesh

    Returns:
        psi (ndarray) : raw, unnormalized values

    Parameters:
        f (ndarray) : Numerov weights
        start (int) : index at which the two inward integrations meet
        dx (double) : mesh spacing
        even (bool) : parity; selects the sign of the left seed
    """
    n = f.shape[0]
    psi = np.zeros(n, dtype=np.double)

    psi[0] = dx if even else -dx
    psi[1] = (12.0 - 10.0 * f[0]) * psi[0] / f[1]
    for i in range(1, start):
        numerov_step(psi, f, i, True)

    psi[n - 1] = dx
    psi[n - 2] = (12.0 - 10.0 * f[n - 1]) * psi[n - 1] / f[n - 2]
    for i in range(n - 2, start, -1):
        numerov_step(psi, f, i, False)
    return psi


@njit(error_model="numpy")
def stitch(center: np.array, edge: np.array, left: np.int64, right: np.int64):
    r"""Joins the edge solution (scaled to match) outside [left, right) to the center
    solution inside it.
    A zero `edge[left]` or `edge[right]` yields inf/nan rather than raising.
    """
    n = center.shape[0]
    left_scale = center[left] / edge[left]
    right_scale = center[right] / edge[right]
    psi = np.empty(n, dtype=np.double)
    for i in range(n):
        if i < left:
            psi[i] = left_scale * edge[i]
        elif i < right:
            psi[i] = center[i]
        else:
            psi[i] = right_scale * edge[i]
    return psi


@njit
def derivative_discontinuity(psi: np.array, f: np.array, x: np.int64, dx: np.double):
    r"""Residual of the discretized Schrödinger equation at x; zero when x sits on
    either edge of the mesh.
    """
    if x == 0 or x + 1 == psi.shape[0]:
        return 0.0
    return (psi[x + 1] + psi[x - 1] - (14.0 - 12.0 * f[x]) * psi[x]) / dx


@njit
def l2_norm(res: np.array, ims: np.array, dx: np.double):
    r"""$\sqrt{\sum_i |\psi_i|^2 dx}$, or 1 for the zero function"""
    norm = np.sqrt(np.sum(res * res + ims * ims) * dx)
    if norm == 0.0:
        norm = 1.0
    return norm


@njit
def fourier_kernel_naive(
    space_values: np.array, center: np.double, dx: np.double, dfreq: np.double
):
    r"""Riemann sum for $\phi(p) = \frac{1}{\sqrt{2\pi}} \int e^{-ipx} \psi(x) dx$,
    evaluating every exponential directly.

    Returns:
        res, ims (ndarray, ndarray): real and imaginary parts of $\phi$ at
            $p_k = (k - center)\,dfreq$
    """
    n = space_values.shape[0]
    res = np.zeros(n, dtype=np.double)
    ims = np.zeros(n, dtype=np.double)
    multiplier = dx * INV_SQRT_2PI
    for k in range(n):
        p = (k - center) * dfreq
        phi_re = 0.0
        phi_im = 0.0
        for i in range(n):
            x = (i - center) * dx
            phi_re += np.cos(-p * x) * space_values[i]
            phi_im += np.sin(-p * x) * space_values[i]
        res[k] = phi_re * multiplier
        ims[k] = phi_im * multiplier
    return res, ims


@njit
def fourier_kernel(
    space_values: np.array, center: np.double, dx: np.double, dfreq: np.double
):
    r"""Same sum as `fourier_kernel_naive`, but steps the exponential along each row:

    $e^{-ip(x + dx)} = e^{-ipx} e^{-ip\,dx}$

    so each sample costs one complex multiply instead of two trigonometric calls.
    """
    n = space_values.shape[0]
    res = np.zeros(n, dtype=np.double)
    ims = np.zeros(n, dtype=np.double)
    start_x = -center * dx
    coefficient = dx * INV_SQRT_2PI

    for k in range(n):
        freq = (k - center) * dfreq

        rotor_re = np.cos(-start_x * freq)
        rotor_im = np.sin(-start_x * freq)
        step_re = np.cos(-dx * freq)
        step_im = np.sin(-dx * freq)

        phi_re = 0.0
        phi_im = 0.0
        for i in range(n):
            value = space_values[i]
            phi_re += value * rotor_re
            phi_im += value * rotor_im

            tmp = rotor_re * step_re - rotor_im * step_im
            rotor_im = rotor_re * step_im + step_re * rotor_im
            rotor_re = tmp

        res[k] = coefficient * phi_re
        ims[k] = coefficient * phi_im
    return res, ims
