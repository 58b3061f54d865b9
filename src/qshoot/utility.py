"""
Turning points, the integration start point and the normalization conventions
shared by the solver and the wave function classes.
"""

from dataclasses import dataclass

import numpy as np

from .complex_array import ComplexArray
from .constants import SIGN_EPSILON
from .njit_solver_utils import l2_norm


@dataclass(frozen=True)
class TurningPoints:
    r"""
    Mesh indices of the classical turning points, `0 <= left <= right < N`
    """

    left: int
    right: int


def classical_turning_points(potential: np.array, energy: float) -> TurningPoints:
    r"""Finds where the energy crosses the potential.

    `left` is the first index, scanning rightwards, with `energy > potential`;
    `right` is the first such index scanning leftwards from the end. If the two
    scans cross, nowhere was classically allowed and the whole mesh is used,
    as for a particle in an infinite square well.

    Parameters:
        potential (ndarray): potential mesh
        energy (float): energy

    Returns:
        turning_points (TurningPoints): `left <= right`, always

    """
    length = len(potential)
    left = 0
    while left < length and not energy > potential[left]:
        left += 1
    right = length - 1
    while right >= left and not energy > potential[right]:
        right -= 1
    if left > right:
        left, right = 0, length - 1
    return TurningPoints(left, right)


def index_of_minimum(potential: np.array) -> int:
    r"""Index at which to start the outward integration.

    This is the index of the lowest potential sample; among tied minima the
    middle one is chosen. The result is clamped to `[1, N - 2]` so that there
    is always a step available on both sides.

    Parameters:
        potential (ndarray): potential mesh

    Returns:
        index (int): start index

    """
    potential = np.asarray(potential)
    assert potential.shape[0] > 0, "No minimum for empty potential"
    tied = np.flatnonzero(potential == potential.min())
    result = int(tied[tied.shape[0] // 2])
    result = max(1, result)
    result = min(potential.shape[0] - 2, result)
    return result


def normalize_real_function(samples: np.array, dx: float) -> np.array:
    r"""Returns a copy of `samples` scaled so that $\sum_i \psi_i^2 dx = 1$. The
    zero function is returned unscaled.
    """
    samples = np.array(samples, dtype=np.double)
    return samples / l2_norm(samples, np.zeros_like(samples), dx)


def normalize_complex_function(samples: ComplexArray, dx: float) -> ComplexArray:
    r"""Complex analogue of `normalize_real_function`."""
    norm = l2_norm(samples.res, samples.ims, dx)
    return ComplexArray(samples.res / norm, samples.ims / norm)


def normalize_sign(
    values: ComplexArray, left_turning_point: int, eps: float = SIGN_EPSILON
) -> ComplexArray:
    r"""Flips the overall sign, if needed, so that the first sample right of
    `left_turning_point` with a non-negligible real part is positive.

    Parameters:
        values (ComplexArray): samples
        left_turning_point (int): where to start scanning
        eps (float): real parts at or below this magnitude are skipped

    Returns:
        values (ComplexArray): new, sign-normalized samples

    """
    wants_sign_flip = False
    for i in range(left_turning_point, values.length - 1):
        re = values.res[i]
        if abs(re) > eps:
            wants_sign_flip = re < 0
            break
    if wants_sign_flip:
        return ComplexArray(-values.res, -values.ims)
    return values.slice()
