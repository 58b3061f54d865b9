'''
Functions for computing diagnostics of solutions.
'''

import numpy as np
import pandas as pd

from .constants import DEFAULT_FREQUENCY_SCALE
from .fourier import fourier_transform, fourier_transform_naive
from .wavefunction import TimeIndependentWavefunction


def norm(psi: TimeIndependentWavefunction):
    return float(np.sum(psi.values.res**2 + psi.values.ims**2) * psi.dx)


def max_discontinuity(psi: TimeIndependentWavefunction):
    return max(
        abs(psi.md.left_derivative_discontinuity),
        abs(psi.md.right_derivative_discontinuity),
    )


def fourier_agreement(space_values: np.array, center: float, dx: float, dfreq: float):
    '''
    Largest per-sample difference, over real and imaginary parts, between the
    naive and optimized transforms
    '''
    fast = fourier_transform(space_values, center, dx, dfreq)
    naive = fourier_transform_naive(space_values, center, dx, dfreq)
    return float(
        max(np.max(np.abs(fast.res - naive.res)), np.max(np.abs(fast.ims - naive.ims)))
    )


def tabulate(
    psi: TimeIndependentWavefunction,
    potential: np.array,
    max_x: float,
    time: float = 0.0,
):
    '''
    One row per mesh point: position (centered on the box), psi at `time`,
    |psi|^2 and the potential
    '''
    length = psi.length
    values = np.array([psi.value_at(i, time) for i in range(length)])
    return pd.DataFrame(
        {
            "x": (np.arange(length) / length - 0.5) * max_x,
            "re": values.real,
            "im": values.imag,
            "abs2": np.abs(values) ** 2,
            "V": np.asarray(potential, dtype=np.double),
        }
    )


def run_metrics(
    psi: TimeIndependentWavefunction,
    center: float = None,
    scale: float = DEFAULT_FREQUENCY_SCALE,
    verbose: bool = False,
):
    if center is None:
        center = psi.length // 2

    results = {
        "energy": psi.md.energy,
        "norm": norm(psi),
        "left_discontinuity": psi.md.left_derivative_discontinuity,
        "right_discontinuity": psi.md.right_derivative_discontinuity,
        "fourier_agreement": fourier_agreement(
            psi.values.res, center, psi.dx, psi.dx * scale
        ),
    }

    if verbose:
        print(f'Energy: {results["energy"]:.4f}')
        print(f'Norm (sum |psi|^2 dx): {results["norm"]:.6f}')
        print('Derivative discontinuities (left, right):')
        print(f'{results["left_discontinuity"]:.4e}  {results["right_discontinuity"]:.4e}')
        print('Max naive/optimized Fourier transform difference:')
        print(f'{results["fourier_agreement"]:.4e}')

    return results
