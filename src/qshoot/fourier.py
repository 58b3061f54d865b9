r"""Position-to-momentum transform of sampled wave functions.

$$
\phi(p) = \frac{1}{\sqrt{2\pi}} \int e^{-ipx} \psi(x)\, dx
$$

is approximated by a Riemann sum. The momenta $p_k = (k - c)\,dfreq$ are
arbitrary real multiples of `dfreq`, not integer multiples of a fundamental
frequency, so this is a continuous transform and not an FFT.
"""

import numpy as np

from .complex_array import ComplexArray
from .njit_solver_utils import fourier_kernel, fourier_kernel_naive


def _check_inputs(space_values: np.array, center: float):
    space_values = np.ascontiguousarray(space_values, dtype=np.double)
    length = space_values.shape[0]
    assert length > 0 and center < length, "center out of bounds"
    return space_values


def fourier_transform_naive(
    space_values: np.array, center: float, dx: float, dfreq: float
) -> ComplexArray:
    r"""Reference implementation; evaluates every $e^{-ipx}$ with trigonometric
    calls, $O(N^2)$ of them.

    Parameters:
        space_values (ndarray): real samples $\psi(x_i)$, $x_i = (i - center) dx$
        center (float): array index of $x = 0$ (and of $p = 0$)
        dx (float): spacing of the position samples
        dfreq (float): spacing of the momentum samples

    Returns:
        phi (ComplexArray): $\phi(p_k)$, same length as `space_values`

    """
    space_values = _check_inputs(space_values, center)
    res, ims = fourier_kernel_naive(space_values, float(center), float(dx), float(dfreq))
    return ComplexArray(res, ims)


def fourier_transform(
    space_values: np.array, center: float, dx: float, dfreq: float
) -> ComplexArray:
    r"""Computes the transform with one complex multiply per sample; agrees with
    `fourier_transform_naive` to within `constants.FOURIER_TOLERANCE`.

    Parameters:
        space_values (ndarray): real samples $\psi(x_i)$, $x_i = (i - center) dx$
        center (float): array index of $x = 0$ (and of $p = 0$)
        dx (float): spacing of the position samples
        dfreq (float): spacing of the momentum samples

    Returns:
        phi (ComplexArray): $\phi(p_k)$, same length as `space_values`

    """
    space_values = _check_inputs(space_values, center)
    res, ims = fourier_kernel(space_values, float(center), float(dx), float(dfreq))
    return ComplexArray(res, ims)
