r"""Stationary and superposed wave functions.

A `TimeIndependentWavefunction` is one solution of the time-independent
Schrödinger equation at a fixed energy; its time dependence is the phase
$e^{-iEt}$. A `Wavefunction` is an equally weighted superposition of several
of them.
"""

import dataclasses
from dataclasses import dataclass

import numpy as np

from .complex_array import ComplexArray, exponential
from .constants import DEFAULT_FREQUENCY_SCALE, DISCONTINUITY_EPSILON
from .fourier import fourier_transform
from .utility import normalize_complex_function, normalize_sign


@dataclass(frozen=True)
class WavefunctionMetadata:
    r"""
    Energy and stitching diagnostics of a resolved solution
    """

    energy: float
    left_turning_point: int
    right_turning_point: int
    left_derivative_discontinuity: float
    right_derivative_discontinuity: float


class TimeIndependentWavefunction:
    """
    Solution to the time-independent Schrödinger equation, sampled on a mesh.
    Immutable: the sample arrays are frozen at construction.
    """

    def __init__(self, values: ComplexArray, dx: float, md: WavefunctionMetadata):
        r"""
        Parameters:
            values (ComplexArray): samples; copied, and the copy frozen
            dx (float): mesh spacing
            md (WavefunctionMetadata): energy, turning points, discontinuities

        Attributes:
            values (ComplexArray): samples
            dx (float): mesh spacing
            md (WavefunctionMetadata): metadata

        """
        assert np.isfinite(md.energy), f"Non-finite energy: {md.energy}"
        assert np.isfinite(dx), f"Non-finite dx: {dx}"
        assert np.isfinite(
            md.left_derivative_discontinuity
        ), f"Non-finite leftDerivativeDiscontinuity: {md.left_derivative_discontinuity}"
        assert np.isfinite(
            md.right_derivative_discontinuity
        ), f"Non-finite rightDerivativeDiscontinuity: {md.right_derivative_discontinuity}"
        self.values = values.slice().freeze()
        self.dx = dx
        self.md = md

    @property
    def metadata(self) -> WavefunctionMetadata:
        return self.md

    @property
    def energy(self) -> float:
        return self.md.energy

    @property
    def length(self) -> int:
        return self.values.length

    def value_at(self, index: int, time: float) -> complex:
        r"""$\psi(x_{index}) e^{-iEt}$"""
        return self.values.at(index) * exponential(-self.md.energy * time)

    def fourier_transform(self, center: float, scale: float):
        r"""Momentum-space counterpart, normalized like the position-space samples.

        The metadata is carried over as is; it still describes the position-space
        solution.

        Parameters:
            center (float): array index of $x = 0$ and $p = 0$
            scale (float): momentum spacing in units of `dx`

        Returns:
            phi (TimeIndependentWavefunction): transformed wave function

        """
        freq_values = fourier_transform(self.values.res, center, self.dx, self.dx * scale)
        freq_values = normalize_complex_function(freq_values, self.dx)
        return TimeIndependentWavefunction(freq_values, self.dx, self.md)

    def __repr__(self):
        return (
            f"TimeIndependentWavefunction(energy={self.md.energy}, "
            f"length={self.length}, dx={self.dx})"
        )


class Wavefunction:
    """
    Equally weighted superposition of time-independent solutions sharing one
    mesh. Rebuilt, never mutated, when the set of energies changes.
    """

    def __init__(self, components: list):
        r"""
        Parameters:
            components (list[TimeIndependentWavefunction]): at least one solution;
                all of the same length and spacing

        Attributes:
            components (tuple[TimeIndependentWavefunction]): the solutions
            length (int): number of mesh points
            dx (float): mesh spacing

        """
        assert len(components) > 0, "Empty components in Wavefunction"
        self.components = tuple(components)
        self.length = self.components[0].length
        self.dx = self.components[0].dx
        for psi in self.components:
            assert psi.length == self.length, "Not all lengths the same"
            assert psi.dx == self.dx, "Not all spacings the same"
        self._momentum_cache = {}

    @property
    def energies(self) -> list:
        return [psi.energy for psi in self.components]

    def value_at(self, index: int, time: float) -> complex:
        r"""Mean of $\psi_j(x_{index}) e^{-iE_jt}$ over the components.

        Parameters:
            index (int): mesh index; must be integral
            time (float): time

        Returns:
            value (complex): value of the superposition

        """
        assert float(index).is_integer(), "Non-integer passed to valueAt"
        index = int(index)
        result = sum(psi.value_at(index, time) for psi in self.components)
        return result / len(self.components)

    def values_at_time(self, time: float) -> ComplexArray:
        """Every mesh sample of the superposition at `time`."""
        total = np.zeros(self.length, dtype=np.cdouble)
        for psi in self.components:
            total += psi.values.to_numpy() * exponential(-psi.energy * time)
        return ComplexArray.from_complex(total / len(self.components))

    def fourier_transform(self, center: float, scale: float):
        """Transforms each component; valid because the transform is linear."""
        return Wavefunction([psi.fourier_transform(center, scale) for psi in self.components])

    def momentum(self, center: float = None, scale: float = DEFAULT_FREQUENCY_SCALE):
        r"""Memoized `fourier_transform`.

        Parameters:
            center (float): defaults to the middle of the mesh
            scale (float): momentum spacing in units of `dx`

        Returns:
            phi (Wavefunction): momentum-space wave function

        """
        if center is None:
            center = self.length // 2
        key = (center, scale)
        if key not in self._momentum_cache:
            self._momentum_cache[key] = self.fourier_transform(center, scale)
        return self._momentum_cache[key]

    def __len__(self):
        return len(self.components)


def average_time_independent_wavefunctions(
    first: TimeIndependentWavefunction,
    second: TimeIndependentWavefunction,
    eps: float = DISCONTINUITY_EPSILON,
) -> TimeIndependentWavefunction:
    r"""Combines two solutions resolved at the same turning points so that the
    derivative discontinuity at the left turning point cancels:

    $\psi = \psi_1 + k \psi_2, \quad k = -d_1 / d_2$

    The right discontinuity is left as it falls. If either input is already
    smooth at the left turning point (discontinuity below `eps`), it is
    returned unchanged.

    Parameters:
        first (TimeIndependentWavefunction): usually the even-parity solution
        second (TimeIndependentWavefunction): usually the odd-parity solution
        eps (float): negligible discontinuity

    Returns:
        psi (TimeIndependentWavefunction): normalized combination, positive just
            right of the left turning point, with `first`'s energy and turning
            points and zeroed discontinuities

    """
    assert first.length == second.length, "Wavefunctions have different lengths"
    bad1 = first.md.left_derivative_discontinuity
    bad2 = second.md.left_derivative_discontinuity
    if abs(bad1) < eps:
        return first
    if abs(bad2) < eps:
        return second

    k = -bad1 / bad2
    values = ComplexArray(
        first.values.res + k * second.values.res,
        first.values.ims + k * second.values.ims,
    )
    values = normalize_complex_function(values, first.dx)
    values = normalize_sign(values, first.md.left_turning_point)
    md = dataclasses.replace(
        first.md, left_derivative_discontinuity=0.0, right_derivative_discontinuity=0.0
    )
    return TimeIndependentWavefunction(values, first.dx, md)
