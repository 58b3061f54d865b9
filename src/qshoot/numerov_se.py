r"""Shooting-method solver for the one-dimensional, time-independent Schrödinger
equation on a uniform mesh, using the Numerov method:
https://en.wikipedia.org/wiki/Numerov%27s_method

The energy is an input, not an eigenvalue to search for. For an arbitrary
energy the best available answer is an approximately smooth solution: the
even- and odd-parity shots are each stitched to the decaying edge solutions at
the classical turning points, then combined to cancel the derivative
discontinuity at the left turning point.
"""

from dataclasses import dataclass

import numpy as np
from tqdm import tqdm

from .complex_array import ComplexArray
from .constants import DEFAULT_MAX_X
from .njit_solver_utils import (
    numerov_f,
    numerov_from_center,
    numerov_from_edge,
    stitch,
    derivative_discontinuity,
)
from .utility import (
    TurningPoints,
    classical_turning_points,
    index_of_minimum,
    normalize_real_function,
)
from .wavefunction import (
    TimeIndependentWavefunction,
    Wavefunction,
    WavefunctionMetadata,
    average_time_independent_wavefunctions,
)


@dataclass(frozen=True)
class IntegratorInput:
    r"""
    A potential mesh, an energy and the width of the domain the mesh covers

    Attributes:
        potential_mesh (ndarray): $N \geq 3$ finite potential samples
        energy (float): finite energy
        max_x (float): positive domain width; `dx = max_x / N`
    """

    potential_mesh: np.array
    energy: float
    max_x: float = DEFAULT_MAX_X

    def __post_init__(self):
        assert len(self.potential_mesh) >= 3, "PotentialMesh is too small"
        assert np.isfinite(self.energy), f"Non-finite energy: {self.energy}"
        assert self.max_x > 0, f"Non-positive maxX: {self.max_x}"


class ResolvableWavefunction:
    """
    Raw outward (from the potential minimum) and inward (from the edges)
    integrations at one energy and parity, waiting to be stitched together.
    """

    def __init__(
        self,
        potential: np.array,
        energy: float,
        max_x: float,
        values_from_center: np.array,
        values_from_edge: np.array,
        f: np.array,
    ):
        r"""
        Parameters:
            potential (ndarray): copy of the potential mesh
            energy (float): energy
            max_x (float): domain width
            values_from_center (ndarray): outward integration
            values_from_edge (ndarray): inward integration
            f (ndarray): Numerov weights $F(x)$, kept for the discontinuities

        """
        assert (
            values_from_center.shape == values_from_edge.shape
        ), "Wavefunction does not have a consistent length"
        self.potential = potential
        self.energy = energy
        self.max_x = max_x
        self.values_from_center = values_from_center
        self.values_from_edge = values_from_edge
        self.f = f

    @property
    def length(self) -> int:
        return self.values_from_center.shape[0]

    @property
    def dx(self) -> float:
        return self.max_x / self.length

    def resolve_at_turning_points(self, tp: TurningPoints) -> TimeIndependentWavefunction:
        r"""Scales the edge solutions to meet the center solution at the turning
        points, normalizes the result and measures the derivative discontinuity at
        each turning point.

        Parameters:
            tp (TurningPoints): where to stitch; rounded to the nearest index

        Returns:
            psi (TimeIndependentWavefunction): real-valued, normalized solution

        """
        left, right = int(round(tp.left)), int(round(tp.right))
        length = self.length
        assert left <= right, "left is not <= right"
        assert 0 <= left < length and 0 <= right < length, "left or right out of bounds"

        psi = stitch(self.values_from_center, self.values_from_edge, left, right)
        # a zero Numerov weight or edge sample at a seam leaves inf/nan behind
        assert np.all(np.isfinite(psi)), "Non-finite wavefunction values"
        dx = self.dx
        psi = normalize_real_function(psi, dx)

        md = WavefunctionMetadata(
            energy=self.energy,
            left_turning_point=left,
            right_turning_point=right,
            left_derivative_discontinuity=derivative_discontinuity(psi, self.f, left, dx),
            right_derivative_discontinuity=derivative_discontinuity(psi, self.f, right, dx),
        )
        return TimeIndependentWavefunction(ComplexArray.from_real(psi), dx, md)

    def resolve_at_classical_turning_points(self) -> TimeIndependentWavefunction:
        return self.resolve_at_turning_points(
            classical_turning_points(self.potential, self.energy)
        )


def numerov(input: IntegratorInput, even: bool) -> ResolvableWavefunction:
    r"""Integrates outwards from the potential minimum and inwards from both edges.

    Parameters:
        input (IntegratorInput): potential, energy and domain width
        even (bool): parity of the ansatz at the starting point

    Returns:
        raw (ResolvableWavefunction): unstitched integrations

    """
    potential = np.array(input.potential_mesh, dtype=np.double)
    length = potential.shape[0]
    start = index_of_minimum(potential)
    dx = input.max_x / length
    f = numerov_f(potential, float(input.energy), dx)

    return ResolvableWavefunction(
        potential,
        input.energy,
        input.max_x,
        numerov_from_center(f, start, dx, even),
        numerov_from_edge(f, start, dx, even),
        f,
    )


class NumerovIntegrator:
    """Computes raw solutions of a fixed parity."""

    def __init__(self, even: bool):
        self.even = even

    def compute_wavefunction(self, input: IntegratorInput) -> ResolvableWavefunction:
        return numerov(input, self.even)


def resolved_averaged_numerov(
    input: IntegratorInput, tps: TurningPoints
) -> TimeIndependentWavefunction:
    r"""Even and odd solutions, both resolved at `tps`, averaged to cancel the left
    discontinuity.

    Parameters:
        input (IntegratorInput): potential, energy and domain width
        tps (TurningPoints): shared by both parities

    Returns:
        psi (TimeIndependentWavefunction): approximate stationary state

    """
    even_val = numerov(input, True).resolve_at_turning_points(tps)
    odd_val = numerov(input, False).resolve_at_turning_points(tps)
    return average_time_independent_wavefunctions(even_val, odd_val)


def classically_resolved_averaged_numerov(
    input: IntegratorInput,
) -> TimeIndependentWavefunction:
    tps = classical_turning_points(input.potential_mesh, input.energy)
    return resolved_averaged_numerov(input, tps)


def wavefunction_for_energies(
    potential: np.array,
    energies: list,
    max_x: float = DEFAULT_MAX_X,
    verbose: bool = False,
) -> Wavefunction:
    r"""Superposition of one stationary solution per energy.

    Each component is resolved at its own classical turning points, so mixing
    energies that are not eigenvalues shows one kink per component.

    Parameters:
        potential (ndarray): potential mesh
        energies (list[float]): at least one energy
        max_x (float): domain width
        verbose (bool): show a progress bar

    Returns:
        psi (Wavefunction): equally weighted superposition

    """
    assert len(energies) > 0, "No energies given"
    psis = []
    for energy in tqdm(energies, disable=(not verbose)):
        psis.append(
            classically_resolved_averaged_numerov(
                IntegratorInput(potential, energy, max_x)
            )
        )
    if verbose:
        for psi in psis:
            print(
                f"E = {psi.energy:.4f}: turning points "
                f"[{psi.md.left_turning_point}, {psi.md.right_turning_point}]"
            )
    return Wavefunction(psis)
