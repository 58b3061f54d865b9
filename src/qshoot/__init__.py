from .complex_array import ComplexArray, exponential, magnitude_squared
from .utility import (
    TurningPoints,
    classical_turning_points,
    index_of_minimum,
)
from .fourier import fourier_transform, fourier_transform_naive
from .wavefunction import (
    WavefunctionMetadata,
    TimeIndependentWavefunction,
    Wavefunction,
    average_time_independent_wavefunctions,
)
from .numerov_se import (
    IntegratorInput,
    ResolvableWavefunction,
    NumerovIntegrator,
    numerov,
    resolved_averaged_numerov,
    classically_resolved_averaged_numerov,
    wavefunction_for_energies,
)
from . import constants, metrics
from . import potentials
from . import free_solutions
from .potentials import potential_mesh

from .__version__ import __version__
