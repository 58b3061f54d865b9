import numpy as np

DEFAULT_MAX_X = 25.0  # width of the spatial domain
DEFAULT_MESH_DIVISION = 800  # number of samples in a potential mesh
DEFAULT_FREQUENCY_SCALE = 0.5  # dfreq = dx * scale in the momentum transform
DISCONTINUITY_EPSILON = 0.01  # discontinuities below this are negligible
SIGN_EPSILON = 1.0e-16  # smallest |Re psi| that fixes the overall sign
INFINITE_POTENTIAL = 1000.0  # stand-in for an infinite wall
FOURIER_TOLERANCE = 1.0e-4  # naive and optimized transforms agree to this
INV_SQRT_2PI = 1.0 / np.sqrt(2 * np.pi)
