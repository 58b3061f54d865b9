'''Potential builders.

A builder maps `(parameter, x)` to a potential value, where `x` in [0, 1) is the
fractional position in the box and `parameter` in [0, 1) is a user-tunable
shape parameter. Builders are pure; `potential_mesh` samples one onto a mesh.
'''

from typing import Callable

import numpy as np

from .constants import DEFAULT_MESH_DIVISION, INFINITE_POTENTIAL

BASE_ENERGY = 0.05


def symmetrize(parameter):
    '''
    Folds a parameter in [0, 1) into [0, 0.5] for potentials symmetric about 0.5
    '''
    if parameter > 0.5:
        parameter = 1.0 - parameter
    return parameter


def lerp(p1, p2, x):
    '''
    Linear interpolation between points (x, y) p1 and p2, flat outside them
    '''
    if x <= p1[0]:
        return p1[1]
    elif x >= p2[0]:
        return p2[1]
    percent = (x - p1[0]) / (p2[0] - p1[0])
    return p1[1] * (1.0 - percent) + p2[1] * percent


def simple_harmonic_oscillator(parameter, x):
    '''
    Harmonic well centered at 0.5; reaches 1 where x == parameter
    '''
    parameter = symmetrize(parameter)
    base_energy = 0.04
    offset_x = 0.5
    vparam = parameter - offset_x
    steepness = min(1e5, (1.0 - base_energy) / (vparam * vparam / 2))
    vx = x - offset_x
    return base_energy + steepness * (vx * vx / 2.0)


def infinite_square_well(width_ratio, x):
    width_ratio = symmetrize(width_ratio)
    if x < width_ratio or x > 1.0 - width_ratio:
        return INFINITE_POTENTIAL
    return BASE_ENERGY


def finite_square_well(width_ratio, x):
    width_ratio = symmetrize(width_ratio)
    if x < width_ratio or x > 1.0 - width_ratio:
        return 0.8
    return BASE_ENERGY


def two_square_wells(parameter, x):
    '''
    Two adjacent square wells separated by a finite barrier, inside infinite walls
    '''
    parameter = symmetrize(parameter)
    left_well_width_factor = 1.0 / 6.0
    barrier_width_factor = 1.0 / 8.0

    if x < parameter or x >= 1.0 - parameter:
        return INFINITE_POTENTIAL
    interval_length = 1.0 - 2 * parameter
    vx = (x - parameter) / interval_length
    if vx < left_well_width_factor:
        return BASE_ENERGY
    vx -= left_well_width_factor
    if vx < barrier_width_factor:
        return 0.85
    return BASE_ENERGY


def sampled_potential(samples) -> Callable[[float, float], float]:
    '''
    Piecewise-linear potential through (x, y) samples sorted by x; infinite
    outside the sampled span
    '''
    assert len(samples) > 0, "No samples"
    samples = np.asarray(samples, dtype=np.double)
    xs = samples[:, 0]

    def potential(parameter, x):
        idx = max(int(np.searchsorted(xs, x, side="right")) - 1, 0)
        if x < xs[idx] or idx + 1 >= xs.shape[0]:
            return INFINITE_POTENTIAL
        return lerp(samples[idx], samples[idx + 1], x)

    return potential


def bezier(p0, p1, p2, t):
    omt = 1 - t
    return omt * (omt * p0 + t * p1) + t * (omt * p1 + t * p2)


def random_potential(rng: np.random.Generator = None) -> Callable[[float, float], float]:
    r'''Random landscape of 8 to 24 pivots joined by straight, flat or quadratic
    Bezier segments, rising to 1 at both walls.

    Parameters:
        rng (Generator): source of randomness; `np.random.default_rng()` if None

    Returns:
        potential (Callable[[float, float], float]): builder; ignores `parameter`

    '''
    if rng is None:
        rng = np.random.default_rng()

    join_types = ["line", "flat", "bezier", "bezier", "bezier"]
    min_pivot_count, max_pivot_count = 8, 24
    pivot_count = int(rng.integers(min_pivot_count, max_pivot_count))

    pivots = [dict(x=0.0, y=1.0, join="line", control=0.0)]
    for _ in range(pivot_count):
        pivots.append(
            dict(
                x=rng.random() * 0.95,
                y=rng.random() ** 1.5,
                join=join_types[rng.integers(len(join_types))],
                control=rng.random(),
            )
        )
    pivots.sort(key=lambda p: p["x"])

    # drop pivots too close to their left neighbour
    i = 1
    while i < len(pivots):
        if pivots[i]["x"] - pivots[i - 1]["x"] < 0.1:
            del pivots[i]
        else:
            i += 1

    # the segment into the right wall must rise
    while pivots[-1]["join"] == "flat":
        pivots[-1]["join"] = join_types[rng.integers(len(join_types))]
    pivots.append(dict(x=1.0, y=1.0, join="line", control=0.0))
    xs = np.array([p["x"] for p in pivots])

    def potential(parameter, x):
        idx = max(int(np.searchsorted(xs, x, side="right")) - 1, 0)
        pivot = pivots[idx]
        if idx + 1 >= len(pivots):
            return pivot["y"]
        following = pivots[idx + 1]
        if pivot["join"] == "line":
            return lerp((pivot["x"], pivot["y"]), (following["x"], following["y"]), x)
        if pivot["join"] == "bezier":
            t = (x - pivot["x"]) / (following["x"] - pivot["x"])
            return bezier(pivot["y"], pivot["control"], following["y"], t)
        return pivot["y"]

    return potential


def potential_mesh(
    builder: Callable[[float, float], float],
    parameter: float = 0.0,
    mesh_division: int = DEFAULT_MESH_DIVISION,
) -> np.array:
    r'''Samples a builder at `x = i / mesh_division`.

    Parameters:
        builder (Callable[[float, float], float]): potential builder
        parameter (float): shape parameter passed to the builder
        mesh_division (int): number of samples

    Returns:
        potential (ndarray): potential mesh

    '''
    assert mesh_division >= 3, "Mesh is too small"
    return np.array(
        [builder(parameter, i / mesh_division) for i in range(mesh_division)],
        dtype=np.double,
    )
