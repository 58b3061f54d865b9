r"""Complex values and fixed-length sequences of complex samples.

Single complex values are Python's built-in `complex`. `ComplexArray` keeps
its samples as two parallel `float64` arrays, the layout the compiled kernels
in `njit_solver_utils` read and write directly.
"""

import numpy as np


def exponential(theta: float) -> complex:
    r"""Returns $e^{i\theta}$ as a point on the unit circle."""
    return complex(np.cos(theta), np.sin(theta))


def magnitude_squared(z: complex) -> float:
    return z.real * z.real + z.imag * z.imag


class ComplexArray:
    """A fixed-length, mutable sequence of complex samples, stored as separate
    real and imaginary arrays."""

    @classmethod
    def zeros(cls, length: int):
        r"""Returns `length` zero-valued samples.

        Parameters:
            length (int): number of samples; a non-negative integer

        Returns:
            samples (ComplexArray): zero-filled sequence

        """
        assert length >= 0 and length == int(length), "Invalid length"
        length = int(length)
        return cls(np.zeros(length), np.zeros(length))

    @classmethod
    def from_real(cls, values: np.array):
        """Wraps real samples with zero imaginary parts."""
        res = np.array(values, dtype=np.double)
        return cls(res, np.zeros_like(res))

    @classmethod
    def from_complex(cls, values: np.array):
        values = np.asarray(values, dtype=np.cdouble)
        return cls(values.real.copy(), values.imag.copy())

    def __init__(self, res: np.array, ims: np.array):
        r"""
        Parameters:
            res (ndarray): real parts
            ims (ndarray): imaginary parts; same length as `res`

        Attributes:
            res (ndarray): real parts
            ims (ndarray): imaginary parts
            length (int): number of samples, fixed at construction

        """
        assert len(res) == len(ims), "Mismatching length"
        self.res = np.asarray(res, dtype=np.double)
        self.ims = np.asarray(ims, dtype=np.double)
        self.length = self.res.shape[0]

    def __len__(self):
        return self.length

    def at(self, idx: int) -> complex:
        return complex(self.res[idx], self.ims[idx])

    def set(self, idx: int, value: complex):
        self.res[idx] = value.real
        self.ims[idx] = value.imag

    def slice(self):
        """Independent deep copy; the copy is writable even if `self` is frozen."""
        return ComplexArray(self.res.copy(), self.ims.copy())

    def freeze(self):
        r"""Marks both backing arrays read-only, so later `set` calls raise.

        Returns:
            self (ComplexArray)
        """
        self.res.flags.writeable = False
        self.ims.flags.writeable = False
        return self

    def to_numpy(self) -> np.array:
        """Copy of the samples as a single complex array."""
        return self.res + 1j * self.ims

    def __repr__(self):
        return f"ComplexArray(length={self.length})"
