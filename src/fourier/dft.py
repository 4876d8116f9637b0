"""
Reference DFT by direct summation.

O(N^2), works for any length. Used as the correctness baseline for the FFTs.
"""

import math

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def _dft_naive_jit(x: np.ndarray) -> np.ndarray:
    """Naive DFT (JIT compiled)."""
    N = x.shape[0]
    X = np.zeros(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for n in range(N):
            # W_N^(k*n) = exp(-2*pi*i*k*n/N)
            theta = -2.0 * math.pi * k * n / N
            s += x[n] * complex(math.cos(theta), math.sin(theta))
        X[k] = s

    return X


def dft_reference(x) -> np.ndarray:
    """
    Compute the 1-D discrete Fourier transform by direct summation.

    Parameters
    ----------
    x : array_like
        Input samples, any length (including 0 and non-powers of two).

    Returns
    -------
    np.ndarray
        New complex128 array of the same length. The input is not modified.

    Examples
    --------
    >>> X = dft_reference([1.0, 0.0, 0.0, 0.0])
    >>> # every bin equals 1+0j
    """
    x = np.asarray(x, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {x.shape}")

    return _dft_naive_jit(x)
