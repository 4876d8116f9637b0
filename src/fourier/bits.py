"""
Bit-level helpers for the radix-2 FFT.

Provides the power-of-two test used to validate transform lengths and the
bit-reversal permutation that reorders a buffer before the in-place
butterfly stages.
"""

import numpy as np
from numba import jit


def is_power_of_two(n: int) -> bool:
    """Return True if n is strictly positive with exactly one set bit."""
    return n > 0 and (n & (n - 1)) == 0


@jit(nopython=True, cache=True)
def reverse_bits(index: int, num_bits: int) -> int:
    """
    Reverse the low ``num_bits`` bits of ``index``.

    Bit 0 becomes bit ``num_bits - 1`` and so on, e.g.
    ``reverse_bits(1, 3) == 4`` (001 -> 100) and ``reverse_bits(3, 3) == 6``
    (011 -> 110). Bits above ``num_bits`` are ignored.
    """
    result = 0
    for _ in range(num_bits):
        result = (result << 1) | (index & 1)
        index >>= 1
    return result


@jit(nopython=True, cache=True)
def _permute_inplace(x: np.ndarray, num_bits: int) -> None:
    for i in range(x.shape[0]):
        r = reverse_bits(i, num_bits)
        # Each pair is swapped once; fixed points stay put
        if i < r:
            tmp = x[i]
            x[i] = x[r]
            x[r] = tmp


def bit_reverse_permute(x: np.ndarray) -> np.ndarray:
    """
    Reorder ``x`` in place by bit-reversed index.

    Parameters
    ----------
    x : np.ndarray
        1-D array whose length is a power of two. Any dtype.

    Returns
    -------
    np.ndarray
        The same array object, permuted.

    Raises
    ------
    TypeError
        If ``x`` is not a 1-D numpy array.
    ValueError
        If the length of ``x`` is not a power of two.
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1:
        raise TypeError("bit_reverse_permute expects a 1-D numpy array")

    N = x.shape[0]
    if N <= 1:
        return x
    if not is_power_of_two(N):
        raise ValueError(f"Permutation size must be power of 2. Given: {N}")

    _permute_inplace(x, N.bit_length() - 1)
    return x
