"""
Radix-2 Cooley-Tukey FFT implementations

Two versions of the same algorithm:
1. fft_recursive: divide-and-conquer on even/odd-indexed halves, returns a new array
2. fft_iterative: in-place bit-reversal permutation followed by butterfly stages (Numba JIT)

Both require a power-of-two length. fft() dispatches between the iterative
FFT and the reference DFT for arbitrary lengths.
"""

import numpy as np
from numba import jit

from .bits import is_power_of_two, _permute_inplace
from .dft import dft_reference


def _fft_recursive(x: np.ndarray) -> np.ndarray:
    N = x.shape[0]
    if N <= 1:
        return x.copy()

    # Even/odd halves are strided views; each level allocates its own result
    even = _fft_recursive(x[0::2])
    odd = _fft_recursive(x[1::2])

    half = N // 2
    k = np.arange(half)
    twiddled = np.exp(-2j * np.pi * k / N) * odd

    result = np.empty(N, dtype=np.complex128)
    result[:half] = even + twiddled
    result[half:] = even - twiddled
    return result


def fft_recursive(x) -> np.ndarray:
    """
    Recursive radix-2 FFT.

    Parameters
    ----------
    x : array_like
        1-D input whose length is a power of two (lengths 0 and 1 are returned
        as copies).

    Returns
    -------
    np.ndarray
        New complex128 array. The input is not modified.

    Raises
    ------
    ValueError
        If the input is not 1-D or its length is not a power of two.
    """
    x = np.asarray(x, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {x.shape}")

    N = x.shape[0]
    if N > 1 and not is_power_of_two(N):
        raise ValueError(f"FFT size must be power of 2. Given: {N}")

    return _fft_recursive(x)


@jit(nopython=True, cache=True)
def _fft_radix2_inplace(x: np.ndarray) -> None:
    """
    In-place iterative Cooley-Tukey radix-2 DIT FFT (Numba JIT).

    The twiddle factor for each butterfly is obtained by multiplying the
    previous one by the stage's principal root, not by calling exp() again.
    """
    N = x.shape[0]
    n_bits = 0
    while (1 << n_bits) < N:
        n_bits += 1

    _permute_inplace(x, n_bits)

    # Process stages: size 2, 4, 8, ..., N
    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        # W_len^1 = exp(-2*pi*i/len)
        w_len = np.exp(-2j * np.pi / stage_size)

        for i in range(0, N, stage_size):
            w = 1.0 + 0j

            for j in range(half_size):
                idx1 = i + j
                idx2 = i + j + half_size

                u = x[idx1]
                v_twiddled = w * x[idx2]

                x[idx1] = u + v_twiddled
                x[idx2] = u - v_twiddled

                w = w * w_len

        stage_size *= 2


def fft_iterative(x: np.ndarray) -> np.ndarray:
    """
    In-place iterative radix-2 FFT.

    Parameters
    ----------
    x : np.ndarray
        1-D complex128 array whose length is a power of two. It is
        overwritten with its transform.

    Returns
    -------
    np.ndarray
        ``x`` itself.

    Raises
    ------
    TypeError
        If ``x`` is not a 1-D complex128 numpy array.
    ValueError
        If the length is greater than 1 and not a power of two. Nothing is
        written in that case.
    """
    if not isinstance(x, np.ndarray) or x.ndim != 1 or x.dtype != np.complex128:
        raise TypeError("fft_iterative expects a 1-D complex128 numpy array")

    N = x.shape[0]
    if N <= 1:
        return x
    if not is_power_of_two(N):
        raise ValueError(f"FFT size must be power of 2. Given: {N}")

    _fft_radix2_inplace(x)
    return x


def fft(x) -> np.ndarray:
    """
    Compute the 1-D discrete Fourier transform.

    Uses the iterative radix-2 FFT for power-of-two lengths and falls back to
    the reference DFT otherwise. Always works on a copy.

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5])
    >>> X = fft(x)
    >>> # Should match scipy.fft.fft(x)
    """
    x = np.array(x, dtype=np.complex128)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {x.shape}")

    if is_power_of_two(x.shape[0]):
        return fft_iterative(x)
    return dft_reference(x)


if __name__ == "__main__":
    import time
    from scipy.fft import fft as scipy_fft

    print("=" * 70)
    print("Radix-2 FFT Self-Check")
    print("=" * 70)

    print("\nWarming up JIT...")
    _ = fft(np.random.randn(8))
    _ = dft_reference(np.random.randn(8))
    print("JIT warm-up complete.")

    print("\n[Correctness vs scipy]")
    for N in [64, 256, 1024]:
        x = np.random.randn(N) + 1j * np.random.randn(N)
        X_scipy = scipy_fft(x)
        err_rec = np.abs(fft_recursive(x) - X_scipy).max()
        err_it = np.abs(fft_iterative(x.copy()) - X_scipy).max()
        print(f"  N={N:5d}: recursive={err_rec:.2e} iterative={err_it:.2e}")

    print("\n[Timing]")
    print(f"{'N':>6} | {'DFT (ms)':>10} | {'Rec (ms)':>10} | {'Iter (ms)':>10}")
    print("-" * 48)
    for N in [256, 1024, 4096]:
        x = np.random.randn(N).astype(np.complex128)

        start = time.perf_counter()
        _ = dft_reference(x)
        t_dft = (time.perf_counter() - start) * 1000

        start = time.perf_counter()
        _ = fft_recursive(x)
        t_rec = (time.perf_counter() - start) * 1000

        y = x.copy()
        start = time.perf_counter()
        fft_iterative(y)
        t_it = (time.perf_counter() - start) * 1000

        print(f"{N:6d} | {t_dft:10.3f} | {t_rec:10.3f} | {t_it:10.3f}")
