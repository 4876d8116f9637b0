import numpy as np


def sine_wave(n: int, frequency: float = 5.0) -> np.ndarray:
    """
    Sampled sine test signal: x[k] = sin(2*pi*frequency*k/n) + 0j.

    The frequency is in cycles per signal length, so an integer frequency f
    puts all the energy in bins f and n - f.
    """
    k = np.arange(n)
    return np.sin(2.0 * np.pi * frequency * k / n).astype(np.complex128)
