"""
Timing harness for the three transforms.

Runs the reference DFT, the recursive FFT and the in-place iterative FFT on
the same sine signal, in that order, and records elapsed time, the leading
output bins and the deviation from scipy.fft.fft.
"""

import time
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Tuple

import numpy as np
from scipy.fft import fft as scipy_fft

from src.fourier import is_power_of_two, dft_reference, fft_recursive, fft_iterative
from src.utils.logging import get_logger
from .config import BenchmarkConfig
from .signals import sine_wave


logger = get_logger(__name__)


@dataclass
class TransformTiming:
    """Result of timing a single transform."""
    name: str
    title: str
    elapsed_s: float  # Fastest of the timed repeats
    max_error: float  # Max |X - scipy.fft.fft(x)|
    head: List[complex]

    def to_dict(self) -> Dict:
        result = asdict(self)
        result['head'] = [[float(z.real), float(z.imag)] for z in self.head]
        return result


def validate_signal_length(n: int) -> int:
    """Check that n is a usable FFT length, raising the user-facing error."""
    if not is_power_of_two(n):
        raise ValueError("Error: signal length must be a power of 2.")
    return n


def _run_reference(signal: np.ndarray) -> np.ndarray:
    return dft_reference(signal)


def _run_recursive(signal: np.ndarray) -> np.ndarray:
    return fft_recursive(signal)


def _run_iterative(signal: np.ndarray) -> Tuple[np.ndarray, float]:
    # In place on a private copy so repeats all see the original signal
    buffer = signal.copy()
    start = time.perf_counter()
    fft_iterative(buffer)
    return buffer, time.perf_counter() - start


TRANSFORMS: List[Tuple[str, str, Callable]] = [
    ('naive_dft', 'Naive DFT', _run_reference),
    ('recursive_fft', 'Recursive FFT', _run_recursive),
    ('optimized_fft', 'Optimized FFT', _run_iterative),
]


def time_transform(
    func: Callable,
    signal: np.ndarray,
    repeats: int = 1,
    warmup: bool = True,
) -> Tuple[np.ndarray, float]:
    """
    Time ``func(signal)`` and return (last output, fastest elapsed seconds).

    ``func`` may return either an output array or an ``(output, elapsed)``
    pair when it needs to keep setup work out of the measurement.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    if warmup:
        # Trigger Numba compilation outside the timed region
        func(signal[:2] if len(signal) >= 2 else signal)

    best = float('inf')
    output = None
    for _ in range(repeats):
        start = time.perf_counter()
        result = func(signal)
        elapsed = time.perf_counter() - start

        if isinstance(result, tuple):
            result, elapsed = result
        output = result
        best = min(best, elapsed)

    return output, best


def run_benchmark(config: BenchmarkConfig) -> List[TransformTiming]:
    """
    Run every transform on a sine wave described by ``config``.

    Raises:
        ValueError: if ``config.signal_length`` is not a power of two.
    """
    n = validate_signal_length(config.signal_length)
    signal = sine_wave(n, config.frequency)
    expected = scipy_fft(signal)

    logger.info(f"Benchmark: N={n}, frequency={config.frequency}, repeats={config.repeats}")

    results = []
    for name, title, func in TRANSFORMS:
        output, elapsed = time_transform(func, signal, repeats=config.repeats)
        max_error = float(np.abs(output - expected).max())

        results.append(TransformTiming(
            name=name,
            title=title,
            elapsed_s=elapsed,
            max_error=max_error,
            head=[complex(z) for z in output[:config.head]],
        ))

        logger.info(f"{title}: elapsed={elapsed:.6f}s, max_error={max_error:.2e}")

    return results
