"""
Benchmark harness for the hand-written transforms.

Synthesises a sine test signal, times each transform and reports the leading
output bins alongside the deviation from scipy.
"""

from .config import BenchmarkConfig, load_config
from .signals import sine_wave
from .runner import TransformTiming, run_benchmark, time_transform, validate_signal_length

__all__ = [
    'BenchmarkConfig',
    'load_config',
    'sine_wave',
    'TransformTiming',
    'run_benchmark',
    'time_transform',
    'validate_signal_length',
]
