"""
Fourier Module - Hand-written DFT and Radix-2 FFT Implementations

This module provides from-scratch implementations of the discrete Fourier
transform over 1-D complex sequences, checked against scipy.fft.

Modules:
    - bits: power-of-two check and bit-reversal permutation
    - dft: reference O(N^2) DFT
    - fft: recursive and in-place iterative Cooley-Tukey FFT
"""

from .bits import is_power_of_two, reverse_bits, bit_reverse_permute
from .dft import dft_reference
from .fft import fft, fft_recursive, fft_iterative

__all__ = [
    # Bit helpers
    'is_power_of_two',
    'reverse_bits',
    'bit_reverse_permute',
    # Transforms
    'dft_reference',
    'fft_recursive',
    'fft_iterative',
    'fft',
]

__version__ = '1.0.0'
