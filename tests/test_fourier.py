"""
Unit Tests for the Fourier Module

This test suite validates the hand-written reference DFT, recursive FFT and
in-place iterative FFT against each other and against scipy.fft.

Test Coverage:
    - Bit helpers: power-of-two check, bit reversal, permutation
    - Reference DFT: correctness, arbitrary lengths, edge cases
    - Recursive / iterative FFT: agreement with the DFT, preconditions, in-place contract

Run:
    pytest tests/test_fourier.py -v
    or
    python tests/test_fourier.py
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
import pytest
from scipy.fft import fft as scipy_fft

from src.fourier import (
    is_power_of_two,
    reverse_bits,
    bit_reverse_permute,
    dft_reference,
    fft_recursive,
    fft_iterative,
    fft,
)


def random_signal(N, seed=0):
    rng = np.random.default_rng(seed)
    return rng.standard_normal(N) + 1j * rng.standard_normal(N)


def relative_error(X_ours, X_ref):
    scale = max(np.abs(X_ref).max(), 1.0)
    return np.abs(X_ours - X_ref).max() / scale


class TestPowerOfTwo:
    """Test suite for the power-of-two check."""

    def test_known_values(self):
        assert is_power_of_two(1)
        assert not is_power_of_two(0)
        assert not is_power_of_two(-4)
        assert not is_power_of_two(3)
        assert is_power_of_two(1024)

    def test_all_small_values(self):
        powers = {1, 2, 4, 8, 16, 32, 64}
        for n in range(-8, 100):
            assert is_power_of_two(n) == (n in powers), f"wrong answer for {n}"

    def test_numpy_integers(self):
        assert is_power_of_two(np.int64(256))
        assert not is_power_of_two(np.int64(255))


class TestBitReversal:
    """Test suite for reverse_bits and bit_reverse_permute."""

    def test_reverse_bits_examples(self):
        assert reverse_bits(1, 3) == 4  # 001 -> 100
        assert reverse_bits(3, 3) == 6  # 011 -> 110
        assert reverse_bits(6, 3) == 3  # 110 -> 011
        assert reverse_bits(0, 5) == 0
        assert reverse_bits(1, 10) == 512

    def test_reverse_bits_zero_width(self):
        assert reverse_bits(0, 0) == 0

    def test_reverse_bits_involution(self):
        for b in range(0, 11):
            for v in range(1 << b):
                assert reverse_bits(reverse_bits(v, b), b) == v, f"v={v}, b={b}"

        print(f"\n[Bit Reversal] Involution holds for widths 0..10 ✓")

    def test_permute_known_order(self):
        x = np.arange(8)
        out = bit_reverse_permute(x)
        assert out is x
        np.testing.assert_array_equal(x, [0, 4, 2, 6, 1, 5, 3, 7])

    def test_permute_is_bijection(self):
        for m in range(0, 11):
            N = 1 << m
            x = bit_reverse_permute(np.arange(N))
            assert sorted(x.tolist()) == list(range(N)), f"not a bijection for N={N}"
            for i in range(N):
                assert x[i] == reverse_bits(i, m)

    def test_permute_twice_restores(self):
        x = random_signal(64)
        original = x.copy()
        bit_reverse_permute(bit_reverse_permute(x))
        np.testing.assert_array_equal(x, original)

    def test_permute_rejects_bad_input(self):
        with pytest.raises(ValueError):
            bit_reverse_permute(np.arange(6))
        with pytest.raises(TypeError):
            bit_reverse_permute([0, 1, 2, 3])
        with pytest.raises(TypeError):
            bit_reverse_permute(np.zeros((4, 4)))


class TestReferenceDFT:
    """Test suite for the O(N^2) reference DFT."""

    def test_dft_random_signal(self):
        x = random_signal(256)
        X_ours = dft_reference(x)
        X_scipy = scipy_fft(x)
        error = np.abs(X_ours - X_scipy)

        print(f"\n[DFT Random Signal]")
        print(f"  Max error: {error.max():.2e}")

        assert error.max() < 1e-10, f"DFT error too large: {error.max()}"

    def test_dft_non_power_of_2(self):
        for N in [3, 5, 12, 100]:
            x = random_signal(N, seed=N)
            error = np.abs(dft_reference(x) - scipy_fft(x))
            assert error.max() < 1e-10, f"DFT failed for N={N}"

    def test_dft_real_list_input(self):
        x = [1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5]
        X = dft_reference(x)
        assert X.dtype == np.complex128
        assert np.abs(X - scipy_fft(x)).max() < 1e-12

    def test_dft_impulse(self):
        X = dft_reference([1.0, 0.0, 0.0, 0.0])
        np.testing.assert_allclose(X, np.ones(4), atol=1e-15)

    def test_dft_degenerate_lengths(self):
        assert dft_reference(np.array([], dtype=np.complex128)).shape == (0,)
        X = dft_reference(np.array([3.0 - 2.0j]))
        np.testing.assert_array_equal(X, [3.0 - 2.0j])

    def test_dft_does_not_mutate(self):
        x = random_signal(16)
        original = x.copy()
        X = dft_reference(x)
        assert X is not x
        np.testing.assert_array_equal(x, original)

    def test_dft_rejects_2d(self):
        with pytest.raises(ValueError):
            dft_reference(np.zeros((4, 4)))


class TestRecursiveFFT:
    """Test suite for the recursive radix-2 FFT."""

    def test_matches_dft_power_of_2(self):
        for m in range(0, 11):
            N = 1 << m
            x = random_signal(N, seed=m)
            err = relative_error(fft_recursive(x), dft_reference(x))
            assert err < 1e-9, f"recursive FFT failed for N={N}: {err:.2e}"

        print(f"\n[Recursive FFT] N = 1..1024 agree with DFT ✓")

    def test_matches_scipy(self):
        x = random_signal(1024)
        error = np.abs(fft_recursive(x) - scipy_fft(x))
        assert error.max() < 1e-10

    def test_does_not_mutate(self):
        x = random_signal(32)
        original = x.copy()
        X = fft_recursive(x)
        assert X is not x
        np.testing.assert_array_equal(x, original)

    def test_single_sample_is_fresh_copy(self):
        x = np.array([1.5 + 0.5j])
        X = fft_recursive(x)
        assert X is not x
        np.testing.assert_array_equal(X, x)

    def test_rejects_non_power_of_2(self):
        for N in [3, 6, 12]:
            with pytest.raises(ValueError):
                fft_recursive(random_signal(N))


class TestIterativeFFT:
    """Test suite for the in-place iterative radix-2 FFT."""

    def test_matches_dft_power_of_2(self):
        for m in range(0, 11):
            N = 1 << m
            x = random_signal(N, seed=100 + m)
            X_ref = dft_reference(x)
            y = x.copy()
            fft_iterative(y)
            err = relative_error(y, X_ref)
            assert err < 1e-9, f"iterative FFT failed for N={N}: {err:.2e}"

        print(f"\n[Iterative FFT] N = 1..1024 agree with DFT ✓")

    def test_matches_scipy(self):
        for N in [64, 128, 256, 512, 1024, 4096]:
            x = random_signal(N, seed=N)
            y = x.copy()
            fft_iterative(y)
            error = np.abs(y - scipy_fft(x))
            assert error.max() < 1e-10, f"FFT failed for N={N}"

    def test_in_place(self):
        x = random_signal(16)
        expected = scipy_fft(x)
        out = fft_iterative(x)
        assert out is x
        assert np.abs(x - expected).max() < 1e-12

    def test_degenerate_lengths(self):
        empty = np.array([], dtype=np.complex128)
        assert fft_iterative(empty).shape == (0,)

        x = np.array([2.0 - 7.0j])
        fft_iterative(x)
        np.testing.assert_array_equal(x, [2.0 - 7.0j])

    def test_rejects_non_power_of_2_without_mutation(self):
        x = random_signal(12)
        original = x.copy()
        with pytest.raises(ValueError, match="power of 2"):
            fft_iterative(x)
        np.testing.assert_array_equal(x, original)

    def test_rejects_wrong_buffer(self):
        with pytest.raises(TypeError):
            fft_iterative([1.0, 2.0, 3.0, 4.0])
        with pytest.raises(TypeError):
            fft_iterative(np.ones(8))
        with pytest.raises(TypeError):
            fft_iterative(np.ones((4, 4), dtype=np.complex128))


class TestSineScenario:
    """N=8, x[n] = sin(2*pi*5*n/8): energy lands in bins 3 and 5."""

    def setup_method(self):
        n = np.arange(8)
        self.x = np.sin(2 * np.pi * 5 * n / 8).astype(np.complex128)

    def test_all_transforms_agree(self):
        X_dft = dft_reference(self.x)
        X_rec = fft_recursive(self.x)
        X_it = fft_iterative(self.x.copy())

        assert np.abs(X_dft - X_rec).max() < 1e-12
        assert np.abs(X_dft - X_it).max() < 1e-12

    def test_energy_in_bins_3_and_5(self):
        X = fft_iterative(self.x.copy())
        magnitude = np.abs(X)

        print(f"\n[Sine N=8, f=5]")
        print(f"  |X|: {np.round(magnitude, 6)}")

        assert abs(magnitude[5] - 4.0) < 1e-9
        assert abs(magnitude[3] - 4.0) < 1e-9
        others = np.delete(magnitude, [3, 5])
        assert others.max() < 1e-9
        # sin = (e^{ix} - e^{-ix}) / 2i puts -N/2 i at +f and +N/2 i at -f
        assert abs(X[5] - (-4j)) < 1e-9
        assert abs(X[3] - 4j) < 1e-9


class TestDispatch:
    """Test suite for the fft() front end."""

    def test_power_of_2(self):
        x = random_signal(256)
        original = x.copy()
        X = fft(x)
        np.testing.assert_array_equal(x, original)
        assert np.abs(X - scipy_fft(x)).max() < 1e-10

    def test_non_power_of_2_falls_back_to_dft(self):
        for N in [0, 3, 10, 100]:
            x = np.random.randn(N)
            X = fft(x)
            assert X.shape == (N,)
            if N:
                assert np.abs(X - scipy_fft(x)).max() < 1e-10

    def test_real_input(self):
        x = [1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5]
        assert np.abs(fft(x) - scipy_fft(x)).max() < 1e-12


def run_all_tests():
    """Run all test suites."""
    print("=" * 70)
    print("Fourier Module - Unit Tests")
    print("=" * 70)

    suites = [
        TestPowerOfTwo(),
        TestBitReversal(),
        TestReferenceDFT(),
        TestRecursiveFFT(),
        TestIterativeFFT(),
        TestSineScenario(),
        TestDispatch(),
    ]
    for suite in suites:
        print(f"\n{type(suite).__name__}")
        for name in sorted(dir(suite)):
            if name.startswith('test_'):
                if hasattr(suite, 'setup_method'):
                    suite.setup_method()
                getattr(suite, name)()
                print(f"  {name} ✓")

    print("\n" + "=" * 70)
    print("ALL TESTS PASSED ✓")
    print("=" * 70)


if __name__ == "__main__":
    run_all_tests()
