import math

import numpy as np
import pytest

from mallat.continuous import *


X = np.linspace(-4, 4, 81)


def test_haar():
    w = HaarWavelet()
    x = np.array([-0.5, 0.0, 0.25, 0.5, 0.75, 1.0, 2.0])
    np.testing.assert_array_equal(w.scaling(x), [0, 1, 1, 1, 1, 0, 0])
    np.testing.assert_array_equal(w.wavelet(x), [0, 1, 1, -1, -1, 0, 0])


def test_haar_compact_support():
    """The Haar wavelet vanishes from x = 1 on, like its scaling function."""
    x = np.linspace(1.0, 10.0, 37)
    np.testing.assert_array_equal(HaarWavelet().wavelet(x), np.zeros_like(x))
    np.testing.assert_array_equal(HaarWavelet().scaling(x), np.zeros_like(x))
    assert HaarWavelet().wavelet(0.999) == -1.0


def test_mexican_hat():
    w = MexicanHatWavelet()
    assert w.wavelet(0.0) == pytest.approx(2 / (math.sqrt(3) * math.pi ** 0.25))
    assert w.wavelet(1.0) == pytest.approx(0.0)
    np.testing.assert_allclose(w(X), w(-X))


def test_morlet():
    w = MorletWavelet()
    assert w.wavelet(0.0) == pytest.approx(1.0)
    np.testing.assert_allclose(w.wavelet(X), np.exp(-X ** 2 / 2) * np.cos(5 * X))


def test_meyer():
    w = MeyerWavelet()
    assert w.scaling(0.0) == pytest.approx(2 / 3 + 4 / (3 * math.pi))
    # The closed form is continuous around its removable singularity at 0.
    assert w.scaling(1e-6) == pytest.approx(w.scaling(0.0), abs=1e-6)
    np.testing.assert_allclose(w.wavelet(0.5 + X[:10]), w.wavelet(0.5 - X[:10]))


def test_shannon():
    w = ShannonWavelet()
    assert w.wavelet(0.0) == pytest.approx(1.0)
    assert w.wavelet(2.0) == pytest.approx(0.0)


def test_poisson():
    w = PoissonWavelet(2)
    assert w.wavelet(-1.0) == 0.0
    assert w.wavelet(2.0) == pytest.approx(0.0)
    assert w.wavelet(1.0) == pytest.approx(-0.5 * math.exp(-1))
    with pytest.raises(ValueError):
        PoissonWavelet(0)


@pytest.mark.parametrize("derivative", range(1, 9))
def test_gaussian_energy(derivative):
    """Every order is normalized to unit energy."""
    x = np.linspace(-10, 10, 20001)
    psi = GaussianWavelet(derivative).wavelet(x)
    assert np.sum(psi ** 2) * (x[1] - x[0]) == pytest.approx(1.0, rel=1e-6)


def test_gaussian_derivative():
    h = 1e-5
    f0 = lambda x: (2 / np.pi) ** 0.25 * np.exp(-x ** 2)
    numeric = (f0(X + h) - f0(X - h)) / (2 * h)
    np.testing.assert_allclose(GaussianWavelet(1).wavelet(X), numeric, atol=1e-8)


@pytest.mark.parametrize(
    "cls,low,high",
    [(GaussianWavelet, 1, 8), (ComplexGaussianWavelet, 1, 8), (HermitianWavelet, 1, 3)],
)
def test_derivative_range(cls, low, high):
    w = cls(high)
    assert w.derivative == high
    with pytest.raises(ValueError):
        cls(low - 1)
    with pytest.raises(ValueError):
        w.derivative = high + 1
    assert w.derivative == high
    with pytest.raises(TypeError):
        cls(1.5)


def test_complex_gaussian_derivative():
    h = 1e-5
    f = lambda x: np.exp(-1j * x - x ** 2)
    numeric = (f(X + h) - f(X - h)) / (2 * h)
    expected = math.sqrt(2) * numeric / (2 * math.pi) ** 0.25
    np.testing.assert_allclose(ComplexGaussianWavelet(1).wavelet(X), expected, atol=1e-8)


def test_hermitian():
    psi = HermitianWavelet(1).wavelet(X)
    assert psi.dtype == np.complex128
    np.testing.assert_allclose(psi, -HermitianWavelet(1).wavelet(-X))
    hat = HermitianHatWavelet().wavelet(0.0)
    assert hat == pytest.approx(2 / math.sqrt(5) * math.pi ** -0.25)


def test_gabor():
    w = GaborWavelet(x0=1.0, k0=2.0, a=3.0)
    assert w.wavelet(1.0) == pytest.approx(1.0)
    np.testing.assert_allclose(np.abs(w.wavelet(1 + X)), np.exp(-X ** 2 / 9))


def test_complex_morlet():
    w = ComplexMorletWavelet(fb=1.5, fc=1.0)
    np.testing.assert_allclose(
        np.abs(w.wavelet(X)), (math.pi * 1.5) ** -0.5 * np.exp(-X ** 2 / 1.5)
    )


def test_fbsp():
    w = FbspWavelet(m=2, fb=1.0, fc=0.5)
    assert w.wavelet(0.0) == pytest.approx(1.0)
    assert abs(w.wavelet(1.0)) == pytest.approx(0.0)
    with pytest.raises(ValueError):
        FbspWavelet(m=0)


@pytest.mark.parametrize(
    "w",
    [
        MexicanHatWavelet(),
        MorletWavelet(),
        ShannonWavelet(),
        GaussianWavelet(),
        HermitianHatWavelet(),
        GaborWavelet(),
        ComplexMorletWavelet(),
        ComplexGaussianWavelet(),
        FbspWavelet(),
    ],
)
def test_no_scaling(w):
    with pytest.raises(NotImplementedError):
        w.scaling(0.0)


def test_complex_flag():
    assert not MorletWavelet().is_complex
    assert ComplexMorletWavelet().is_complex
    assert np.iscomplexobj(ComplexMorletWavelet().wavelet(X))
