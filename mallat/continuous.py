"""
Continuous wavelets
===================

Point evaluators of classical continuous wavelets. Every evaluator has a
``wavelet(x)`` method and a ``scaling(x)`` method, both vectorized over
NumPy arrays. ``scaling`` raises ``NotImplementedError`` for the families
that have no scaling function.
"""
import math

import numpy as np


__all__ = [
    "ComplexGaussianWavelet",
    "ComplexMorletWavelet",
    "FbspWavelet",
    "GaborWavelet",
    "GaussianWavelet",
    "HaarWavelet",
    "HermitianHatWavelet",
    "HermitianWavelet",
    "MeyerWavelet",
    "MexicanHatWavelet",
    "MorletWavelet",
    "PoissonWavelet",
    "ShannonWavelet",
]


class ContinuousWavelet:
    """Base class of the continuous wavelet evaluators."""

    #: whether :meth:`wavelet` returns complex values
    is_complex = False

    def scaling(self, x):
        raise NotImplementedError(
            f"{type(self).__name__} has no scaling function"
        )

    def wavelet(self, x):
        raise NotImplementedError

    def __call__(self, x):
        return self.wavelet(x)


def _check_order(name, value, low, high=None):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int, got {type(value)}")
    if value < low or (high is not None and value > high):
        bounds = f"[{low}, {high}]" if high is not None else f">= {low}"
        raise ValueError(f"{name} must be {bounds}, got {value}")
    return int(value)


class HaarWavelet(ContinuousWavelet):
    """Haar scaling function (indicator of [0, 1)) and wavelet (+1 on
    [0, 1/2), -1 on [1/2, 1), 0 elsewhere)."""

    def scaling(self, x):
        x = np.asarray(x, dtype=np.float64)
        return np.where((x >= 0) & (x < 1), 1.0, 0.0)

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        return np.where((x >= 0) & (x < 0.5), 1.0, 0.0) - np.where(
            (x >= 0.5) & (x < 1), 1.0, 0.0
        )


class MexicanHatWavelet(ContinuousWavelet):
    """Mexican hat (Ricker) wavelet, the normalized second derivative of a
    Gaussian."""

    def wavelet(self, x):
        x2 = np.square(np.asarray(x, dtype=np.float64))
        return 2.0 / (np.sqrt(3) * np.pi ** 0.25) * (1 - x2) * np.exp(-x2 / 2)


class MorletWavelet(ContinuousWavelet):
    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        return np.exp(-np.square(x) / 2) * np.cos(5 * x)


class MeyerWavelet(ContinuousWavelet):
    """Meyer scaling function and wavelet in the closed form given by
    Valenzuela and de Oliveira (2015).

    The closed forms have removable singularities. The scaling function is
    evaluated exactly at 0; other singular points evaluate to nan.
    """

    def scaling(self, x):
        x = np.asarray(x, dtype=np.float64)
        with np.errstate(divide="ignore", invalid="ignore"):
            upper = np.sin(2 * np.pi / 3 * x) + 4.0 / 3 * x * np.cos(
                4 * np.pi / 3 * x
            )
            lower = np.pi * x - 16 * np.pi / 9 * x ** 3
            phi = upper / lower
        return np.where(x == 0, 2.0 / 3 + 4.0 / (3 * np.pi), phi)

    def wavelet(self, x):
        t = np.asarray(x, dtype=np.float64) - 0.5
        with np.errstate(divide="ignore", invalid="ignore"):
            psi1 = (
                4.0 / (3 * np.pi) * t * np.cos(2 * np.pi / 3 * t)
                - np.sin(4 * np.pi / 3 * t) / np.pi
            ) / (t - 16.0 / 9 * t ** 3)
            psi2 = (
                8.0 / (3 * np.pi) * t * np.cos(8 * np.pi / 3 * t)
                + np.sin(4 * np.pi / 3 * t) / np.pi
            ) / (t - 64.0 / 9 * t ** 3)
        return psi1 + psi2


class ShannonWavelet(ContinuousWavelet):
    def wavelet(self, x):
        t = np.asarray(x, dtype=np.float64) / 2
        return np.sinc(t) * np.cos(3 * np.pi * t)


class PoissonWavelet(ContinuousWavelet):
    """Poisson wavelet of order n >= 1, supported on the positive half-line."""

    def __init__(self, n=1):
        self.n = n

    @property
    def n(self):
        return self._n

    @n.setter
    def n(self, n):
        self._n = _check_order("n", n, 1)

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        n = self.n
        xp = np.maximum(x, 0)
        psi = (xp - n) / math.factorial(n) * xp ** (n - 1) * np.exp(-xp)
        return np.where(x < 0, 0.0, psi)


class GaussianWavelet(ContinuousWavelet):
    """Derivatives of a Gaussian, of order 1 to 8, normalized to unit
    energy."""

    def __init__(self, derivative=1):
        self.derivative = derivative

    @property
    def derivative(self):
        return self._derivative

    @derivative.setter
    def derivative(self, derivative):
        self._derivative = _check_order("derivative", derivative, 1, 8)

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        x2 = x * x
        f0 = (2.0 / np.pi) ** 0.25 * np.exp(-x2)
        d = self.derivative
        if d == 1:
            return -2.0 * x * f0
        if d == 2:
            return 2.0 / np.sqrt(3) * (-1.0 + 2 * x2) * f0
        if d == 3:
            return 4.0 / np.sqrt(15) * x * (3 - 2 * x2) * f0
        if d == 4:
            return 4.0 / np.sqrt(105) * (3 - 12 * x2 + 4 * x2 ** 2) * f0
        if d == 5:
            return (
                8.0 / (3 * np.sqrt(105)) * x * (-15 + 20 * x2 - 4 * x2 ** 2) * f0
            )
        if d == 6:
            return (
                8.0
                / (3 * np.sqrt(1155))
                * (-15 + 90 * x2 - 60 * x2 ** 2 + 8 * x2 ** 3)
                * f0
            )
        if d == 7:
            return (
                16.0
                / (3 * np.sqrt(15015))
                * x
                * (105 - 210 * x2 + 84 * x2 ** 2 - 8 * x2 ** 3)
                * f0
            )
        return (
            16.0
            / (45 * np.sqrt(1001))
            * (105 - 840 * x2 + 840 * x2 ** 2 - 224 * x2 ** 3 + 16 * x2 ** 4)
            * f0
        )


class HermitianHatWavelet(ContinuousWavelet):
    is_complex = True

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        x2 = x * x
        cf = 2.0 / np.sqrt(5) * np.pi ** -0.25
        return cf * (1 - x2 + 1j * x) * np.exp(-0.5 * x2)


class HermitianWavelet(ContinuousWavelet):
    """Hermitian wavelets of order 1 to 3."""

    is_complex = True

    def __init__(self, derivative=1):
        self.derivative = derivative

    @property
    def derivative(self):
        return self._derivative

    @derivative.setter
    def derivative(self, derivative):
        self._derivative = _check_order("derivative", derivative, 1, 3)

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        x2 = x * x
        f0 = (np.pi ** -0.25 * np.exp(-x2 / 2)).astype(np.complex128)
        if self.derivative == 1:
            return np.sqrt(2) * x * f0
        if self.derivative == 2:
            return 2.0 * np.sqrt(3.0) / 3.0 * f0 * (1 - x2)
        return 2.0 * np.sqrt(30.0) / 15.0 * f0 * (x2 * x - 3 * x)


class GaborWavelet(ContinuousWavelet):
    """Gabor wavelet centred on x0, with wavenumber k0 and width a."""

    is_complex = True

    def __init__(self, x0=0.0, k0=1.0, a=2.0):
        self.x0 = x0
        self.k0 = k0
        self.a = a

    def wavelet(self, x):
        d = np.asarray(x, dtype=np.float64) - self.x0
        return np.exp(-d * d / self.a ** 2) * np.exp(-1j * self.k0 * d)


class ComplexMorletWavelet(ContinuousWavelet):
    """Complex Morlet wavelet with bandwidth fb and center frequency fc."""

    is_complex = True

    def __init__(self, fb=0.5, fc=1.0):
        self.fb = fb
        self.fc = fc

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        return (
            (np.pi * self.fb) ** -0.5
            * np.exp(2j * np.pi * self.fc * x)
            * np.exp(-np.square(x) / self.fb)
        )


class ComplexGaussianWavelet(ContinuousWavelet):
    """Derivatives of a complex Gaussian, of order 1 to 8."""

    is_complex = True

    # Coefficients of the polynomial factor, constant term first.
    POLYNOMIALS = {
        1: ((-1j, -2), 1.0, 2),
        2: ((-3, 4j, 4), 1.0 / 3, 6),
        3: ((7j, 18, -12j, -8), 1.0 / 15, 30),
        4: ((25, -56j, -72, 32j, 16), 1.0 / 105, 210),
        5: ((-81j, -250, 280j, 240, -80j, -32), 1.0 / 315, 210),
        6: ((-331, 972j, 1500, -1120j, -720, 192j, 64), 1.0 / 3465, 2310),
        7: (
            (1303j, 4634, -6804j, -7000, 3920j, 2016, -448j, -128),
            1.0 / 45045,
            30030,
        ),
        8: (
            (5937, -20848j, -37072, 36288j, 28000, -12544j, -5376, 1024j, 256),
            1.0 / 45045,
            20021,
        ),
    }

    def __init__(self, derivative=1):
        self.derivative = derivative

    @property
    def derivative(self):
        return self._derivative

    @derivative.setter
    def derivative(self, derivative):
        self._derivative = _check_order("derivative", derivative, 1, 8)

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        coefs, scale, root = self.POLYNOMIALS[self.derivative]
        f2 = np.exp(-1j * x) * np.exp(-x * x) / np.sqrt(np.sqrt(2 * np.pi))
        poly = np.polynomial.polynomial.polyval(x, coefs)
        return scale * f2 * poly * np.sqrt(root)


class FbspWavelet(ContinuousWavelet):
    """Frequency B-spline wavelet of order m >= 1, bandwidth fb and center
    frequency fc."""

    is_complex = True

    def __init__(self, m=3, fb=1.0, fc=2.0):
        self.m = m
        self.fb = fb
        self.fc = fc

    @property
    def m(self):
        return self._m

    @m.setter
    def m(self, m):
        if m < 1:
            raise ValueError(f"m must be >= 1, got {m}")
        self._m = m

    def wavelet(self, x):
        x = np.asarray(x, dtype=np.float64)
        band = np.sinc(x / self.fb ** self.m) ** self.m
        return np.sqrt(self.fb) * band * np.exp(2j * np.pi * self.fc * x)
