import pytest
import torch
import numpy as np
import pywt
import mallat


@pytest.mark.parametrize("wavelet", ["haar", "db2", "sym6", "coif2", "bior2.2", "cdf9.7"])
@pytest.mark.parametrize("shape", [(32, 32), (64, 16), (17, 24), (31, 33), (5, 7)])
@pytest.mark.parametrize("normalize", [True, False])
@pytest.mark.parametrize("dtype", [torch.float64, torch.complex128])
def test_pr(wavelet, shape, normalize, dtype):
    Xt = torch.randn(2, *shape, dtype=dtype)
    xfm = mallat.DWT2DDirect(wavelet=wavelet, J=3, normalize=normalize)
    inv = mallat.DWT2DInverse(wavelet=wavelet, J=3, normalize=normalize)
    X_rec = inv(xfm(Xt))
    assert X_rec.shape == Xt.shape
    torch.testing.assert_close(Xt, X_rec, atol=1e-7, rtol=0)


def test_haar_same_as_pywt():
    X = np.random.rand(16, 32)
    y = mallat.DWT2DDirect(wavelet="haar", J=1, normalize=False)(X).numpy()
    cA, (cH, cV, cD) = pywt.dwt2(X, "haar", mode="periodization")
    np.testing.assert_array_almost_equal(y[:8, :16], cA, decimal=10)
    np.testing.assert_array_almost_equal(y[8:, :16], cH, decimal=10)
    np.testing.assert_array_almost_equal(y[:8, 16:], cV, decimal=10)
    np.testing.assert_array_almost_equal(y[8:, 16:], cD, decimal=10)


@pytest.mark.parametrize("J", [1, 2, 3])
def test_haar_pyramid_same_as_pywt(J):
    X = np.random.rand(32, 32)
    y = mallat.DWT2DDirect(wavelet="haar", J=J, normalize=False)(X).numpy()
    coeffs = pywt.wavedec2(X, "haar", mode="periodization", level=J)
    np.testing.assert_array_almost_equal(
        y, pywt.coeffs_to_array(coeffs)[0], decimal=10
    )


def test_constant_image():
    x = torch.ones(1, 4, 4, dtype=torch.float64)
    y = mallat.DWT2DDirect(wavelet="haar", J=1, normalize=False)(x)
    expected = torch.zeros(1, 4, 4, dtype=torch.float64)
    expected[:, :2, :2] = 2
    torch.testing.assert_close(y, expected)


def test_energy_preservation():
    x = torch.randn(64, 48, dtype=torch.float64)
    y = mallat.DWT2DDirect(wavelet="db4", J=3, normalize=False)(x)
    ratio = torch.linalg.norm(y) ** 2 / torch.linalg.norm(x) ** 2
    assert torch.abs(ratio - 1) <= 1e-6


def test_levels():
    xfm = mallat.DWT2DDirect(J=5)
    assert xfm.levels((8, 64)) == 3
    assert xfm.levels((64, 64)) == 5
    assert xfm.levels((1, 64)) == 0
    x = torch.randn(8, 64, dtype=torch.float64)
    torch.testing.assert_close(
        xfm(x), mallat.DWT2DDirect(J=3)(x)
    )


def test_rows_then_columns():
    """A single level is the 1-D transform of the rows followed by the 1-D
    transform of the columns."""
    x = torch.randn(8, 16, dtype=torch.float64)
    y = mallat.DWT2DDirect(wavelet="db2", J=1)(x)
    dwt = mallat.DWTDirect(wavelet="db2", J=1)
    expected = dwt(dwt(x).transpose(0, 1)).transpose(0, 1)
    torch.testing.assert_close(y, expected)


def test_input_untouched():
    Xt = torch.randn(16, 16, dtype=torch.float64)
    X_copy = Xt.clone()
    xfm = mallat.DWT2DDirect(wavelet="db2", J=2)
    xfm.inverse()(xfm(Xt))
    assert torch.equal(Xt, X_copy)


def test_inverse_direct():
    xfm = mallat.DWT2DDirect(wavelet="sym3", J=2, normalize=False)
    inv = xfm.inverse()
    assert isinstance(inv, mallat.DWT2DInverse)
    assert (inv.wavelet, inv.J, inv.normalize) == (xfm.wavelet, 2, False)
    assert isinstance(inv.direct(), mallat.DWT2DDirect)


def test_needs_two_dims():
    with pytest.raises(AssertionError):
        mallat.DWT2DDirect()(torch.randn(16))


def test_complex_dtype_kept():
    Xt = torch.randn(16, 24, dtype=torch.complex128)
    y = mallat.DWT2DDirect(wavelet="db3", J=2)(Xt)
    assert y.dtype == torch.complex128
    real = mallat.DWT2DDirect(wavelet="db3", J=2)(Xt.real)
    imag = mallat.DWT2DDirect(wavelet="db3", J=2)(Xt.imag)
    torch.testing.assert_close(y, torch.complex(real, imag))


def test_base_class_is_not_an_alias():
    from mallat.dwt.transform2d import DWT2DBase

    assert issubclass(mallat.DWT2DDirect, DWT2DBase)
    assert issubclass(mallat.DWT2DInverse, DWT2DBase)
    assert mallat.DWT2D is not DWT2DBase
    assert not hasattr(mallat.dwt.transform2d, "DWT2D")
