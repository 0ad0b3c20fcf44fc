import pytest
import torch
import mallat
from mallat.dwt.bandfilter import WaveletFilter


@pytest.mark.parametrize("wavelet", ["haar", "db2", "sym4", "bior2.2"])
@pytest.mark.parametrize("J", [1, 2, 3])
def test_constant_image(wavelet, J):
    """Zeroing the detail bands leaves a constant image unchanged."""
    x = torch.full((2, 30, 41), 3.0, dtype=torch.float64)
    filt = WaveletFilter(mallat.DWT2DDirect(wavelet=wavelet, J=J), factor=-1.0)
    y = filt(x)
    assert y.shape == x.shape
    torch.testing.assert_close(y, x, atol=1e-9, rtol=0)


@pytest.mark.parametrize("padding_mode", ["symmetric", "zeros", "replicate", "circular"])
@pytest.mark.parametrize("T", [64, 100, 97])
def test_identity(padding_mode, T):
    x = torch.randn(3, T, dtype=torch.float64)
    filt = WaveletFilter(
        mallat.DWTDirect(wavelet="db3", J=3), factor=0.0, padding_mode=padding_mode
    )
    torch.testing.assert_close(filt(x), x, atol=1e-9, rtol=0)


def test_identity_2d():
    x = torch.randn(25, 18, dtype=torch.float64)
    filt = WaveletFilter(mallat.DWT2DDirect(wavelet="cdf9.7", J=2), factor=0.0)
    torch.testing.assert_close(filt(x), x, atol=1e-9, rtol=0)


@pytest.mark.parametrize("accuracy", [0.0, 0.1])
def test_highest_frequency_removed(accuracy):
    x = torch.ones(64, dtype=torch.float64)
    x[1::2] = -1
    filt = WaveletFilter(mallat.DWTDirect(wavelet="haar", J=1), accuracy=accuracy)
    torch.testing.assert_close(filt(x), torch.zeros_like(x), atol=1e-12, rtol=0)


def test_factor_scales_details():
    """With factor=1 the details are doubled: the result is twice the input
    minus its low-pass part."""
    x = torch.randn(128, dtype=torch.float64)
    dwt = mallat.DWTDirect(wavelet="db2", J=2)
    low = WaveletFilter(dwt, factor=-1.0)(x)
    boosted = WaveletFilter(dwt, factor=1.0)(x)
    torch.testing.assert_close(boosted, 2 * x - low, atol=1e-9, rtol=0)


def test_sizes():
    filt = WaveletFilter(mallat.DWTDirect(J=3), accuracy=0.1)
    assert filt.sizes((100,)) == ((120,), (15,))
    filt = WaveletFilter(mallat.DWT2DDirect(J=2), accuracy=0.1)
    assert filt.sizes((30, 50)) == ((36, 56), (9, 14))


def test_input_untouched():
    x = torch.randn(50, dtype=torch.float64)
    x_copy = x.clone()
    filt = WaveletFilter(mallat.DWTDirect(wavelet="db2", J=2))
    filt(x)
    filt([x, x])
    assert torch.equal(x, x_copy)


def test_apply_in_place():
    x = torch.randn(4, 50, dtype=torch.float64)
    filt = WaveletFilter(mallat.DWTDirect(wavelet="db2", J=2))
    expected = filt(x)
    y = filt.apply_(x)
    assert y is x
    torch.testing.assert_close(x, expected)


@pytest.mark.parametrize("N", [1, 2, 5])
def test_blend_identical(N):
    x = torch.randn(40, 40, dtype=torch.float64)
    filt = WaveletFilter(mallat.DWT2DDirect(wavelet="db2", J=2), factor=-0.5)
    torch.testing.assert_close(filt([x] * N), filt(x), atol=1e-12, rtol=0)


def test_blend_mean():
    xs = [torch.randn(2, 70, dtype=torch.float64) for _ in range(3)]
    filt = WaveletFilter(mallat.DWTDirect(wavelet="sym5", J=3), factor=-1.0)
    expected = sum(filt(x) for x in xs) / 3
    torch.testing.assert_close(filt(tuple(xs)), expected, atol=1e-9, rtol=0)
    x = xs[0]
    torch.testing.assert_close(
        filt([x, -x]), torch.zeros_like(x), atol=1e-12, rtol=0
    )


def test_blend_errors():
    filt = WaveletFilter(mallat.DWTDirect(J=2))
    with pytest.raises(ValueError):
        filt([])
    with pytest.raises(ValueError):
        filt([torch.zeros(16), torch.zeros(17)])


def test_complex():
    x = torch.randn(64, dtype=torch.complex128)
    filt = WaveletFilter(mallat.DWTDirect(wavelet="db2", J=2), factor=0.0)
    y = filt(x)
    assert y.dtype == torch.complex128
    torch.testing.assert_close(y, x, atol=1e-9, rtol=0)


@pytest.mark.parametrize("wavelet", ["db3", "bior2.2", "cdf9.7"])
def test_complex_2d(wavelet):
    x = torch.randn(2, 27, 34, dtype=torch.complex128)
    filt = WaveletFilter(mallat.DWT2DDirect(wavelet=wavelet, J=3), factor=0.0)
    y = filt(x)
    assert y.dtype == torch.complex128
    torch.testing.assert_close(y, x, atol=1e-9, rtol=0)


def test_configuration():
    dwt = mallat.DWTDirect(J=2)
    assert WaveletFilter(dwt, accuracy=2.0).accuracy == 1.0
    assert WaveletFilter(dwt, accuracy=-1.0).accuracy == 0.0
    assert WaveletFilter(dwt, padding_mode="zeros").padding_mode == "constant"
    assert WaveletFilter(dwt).ndim == 1
    assert WaveletFilter(mallat.DWT2DDirect()).ndim == 2
    with pytest.raises(ValueError):
        WaveletFilter(dwt, padding_mode="periodic")
    with pytest.raises(TypeError):
        WaveletFilter(mallat.DWTInverse())
    with pytest.raises(TypeError):
        WaveletFilter("haar")
