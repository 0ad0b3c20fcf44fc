import pytest
import torch
import numpy as np
import pywt
import mallat
import math


EXACT = (
    ["haar", "fk4", "fk6", "fk14", "fk22", "fbsp1-0-0"]
    + ["db{}".format(k) for k in range(1, 39)]
    + ["sym{}".format(k) for k in range(2, 21)]
    + ["coif{}".format(k) for k in range(1, 5)]
    + ["bior1.1", "bior1.3", "bior1.5", "bior2.2", "bior2.4", "bior2.6", "bior2.8"]
    + ["bior3.1", "bior3.3", "bior3.5", "bior3.7"]
    + ["cdf1.3", "cdf1.5", "cdf3.1", "cdf5.1", "cdf5.3", "cdf5.5"]
    + ["cdf2.2", "cdf2.4", "cdf2.6", "cdf4.2", "cdf4.4", "cdf4.6"]
    + ["cdf6.2", "cdf6.4", "cdf6.6", "cdf9.7"]
)


@pytest.mark.parametrize("wavelet", EXACT)
@pytest.mark.parametrize("normalize", [True, False])
def test_pr(wavelet, normalize):
    Xt = torch.randn(2, 2, 256, dtype=torch.float64)
    xfm = mallat.DWTDirect(wavelet=wavelet, J=3, normalize=normalize)
    inv = mallat.DWTInverse(wavelet=wavelet, J=3, normalize=normalize)
    X_rec = inv(xfm(Xt))
    torch.testing.assert_close(Xt, X_rec, atol=1e-7, rtol=0)


@pytest.mark.parametrize(
    "wavelet", ["haar", "db4", "db20", "sym8", "coif3", "bior3.7", "cdf9.7", "fk22"]
)
@pytest.mark.parametrize("J", [1, 2, 5, 8])
@pytest.mark.parametrize("dtype", [torch.float64, torch.complex128])
def test_pr_all_levels(wavelet, J, dtype):
    Xt = torch.randn(2, 256, dtype=dtype)
    xfm = mallat.DWTDirect(wavelet=wavelet, J=J)
    assert xfm.levels(256) == J
    X_rec = xfm.inverse()(xfm(Xt))
    torch.testing.assert_close(Xt, X_rec, atol=1e-7, rtol=0)


@pytest.mark.parametrize(
    "wavelet,atol", [("coif5", 1e-6), ("fk8", 1e-6), ("meyer", 1e-4), ("kravchenko", 1e-2)]
)
def test_pr_truncated_taps(wavelet, atol):
    Xt = torch.randn(2, 256, dtype=torch.float64)
    xfm = mallat.DWTDirect(wavelet=wavelet, J=3)
    X_rec = xfm.inverse()(xfm(Xt))
    torch.testing.assert_close(Xt, X_rec, atol=atol, rtol=0)


@pytest.mark.parametrize("wavelet", ["haar", "db2", "sym4", "bior2.2", "cdf9.7"])
@pytest.mark.parametrize("T,J", [(100, 5), (97, 5), (12, 5), (6, 2), (1000, 4), (3, 8)])
def test_pr_any_length(wavelet, T, J):
    Xt = torch.randn(3, T, dtype=torch.float64)
    xfm = mallat.DWTDirect(wavelet=wavelet, J=J)
    X_rec = xfm.inverse()(xfm(Xt))
    assert X_rec.shape == Xt.shape
    torch.testing.assert_close(Xt, X_rec, atol=1e-7, rtol=0)


@pytest.mark.parametrize("wavelet", ["haar", "db3", "bior3.5"])
def test_pr_complex(wavelet):
    Xt = torch.randn(2, 128, dtype=torch.complex128)
    xfm = mallat.DWTDirect(wavelet=wavelet, J=4)
    y = xfm(Xt)
    assert y.dtype == torch.complex128
    torch.testing.assert_close(Xt, xfm.inverse()(y), atol=1e-7, rtol=0)


def test_float32():
    Xt = torch.randn(4, 64)
    xfm = mallat.DWTDirect(wavelet="db4", J=3)
    y = xfm(Xt)
    assert y.dtype == torch.float32
    torch.testing.assert_close(Xt, xfm.inverse()(y), atol=1e-4, rtol=1e-4)


def test_input_untouched():
    Xt = torch.randn(64, dtype=torch.float64)
    X_copy = Xt.clone()
    xfm = mallat.DWTDirect(wavelet="db2", J=3)
    y = xfm(Xt)
    xfm.inverse()(y)
    assert torch.equal(Xt, X_copy)
    assert y.data_ptr() != Xt.data_ptr()


def test_array_like():
    x = [1, 1, 1, 1, -1, -1, -1, -1]
    y = mallat.DWTDirect(J=1, normalize=False)(x)
    assert y.dtype == torch.float64
    y_np = mallat.DWTDirect(J=1, normalize=False)(np.array(x, dtype=np.float64))
    assert torch.equal(y, y_np)


def test_haar_known_value():
    x = torch.tensor([1.0, 1, 1, 1, -1, -1, -1, -1], dtype=torch.float64)
    y = mallat.DWTDirect(wavelet="haar", J=1, normalize=False)(x)
    s = math.sqrt(2)
    expected = torch.tensor([s, s, -s, -s, 0, 0, 0, 0], dtype=torch.float64)
    torch.testing.assert_close(y, expected)

    y = mallat.DWTDirect(wavelet="haar", J=1, normalize=True)(x)
    expected = torch.tensor([1.0, 1, -1, -1, 0, 0, 0, 0], dtype=torch.float64)
    torch.testing.assert_close(y, expected)


@pytest.mark.parametrize("J", list(range(1, 9)))
def test_haar_same_as_pywt(J):
    X = np.random.rand(256)
    y = mallat.DWTDirect(wavelet="haar", J=J, normalize=False)(X)
    coeffs = pywt.wavedec(X, "haar", mode="periodization", level=J)
    np.testing.assert_array_almost_equal(y.numpy(), np.concatenate(coeffs), decimal=10)


@pytest.mark.parametrize("wavelet", ["haar", "db2", "db8", "sym5", "coif2"])
def test_energy_preservation(wavelet):
    """
    Orthonormal filter banks preserve the energy of the signal when the
    transform is not normalized.
    """
    x = torch.randn(1, 1, 2**12, dtype=torch.float64)
    y = mallat.DWTDirect(wavelet=wavelet, J=5, normalize=False)(x)
    ratio = torch.linalg.norm(y) ** 2 / torch.linalg.norm(x) ** 2
    assert torch.abs(ratio - 1) <= 1e-6


def test_constant_lowpass():
    """The low-pass band of a constant is constant, the other bands vanish."""
    x = torch.ones(64, dtype=torch.float64)
    xfm = mallat.DWTDirect(wavelet="db3", J=3, normalize=False)
    yl, yh = xfm.split(xfm(x))
    torch.testing.assert_close(yl, torch.full((8,), 2.0**1.5, dtype=torch.float64))
    for band in yh:
        torch.testing.assert_close(band, torch.zeros_like(band), atol=1e-9, rtol=0)


def test_levels_clamped():
    x = torch.randn(16, dtype=torch.float64)
    deep = mallat.DWTDirect(wavelet="db2", J=10)
    assert deep.levels(16) == 4
    y_deep = deep(x)
    y = mallat.DWTDirect(wavelet="db2", J=4)(x)
    assert torch.equal(y, y_deep)
    torch.testing.assert_close(deep.inverse()(y_deep), x)


def test_short_signals():
    xfm = mallat.DWTDirect(wavelet="db2", J=3)
    x = torch.tensor([2.5], dtype=torch.float64)
    assert torch.equal(xfm(x), x)
    assert xfm(torch.zeros(0)).shape == (0,)


@pytest.mark.parametrize("T", [16, 17, 100])
def test_bands(T):
    xfm = mallat.DWTDirect(J=3)
    yl, yh = xfm.bands(T)
    assert len(yh) == xfm.levels(T)
    assert yl.start == 0 and yl.stop == yh[-1].start
    for finer, coarser in zip(yh[:-1], yh[1:]):
        assert coarser.stop <= finer.start
    assert yh[0].stop <= T
    x = torch.randn(2, T)
    lp, bps = xfm.split(xfm(x))
    assert lp.shape[-1] == yl.stop
    assert [bp.shape[-1] for bp in bps] == [s.stop - s.start for s in yh]


def test_bands_dyadic():
    yl, yh = mallat.DWTDirect(J=2).bands(16)
    assert yl == slice(0, 4)
    assert yh == [slice(8, 16), slice(4, 8)]


def test_reconfigure():
    x = torch.randn(64, dtype=torch.float64)
    xfm = mallat.DWTDirect(wavelet="haar", J=1)
    xfm.wavelet = "db4"
    xfm.J = 3
    xfm.normalize = False
    assert xfm.wavelet == mallat.filter_bank("db4")
    assert xfm.h0.shape == (8,)
    y = xfm(x)
    torch.testing.assert_close(y, mallat.DWTDirect("db4", J=3, normalize=False)(x))
    inv = xfm.inverse()
    assert (inv.wavelet, inv.J, inv.normalize) == (xfm.wavelet, 3, False)
    assert isinstance(inv.direct(), mallat.DWTDirect)


def test_filter_bank_argument():
    bank = mallat.FilterBank.from_scaling([0.5, 0.5, 0.5, 0.5])
    xfm = mallat.DWTDirect(wavelet=bank)
    assert xfm.wavelet is bank


@pytest.mark.parametrize("J", [0, -2])
def test_bad_J_value(J):
    with pytest.raises(ValueError):
        mallat.DWTDirect(J=J)


@pytest.mark.parametrize("J", [1.5, "3", True])
def test_bad_J_type(J):
    with pytest.raises(TypeError):
        mallat.DWTDirect(J=J)


def test_bad_wavelet():
    with pytest.raises(ValueError):
        mallat.DWTDirect(wavelet="db99")
    with pytest.raises(TypeError):
        mallat.DWTDirect(wavelet=[0.5, 0.5])


def test_aliases():
    assert mallat.DWT1D is mallat.DWTDirect
    assert mallat.IDWT is mallat.DWTInverse
    assert mallat.DWT2D is mallat.DWT2DDirect
    assert mallat.IDWT2D is mallat.DWT2DInverse
