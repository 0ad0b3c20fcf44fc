import math

import numpy as np
import pytest
import torch

import mallat.dwt.lowlevel
from mallat.dwt.coeffs import filter_bank


def test_prep_filt():
    x = np.array([1, 2, 3])[:, np.newaxis]
    y = mallat.dwt.lowlevel.prep_filt(x)
    assert isinstance(y, torch.Tensor)
    assert y.dtype == torch.float64
    assert list(y.shape) == [len(x)]


def test_afb_haar():
    bank = filter_bank("haar")
    h0 = mallat.dwt.lowlevel.prep_filt(bank.dec_lo)
    h1 = mallat.dwt.lowlevel.prep_filt(bank.dec_hi)
    x = torch.tensor([1.0, 3.0, 2.0, 2.0], dtype=torch.float64)
    y = mallat.dwt.lowlevel.afb(x, h0, h1, normalize=False)
    s = math.sqrt(2)
    expected = torch.tensor([4 / s, 4 / s, -2 / s, 0.0], dtype=torch.float64)
    torch.testing.assert_close(y, expected)
    y = mallat.dwt.lowlevel.afb(x, h0, h1, normalize=True)
    torch.testing.assert_close(y, expected / s)


def test_afb_wraps_around():
    """The analysis window of the first output starts before the first
    sample and wraps to the end of the signal."""
    h0 = mallat.dwt.lowlevel.prep_filt([1.0, 0.0, 0.0, 0.0])
    h1 = mallat.dwt.lowlevel.prep_filt([0.0, 0.0, 0.0, 1.0])
    x = torch.arange(8, dtype=torch.float64)
    y = mallat.dwt.lowlevel.afb(x, h0, h1, normalize=False)
    # With four taps, output r reads samples 2r - 1 to 2r + 2.
    torch.testing.assert_close(y[:4], torch.tensor([7.0, 1, 3, 5], dtype=torch.float64))
    torch.testing.assert_close(y[4:], torch.tensor([2.0, 4, 6, 0], dtype=torch.float64))


@pytest.mark.parametrize("wavelet", ["haar", "db2", "db5", "sym8", "bior3.3"])
@pytest.mark.parametrize("normalize", [True, False])
@pytest.mark.parametrize("T", [2, 8, 30])
def test_sfb_inverts_afb(wavelet, normalize, T):
    bank = filter_bank(wavelet)
    h0, h1, g0, g1 = (mallat.dwt.lowlevel.prep_filt(h) for h in bank)
    x = torch.randn(3, T, dtype=torch.float64)
    y = mallat.dwt.lowlevel.afb(x, h0, h1, normalize)
    x_rec = mallat.dwt.lowlevel.sfb(y, g0, g1, normalize)
    torch.testing.assert_close(x, x_rec, atol=1e-8, rtol=0)


def test_odd_length():
    h = mallat.dwt.lowlevel.prep_filt([1.0, 1.0])
    with pytest.raises(AssertionError):
        mallat.dwt.lowlevel.afb(torch.zeros(5), h, h, False)
    with pytest.raises(AssertionError):
        mallat.dwt.lowlevel.sfb(torch.zeros(5), h, h, False)
