import pytest
import torch
from torch.autograd import gradcheck
import mallat
from contextlib import contextmanager


if torch.cuda.is_available():
    dev = torch.device("cuda")
else:
    dev = torch.device("cpu")


@contextmanager
def set_double_precision():
    old_prec = torch.get_default_dtype()
    try:
        torch.set_default_dtype(torch.float64)
        yield
    finally:
        torch.set_default_dtype(old_prec)


@pytest.mark.parametrize("wavelet", ["haar", "db2", "bior2.2"])
@pytest.mark.parametrize("T", [8, 13])
def test_fwd(wavelet, T):
    eps = 1e-3
    atol = 1e-4
    with set_double_precision():
        x = torch.randn(2, T, device=dev, requires_grad=True)
        fwd = mallat.DWTDirect(wavelet=wavelet, J=2).to(dev)
    gradcheck(fwd, (x,), eps=eps, atol=atol)


@pytest.mark.parametrize("wavelet", ["haar", "db2", "bior2.2"])
def test_inv(wavelet):
    eps = 1e-3
    atol = 1e-4
    with set_double_precision():
        y = torch.randn(2, 16, device=dev, requires_grad=True)
        inv = mallat.DWTInverse(wavelet=wavelet, J=3).to(dev)
    gradcheck(inv, (y,), eps=eps, atol=atol)


@pytest.mark.parametrize("shape", [(8, 8), (7, 10)])
def test_fwd_inv_2d(shape):
    eps = 1e-3
    atol = 1e-4
    with set_double_precision():
        x = torch.randn(*shape, device=dev, requires_grad=True)
        fwd = mallat.DWT2DDirect(wavelet="db2", J=2).to(dev)
    gradcheck(fwd, (x,), eps=eps, atol=atol)
    gradcheck(fwd.inverse(), (x,), eps=eps, atol=atol)


@pytest.mark.parametrize("padding_mode", ["symmetric", "zeros"])
def test_wavelet_filter(padding_mode):
    eps = 1e-3
    atol = 1e-4
    with set_double_precision():
        x = torch.randn(2, 20, device=dev, requires_grad=True)
        filt = mallat.WaveletFilter(
            mallat.DWTDirect(wavelet="db2", J=2).to(dev),
            factor=-0.5,
            padding_mode=padding_mode,
        )
    gradcheck(filt, (x,), eps=eps, atol=atol)


@pytest.mark.parametrize("normalize", [True, False])
def test_autograd(normalize):
    b = 2
    ch = 3
    N = 2**5
    x = torch.zeros(b, ch, N, requires_grad=True)

    kwargs = dict(wavelet="db4", J=3, normalize=normalize)
    dwt = mallat.DWT1D(**kwargs)
    idwt = mallat.IDWT(**kwargs)

    y = idwt(dwt(x))
    y[:, :, N // 2].mean().backward()
    g = x.grad.sum(axis=1).sum(axis=0)

    dirac = torch.zeros(N)
    dirac[N // 2] = 1

    assert torch.allclose(g, dirac, atol=1e-3)
    assert x.grad.shape == (b, ch, N)
