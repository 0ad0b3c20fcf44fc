import numpy as np
import torch


def prep_filt(h):
    """Convert a 1-D filter (a sequence of taps) into a float64 PyTorch
    vector for mallat."""
    # Taps are kept in double precision whatever the default dtype is,
    # so that the published coefficients are used exactly.
    return torch.tensor(np.asarray(h, dtype=np.float64).ravel(), dtype=torch.float64)


def circ_accumulate(acc, x, h, positions):
    """Add the circular correlation of the last dimension of *x* with *h*,
    evaluated at *positions*, to *acc*.

    The first tap is aligned at ``positions - (len(h) // 2 - 1)`` and indices
    wrap modulo ``x.shape[-1]``. Taps are accumulated one by one in filter
    order.
    """
    n = x.shape[-1]
    start = -((h.shape[-1] >> 1) - 1)
    for k in range(h.shape[-1]):
        idx = torch.remainder(positions + (start + k), n)
        acc = acc + h[k] * x[..., idx]
    return acc


def afb(x, h0, h1, normalize):
    """Single-level analysis along the last dimension.

    Args:
        x: input Tensor whose last dimension has even length b
        h0: low-pass analysis filter
        h1: high-pass analysis filter
        normalize: if True, divide both bands by sqrt(2)

    Returns:
        Tensor of the same shape as x, with the low-pass band in the first
        b/2 samples and the high-pass band in the last b/2 samples.
    """
    b = x.shape[-1]
    assert b % 2 == 0, f"analysis needs an even length, got {b}"
    # Decimation by 2: output r starts its filter window at 2r.
    positions = 2 * torch.arange(b // 2, device=x.device)
    lo = circ_accumulate(0, x, h0, positions)
    hi = circ_accumulate(0, x, h1, positions)
    if normalize:
        lo = lo / np.sqrt(2)
        hi = hi / np.sqrt(2)
    return torch.cat((lo, hi), dim=-1)


def sfb(y, g0, g1, normalize):
    """Single-level synthesis along the last dimension. Inverse of :func:`afb`.

    Args:
        y: input Tensor whose last dimension has even length h, low-pass band
            first and high-pass band second
        g0: low-pass synthesis filter
        g1: high-pass synthesis filter
        normalize: if True, multiply the output by sqrt(2)

    Returns:
        Tensor of the same shape as y.
    """
    h = y.shape[-1]
    assert h % 2 == 0, f"synthesis needs an even length, got {h}"
    lo, hi = y[..., : h // 2], y[..., h // 2 :]
    # Upsampling by 2: band samples go to the odd positions.
    lo = torch.stack((torch.zeros_like(lo), lo), dim=-1).flatten(-2)
    hi = torch.stack((torch.zeros_like(hi), hi), dim=-1).flatten(-2)
    # Unlike the analysis, the filter window advances by one per output.
    positions = torch.arange(h, device=y.device)
    x = circ_accumulate(0, lo, g0, positions)
    x = circ_accumulate(x, hi, g1, positions)
    if normalize:
        x = x * np.sqrt(2)
    return x
