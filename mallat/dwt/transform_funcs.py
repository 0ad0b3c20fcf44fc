import torch
from mallat.dwt.lowlevel import afb, sfb
from mallat.dwt.utils import max_levels, even_bound


def put_prefix(y, block):
    """Return a copy of *y* whose leading samples along the last dimension
    are replaced by *block*."""
    b = block.shape[-1]
    return torch.cat((block, y[..., b:]), dim=-1)


def put_block(y, block):
    """Return a copy of *y* whose top-left corner along the last two
    dimensions is replaced by *block*."""
    b1, b2 = block.shape[-2:]
    top = torch.cat((block, y[..., :b1, b2:]), dim=-1)
    return torch.cat((top, y[..., b1:, :]), dim=-2)


def dwt1d(x, h0, h1, J, normalize):
    """
    Forward multilevel DWT along the last dimension.

    Level j (counting from 0) transforms the leading ``n >> j`` samples,
    rounded down to even, and leaves the rest of the buffer untouched. The
    output is packed as a Mallat pyramid: coarsest approximation first,
    followed by the details from the coarsest to the finest level.

    Args:
        x: input Tensor of shape (..., n)
        h0: low-pass analysis filter
        h1: high-pass analysis filter
        J: requested number of levels, clamped to floor(log2(n))
        normalize: if True, each level is scaled by 1/sqrt(2)

    Returns:
        Tensor of shape (..., n)
    """
    n = x.shape[-1]
    y = x.clone()
    for j in range(max_levels(n, J)):
        b = even_bound(n, j)
        y = put_prefix(y, afb(y[..., :b], h0, h1, normalize))
    return y


def idwt1d(y, g0, g1, J, normalize):
    """
    Inverse multilevel DWT along the last dimension. Inverse of :func:`dwt1d`
    with the same J and normalization.

    Level j (counting from J down to 1) reconstructs the leading
    ``2 * (n >> j)`` samples from their two bands.
    """
    n = y.shape[-1]
    x = y.clone()
    for j in range(max_levels(n, J), 0, -1):
        h = (n >> j) << 1
        x = put_prefix(x, sfb(x[..., :h], g0, g1, normalize))
    return x


def dwt2d(x, h0, h1, J, normalize):
    """
    Forward multilevel separable DWT along the last two dimensions.

    At each level, the active block of every row is transformed, then the
    active block of every column. Both extents shrink independently and
    are rounded down to even independently. The number of levels is
    limited by the smaller extent.

    Args:
        x: input Tensor of shape (..., n1, n2)
        h0: low-pass analysis filter
        h1: high-pass analysis filter
        J: requested number of levels
        normalize: if True, each 1-D pass is scaled by 1/sqrt(2)

    Returns:
        Tensor of shape (..., n1, n2)
    """
    n1, n2 = x.shape[-2:]
    y = x.clone()
    for j in range(min(max_levels(n1, J), max_levels(n2, J))):
        b1, b2 = even_bound(n1, j), even_bound(n2, j)
        block = afb(y[..., :b1, :b2], h0, h1, normalize)
        block = afb(block.transpose(-1, -2), h0, h1, normalize).transpose(-1, -2)
        y = put_block(y, block)
    return y


def idwt2d(y, g0, g1, J, normalize):
    """
    Inverse multilevel separable DWT along the last two dimensions. Inverse
    of :func:`dwt2d` with the same J and normalization.
    """
    n1, n2 = y.shape[-2:]
    x = y.clone()
    for j in range(min(max_levels(n1, J), max_levels(n2, J)), 0, -1):
        h1, h2 = (n1 >> j) << 1, (n2 >> j) << 1
        block = sfb(x[..., :h1, :h2], g0, g1, normalize)
        block = sfb(block.transpose(-1, -2), g0, g1, normalize).transpose(-1, -2)
        x = put_block(x, block)
    return x
