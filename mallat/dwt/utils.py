import logging

import numpy as np
import torch


PADDING_MODES = ("symmetric", "constant", "replicate", "circular")


def log2(n):
    """Integer part of the base-2 logarithm of a positive length *n*."""
    return int(n).bit_length() - 1


def max_levels(n, J):
    """Number of levels a transform with *J* levels actually runs on a
    length-*n* signal. Requests deeper than ``floor(log2(n))`` are clamped."""
    if n < 1:
        return 0
    levels = min(log2(n), J)
    if levels < J:
        logging.debug("max_levels: clamping J=%d to %d (length %d)", J, levels, n)
    return levels


def even_bound(n, level):
    """Active length of a length-*n* buffer at decomposition *level*,
    rounded down to an even number of samples."""
    b = n >> level
    return b - (b % 2)


def transform_length(n, J):
    """Smallest length ``r >= n`` that decomposes over ``min(log2(r), J)``
    levels without dropping odd trailing samples.

    The length is rounded up to even and halved once per level, then scaled
    back by the same power of two.
    """
    levels = min(log2(n), J) if n >= 1 else 0
    s = n
    for _ in range(levels):
        if s >= 2:
            if s % 2 != 0:
                s = s + 1
            s = s // 2
    return s * 2 ** levels


def reflect(x, minx, maxx):
    """Reflect the values in matrix *x* about the scalar values *minx* and
    *maxx*.  Hence a vector *x* containing a long linearly increasing series is
    converted into a waveform which ramps linearly up and down between *minx*
    and *maxx*.  If *x* contains integers and *minx* and *maxx* are (integers +
    0.5), the ramps will have repeated max and min samples.

    Adapted from Rich Wareham's dtcwt NumPy library (2013), which in turn was
    adapted from Nick Kingsbury's MATLAB implementation (1999).
    """
    rng = maxx - minx
    rng_by_2 = 2 * rng
    mod = torch.remainder(x - minx, rng_by_2)
    normed_mod = torch.where(mod < 0, mod + rng_by_2, mod)
    out = torch.where(normed_mod >= rng, rng_by_2 - normed_mod, normed_mod) + minx
    return out.long()


def normalize_mode(padding_mode):
    """Map user-facing padding names onto the names used by :func:`extend`."""
    if padding_mode == "zeros":
        return "constant"
    if padding_mode not in PADDING_MODES:
        raise ValueError("Unkown pad type: {}".format(padding_mode))
    return padding_mode


def extend(x, size, dim=-1, padding_mode="symmetric"):
    """
    Extend the tensor x to length *size* along *dim*, keeping the original
    samples centred. The left margin is ``(size - n) // 2``.

    Args:
        x is the input Tensor
        size is the extended length (not smaller than the current length)
        dim is the dimension to extend
        padding_mode: 'constant', 'symmetric', 'replicate' or 'circular'
    """
    padding_mode = normalize_mode(padding_mode)
    n = x.shape[dim]
    assert size >= n, f"cannot extend length {n} to {size}"
    left = (size - n) // 2
    positions = torch.arange(-left, size - left, device=x.device)
    if padding_mode == "constant":
        shape = list(x.shape)
        shape[dim] = size
        out = x.new_zeros(shape)
        out.narrow(dim, left, n).copy_(x)
        return out
    if padding_mode == "symmetric":
        idx = reflect(positions, -0.5, n - 0.5)
    elif padding_mode == "replicate":
        idx = positions.clamp(0, n - 1)
    else:
        idx = torch.remainder(positions, n)
    return x.index_select(dim, idx)


def crop(x, size, dim=-1):
    """Cut the centred window of length *size* out of *x* along *dim*.
    Inverse of :func:`extend`."""
    n = x.shape[dim]
    assert size <= n, f"cannot crop length {n} to {size}"
    return x.narrow(dim, (n - size) // 2, size)


def as_signal(x):
    """Return *x* as a floating point or complex PyTorch tensor. Python
    sequences and NumPy arrays are converted in double precision and integer
    tensors are cast to float64."""
    if not torch.is_tensor(x):
        x = torch.as_tensor(np.asarray(x))
    if not (x.is_floating_point() or x.is_complex()):
        x = x.to(torch.float64)
    return x
