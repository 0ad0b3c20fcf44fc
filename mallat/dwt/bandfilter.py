import logging

import torch.nn

from mallat.dwt.transform1d import DWTDirect
from mallat.dwt.transform2d import DWT2DDirect
from .utils import as_signal, crop, extend, max_levels, normalize_mode, transform_length


class WaveletFilter(torch.nn.Module):
    """Scales every band of a wavelet decomposition except the coarsest
    approximation, then reconstructs.

    The input is first extended on every side by a fraction ``accuracy`` of
    its (smallest) extent, up to a length that decomposes without dropping
    samples. The result is cropped back to the original extent. With the
    default ``factor=-1`` all detail bands are zeroed, which amounts to a
    low-pass filter whose cutoff is set by the number of levels J of the
    transform.

    Args:
        dwt (DWTDirect or DWT2DDirect): the transform. Its type decides
            whether the filter acts on the last dimension or on the last two.
        factor (float): detail coefficients are multiplied by ``1 + factor``.
            Default is -1.
        accuracy (float): padding fraction, clamped into [0, 1]. Default is
            0.1.
        padding_mode (str): 'symmetric' (default), 'zeros', 'constant',
            'replicate' or 'circular'. Used to extend the input.
    """

    def __init__(self, dwt, factor=-1.0, accuracy=0.1, padding_mode="symmetric"):
        super().__init__()
        if not isinstance(dwt, (DWTDirect, DWT2DDirect)):
            raise TypeError(
                f"dwt must be a DWTDirect or a DWT2DDirect, got {type(dwt)}"
            )
        self.dwt = dwt
        self.factor = factor
        self.accuracy = accuracy
        self.padding_mode = padding_mode

    @property
    def accuracy(self):
        return self._accuracy

    @accuracy.setter
    def accuracy(self, accuracy):
        self._accuracy = min(max(float(accuracy), 0.0), 1.0)

    @property
    def padding_mode(self):
        return self._padding_mode

    @padding_mode.setter
    def padding_mode(self, padding_mode):
        self._padding_mode = normalize_mode(padding_mode)

    @property
    def ndim(self):
        """Number of trailing dimensions the filter acts on."""
        return 2 if isinstance(self.dwt, DWT2DDirect) else 1

    def sizes(self, shape):
        """
        Return the extended extents and the extents of the coarsest
        approximation block for an input of the given trailing shape.
        """
        J = self.dwt.J
        delta = int(min(shape) * self.accuracy)
        extended = tuple(transform_length(n + 2 * delta, J) for n in shape)
        levels = max_levels(min(extended), J)
        coarsest = tuple(r >> levels for r in extended)
        logging.debug(
            "WaveletFilter.sizes: extending %s to %s over %d levels",
            tuple(shape),
            extended,
            levels,
        )
        return extended, coarsest

    def scales(self, extended, coarsest, x):
        """Multiplier of every coefficient: 1 inside the coarsest block,
        ``1 + factor`` elsewhere."""
        dtype = x.real.dtype
        mask = torch.full(extended, 1.0 + self.factor, dtype=dtype, device=x.device)
        mask[tuple(slice(0, p) for p in coarsest)] = 1.0
        return mask

    def emphasize(self, x):
        """Extend and transform *x*, then scale its detail bands."""
        shape = x.shape[-self.ndim :]
        assert len(shape) == self.ndim, f"expected {self.ndim} dimensions"
        extended, coarsest = self.sizes(shape)
        for k, size in enumerate(extended):
            x = extend(x, size, dim=k - self.ndim, padding_mode=self.padding_mode)
        wave = self.dwt(x)
        return wave * self.scales(extended, coarsest, wave)

    def reconstruct(self, wave, shape):
        """Invert *wave* and crop the centre back to *shape*."""
        y = self.dwt.inverse()(wave)
        for k, size in enumerate(shape):
            y = crop(y, size, dim=k - self.ndim)
        return y

    def forward(self, x):
        """
        Args:
            x (PyTorch tensor or list of tensors): a signal of shape
                `(..., T)` (or `(..., H, W)` for a 2-D transform). A list or
                tuple of same-shaped signals is blended, see :meth:`blend`.

        Returns:
            y: a new tensor of the same shape as x. x is not modified.
        """
        if isinstance(x, (list, tuple)):
            return self.blend(x)
        x = as_signal(x)
        return self.reconstruct(self.emphasize(x), x.shape[-self.ndim :])

    def blend(self, xs):
        """Ensemble mean of same-shaped signals, computed in the wavelet
        domain with the same band scaling. Returns a new tensor."""
        if len(xs) == 0:
            raise ValueError("blend needs at least one input")
        xs = [as_signal(x) for x in xs]
        shape = xs[0].shape
        for x in xs[1:]:
            if x.shape != shape:
                raise ValueError(
                    f"all inputs must have the same shape, got {tuple(shape)} "
                    f"and {tuple(x.shape)}"
                )
        logging.debug("WaveletFilter.blend: averaging %d inputs", len(xs))
        total = 0
        for x in xs:
            total = total + self.emphasize(x) / len(xs)
        return self.reconstruct(total, shape[-self.ndim :])

    def apply_(self, x):
        """In-place version of :meth:`forward`: writes the filtered signal
        into the floating point tensor x and returns x."""
        assert torch.is_tensor(x) and (x.is_floating_point() or x.is_complex())
        return x.copy_(self.forward(x))

    def extra_repr(self):
        return (
            f"factor={self.factor}, accuracy={self.accuracy}, "
            f"padding_mode={self.padding_mode!r}"
        )
