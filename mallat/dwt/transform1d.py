import numpy as np
import torch.nn

from mallat.dwt.coeffs import filter_bank
from mallat.dwt.filterbank import FilterBank
from mallat.dwt.lowlevel import prep_filt
from mallat.dwt.transform_funcs import dwt1d, idwt1d
from .utils import as_signal, even_bound, max_levels


class DWT(torch.nn.Module):
    """Configuration shared by the direct and inverse discrete wavelet
    transforms: a filter bank, a number of levels and a normalization flag.

    All three may be reassigned between calls. A single instance must not
    be reconfigured while a call on it is in flight.
    """

    def __init__(self, wavelet="haar", J=1, normalize=True):
        super().__init__()
        self.wavelet = wavelet
        self.J = J
        self.normalize = normalize

    @property
    def wavelet(self):
        """The :class:`~mallat.dwt.filterbank.FilterBank` in use. Can be set
        from a preset name or from a FilterBank."""
        return self._bank

    @wavelet.setter
    def wavelet(self, wavelet):
        if isinstance(wavelet, str):
            bank = filter_bank(wavelet)
        elif isinstance(wavelet, FilterBank):
            bank = wavelet
        else:
            raise TypeError(
                f"wavelet must be a preset name or a FilterBank, got {type(wavelet)}"
            )
        self._bank = bank

        # h0 is the low-pass analysis filter.
        # h1 is the high-pass analysis filter.
        # g0 is the low-pass synthesis filter.
        # g1 is the high-pass synthesis filter.
        filters = [prep_filt(taps) for taps in bank]
        if "h0" in self._buffers:
            filters = [h.to(self.h0.device) for h in filters]
        for name, h in zip(("h0", "h1", "g0", "g1"), filters):
            self.register_buffer(name, h)

    @property
    def J(self):
        """Requested number of levels. Transforms run on at most
        ``floor(log2(n))`` levels for a signal of length n."""
        return self._J

    @J.setter
    def J(self, J):
        if isinstance(J, bool) or not isinstance(J, (int, np.integer)):
            raise TypeError(f"J must be an int, got {type(J)}")
        if J < 1:
            raise ValueError(f"J must be greater or equal to 1, got {J}")
        self._J = int(J)

    def levels(self, n):
        """Number of levels actually run on a length-n signal."""
        return max_levels(n, self.J)

    def _configured(self, cls):
        return cls(wavelet=self.wavelet, J=self.J, normalize=self.normalize).to(
            self.h0.device
        )

    def extra_repr(self):
        return f"J={self.J}, normalize={self.normalize}"


class DWTDirect(DWT):
    """Performs a multilevel DWT forward decomposition of a PyTorch tensor
    along its last dimension, with circular boundary handling.

    Args:
        wavelet (str or FilterBank): preset name such as 'haar', 'db4',
            'sym8', 'coif2', 'bior2.2' or 'cdf9.7', or a FilterBank.
        J (int): Number of levels of decomposition. Default is 1. Values
            larger than log2 of the signal length are clamped.
        normalize (bool): If True (default), each level is scaled by a
            factor of 1/sqrt(2).
    """

    def forward(self, x):
        """Forward DWT of a 1-D signal.

        Args:
            x (PyTorch tensor): Input data of shape `(..., T)`, real or
                complex. Leading dimensions are transformed independently.
                Lengths need not be powers of two: at every level an odd
                trailing sample is carried over unchanged.

        Returns:
            y: a new tensor of the same shape. The coarsest low-pass band
                comes first, followed by the band-pass coefficients from the
                coarsest to the finest scale. See :meth:`bands`.
        """
        x = as_signal(x)
        return dwt1d(x, self.h0, self.h1, self.J, self.normalize)

    def bands(self, n):
        """
        Return the coefficient layout of a length-n decomposition.

        Returns:
            yl: slice of the coarsest low-pass band.
            yh: list of slices of the band-pass coefficients, one per level,
                from the finest (level 1) to the coarsest.
        """
        levels = self.levels(n)
        yh = []
        for j in range(levels):
            b = even_bound(n, j)
            yh.append(slice(b // 2, b))
        yl = slice(0, even_bound(n, levels - 1) // 2 if levels else n)
        return yl, yh

    def split(self, y):
        """Split a decomposition into its low-pass band and its list of
        band-pass bands (finest first). The bands are views of y."""
        yl, yh = self.bands(y.shape[-1])
        return y[..., yl], [y[..., s] for s in yh]

    def inverse(self):
        """Return a DWTInverse with the same configuration."""
        return self._configured(DWTInverse)


class DWTInverse(DWT):
    """Performs a multilevel DWT reconstruction of PyTorch tensors along their
    last dimension. DWTInverse should be initialized in the same manner as
    DWTDirect.

    Args: should be the same as DWTDirect.
        wavelet (str or FilterBank): preset name or FilterBank.
        J (int): Number of levels of decomposition. Default is 1.
        normalize (bool): If True (default), each level is scaled by a
            factor of sqrt(2).
    """

    def forward(self, y):
        """
        Args:
            y: coefficients packed as returned by DWTDirect, shape `(..., T)`.

        Returns:
            x: a new tensor of the same shape, the reconstructed signal.
        """
        y = as_signal(y)
        return idwt1d(y, self.g0, self.g1, self.J, self.normalize)

    def direct(self):
        """Return a DWTDirect with the same configuration."""
        return self._configured(DWTDirect)
