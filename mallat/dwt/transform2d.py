from mallat.dwt.transform1d import DWT
from mallat.dwt.transform_funcs import dwt2d, idwt2d
from .utils import as_signal, max_levels


class DWT2DBase(DWT):
    """Configuration of the separable two-dimensional transforms. The number
    of levels is limited by the smaller of the two extents."""

    def levels(self, shape):
        """Number of levels actually run on an image of the given shape."""
        n1, n2 = shape
        return min(max_levels(n1, self.J), max_levels(n2, self.J))


class DWT2DDirect(DWT2DBase):
    """Performs a multilevel separable DWT of a PyTorch tensor along its last
    two dimensions. At every level the rows of the active block are
    transformed first, then its columns.

    Args:
        wavelet (str or FilterBank): preset name or FilterBank.
        J (int): Number of levels of decomposition. Default is 1.
        normalize (bool): If True (default), each 1-D pass is scaled by a
            factor of 1/sqrt(2).
    """

    def forward(self, x):
        """
        Args:
            x (PyTorch tensor): Input data of shape `(..., H, W)`.

        Returns:
            y: a new tensor of the same shape holding the 2-D Mallat pyramid,
                with the coarsest approximation in the top-left corner.
        """
        x = as_signal(x)
        assert x.ndim >= 2, f"expected at least 2 dimensions, got {x.ndim}"
        return dwt2d(x, self.h0, self.h1, self.J, self.normalize)

    def inverse(self):
        """Return a DWT2DInverse with the same configuration."""
        return self._configured(DWT2DInverse)


class DWT2DInverse(DWT2DBase):
    """Performs a multilevel separable DWT reconstruction along the last two
    dimensions. Should be initialized in the same manner as DWT2DDirect."""

    def forward(self, y):
        y = as_signal(y)
        assert y.ndim >= 2, f"expected at least 2 dimensions, got {y.ndim}"
        return idwt2d(y, self.g0, self.g1, self.J, self.normalize)

    def direct(self):
        """Return a DWT2DDirect with the same configuration."""
        return self._configured(DWT2DDirect)
