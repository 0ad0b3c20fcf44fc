"""
Mallat: multilevel discrete wavelet transforms
==============================================

mallat is a Python module which implements periodized discrete wavelet
transforms in one and two dimensions, a catalog of classical filter banks,
and wavelet-domain band filters, within a differentiable computing
framework.
"""

# List of top-level public names.
__all__ = [
    "DWTDirect",
    "DWTInverse",
    "DWT2DDirect",
    "DWT2DInverse",
    "FilterBank",
    "WaveletFilter",
    "filter_bank",
]


# Submodule imports
from .dwt.bandfilter import WaveletFilter
from .dwt.coeffs import filter_bank
from .dwt.filterbank import FilterBank
from .dwt.transform1d import DWTDirect, DWTInverse
from .dwt.transform2d import DWT2DDirect, DWT2DInverse
from .version import version as __version__

# PyWavelets-like aliases
DWT1D = DWTDirect
IDWT = DWTInverse
DWT2D = DWT2DDirect
IDWT2D = DWT2DInverse
