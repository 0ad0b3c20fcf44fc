from typing import NamedTuple, Tuple


def invert_odds(v):
    """Return a copy of the tap sequence *v* with odd-indexed entries negated."""
    return tuple(-c if i % 2 else c for i, c in enumerate(v))


def invert_evens(v):
    """Return a copy of the tap sequence *v* with even-indexed entries negated."""
    return tuple(c if i % 2 else -c for i, c in enumerate(v))


class FilterBank(NamedTuple):
    """Perfect-reconstruction filter quadruple.

    Attributes:
        dec_lo (tuple of float): analysis low-pass taps (scaling function).
        dec_hi (tuple of float): analysis high-pass taps (wavelet function).
        rec_lo (tuple of float): synthesis low-pass taps.
        rec_hi (tuple of float): synthesis high-pass taps.

    The tap order is the convolution order used by the transform. Low-pass
    and high-pass pairs may have different lengths. Instances are immutable
    and compare structurally.
    """

    dec_lo: Tuple[float, ...]
    dec_hi: Tuple[float, ...]
    rec_lo: Tuple[float, ...]
    rec_hi: Tuple[float, ...]

    @classmethod
    def from_scaling(cls, scaling):
        """Orthogonal filter bank from a scaling sequence alone.

        The wavelet is the flipped scaling sequence with its odd entries
        inverted, and both synthesis filters are the time-reversed analysis
        filters.
        """
        lo = tuple(float(c) for c in scaling)
        hi = invert_odds(lo[::-1])
        return cls(lo, hi, lo[::-1], hi[::-1])

    @classmethod
    def from_pair(cls, scaling, wavelet):
        """Biorthogonal filter bank from explicit scaling and wavelet sequences.

        The synthesis low-pass is the wavelet with its even entries inverted
        and the synthesis high-pass is the scaling sequence with its odd
        entries inverted. Note that this is not the rule used by
        :meth:`from_scaling`, even when ``wavelet`` is derived from
        ``scaling``.
        """
        lo = tuple(float(c) for c in scaling)
        hi = tuple(float(c) for c in wavelet)
        return cls(lo, hi, invert_evens(hi), invert_odds(lo))

    @classmethod
    def from_bands(cls, lo, hi):
        """Filter bank from explicit analysis filters, synthesized by time reversal."""
        lo = tuple(float(c) for c in lo)
        hi = tuple(float(c) for c in hi)
        return cls(lo, hi, lo[::-1], hi[::-1])
