import math

import numpy as np
import pytest
import pywt

import mallat
from mallat.dwt.coeffs import filter_bank, names
from mallat.dwt.filterbank import FilterBank, invert_evens, invert_odds


D2 = (
    "4.829629131445341433748715998644486838169524195042022752011715e-01",
    "8.365163037378079055752937809168732034593703883484392934953414e-01",
    "2.241438680420133810259727622404003554678835181842717613871683e-01",
    "-1.294095225512603811744494188120241641745344506599652569070016e-01",
)


def test_d2_literal():
    assert filter_bank("D2").dec_lo == tuple(float(c) for c in D2)


def test_invert():
    assert invert_odds([1.0, 2.0, 3.0]) == (1.0, -2.0, 3.0)
    assert invert_evens([1.0, 2.0, 3.0]) == (-1.0, 2.0, -3.0)


def test_from_scaling():
    bank = FilterBank.from_scaling([1.0, 2.0, 3.0, 4.0])
    assert bank.dec_lo == (1.0, 2.0, 3.0, 4.0)
    assert bank.dec_hi == (4.0, -3.0, 2.0, -1.0)
    assert bank.rec_lo == (4.0, 3.0, 2.0, 1.0)
    assert bank.rec_hi == (-1.0, 2.0, -3.0, 4.0)


def test_from_pair():
    bank = FilterBank.from_pair([1.0, 2.0], [3.0, 4.0, 5.0])
    assert bank.dec_lo == (1.0, 2.0)
    assert bank.dec_hi == (3.0, 4.0, 5.0)
    assert bank.rec_lo == (-3.0, 4.0, -5.0)
    assert bank.rec_hi == (1.0, -2.0)


def test_from_bands():
    bank = FilterBank.from_bands([1.0, 2.0], [3.0, 4.0])
    assert bank == ((1.0, 2.0), (3.0, 4.0), (2.0, 1.0), (4.0, 3.0))


def test_immutable():
    bank = filter_bank("haar")
    with pytest.raises(AttributeError):
        bank.dec_lo = (1.0,)
    assert filter_bank("haar") == bank
    assert filter_bank("haar") is not bank


@pytest.mark.parametrize(
    "alias,name",
    [
        ("D2", "db2"),
        ("d10", "db10"),
        ("C3", "coif3"),
        ("S8", "sym8"),
        ("L3", "leg3"),
        ("F6", "fk6"),
        ("Bior22", "bior2.2"),
        ("CDF97", "cdf9.7"),
        ("Fbsp103", "fbsp1-0-3"),
        ("S1", "haar"),
        ("L1", "haar"),
        ("CDF11", "bior1.1"),
        ("sym1", "haar"),
        ("HAAR", "haar"),
        ("Meyer", "meyer"),
    ],
)
def test_aliases(alias, name):
    assert filter_bank(alias) == filter_bank(name)


def test_unknown():
    with pytest.raises(ValueError):
        filter_bank("D0")
    with pytest.raises(ValueError):
        filter_bank("mexican")
    with pytest.raises(TypeError):
        filter_bank(2)


@pytest.mark.parametrize("name", names())
def test_every_preset(name):
    bank = filter_bank(name)
    assert isinstance(bank, FilterBank)
    assert len(bank.dec_lo) == len(bank.rec_hi)
    assert len(bank.dec_hi) == len(bank.rec_lo)
    assert all(len(taps) > 0 for taps in bank)


def test_catalog_size():
    assert len(names()) >= 60
    assert mallat.filter_bank is filter_bank


def test_names_include_aliases():
    assert names() == sorted(names())
    assert {"haar", "sym1", "leg1", "cdf1.1", "bior1.1"} <= set(names())
    assert filter_bank("sym1") == filter_bank("haar")


@pytest.mark.parametrize(
    "name",
    ["db{}".format(k) for k in range(1, 21)]
    + ["sym{}".format(k) for k in range(2, 11)]
    + ["coif{}".format(k) for k in range(1, 5)],
)
def test_same_as_pywt(name):
    ours = np.array(filter_bank(name).dec_lo)
    ref = pywt.Wavelet(name)
    # Tap order differs between conventions: compare up to time reversal.
    assert np.allclose(ours, ref.dec_lo, atol=1e-9) or np.allclose(
        ours, ref.rec_lo, atol=1e-9
    )


@pytest.mark.parametrize(
    "name",
    ["haar"]
    + ["db{}".format(k) for k in range(1, 39)]
    + ["sym{}".format(k) for k in range(2, 21)]
    + ["coif{}".format(k) for k in range(1, 5)],
)
def test_orthonormal(name):
    lo = np.array(filter_bank(name).dec_lo)
    assert abs(lo.sum() - math.sqrt(2)) < 1e-9
    assert abs(np.dot(lo, lo) - 1) < 1e-9
    for m in range(1, len(lo) // 2):
        assert abs(np.dot(lo[2 * m :], lo[: -2 * m])) < 1e-9
