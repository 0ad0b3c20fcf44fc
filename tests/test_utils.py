import pytest
import torch

from mallat.dwt.utils import *


@pytest.mark.parametrize(
    "n,J,expected", [(16, 10, 4), (17, 2, 2), (100, 3, 3), (1, 3, 0), (0, 1, 0)]
)
def test_max_levels(n, J, expected):
    assert max_levels(n, J) == expected


@pytest.mark.parametrize(
    "n,J,expected", [(100, 3, 104), (64, 10, 64), (7, 2, 8), (120, 3, 120), (1, 4, 1)]
)
def test_transform_length(n, J, expected):
    assert transform_length(n, J) == expected


@pytest.mark.parametrize("n", [5, 64, 97, 1000])
@pytest.mark.parametrize("J", [1, 3, 6])
def test_transform_length_no_carry(n, J):
    r = transform_length(n, J)
    assert r >= n
    for j in range(min(log2(n), J)):
        assert (r >> j) % 2 == 0


@pytest.mark.parametrize(
    "padding_mode,expected",
    [
        ("symmetric", [1, 0, 0, 1, 2, 3, 3, 2]),
        ("replicate", [0, 0, 0, 1, 2, 3, 3, 3]),
        ("circular", [2, 3, 0, 1, 2, 3, 0, 1]),
        ("constant", [0, 0, 0, 1, 2, 3, 0, 0]),
        ("zeros", [0, 0, 0, 1, 2, 3, 0, 0]),
    ],
)
def test_extend(padding_mode, expected):
    x = torch.arange(4, dtype=torch.float64)
    y = extend(x, 8, padding_mode=padding_mode)
    assert torch.equal(y, torch.tensor(expected, dtype=torch.float64))


@pytest.mark.parametrize("padding_mode", ["symmetric", "replicate", "circular", "zeros"])
@pytest.mark.parametrize("dim", [-1, -2])
@pytest.mark.parametrize("size", [13, 20, 45])
def test_crop_extend(padding_mode, dim, size):
    x = torch.randn(3, 13, 13)
    y = extend(x, size, dim=dim, padding_mode=padding_mode)
    assert y.shape[dim] == size
    assert torch.equal(crop(y, 13, dim=dim), x)


def test_bad_padding_mode():
    with pytest.raises(ValueError):
        extend(torch.zeros(4), 8, padding_mode="periodic")


def test_reflect():
    x = torch.arange(-3, 7)
    y = reflect(x, -0.5, 3.5)
    assert y.tolist() == [2, 1, 0, 0, 1, 2, 3, 3, 2, 1]


def test_as_signal():
    assert as_signal([1, 2, 3]).dtype == torch.float64
    assert as_signal([1j, 2]).dtype == torch.complex128
    assert as_signal(torch.arange(3)).dtype == torch.float64
    x = torch.zeros(3, dtype=torch.float32)
    assert as_signal(x) is x
