"""Unit tests for quartiles and iqr."""

import pytest

from src.stats.errors import EmptySample, InvalidRange
from src.stats.quartiles import iqr, quartiles


def test_even_sample_splits_in_half():
    assert quartiles([1, 2, 3, 4, 5, 6, 7, 8]) == (2.5, 6.5)
    assert iqr([1, 2, 3, 4, 5, 6, 7, 8]) == 4


def test_unsorted_input():
    assert iqr([8, 3, 5, 1, 7, 2, 6, 4]) == 4


def test_odd_sample_halves():
    """n=9: mid=5, lower half [1..4], upper half [7, 8, 9]."""
    assert quartiles(range(1, 10)) == (2.5, 8)
    assert iqr(range(1, 10)) == 5.5


def test_odd_sample_of_five():
    assert quartiles([1, 2, 3, 4, 5]) == (1.5, 5)


def test_two_values():
    assert iqr([3, 1]) == 2


def test_iqr_non_negative():
    assert iqr([4, 4, 4, 4]) == 0
    assert iqr([-10, 0.5, 3, 99, 12, -4]) >= 0


@pytest.mark.parametrize("sample", [[1], [1, 2, 3]])
def test_too_small_to_split_raises(sample):
    with pytest.raises(InvalidRange):
        iqr(sample)


def test_empty_sample_raises_empty_sample():
    with pytest.raises(EmptySample):
        iqr([])
