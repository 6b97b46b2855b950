"""Quartiles and interquartile range."""

from __future__ import annotations

import math
from collections.abc import Iterable

from src.stats.descriptive import is_even, median, ordered


def quartiles(sample: Iterable[float | int]) -> tuple[float, float]:
    """Return ``(lower, upper)`` quartiles as medians of the two halves.

    An even sample splits at ``n/2``. An odd sample uses ``mid = ceil(n/2)``
    and takes ``[0, mid - 1)`` and ``[mid + 1, n)``, so the middle value is
    left out of both halves. Samples too small to split raise
    :class:`~src.stats.errors.InvalidRange` from the median calls.
    """
    values = ordered(sample)
    size = len(values)
    if is_even(size):
        mid = size // 2
        return median(values, 0, mid), median(values, mid, size)
    mid = math.ceil(size / 2)
    return median(values, 0, mid - 1), median(values, mid + 1, size)


def iqr(sample: Iterable[float | int]) -> float:
    lower, upper = quartiles(sample)
    return upper - lower
