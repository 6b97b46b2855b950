"""Central tendency and dispersion over a sample or a sorted sub-range.

Every function sorts a private copy of the sample first, so ``start`` and
``end`` always index into ascending order and the caller's data is never
touched. Leaving both bounds out selects the whole sample; on an empty
sample that form returns a zero default instead of raising.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from src.stats.errors import EmptySample, InvalidRange


def is_even(number: int) -> bool:
    return number % 2 == 0


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def ordered(sample: Iterable[float | int]) -> list[float]:
    return sorted(float(v) for v in sample)


def resolve_range(
    values: list[float],
    start: int | None,
    end: int | None,
    *,
    non_empty: bool = True,
) -> tuple[int, int]:
    """Fill in default bounds and check ``0 <= start <= end <= len(values)``.

    With *non_empty* the range must also hold at least one value.
    """
    size = len(values)
    if size == 0:
        raise EmptySample(f"range [{start}, {end}) requested over an empty sample")
    lo = 0 if start is None else start
    hi = size if end is None else end
    if lo < 0 or hi > size or lo > hi:
        raise InvalidRange(f"range [{lo}, {hi}) is outside a sample of {size} values")
    if non_empty and hi == lo:
        raise InvalidRange(f"range [{lo}, {hi}) is empty")
    return lo, hi


def _whole(sample_size: int, start: int | None, end: int | None) -> bool:
    return sample_size == 0 and start is None and end is None


def _mean(values: list[float], start: int, end: int) -> float:
    window = values[start:end]
    # Rounding can push the quotient just past the window extremes.
    return min(max(sum(window) / (end - start), window[0]), window[-1])


def mean(
    sample: Iterable[float | int],
    start: int | None = None,
    end: int | None = None,
) -> float:
    values = ordered(sample)
    if _whole(len(values), start, end):
        return 0.0
    lo, hi = resolve_range(values, start, end)
    return _mean(values, lo, hi)


def variance(
    sample: Iterable[float | int],
    mean: float | None = None,
    start: int | None = None,
    end: int | None = None,
) -> float:
    """Mean squared deviation from *mean* over ``[start, end)``.

    The divisor is the range length, less one when the range does not
    begin at the first value. That asymmetry is kept as-is for parity with
    existing results; a range starting past 0 therefore needs two values.
    """
    values = ordered(sample)
    if _whole(len(values), start, end):
        return 0.0
    lo, hi = resolve_range(values, start, end)
    center = _mean(values, lo, hi) if mean is None else mean

    count = hi - lo
    if lo > 0:
        count -= 1
    if count == 0:
        raise InvalidRange(f"range [{lo}, {hi}) leaves no degrees of freedom")
    return sum((v - center) ** 2 for v in values[lo:hi]) / count


def standard_deviation(
    sample: Iterable[float | int],
    start: int | None = None,
    end: int | None = None,
) -> float:
    values = ordered(sample)
    if _whole(len(values), start, end):
        return 0.0
    lo, hi = resolve_range(values, start, end)
    return math.sqrt(variance(values, _mean(values, lo, hi), lo, hi))


def median(
    sample: Iterable[float | int],
    start: int | None = None,
    end: int | None = None,
) -> float:
    values = ordered(sample)
    if _whole(len(values), start, end):
        return 0.0
    lo, hi = resolve_range(values, start, end)
    window = values[lo:hi]
    size = len(window)
    if is_even(size):
        mid = size // 2
        return (window[mid - 1] + window[mid]) / 2
    return window[round_half_away(size / 2) - 1]


def modes(
    sample: Iterable[float | int],
    start: int | None = None,
    end: int | None = None,
) -> set[float]:
    """Most frequent values, or an empty set when nothing repeats."""
    values = ordered(sample)
    if _whole(len(values), start, end):
        return set()
    lo, hi = resolve_range(values, start, end, non_empty=False)
    counts = Counter(values[lo:hi])
    if not counts:
        return set()
    top = max(counts.values())
    if top <= 1:
        return set()
    return {v for v, c in counts.items() if c == top}
