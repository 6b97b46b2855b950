"""Adaptive histogram binning (Freedman–Diaconis or Scott's rule)."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.common.constants import FD_COEFFICIENT, MAX_BINS, SCOTT_COEFFICIENT
from src.stats.descriptive import ordered, resolve_range, standard_deviation
from src.stats.errors import DegenerateBandwidth
from src.stats.quartiles import iqr


@dataclass(frozen=True)
class HistogramBin:
    """One bin of a histogram; ``bin_count`` excludes values on either edge."""

    bin_start: float
    bin_stop: float
    x_value: float               # midpoint of the bin
    bin_count: int

    @property
    def width(self) -> float:
        return self.bin_stop - self.bin_start


def bandwidth(
    sample: Iterable[float | int],
    use_freedman_diaconis: bool,
    start: int | None = None,
    end: int | None = None,
) -> float:
    """Bin width ``h`` for the sorted range ``[start, end)``.

    Freedman–Diaconis uses the IQR of the whole sample, Scott's rule the
    standard deviation of the range; both divide by the cube root of the
    range size. The raw width is returned, zero included.
    """
    values = ordered(sample)
    lo, hi = resolve_range(values, start, end)
    n = hi - lo
    if use_freedman_diaconis:
        spread = FD_COEFFICIENT * iqr(values)
    else:
        spread = SCOTT_COEFFICIENT * standard_deviation(values, lo, hi)
    return spread / n ** (1.0 / 3)


def histogram_bins(
    sample: Iterable[float | int],
    use_freedman_diaconis: bool = True,
    start: int | None = None,
    end: int | None = None,
) -> list[HistogramBin]:
    """Lay out ``ceil(range / h)`` bins of width ``h`` centred on the data.

    The bandwidth comes from ``[start, end)`` but the grid always spans the
    whole sample, overhanging both extremes by the same amount. Counts use
    strict inequality, so a value sitting exactly on an edge lands in no
    bin. An empty sample yields no bins. A width so narrow that covering the
    range would take more than ``MAX_BINS`` bins is rejected as degenerate.
    """
    values = ordered(sample)
    if not values:
        return []

    h = bandwidth(values, use_freedman_diaconis, start, end)
    if not h > 0:
        raise DegenerateBandwidth(f"bin width resolved to {h}")

    data_range = values[-1] - values[0]
    span = data_range / h
    if not math.isfinite(span) or span > MAX_BINS:
        raise DegenerateBandwidth(
            f"bin width {h:.3g} splits a range of {data_range:.3g} into more than {MAX_BINS} bins"
        )
    k = math.ceil(span)
    bin_offset = (h * k - data_range) / 2

    bins: list[HistogramBin] = []
    bin_start = values[0] - bin_offset
    for _ in range(k):
        bin_stop = bin_start + h
        count = bisect_left(values, bin_stop) - bisect_right(values, bin_start)
        bins.append(
            HistogramBin(
                bin_start=bin_start,
                bin_stop=bin_stop,
                x_value=(bin_start + bin_stop) / 2,
                bin_count=count,
            )
        )
        bin_start = bin_stop
    return bins


def boundary_values(sample: Iterable[float | int], bins: Sequence[HistogramBin]) -> int:
    """Number of sample values not counted by any of *bins*."""
    values = list(sample)
    return len(values) - sum(b.bin_count for b in bins)
