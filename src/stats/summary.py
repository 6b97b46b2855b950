"""One-shot summaries built from the descriptive helpers."""

from __future__ import annotations

from collections.abc import Iterable

from src.stats.descriptive import mean, median, modes, ordered, standard_deviation, variance
from src.stats.errors import InvalidRange
from src.stats.quartiles import iqr


def describe(sample: Iterable[float | int]) -> dict:
    """Collect every statistic for *sample* into a JSON-friendly dict.

    ``iqr`` is ``None`` when the sample is too small to split into halves.
    """
    values = ordered(sample)
    try:
        spread: float | None = iqr(values)
    except InvalidRange:
        spread = None
    return {
        "count": len(values),
        "min": values[0] if values else None,
        "max": values[-1] if values else None,
        "mean": mean(values),
        "median": median(values),
        "variance": variance(values),
        "std": standard_deviation(values),
        "iqr": spread,
        "modes": sorted(modes(values)),
    }


def fmt_stat(v: Iterable[float | int]) -> str:
    """Full stats: mean +/- sigma  [min, med, max]  (n=...)."""
    v = ordered(v)
    if not v:
        return "—"
    return (
        f"{mean(v):,.3g} ± {standard_deviation(v):,.3g}"
        f"  [min={v[0]:,.3g}, med={median(v):,.3g}, max={v[-1]:,.3g}]"
        f"  (n={len(v)})"
    )
