"""Fixed-count trimming of the extreme values of a sample."""

from __future__ import annotations

from collections.abc import Iterable

from src.stats.errors import InvalidRange


def remove_outliers(
    sample: Iterable[float | int],
    lowest: int,
    highest: int,
) -> list[float | int]:
    """Drop the *lowest* smallest and *highest* largest values.

    Targets are picked by position in a sorted copy, then one occurrence of
    each target value is removed from the sample in its original order.
    With ties the occurrence removed is the first equal one, not
    necessarily the one that sorted into the trimmed position.
    """
    working = list(sample)
    size = len(working)
    if lowest < 0 or highest < 0:
        raise InvalidRange(f"trim counts must be non-negative, got {lowest} and {highest}")
    if lowest + highest > size:
        raise InvalidRange(
            f"cannot trim {lowest} + {highest} values from a sample of {size}"
        )

    ranked = sorted(working)
    targets = ranked[:lowest] + ranked[size - highest:]
    for value in targets:
        working.remove(value)
    return working
