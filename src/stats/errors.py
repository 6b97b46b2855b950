"""Error kinds raised by the statistics helpers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_RANGE = "invalid_range"
    DEGENERATE_BANDWIDTH = "degenerate_bandwidth"
    EMPTY_SAMPLE = "empty_sample"


class StatisticsError(ValueError):
    """Base class; ``kind`` tells callers which rule was violated."""

    kind: ErrorKind


class InvalidRange(StatisticsError):
    """A ``(start, end)`` selector or trim count falls outside the sample."""

    kind = ErrorKind.INVALID_RANGE


class EmptySample(InvalidRange):
    """An explicit range was requested over a zero-length sample."""

    kind = ErrorKind.EMPTY_SAMPLE


class DegenerateBandwidth(StatisticsError):
    """The bin width resolved to zero or less."""

    kind = ErrorKind.DEGENERATE_BANDWIDTH
