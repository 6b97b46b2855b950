"""Unit tests for the matplotlib histogram chart."""

import pytest

from src.analyzer.plot import plot_histogram
from src.stats.histogram import histogram_bins


def test_plot_histogram_writes_png(tmp_path):
    bins = histogram_bins([1, 2, 3, 4, 5, 6, 7, 8], True)
    path = plot_histogram(bins, tmp_path / "charts" / "hist.png", rule="fd", mean=4.5, median=4.5, dpi=50)
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_histogram_without_markers(tmp_path):
    bins = histogram_bins([2, 4, 4, 4, 5, 5, 7, 9], False)
    path = plot_histogram(bins, tmp_path / "hist.png", rule="scott", dpi=50)
    assert path.stat().st_size > 0


def test_plot_histogram_rejects_empty(tmp_path):
    with pytest.raises(ValueError):
        plot_histogram([], tmp_path / "hist.png", rule="fd")
