"""Unit tests for describe and fmt_stat."""

import pytest

from src.stats.summary import describe, fmt_stat


def test_describe_collects_all_statistics():
    result = describe([4, 1, 2, 4, 3])
    assert result["count"] == 5
    assert result["min"] == 1
    assert result["max"] == 4
    assert result["mean"] == pytest.approx(2.8)
    assert result["median"] == 3
    assert result["variance"] == pytest.approx(1.36)
    assert result["std"] == pytest.approx(1.36 ** 0.5)
    assert result["iqr"] == pytest.approx(2.5)
    assert result["modes"] == [4]


def test_describe_empty_sample():
    result = describe([])
    assert result["count"] == 0
    assert result["min"] is None
    assert result["max"] is None
    assert result["mean"] == 0.0
    assert result["median"] == 0.0
    assert result["iqr"] is None
    assert result["modes"] == []


def test_describe_unsplittable_sample_has_no_iqr():
    assert describe([1, 2, 3])["iqr"] is None


def test_fmt_stat():
    assert fmt_stat([]) == "—"
    line = fmt_stat([1, 2, 3])
    assert line.startswith("2 ± ")
    assert "min=1" in line
    assert "max=3" in line
    assert line.endswith("(n=3)")
