"""Unit tests for sample loading from text, JSON and stdin."""

import io
import sys

import pytest

from src.analyzer.loader import SampleFormatError, load_sample, parse_json, parse_text


def test_parse_text_separators_and_comments():
    text = "1, 2;3\n# heading comment\n\n4 5  # trailing\n-6.5e1\n"
    assert parse_text(text) == [1, 2, 3, 4, 5, -65]


def test_parse_text_reports_line_of_bad_token():
    with pytest.raises(SampleFormatError, match=r"data.txt:2"):
        parse_text("1 2\n3 oops\n", "data.txt")


@pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
def test_parse_text_rejects_non_finite(token):
    with pytest.raises(SampleFormatError):
        parse_text(f"1 {token}")


def test_parse_json_array():
    assert parse_json("[1, 2.5, -3]") == [1.0, 2.5, -3.0]


@pytest.mark.parametrize("text", ['{"a": 1}', "[1, true]", '[1, "2"]', "[1, [2]]", "[1,"])
def test_parse_json_rejects_non_numeric(text):
    with pytest.raises(SampleFormatError):
        parse_json(text)


def test_load_sample_text_file(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("3 1 2\n")
    assert load_sample(str(path)) == [3, 1, 2]


def test_load_sample_json_file(tmp_path):
    path = tmp_path / "values.json"
    path.write_text("[0.5, 1.5]")
    assert load_sample(str(path)) == [0.5, 1.5]


def test_load_sample_stdin(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("7\n8\n"))
    assert load_sample(None) == [7, 8]
    monkeypatch.setattr(sys, "stdin", io.StringIO("9"))
    assert load_sample("-") == [9]


def test_load_sample_missing_file(tmp_path):
    with pytest.raises(SampleFormatError):
        load_sample(str(tmp_path / "absent.txt"))
