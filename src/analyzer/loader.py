"""Reading samples from text/JSON files or stdin."""

from __future__ import annotations

import json
import math
import re
import sys
from pathlib import Path

_SEPARATORS = re.compile(r"[\s,;]+")


class SampleFormatError(ValueError):
    """Input could not be read as a flat list of finite numbers."""


def _to_number(token: str, where: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise SampleFormatError(f"{where}: not a number: {token!r}") from None
    if not math.isfinite(value):
        raise SampleFormatError(f"{where}: non-finite value: {token!r}")
    return value


def parse_text(text: str, source: str = "<text>") -> list[float]:
    """Numbers separated by whitespace, commas or semicolons; ``#`` comments."""
    values: list[float] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        for token in _SEPARATORS.split(line):
            if token:
                values.append(_to_number(token, f"{source}:{lineno}"))
    return values


def parse_json(text: str, source: str = "<json>") -> list[float]:
    """A flat JSON array of numbers."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SampleFormatError(f"{source}: invalid JSON ({exc})") from exc
    if not isinstance(data, list):
        raise SampleFormatError(f"{source}: expected a JSON array, got {type(data).__name__}")

    values: list[float] = []
    for idx, item in enumerate(data):
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise SampleFormatError(f"{source}[{idx}]: not a number: {item!r}")
        values.append(_to_number(str(item), f"{source}[{idx}]"))
    return values


def load_sample(source: str | None = None) -> list[float]:
    """Load a sample from *source*, or from stdin when it is ``None``/``"-"``."""
    if source is None or source == "-":
        return parse_text(sys.stdin.read(), "<stdin>")

    path = Path(source)
    try:
        text = path.read_text()
    except OSError as exc:
        raise SampleFormatError(f"{source}: {exc.strerror or exc}") from exc
    if path.suffix.lower() == ".json":
        return parse_json(text, source)
    return parse_text(text, source)
