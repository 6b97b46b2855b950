"""Histogram chart rendering with matplotlib."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import matplotlib.ticker as ticker  # noqa: E402
import numpy as np  # noqa: E402

from src.common.constants import PLOT_DPI, RULE_LABELS  # noqa: E402
from src.stats.histogram import HistogramBin  # noqa: E402

# Palette
COLOR_BARS = "#2980b9"
COLOR_MEAN = "#e74c3c"
COLOR_MEDIAN = "#27ae60"


def plot_histogram(
    bins: list[HistogramBin],
    path: Path,
    *,
    rule: str,
    mean: float | None = None,
    median: float | None = None,
    title: str = "Sample distribution",
    dpi: int = PLOT_DPI,
) -> Path:
    """Draw *bins* as a bar chart with optional mean/median markers."""
    if not bins:
        raise ValueError("nothing to plot: histogram has no bins")

    x = np.array([b.x_value for b in bins])
    counts = np.array([b.bin_count for b in bins])
    widths = np.array([b.width for b in bins])

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(x, counts, widths, color=COLOR_BARS, edgecolor="black", linewidth=0.5, alpha=0.85)

    if mean is not None:
        ax.axvline(mean, color=COLOR_MEAN, linewidth=1.5, linestyle="--", label=f"mean = {mean:,.4g}")
    if median is not None:
        ax.axvline(median, color=COLOR_MEDIAN, linewidth=1.5, linestyle=":", label=f"median = {median:,.4g}")

    ax.set_xlabel("Value", fontsize=11)
    ax.set_ylabel("Count", fontsize=11)
    ax.set_title(f"{title} — {RULE_LABELS.get(rule, rule)} bins (n={len(bins)})", fontsize=13)
    ax.yaxis.set_major_locator(ticker.MaxNLocator(integer=True))
    ax.grid(True, axis="y", alpha=0.3)
    if mean is not None or median is not None:
        ax.legend(fontsize=10)

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return path
