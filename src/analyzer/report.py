"""Console report — summary table and text histogram."""

from __future__ import annotations

from src.common.console import field, header, section
from src.common.constants import BAR_WIDTH, RULE_LABELS
from src.stats.histogram import HistogramBin


def _fmt(value: float | None) -> str:
    return "—" if value is None else f"{value:,.6g}"


def print_summary(
    summary: dict,
    source: str,
    trimmed: tuple[int, int] | None = None,
    overview: str | None = None,
) -> None:
    """Print the ``describe()`` output as a two-column table.

    *overview* is the ``fmt_stat()`` one-liner shown under the header.
    """
    print(header("SAMPLE STATISTICS"))
    print()
    print(field("Source", source))
    print(field("Values", f"{summary['count']:,}"))
    if trimmed:
        print(field("Trimmed", f"{trimmed[0]} lowest, {trimmed[1]} highest"))
    if overview:
        print(field("Overview", overview))

    print(section("Central tendency & dispersion"))
    rows = [
        ("Min", summary["min"]),
        ("Max", summary["max"]),
        ("Mean", summary["mean"]),
        ("Median", summary["median"]),
        ("Variance", summary["variance"]),
        ("Std deviation", summary["std"]),
        ("IQR", summary["iqr"]),
    ]
    print(f"  {'Statistic':<20} {'Value':>18}")
    print(f"  {'─' * 20} {'─' * 18}")
    for label, value in rows:
        print(f"  {label:<20} {_fmt(value):>18}")

    found = summary["modes"]
    shown = ", ".join(_fmt(m) for m in found) if found else "none (no repeated values)"
    print(f"  {'Modes':<20} {shown}")


def render_bars(bins: list[HistogramBin], width: int = BAR_WIDTH) -> list[str]:
    """One text line per bin, bar length scaled to the fullest bin."""
    peak = max((b.bin_count for b in bins), default=0)
    lines = []
    for b in bins:
        length = round(b.bin_count / peak * width) if peak else 0
        lines.append(
            f"  [{b.bin_start:>12,.4g}, {b.bin_stop:>12,.4g})  "
            f"{b.bin_count:>7,}  {'█' * length}"
        )
    return lines


def print_histogram(
    bins: list[HistogramBin],
    rule: str,
    on_edges: int,
    width: int = BAR_WIDTH,
) -> None:
    label = RULE_LABELS.get(rule, rule)
    print(header(f"HISTOGRAM  ({label})"))
    if not bins:
        print("\n  No bins (empty sample).")
        return
    print()
    print(field("Bins", len(bins)))
    print(field("Bin width", _fmt(bins[0].width)))
    print(field("On edges", f"{on_edges:,} value(s) fall on a bin boundary and are not counted"))
    print(f"\n  {'Bin':<28}  {'Count':>7}")
    print(f"  {'─' * 28}  {'─' * 7}  {'─' * width}")
    for line in render_bars(bins, width):
        print(line)
