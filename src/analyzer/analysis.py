"""End-to-end analysis of one sample: load, trim, describe, bin, export."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

import structlog

from src.analyzer.loader import load_sample
from src.analyzer.plot import plot_histogram
from src.analyzer.report import print_histogram, print_summary
from src.common.console import ok, warn
from src.common.constants import RULE_FD
from src.common.logging import get_json_file_logger
from src.stats.descriptive import ordered, resolve_range
from src.stats.errors import DegenerateBandwidth
from src.stats.histogram import boundary_values, histogram_bins
from src.stats.outliers import remove_outliers
from src.stats.summary import describe, fmt_stat

log = structlog.get_logger("analyzer")


def run_analysis(
    source: str | None,
    *,
    rule: str = RULE_FD,
    start: int | None = None,
    end: int | None = None,
    trim: tuple[int, int] | None = None,
    histogram: bool = True,
    plot_path: str | None = None,
    output: str | None = None,
    log_file: str | None = None,
) -> dict:
    """Analyse the sample at *source* and print the report.

    Returns the result dict that is also written to *output*. Range and
    trim errors propagate; a degenerate bandwidth only skips the histogram.
    """
    label = source if source not in (None, "-") else "<stdin>"
    sample = load_sample(source)
    log.info("sample_loaded", source=label, count=len(sample))

    if trim:
        lowest, highest = trim
        sample = remove_outliers(sample, lowest, highest)
        log.info("sample_trimmed", lowest=lowest, highest=highest, remaining=len(sample))

    if start is not None or end is not None:
        # start/end must fit the trimmed sample whether or not bins are drawn.
        resolve_range(ordered(sample), start, end)

    summary = describe(sample)
    print_summary(summary, label, trim, fmt_stat(sample))

    result: dict = {"source": label, "rule": rule, "summary": summary, "bins": []}

    if histogram and rule == RULE_FD and summary["count"] and summary["iqr"] is None:
        log.warning("histogram_skipped", reason="sample too small to split into quartiles")
        warn("Histogram skipped: sample too small for Freedman–Diaconis (try --rule scott)")
        histogram = False

    if histogram:
        try:
            bins = histogram_bins(sample, rule == RULE_FD, start, end)
        except DegenerateBandwidth as exc:
            log.warning("histogram_skipped", reason=str(exc))
            warn(f"Histogram skipped: {exc}")
            bins = []
        else:
            on_edges = boundary_values(sample, bins)
            log.info("histogram_built", bins=len(bins), on_edges=on_edges)
            print_histogram(bins, rule, on_edges)
            result["on_edges"] = on_edges
        result["bins"] = [asdict(b) for b in bins]

        if plot_path and bins:
            written = plot_histogram(
                bins,
                Path(plot_path),
                rule=rule,
                mean=summary["mean"],
                median=summary["median"],
                title=f"Distribution of {label}",
            )
            log.info("plot_written", path=str(written))
            ok(f"Histogram chart → {written}")
        elif plot_path:
            warn("No bins to plot; chart not written.")

    if output:
        Path(output).write_text(json.dumps(result, indent=2))
        ok(f"Raw data → {output}")

    if log_file:
        get_json_file_logger(Path(log_file)).info(
            "analysis",
            source=label,
            rule=rule,
            count=summary["count"],
            mean=summary["mean"],
            std=summary["std"],
            bins=len(result["bins"]),
        )

    return result
