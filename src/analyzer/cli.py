"""CLI entrypoint for the sample analyzer."""

from __future__ import annotations

import argparse

from src.analyzer.analysis import run_analysis
from src.analyzer.loader import SampleFormatError
from src.common.console import fail
from src.common.constants import DEFAULT_RULE, LOG_LEVEL, RULES
from src.common.logging import configure_structlog
from src.stats.errors import StatisticsError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Descriptive statistics and adaptive histogram for a numeric sample.",
        epilog=(
            "File: %(prog)s data.txt  |  "
            "Stdin: cat data.txt | %(prog)s  |  "
            "Scott bins + chart: %(prog)s data.json --rule scott --plot hist.png"
        ),
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="Text or .json file with numbers ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--rule",
        choices=RULES,
        default=DEFAULT_RULE if DEFAULT_RULE in RULES else RULES[0],
        help="Bandwidth rule: Freedman–Diaconis (fd) or Scott (scott)",
    )
    parser.add_argument("--start", type=int, default=None, help="First sorted index for the bandwidth")
    parser.add_argument("--end", type=int, default=None, help="Stop sorted index (exclusive) for the bandwidth")
    parser.add_argument(
        "--trim",
        nargs=2,
        type=int,
        metavar=("LOW", "HIGH"),
        default=None,
        help="Drop LOW smallest and HIGH largest values before analysis",
    )
    parser.add_argument(
        "--no-histogram",
        action="store_true",
        default=False,
        help="Only print summary statistics",
    )
    parser.add_argument("--plot", metavar="FILE", default=None, help="Write a PNG histogram chart")
    parser.add_argument("-o", "--output", default=None, help="Path to write raw JSON data dump")
    parser.add_argument("--log-file", metavar="FILE", default=None, help="Append a JSON-lines run record")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Console log level (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    configure_structlog(args.log_level)

    try:
        run_analysis(
            args.source,
            rule=args.rule,
            start=args.start,
            end=args.end,
            trim=tuple(args.trim) if args.trim else None,
            histogram=not args.no_histogram,
            plot_path=args.plot,
            output=args.output,
            log_file=args.log_file,
        )
    except SampleFormatError as exc:
        fail(f"Cannot read sample: {exc}")
    except StatisticsError as exc:
        fail(f"{exc.kind.value}: {exc}")
