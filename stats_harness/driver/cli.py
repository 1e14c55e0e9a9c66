"""CLI entrypoint for the statistics harness."""

from __future__ import annotations

import argparse
import logging

import structlog

from stats_harness.common.console import ok
from stats_harness.common.constants import ABORT_MESSAGE, LOG_LEVEL, USAGE_MESSAGE
from stats_harness.common.errors import StatsError
from stats_harness.common.logging import configure_structlog
from stats_harness.driver.reader import read_samples
from stats_harness.driver.report import compute, dump_json, render


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Mean, standard deviation and class frequencies of a one-line "
            "CSV file of numbers in [0, 100)."
        ),
        epilog="Example: %(prog)s samples.csv -o result.json",
    )
    parser.add_argument("path", nargs="?", default=None)
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        default=None,
        help="Path to write the result as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug events (iteration counts) to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        # --help exits 0; usage errors report 1 like every other failure
        return 0 if exc.code in (0, None) else 1
    configure_structlog(logging.DEBUG if args.verbose else LOG_LEVEL)
    log = structlog.get_logger("cli")

    if args.path is None:
        print(USAGE_MESSAGE)
        return 1

    # Single catch point: one diagnostic, no partial report.
    try:
        result = compute(read_samples(args.path))
        if args.output:
            dump_json(result, args.output)
    except (StatsError, OSError, ValueError, ArithmeticError) as exc:
        log.debug("aborted", path=args.path, error=str(exc))
        print(ABORT_MESSAGE)
        print(exc)
        return 1

    for line in render(result):
        print(line)
    if args.output:
        ok(f"Raw data → {args.output}")
    return 0
