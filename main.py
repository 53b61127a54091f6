#!/usr/bin/env python3
"""
main.py
=======
Command-line entry point.

Usage::

    python main.py NETWORK [NETWORK ...] -o SCHEDULE [SCHEDULE ...]

Each network file is paired with the schedule file at the same position.
For every pair the score is printed as ``<schedule-file> score: <score>``;
with more than one pair the total follows.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import config
from batch.report import format_total, outcomes_frame, total_score, write_csv
from batch.runner import PAIR_ERRORS, PairOutcome, run_batch
from logging_setup import setup_logging

log = logging.getLogger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score traffic-light schedules against road networks.",
    )
    parser.add_argument("input", nargs="+", metavar="NETWORK", help="network file paths")
    parser.add_argument(
        "-o", "--output", nargs="+", required=True, metavar="SCHEDULE",
        help="schedule file paths (one for each network file)",
    )
    parser.add_argument(
        "--keep-going", action="store_true",
        help="report a failing pair and continue with the next one",
    )
    parser.add_argument("--csv", metavar="REPORT", help="write a per-pair CSV report")
    parser.add_argument("--log-dir", default=os.environ.get(config.ENV_LOG_DIR),
                        help="directory for scorer.log")
    parser.add_argument("--engine-debug", action="store_true",
                        default=bool(os.environ.get(config.ENV_ENGINE_DEBUG)),
                        help="write the per-tick engine trace to engine_debug.log")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", default=0)
    verbosity.add_argument("-q", "--quiet", action="store_true")
    return parser


def _log_level(args: argparse.Namespace) -> int:
    if args.quiet:
        return logging.ERROR
    if args.verbose >= 2:
        return logging.DEBUG
    if args.verbose == 1:
        return logging.INFO
    name = os.environ.get(config.ENV_LOG_LEVEL, config.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _print_outcome(outcome: PairOutcome) -> None:
    if outcome.ok:
        print(f"{outcome.schedule} score: {outcome.score}")
    else:
        print(f"{outcome.schedule} failed: {outcome.error}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if len(args.input) != len(args.output):
        parser.error(
            f"got {len(args.input)} network files but {len(args.output)} schedule files"
        )

    setup_logging(_log_level(args), log_dir=args.log_dir, engine_debug=args.engine_debug)
    log.info("scoring %d pair(s)", len(args.input))

    try:
        outcomes = run_batch(
            zip(args.input, args.output),
            keep_going=args.keep_going,
            on_outcome=_print_outcome,
        )
    except PAIR_ERRORS as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    frame = outcomes_frame(outcomes)
    if len(outcomes) > 1:
        print(format_total(total_score(frame)))
    if args.csv:
        write_csv(frame, args.csv)
        log.info("report written to %s", args.csv)
    return 0 if all(o.ok for o in outcomes) else 1


if __name__ == "__main__":
    sys.exit(main())
