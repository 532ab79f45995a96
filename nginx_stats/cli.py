"""Print a response size and status digest of an nginx JSON access log."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from nginx_stats.errors import LogError
from nginx_stats.services.aggregator import compute_summary
from nginx_stats.services.formatter import format_summary
from nginx_stats.services.storage import LogStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nginx-stats",
        description="Summarize status codes and response sizes of an nginx JSON access log",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Log file with one JSON object per line",
    )
    return parser


def run(input_path: Path) -> int:
    """Load, summarize and print the log at *input_path*; return the exit code"""
    try:
        records = LogStore(str(input_path)).load_records()
    except LogError as exc:
        print(f"Error reading log file: {exc}", file=sys.stderr)
        return 1

    summary = compute_summary(records)
    print(format_summary(summary))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    logger.debug("Reading %s", args.input)
    return run(args.input)


if __name__ == "__main__":
    sys.exit(main())
