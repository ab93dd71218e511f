"""Command that solves every day from a directory of puzzle inputs."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from advent2025 import day01, day02, day03, day04, day05, day06, day07, day08

DAYS = (day01, day02, day03, day04, day05, day06, day07, day08)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent2025",
        description="Solve every puzzle, reading DIR/dayNN/input.txt for each day.",
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        default="src",
        metavar="DIR",
        help="directory holding one dayNN folder per day (default: src)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Solve all days in order and report the time taken."""
    args = _parser().parse_args(argv)
    base = Path(args.input_dir)
    start = time.perf_counter()
    for number, day in enumerate(DAYS, start=1):
        path = base / f"day{number:02d}" / "input.txt"
        try:
            day.run(path)
        except OSError as error:
            print(f"Error reading input file {path}: {error}", file=sys.stderr)
            return 1
    elapsed = int((time.perf_counter() - start) * 1000)
    print(f"{elapsed}ms elapsed")
    return 0


if __name__ == "__main__":
    sys.exit(main())