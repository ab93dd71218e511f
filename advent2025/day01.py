"""Day 1: counting how often a circular dial lands on or passes zero."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

DIAL_SIZE = 100
START_POSITION = 50


def _rotations(text: str) -> Iterator[tuple[str, int]]:
    """Yield (direction, amount) for every line such as ``L68`` or ``R14``."""
    for line in text.splitlines():
        direction, raw_value = line[:1], line[1:]
        try:
            value = int(raw_value)
        except ValueError:
            raise ValueError(f"Invalid value {raw_value}") from None
        yield direction, value


def solve1(text: str) -> int:
    """Count the rotations after which the dial points exactly at zero."""
    dial = START_POSITION
    hits = 0
    for direction, value in _rotations(text):
        if direction == "R":
            dial = (dial + value) % DIAL_SIZE
        elif direction == "L":
            dial = (dial - value) % DIAL_SIZE
        else:
            raise ValueError(f"Invalid direction {direction}")
        if dial == 0:
            hits += 1
    return hits


def solve2(text: str) -> int:
    """Count every wrap of the dial past zero while rotating."""
    dial = START_POSITION
    hits = 0
    for direction, value in _rotations(text):
        if value != 0:
            if direction == "R":
                dial += value
            elif direction == "L":
                dial -= value
            else:
                raise ValueError(f"Invalid direction {direction}")
        hits += abs(dial // DIAL_SIZE)
        dial %= DIAL_SIZE
    return hits


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 1 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 1 solution 2 is {second}")
    return first, second