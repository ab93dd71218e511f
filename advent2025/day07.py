"""Day 7: following tachyon beams through a manifold of splitters."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

START = "S"
SPLITTER = "^"


def _beam_steps(line: str, column: int) -> list[int]:
    """Columns a beam at *column* continues to after crossing *line*."""
    if line[column] != SPLITTER:
        return [column]
    targets = []
    if column > 0:
        targets.append(column - 1)
    if column < len(line) - 1:
        targets.append(column + 1)
    return targets


def solve1(text: str) -> int:
    """Count how many times a beam is split."""
    first, *lines = text.splitlines()
    columns = {index for index, char in enumerate(first) if char == START}
    splits = 0
    for line in lines:
        next_columns: set[int] = set()
        for column in columns:
            if line[column] == SPLITTER:
                splits += 1
            next_columns.update(_beam_steps(line, column))
        columns = next_columns
    return splits


def solve2(text: str) -> int:
    """Count the distinct timelines a single particle can end up in."""
    first, *lines = text.splitlines()
    columns = Counter(index for index, char in enumerate(first) if char == START)
    for line in lines:
        next_columns: Counter[int] = Counter()
        for column, count in columns.items():
            for target in _beam_steps(line, column):
                next_columns[target] += count
        columns = next_columns
    return sum(columns.values())


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 7 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 7 solution 2 is {second}")
    return first, second