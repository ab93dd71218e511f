"""Day 4: removing paper rolls that forklifts can reach."""

from __future__ import annotations

from collections import Counter
from pathlib import Path

ROLL = "@"
EMPTY = "."
MAX_NEIGHBOURS = 4


def parse_grid(text: str) -> list[list[str]]:
    """Split the input into a grid of single characters."""
    return [list(line) for line in text.splitlines()]


def removable_rolls(grid: list[list[str]]) -> list[tuple[int, int]]:
    """Coordinates, sorted, of rolls with fewer than four adjacent rolls."""
    neighbours: Counter[tuple[int, int]] = Counter()
    for row_index, row in enumerate(grid):
        for column_index, cell in enumerate(row):
            if cell != ROLL:
                continue
            neighbours[(row_index, column_index)] += 0
            for i in range(max(0, row_index - 1), min(len(grid), row_index + 2)):
                for j in range(max(0, column_index - 1), min(len(row), column_index + 2)):
                    if (i, j) != (row_index, column_index) and grid[i][j] == ROLL:
                        neighbours[(i, j)] += 1
    return sorted(position for position, count in neighbours.items() if count < MAX_NEIGHBOURS)


def solve1(text: str) -> int:
    """Number of rolls that can be removed right away."""
    return len(removable_rolls(parse_grid(text)))


def solve2(text: str) -> int:
    """Number of rolls removed when removing repeatedly until none can go."""
    grid = parse_grid(text)
    removed = 0
    while rolls := removable_rolls(grid):
        removed += len(rolls)
        for row, column in rolls:
            grid[row][column] = EMPTY
    return removed


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 4 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 4 solution 2 is {second}")
    return first, second