"""Day 3: choosing the largest joltage from each bank of batteries."""

from __future__ import annotations

from functools import reduce
from pathlib import Path

_DIGITS = "0123456789"


def _best_joltage(line: str, digit_count: int) -> int:
    """Largest number formed by picking *digit_count* digits of *line* in order."""
    digits = [0] * digit_count
    length = len(line)
    for position, char in enumerate(line):
        if char not in _DIGITS or not char:
            raise ValueError(f"Invalid digit {char!r}")
        joltage = int(char)
        start = max(0, digit_count - (length - position))
        for index in range(start, digit_count):
            if digits[index] < joltage:
                digits[index] = joltage
                digits[index + 1 :] = [0] * (digit_count - index - 1)
                break
    return reduce(lambda acc, digit: acc * 10 + digit, digits, 0)


def solve(text: str, digit_count: int) -> int:
    """Sum, over all banks, the largest joltage made of *digit_count* digits."""
    return sum(_best_joltage(line, digit_count) for line in text.splitlines())


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve(text, 2)
    print(f"Day 3 solution 1 is {first}")
    second = solve(text, 12)
    print(f"Day 3 solution 2 is {second}")
    return first, second