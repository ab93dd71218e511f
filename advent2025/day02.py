"""Day 2: summing identifiers made of a repeated digit sequence."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def _ranges(text: str) -> Iterator[tuple[str, str]]:
    """Yield the (lower, upper) bounds of each comma separated range as text."""
    for item in text.strip().split(","):
        lower, sep, upper = item.partition("-")
        if not sep:
            raise ValueError(f"Invalid range {item!r}")
        yield lower.strip(), upper.strip()


def _lowest_half(bound: str) -> int:
    """Smallest half ``h`` such that ``hh`` is not below *bound*."""
    if len(bound) % 2 == 0:
        middle = len(bound) // 2
        first, second = int(bound[:middle]), int(bound[middle:])
        return first if first >= second else first + 1
    return 10 ** ((len(bound) - 1) // 2)


def _highest_half(bound: str) -> int:
    """Largest half ``h`` such that ``hh`` does not exceed *bound*."""
    if len(bound) % 2 == 0:
        middle = len(bound) // 2
        first, second = int(bound[:middle]), int(bound[middle:])
        return first if first <= second else first - 1
    return 10 ** ((len(bound) - 1) // 2) - 1


def solve1(text: str) -> int:
    """Sum the numbers in all ranges that are some digit sequence written twice."""
    total = 0
    for lower, upper in _ranges(text):
        low, high = _lowest_half(lower), _highest_half(upper)
        total += sum(int(f"{half}{half}") for half in range(low, high + 1))
    return total


def solve2(text: str) -> int:
    """Sum the numbers in all ranges made of a digit sequence repeated at least twice."""
    total = 0
    for lower, upper in _ranges(text):
        low, high = int(lower), int(upper)
        seen: set[int] = set()
        for width in range(1, len(upper) // 2 + 1):
            for pattern in range(10 ** (width - 1), 10**width):
                repeats = 2
                while (value := int(str(pattern) * repeats)) <= high:
                    if value >= low and value not in seen:
                        seen.add(value)
                        total += value
                    repeats += 1
    return total


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 2 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 2 solution 2 is {second}")
    return first, second