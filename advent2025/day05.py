"""Day 5: checking ingredient identifiers against ranges of fresh ones."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path


def _sections(text: str) -> tuple[str, str]:
    """Split the input into its range section and its identifier section."""
    ranges, sep, values = text.partition("\n\n")
    if not sep:
        raise ValueError("Input has no blank line between ranges and identifiers")
    return ranges, values


def _parse_ranges(section: str) -> Iterator[tuple[int, int]]:
    """Yield (lower, upper) for every line such as ``3-5``."""
    for line in section.splitlines():
        lower, sep, upper = line.partition("-")
        if not sep:
            raise ValueError(f"Invalid range {line!r}")
        yield int(lower), int(upper)


def solve1(text: str) -> int:
    """Count the identifiers that fall inside at least one fresh range."""
    range_section, value_section = _sections(text)
    widest: dict[int, int] = {}
    for lower, upper in _parse_ranges(range_section):
        widest[lower] = max(upper, widest.get(lower, upper))
    return sum(
        1
        for line in value_section.splitlines()
        if (value := int(line)) is not None
        and any(lower <= value <= upper for lower, upper in widest.items())
    )


def solve2(text: str) -> int:
    """Count the distinct identifiers covered by the fresh ranges."""
    range_section, _ = _sections(text)
    merged: list[tuple[int, int]] = []
    for lower, upper in _parse_ranges(range_section):
        kept: list[tuple[int, int]] = []
        for low, high in merged:
            if low > upper or high < lower:
                kept.append((low, high))
            else:
                lower, upper = min(lower, low), max(upper, high)
        kept.append((lower, upper))
        merged = kept
    return sum(upper - lower + 1 for lower, upper in merged)


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 5 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 5 solution 2 is {second}")
    return first, second