"""Day 6: evaluating a worksheet of vertically written arithmetic problems."""

from __future__ import annotations

from functools import reduce
from pathlib import Path

_DIGITS = "0123456789"


def _apply(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "*":
        return left * right
    raise ValueError(f"Invalid operator {operator!r}")


def solve1(text: str) -> int:
    """Sum the results of the problems read row by row."""
    grid = [line.split() for line in text.splitlines()]
    *number_rows, operators = grid
    results = [int(value) for value in number_rows[0]]
    for row in number_rows[1:]:
        results = [
            _apply(operators[index], result, int(row[index]))
            for index, result in enumerate(results)
        ]
    return sum(results)


def _column_number(rows: list[str], column: int) -> tuple[int, bool]:
    """Number written top to bottom in *column*, and whether it had any digit."""
    digits = [row[column] for row in rows if row[column] in _DIGITS]
    value = reduce(lambda acc, digit: acc * 10 + int(digit), digits, 0)
    return value, bool(digits)


def solve2(text: str) -> int:
    """Sum the results of the problems read column by column."""
    *rows, operators = text.splitlines()
    width = len(rows[0]) if rows else len(operators)
    total = 0
    column = 0
    while column < width:
        operator = operators[column]
        result, _ = _column_number(rows, column)
        column += 1
        while column < width:
            value, has_digits = _column_number(rows, column)
            column += 1
            if not has_digits:
                break
            result = _apply(operator, result, value)
        total += result
    return total


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text)
    print(f"Day 6 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 6 solution 2 is {second}")
    return first, second