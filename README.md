# advent2025

Solvers for the first eight puzzles of Advent of Code 2025. Each day is a
module in the package. Its solver functions take the puzzle input as text
and return the answer.

## Installation

```
pip install .
```

To run the test suite, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
advent2025 [DIR]
```

This solves every day in order. For day N it reads `DIR/dayNN/input.txt`,
for example `DIR/day01/input.txt`. `DIR` defaults to `src`. It prints both
answers for each day, then the total time taken as `<n>ms elapsed`. If an
input file cannot be read, it prints an error to standard error and exits
with status 1.

## Library use

Each day module has its solver functions and a `run(path)` helper. The
helper reads an input file, prints both answers and returns them as a tuple.

```python
from pathlib import Path

from advent2025 import day01, day03, day08

text = Path("input.txt").read_text()

day01.solve1(text)        # times the dial stops on zero
day01.solve2(text)        # times the dial passes zero

day03.solve(text, 2)      # best two-digit joltage per bank, summed
day03.solve(text, 12)     # best twelve-digit joltage per bank, summed

day08.solve1(text, 1000)  # product of the three largest circuits
day08.solve2(text)        # product of the X coordinates of the last link

first, second = day01.run("input.txt")
```

| Module   | Functions                                                  |
|----------|------------------------------------------------------------|
| `day01`  | `solve1`, `solve2`, `run`                                  |
| `day02`  | `solve1`, `solve2`, `run`                                  |
| `day03`  | `solve`, `run`                                             |
| `day04`  | `parse_grid`, `removable_rolls`, `solve1`, `solve2`, `run` |
| `day05`  | `solve1`, `solve2`, `run`                                  |
| `day06`  | `solve1`, `solve2`, `run`                                  |
| `day07`  | `solve1`, `solve2`, `run`                                  |
| `day08`  | `parse`, `pair_distances`, `solve1`, `solve2`, `run`       |

A few notes on the helpers:

- `day04.parse_grid` turns the input into a list of character lists.
  `day04.removable_rolls` returns the sorted `(row, column)` positions of the
  rolls that have fewer than four neighbouring rolls.
- `day08.parse` reads one `x,y,z` position per line.
  `day08.pair_distances` returns every `(squared distance, i, j)` with
  `i < j`, closest first. In `day08.solve1`, only circuits of two or more
  boxes count. If there are fewer than three of them, the missing ones count
  as zero.

Malformed input raises an exception, most often `ValueError`. It does not
return a wrong answer. `day08.solve2` raises `ValueError` if the boxes never
form a single circuit.

## What it does not do

The package does not download puzzle inputs and does not ship any. You must
provide each day's input file yourself.