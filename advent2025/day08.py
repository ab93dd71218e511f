"""Day 8: wiring junction boxes into circuits, closest pairs first."""

from __future__ import annotations

from collections import Counter
from itertools import combinations, islice
from math import prod
from pathlib import Path

Coordinate = tuple[int, int, int]


def parse(text: str) -> list[Coordinate]:
    """Read one ``x,y,z`` position per line."""
    coordinates = []
    for line in text.splitlines():
        parts = line.split(",")
        if len(parts) < 3:
            raise ValueError(f"Invalid coordinate line {line!r}")
        x, y, z = (int(part) for part in parts[:3])
        coordinates.append((x, y, z))
    return coordinates


def pair_distances(coordinates: list[Coordinate]) -> list[tuple[int, int, int]]:
    """All ``(squared distance, i, j)`` with ``i < j``, closest first.

    Pairs at the same distance keep the order of their indices.
    """
    if not coordinates:
        raise ValueError("No junction boxes given")
    distances = [
        (sum((a - b) ** 2 for a, b in zip(first, second)), i, j)
        for (i, first), (j, second) in combinations(enumerate(coordinates), 2)
    ]
    distances.sort()
    return distances


class _Circuits:
    """Disjoint sets of junction boxes."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self.count = size

    def find(self, box: int) -> int:
        root = box
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[box] != root:
            self._parent[box], box = root, self._parent[box]
        return root

    def connect(self, first: int, second: int) -> bool:
        """Join the circuits of two boxes; False if they were already joined."""
        first_root, second_root = self.find(first), self.find(second)
        if first_root == second_root:
            return False
        self._parent[second_root] = first_root
        self.count -= 1
        return True

    def sizes(self) -> list[int]:
        return list(Counter(self.find(box) for box in range(len(self._parent))).values())


def solve1(text: str, junction_count: int) -> int:
    """Product of the three largest circuits after the closest connections.

    Only circuits of at least two boxes count; missing ones count as zero.
    """
    coordinates = parse(text)
    circuits = _Circuits(len(coordinates))
    for _, i, j in islice(pair_distances(coordinates), junction_count):
        circuits.connect(i, j)
    sizes = sorted((size for size in circuits.sizes() if size > 1), reverse=True)
    largest = (sizes + [0, 0, 0])[:3]
    return prod(largest)


def solve2(text: str) -> int:
    """Product of the X coordinates of the pair whose connection forms one circuit."""
    coordinates = parse(text)
    circuits = _Circuits(len(coordinates))
    for _, i, j in pair_distances(coordinates):
        if circuits.connect(i, j) and circuits.count == 1:
            return coordinates[i][0] * coordinates[j][0]
    raise ValueError("Junction boxes never form a single circuit")


def run(path: str | Path) -> tuple[int, int]:
    """Solve both parts for the input file at *path* and print the answers."""
    text = Path(path).read_text()
    first = solve1(text, 1000)
    print(f"Day 8 solution 1 is {first}")
    second = solve2(text)
    print(f"Day 8 solution 2 is {second}")
    return first, second