from __future__ import annotations

from typing import Iterable, List, Sequence


class Location:
    """A place on a tour.

    Two locations are the same location when their indices match; ``name``
    and ``visited`` are plain mutable attributes. ``visited`` is scratch state
    for callers and is never read by the solvers.
    """

    def __init__(self, name: str, index: int, visited: bool = False):
        self.name = name
        self.index = index
        self.visited = visited

    def __eq__(self, other):
        if not isinstance(other, Location):
            return NotImplemented
        return self.index == other.index

    def __hash__(self):
        return hash(self.index)

    def __repr__(self):
        return f"Location({self.name!r}, {self.index})"

    def __str__(self):
        return f"Location{{name={self.name}, index={self.index}, visited={self.visited}}}"


def make_locations(names: Sequence[str]) -> List[Location]:
    """Build locations numbered in list order."""
    return [Location(name, i) for i, name in enumerate(names)]


def numbered_locations(n: int) -> List[Location]:
    return make_locations([str(i) for i in range(n)])


def reset_visited(locations: Iterable[Location]) -> None:
    for loc in locations:
        loc.visited = False
