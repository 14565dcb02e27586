from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from .location import Location
from .weights import Weights


@dataclass
class Tour:
    """Ordered sequence of locations under construction or complete.

    ``start`` is the first location of the circuit and ``current`` the last
    one appended. A closed tour repeats ``start`` as its final element.
    """
    locations: List[Location] = field(default_factory=list)
    start: Optional[Location] = None
    current: Optional[Location] = None

    @classmethod
    def starting_at(cls, start: Location) -> 'Tour':
        return cls(locations=[start], start=start, current=start)

    @property
    def indices(self) -> List[int]:
        return [loc.index for loc in self.locations]

    def __len__(self):
        return len(self.locations)

    def __iter__(self):
        return iter(self.locations)

    def append(self, loc: Location) -> None:
        if self.start is None:
            self.start = loc
        self.locations.append(loc)
        self.current = loc

    def extended(self, loc: Location) -> 'Tour':
        """Copy of this tour with ``loc`` appended."""
        new = Tour(list(self.locations), self.start, self.current)
        new.append(loc)
        return new

    def closed(self, anchor: Location) -> 'Tour':
        """Copy with ``anchor`` affixed to both ends."""
        locations = [anchor] + self.locations + [anchor]
        return Tour(locations, start=anchor, current=anchor)

    def is_closed(self) -> bool:
        return len(self.locations) > 1 and self.locations[0] == self.locations[-1]

    def __str__(self):
        return ' -> '.join(loc.name for loc in self.locations)


def route_cost(tour: Union[Tour, Sequence[int]], weights: Weights):
    """Sum of edge weights between consecutive stops (no closing edge)."""
    idx = tour.indices if isinstance(tour, Tour) else list(tour)
    total = 0
    for i in range(len(idx) - 1):
        total += weights.weight(idx[i], idx[i + 1])
    return total
