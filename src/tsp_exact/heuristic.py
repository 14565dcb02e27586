"""Nearest-neighbour construction, kept as a baseline for the exact solvers."""
from __future__ import annotations

import math
import time
from typing import Sequence

from .location import Location
from .search import validate_instance
from .solution import TourSolution
from .tour import Tour
from .weights import Weights


def nearest_neighbour(weights: Weights, locations: Sequence[Location], anchor: int) -> TourSolution:
    """Greedy tour from ``anchor``: always move to the closest unvisited location.

    Candidates are scanned by ascending index with a strict comparison, so the
    lowest index wins a tie. The closing edge back to the anchor is added at
    the end. Visitation is tracked locally; ``Location.visited`` is untouched.
    """
    anchor = validate_instance(weights, locations, anchor)
    start_t = time.time()
    n = weights.size
    tour = Tour.starting_at(locations[anchor])
    visited = {anchor}
    cost = 0

    while len(visited) < n:
        current = tour.current.index
        nxt = None
        best = math.inf
        for i in range(n):
            if i in visited:
                continue
            d = weights.weight(current, i)
            if d < best:
                nxt, best = i, d
        if nxt is None:
            # every remaining edge is infinite; take the lowest unvisited index
            nxt = min(i for i in range(n) if i not in visited)
            best = weights.weight(current, nxt)
        tour.append(locations[nxt])
        visited.add(nxt)
        cost += best

    if n > 1:
        cost += weights.weight(tour.current.index, anchor)
        tour.append(locations[anchor])
    runtime = time.time() - start_t
    return TourSolution(tour=tour, cost=cost, runtime=runtime, method='nearest_neighbour',
                        tours=[tour], completed=1, nodes_explored=n)
