"""Exact tour search: exhaustive enumeration and branch-and-bound.

Both strategies walk the same depth-first recursion over the tuple of
location indices still to be placed. At each level every remaining index is
tried once as the next stop; the child receives the others in rotation order
(``remaining[i+1:] + remaining[:i]``), so the enumeration order matches the
classic remove-front/append-back list rotation without mutating anything.

Run-scoped state (results collection, incumbent, counters, deadline) lives in
a ``SearchContext`` owned by the caller of one strategy run. The cost matrix
is only read and may be shared between runs.
"""
from __future__ import annotations

import logging
import math
import operator
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import InvalidInstanceError, NoSolutionError, TimeLimitExpired
from .location import Location
from .solution import TourSolution
from .tour import Tour, route_cost
from .weights import Weights

logger = logging.getLogger(__name__)


@dataclass
class SearchContext:
    weights: Weights
    locations: List[Location]
    max_results: Optional[int] = None     # cap on kept tours, bounded mode only
    deadline: Optional[float] = None      # time.time() value
    results: List[Tour] = field(default_factory=list)
    best_cost: float = math.inf
    completed: int = 0
    nodes_explored: int = 0
    pruned: int = 0
    _best: Optional[Tour] = field(default=None, init=False, repr=False)

    @property
    def has_solution(self) -> bool:
        return self._best is not None

    @property
    def best_tour(self) -> Tour:
        if self._best is None:
            raise NoSolutionError("no complete tour has been recorded")
        return self._best

    def record(self, tour: Tour) -> None:
        self.completed += 1
        if self.max_results is None or len(self.results) < self.max_results:
            self.results.append(tour)

    def offer(self, tour: Tour, cost) -> bool:
        """Replace the incumbent if ``cost`` is strictly lower."""
        if cost < self.best_cost:
            self._best = tour
            self.best_cost = cost
            return True
        return False

    def check_deadline(self) -> None:
        if self.deadline is not None and time.time() >= self.deadline:
            raise TimeLimitExpired("Time budget exhausted")


def validate_instance(weights: Weights, locations: Sequence[Location], anchor: int) -> int:
    """Check the instance before searching and return the anchor as a plain int."""
    n = weights.size
    if len(locations) != n:
        raise InvalidInstanceError(f"{len(locations)} locations for a {n}x{n} distance matrix")
    for pos, loc in enumerate(locations):
        if loc.index != pos:
            raise InvalidInstanceError(f"location {loc.name!r} has index {loc.index} at position {pos}")
    try:
        index = operator.index(anchor)
    except TypeError:
        raise InvalidInstanceError(f"anchor {anchor!r} is not an integer index") from None
    if isinstance(anchor, (bool, np.bool_)) or not 0 <= index < n:
        raise InvalidInstanceError(f"anchor {anchor!r} out of range for {n} locations")
    return index


def remaining_indices(n: int, anchor: int, include_anchor: bool) -> Tuple[int, ...]:
    return tuple(i for i in range(n) if include_anchor or i != anchor)


def _deadline(start_t: float, time_limit: Optional[float]) -> Optional[float]:
    return None if time_limit is None else start_t + time_limit


# Exhaustive mode -------------------------------------------------------------

def enumerate_tours(context: SearchContext, partial: Tour, remaining: Tuple[int, ...]) -> List[Tour]:
    """Record every completion of ``partial`` over ``remaining`` into the context."""
    context.check_deadline()
    context.nodes_explored += 1
    if not remaining:
        context.record(partial)
        return context.results
    for i, index in enumerate(remaining):
        enumerate_tours(context, partial.extended(context.locations[index]),
                        remaining[i + 1:] + remaining[:i])
    return context.results


def close_and_rank(context: SearchContext, anchor: Location) -> Tour:
    """Close every recorded tour at ``anchor`` and keep the cheapest.

    Ties keep the tour found first.
    """
    if not context.results:
        raise NoSolutionError("no tours to rank")
    closed = []
    for tour in context.results:
        tour = tour.closed(anchor)
        context.offer(tour, route_cost(tour, context.weights))
        closed.append(tour)
    context.results = closed
    return context.best_tour


# Bounded mode ----------------------------------------------------------------

def bounded_search(context: SearchContext, partial: Tour, partial_cost, remaining: Tuple[int, ...],
                   anchor: Location) -> None:
    """Depth-first branch-and-bound.

    ``partial_cost`` is the route cost of ``partial``. Until the first complete
    tour is recorded every branch is followed; afterwards a child is followed
    only while its partial cost is below the incumbent. Non-negative weights
    make the partial cost a lower bound on every completion.
    """
    context.check_deadline()
    context.nodes_explored += 1
    if not remaining:
        tour = partial.closed(anchor)
        cost = route_cost(tour, context.weights)
        context.record(tour)
        if context.offer(tour, cost):
            logger.debug("incumbent improved to %s: %s", cost, tour.indices)
        return
    weights = context.weights
    for i, index in enumerate(remaining):
        child = partial.extended(context.locations[index])
        if partial.current is None:
            child_cost = partial_cost
        else:
            child_cost = partial_cost + weights.weight(partial.current.index, index)
        if context.completed and child_cost >= context.best_cost:
            context.pruned += 1
            continue
        bounded_search(context, child, child_cost, remaining[i + 1:] + remaining[:i], anchor)


# Strategies --------------------------------------------------------------------

def _trivial_solution(anchor: Location, method: str, start_t: float) -> TourSolution:
    tour = Tour.starting_at(anchor)
    return TourSolution(tour=tour, cost=0, runtime=time.time() - start_t, method=method,
                        tours=[tour], completed=1, nodes_explored=1)


def _to_solution(context: SearchContext, method: str, status: str, start_t: float) -> TourSolution:
    return TourSolution(
        tour=context.best_tour if context.has_solution else None,
        cost=context.best_cost if context.has_solution else None,
        runtime=time.time() - start_t,
        method=method,
        status=status,
        tours=context.results,
        completed=context.completed,
        nodes_explored=context.nodes_explored,
        pruned=context.pruned,
    )


def brute_force(weights: Weights, locations: Sequence[Location], anchor: int,
                time_limit: Optional[float] = None) -> TourSolution:
    """Enumerate all ``(n-1)!`` tours around ``anchor`` and return the cheapest."""
    anchor = validate_instance(weights, locations, anchor)
    start_t = time.time()
    anchor_loc = locations[anchor]
    if weights.size == 1:
        return _trivial_solution(anchor_loc, 'brute_force', start_t)

    context = SearchContext(weights, list(locations), deadline=_deadline(start_t, time_limit))
    status = 'complete'
    try:
        enumerate_tours(context, Tour(), remaining_indices(weights.size, anchor, include_anchor=False))
    except TimeLimitExpired:
        status = 'timeout'
        logger.warning("brute force hit the %ss limit after %d tours", time_limit, context.completed)
    if context.results:
        close_and_rank(context, anchor_loc)
    logger.debug("brute force: %d complete permutations, best cost %s", context.completed, context.best_cost)
    return _to_solution(context, 'brute_force', status, start_t)


def branch_and_bound(weights: Weights, locations: Sequence[Location], anchor: int,
                     include_anchor: bool = True, max_results: Optional[int] = None,
                     time_limit: Optional[float] = None) -> TourSolution:
    """Branch-and-bound over the locations, closed at ``anchor``.

    With ``include_anchor`` (the default) the anchor is permuted like any
    other location and is also affixed to both ends of each finished tour, so
    completed tours hold ``n + 2`` stops. Without it the anchor is left out of
    the permuted set, matching ``brute_force``.
    """
    anchor = validate_instance(weights, locations, anchor)
    if weights.has_negative():
        raise InvalidInstanceError("branch and bound needs non-negative weights")
    start_t = time.time()
    anchor_loc = locations[anchor]
    if weights.size == 1:
        return _trivial_solution(anchor_loc, 'branch_and_bound', start_t)

    context = SearchContext(weights, list(locations), max_results=max_results,
                            deadline=_deadline(start_t, time_limit))
    status = 'complete'
    try:
        bounded_search(context, Tour(), 0, remaining_indices(weights.size, anchor, include_anchor), anchor_loc)
    except TimeLimitExpired:
        status = 'timeout'
        logger.warning("branch and bound hit the %ss limit after %d tours", time_limit, context.completed)
    logger.debug("branch and bound: %d complete tours, %d branches pruned, best cost %s",
                 context.completed, context.pruned, context.best_cost)
    return _to_solution(context, 'branch_and_bound', status, start_t)
