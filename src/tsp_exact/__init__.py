"""Exact travelling-salesman tours over small cost matrices."""
from .errors import InvalidInstanceError, NoSolutionError, TimeLimitExpired
from .heuristic import nearest_neighbour
from .location import Location, make_locations, numbered_locations, reset_visited
from .search import SearchContext, branch_and_bound, brute_force
from .solution import TourSolution
from .tour import Tour, route_cost
from .weights import Weights

__version__ = '0.1.0'
