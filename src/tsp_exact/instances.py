"""Built-in instance: ten Canadian cities, tour anchored at Halifax."""
from __future__ import annotations

from typing import List

from .location import Location, make_locations
from .weights import Weights

DEFAULT_CITY_NAMES = [
    'Vancouver', 'Edmonton', 'Calgary', 'Winnipeg', 'Hamilton',
    'Toronto', 'Kingston', 'Ottawa', 'Montreal', 'Halifax',
]

DEFAULT_DISTANCES = [
    [0, 129, 119, 43, 98, 98, 86, 52, 85, 44],
    [129, 0, 88, 149, 152, 57, 55, 141, 93, 86],
    [119, 88, 0, 97, 72, 72, 42, 72, 35, 92],
    [43, 149, 97, 0, 54, 119, 107, 28, 64, 60],
    [98, 152, 72, 54, 0, 138, 85, 39, 48, 90],
    [98, 57, 72, 119, 138, 0, 35, 111, 77, 56],
    [86, 55, 42, 107, 85, 35, 0, 80, 37, 44],
    [52, 141, 72, 28, 39, 111, 80, 0, 38, 52],
    [85, 93, 35, 64, 48, 77, 37, 38, 0, 47],
    [44, 86, 92, 60, 90, 56, 44, 52, 47, 0],
]

DEFAULT_ANCHOR = 9  # Halifax


def default_locations() -> List[Location]:
    """Fresh location list; build a new one for every independent run."""
    return make_locations(DEFAULT_CITY_NAMES)


def default_weights() -> Weights:
    return Weights(DEFAULT_DISTANCES)
