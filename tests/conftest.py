import numpy as np
import pytest

from tsp_exact import Weights, numbered_locations


@pytest.fixture
def triangle():
    return Weights([[0, 1, 2], [1, 0, 3], [2, 3, 0]])


@pytest.fixture
def unit_cycle():
    """0-1-2-3-0 with unit edges, everything else prohibitively long."""
    big = 10 ** 6
    values = np.full((4, 4), big)
    np.fill_diagonal(values, 0)
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 0)]:
        values[a, b] = values[b, a] = 1
    return Weights(values)


@pytest.fixture
def random_weights():
    def make(n, seed, low=1, high=100):
        rng = np.random.default_rng(seed)
        values = rng.integers(low, high, size=(n, n))
        np.fill_diagonal(values, 0)
        return Weights(values)
    return make


@pytest.fixture
def euclidean_weights():
    def make(n, seed):
        rng = np.random.default_rng(seed)
        pts = rng.uniform(0, 100, size=(n, 2))
        diff = pts[:, None, :] - pts[None, :, :]
        return Weights(np.sqrt((diff ** 2).sum(axis=-1)))
    return make


@pytest.fixture
def locations_for():
    return lambda weights: numbered_locations(weights.size)
