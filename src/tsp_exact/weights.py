"""Square cost matrix used by every solver.

Wraps a numpy array. Besides lookups it carries the bulk algebra used to
build test inputs (scaling, per-cell and uniform offsets, relabelling).
The solvers only read from it; mutating a matrix while a search over it is
running is undefined.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from .errors import InvalidInstanceError


class Weights:

    def __init__(self, values):
        values = np.array(values)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise InvalidInstanceError(f"Distance matrix not square: {values.shape}")
        if values.size and not np.issubdtype(values.dtype, np.number):
            raise InvalidInstanceError(f"Distance matrix is not numeric: dtype={values.dtype}")
        self.values = values

    @classmethod
    def zeros(cls, size: int) -> 'Weights':
        return cls(np.zeros((size, size), dtype=int))

    @property
    def size(self) -> int:
        return self.values.shape[0]

    def _check(self, i: int) -> int:
        if not 0 <= i < self.size:
            raise IndexError(f"location index {i} out of range for {self.size} locations")
        return i

    def weight(self, i: int, j: int):
        return self.values[self._check(i), self._check(j)].item()

    def __getitem__(self, pos: Tuple[int, int]):
        i, j = pos
        return self.weight(i, j)

    def _promote(self, value) -> None:
        # in-place writes must not truncate a float into an int matrix
        self.values = self.values.astype(np.result_type(self.values, value), copy=False)

    def set_weight(self, i: int, j: int, value) -> None:
        self._promote(value)
        self.values[self._check(i), self._check(j)] = value

    def copy(self) -> 'Weights':
        return Weights(self.values.copy())

    # Bulk algebra -----------------------------------------------------------

    def multiply_by(self, m) -> None:
        self.values = self.values * m

    def add_to_cell(self, extra, pos: Sequence[int]) -> None:
        i, j = pos
        self._promote(extra)
        self.values[self._check(i), self._check(j)] += extra

    def subtract_from_cell(self, extra, pos: Sequence[int]) -> None:
        i, j = pos
        self._promote(extra)
        self.values[self._check(i), self._check(j)] -= extra

    def _off_diagonal(self) -> np.ndarray:
        return ~np.eye(self.size, dtype=bool)

    def add_to_all(self, extra) -> None:
        """Add ``extra`` to every off-diagonal entry."""
        self.values = np.where(self._off_diagonal(), self.values + extra, self.values)

    def subtract_from_all(self, extra) -> None:
        self.values = np.where(self._off_diagonal(), self.values - extra, self.values)

    def relabel(self, order: Iterable[int]) -> 'Weights':
        """Return a copy where new location ``k`` is old location ``order[k]``."""
        order = list(order)
        if sorted(order) != list(range(self.size)):
            raise InvalidInstanceError(f"relabel order is not a permutation of 0..{self.size - 1}")
        return Weights(self.values[np.ix_(order, order)])

    # Inspection -------------------------------------------------------------

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self.values, self.values.T))

    def has_negative(self) -> bool:
        return bool((self.values < 0).any())

    def __eq__(self, other):
        if not isinstance(other, Weights):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __repr__(self):
        return f"Weights(size={self.size})"

    def __str__(self):
        return ''.join('\t'.join(str(v) for v in row) + '\t\n' for row in self.values.tolist())
