"""Exceptions raised by the tour solvers."""


class InvalidInstanceError(ValueError):
    """Raised when a cost matrix, location list or anchor cannot be searched."""


class NoSolutionError(RuntimeError):
    """Raised when a best tour is requested before any complete tour exists."""


class TimeLimitExpired(Exception):
    """Raised when a search exceeds the allotted wall clock budget."""
