"""Timed runs of the tour solvers and their pandas summary."""
from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional, Sequence

import pandas as pd

from .heuristic import nearest_neighbour
from .location import Location
from .search import branch_and_bound, brute_force
from .solution import TourSolution
from .weights import Weights

Solver = Callable[..., TourSolution]

DEFAULT_METHODS: Dict[str, Solver] = {
    'brute_force': brute_force,
    'nearest_neighbour': nearest_neighbour,
    'branch_and_bound': branch_and_bound,
}

# keyword arguments each solver understands besides (weights, locations, anchor)
_SOLVER_OPTIONS = {
    'brute_force': ('time_limit',),
    'nearest_neighbour': (),
    'branch_and_bound': ('include_anchor', 'max_results', 'time_limit'),
}


@dataclass
class RunRecord:
    instance: str
    n: int
    method: str
    run: int
    status: str
    cost: Optional[float]
    tour: List[int]
    runtime: float
    completed: int
    nodes_explored: int
    pruned: int
    timestamp: str


def run_method(name: str, weights: Weights, locations: Sequence[Location], anchor: int,
               instance: str = 'default', run: int = 1, **options) -> RunRecord:
    """Run one solver by name and record the outcome.

    ``options`` not understood by the chosen solver are ignored.
    """
    if name not in DEFAULT_METHODS:
        raise ValueError(f"Unknown method {name!r}; known: {list(DEFAULT_METHODS)}")
    kwargs = {k: v for k, v in options.items() if k in _SOLVER_OPTIONS[name] and v is not None}
    start_t = time.time()
    sol = DEFAULT_METHODS[name](weights, locations, anchor, **kwargs)
    runtime = time.time() - start_t
    return RunRecord(
        instance=instance,
        n=weights.size,
        method=name,
        run=run,
        status=sol.status,
        cost=sol.cost,
        tour=sol.indices,
        runtime=runtime,
        completed=sol.completed,
        nodes_explored=sol.nodes_explored,
        pruned=sol.pruned,
        timestamp=time.strftime('%Y-%m-%d %H:%M:%S'),
    )


def records_to_frame(records: List[RunRecord]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in records])


def summarize(records: List[RunRecord]) -> pd.DataFrame:
    df = records_to_frame(records)
    grp = df.groupby(['instance', 'method'])
    summary = grp.agg(
        n=('n', 'first'),
        runs=('run', 'count'),
        successes=('status', lambda s: (s == 'complete').sum()),
        cost_best=('cost', 'min'),
        cost_mean=('cost', 'mean'),
        completed_mean=('completed', 'mean'),
        runtime_mean=('runtime', 'mean'),
        runtime_std=('runtime', 'std'),
    ).reset_index()
    return summary
