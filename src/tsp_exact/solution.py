from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .tour import Tour


@dataclass
class TourSolution:
    tour: Optional[Tour]       # closed at the anchor; None only on a timeout before any tour
    cost: Optional[float]
    runtime: float
    method: str
    status: str = 'complete'
    tours: List[Tour] = field(default_factory=list)   # complete tours generated, if kept
    completed: int = 0
    nodes_explored: int = 0
    pruned: int = 0

    @property
    def indices(self) -> List[int]:
        return self.tour.indices if self.tour is not None else []
