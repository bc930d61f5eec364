from __future__ import annotations

from typing import TYPE_CHECKING

from ...abc import BaseNeighborhood
if TYPE_CHECKING:
    from ..solutions import TSPPathSolution


__all__ = ("TSPBaseNeighborhood",)
if TYPE_CHECKING:
    _TSPPathSolution = TSPPathSolution
else:
    _TSPPathSolution = object


class TSPBaseNeighborhood(BaseNeighborhood[_TSPPathSolution]):
    """Base class for segment moves on a TSP path. The first town of the path is never moved."""

    __slots__ = ()
