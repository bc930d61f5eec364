from __future__ import annotations

from typing import TYPE_CHECKING

from .base import TSPBaseNeighborhood
if TYPE_CHECKING:
    from ..solutions import TSPPathSolution
    from ...rng import RandomSource


__all__ = ("SegmentReverse",)


class SegmentReverse(TSPBaseNeighborhood):

    __slots__ = ()

    def random_candidate(self, *, rng: RandomSource, max_retries: int) -> TSPPathSolution:
        start, end = self._solution.random_segment(rng, max_retries=max_retries)
        return self._solution.reverse(start, end)
