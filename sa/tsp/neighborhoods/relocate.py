from __future__ import annotations

from typing import TYPE_CHECKING

from .base import TSPBaseNeighborhood
if TYPE_CHECKING:
    from ..solutions import TSPPathSolution
    from ...rng import RandomSource


__all__ = ("SegmentRelocate",)


class SegmentRelocate(TSPBaseNeighborhood):
    """Cut a random segment out of the path and insert it back at a random position

    The insertion index is drawn from [1, m] where m is the number of towns left after the cut, so the
    segment never lands in front of the first town but may be appended after the last one.
    """

    __slots__ = ()

    def random_candidate(self, *, rng: RandomSource, max_retries: int) -> TSPPathSolution:
        solution = self._solution
        start, end = solution.random_segment(rng, max_retries=max_retries)

        remaining = len(solution) - (end - start)
        position = rng.uniform_int(1, remaining)
        return solution.relocate(start, end, position)
