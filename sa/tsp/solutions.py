from __future__ import annotations

from typing import Iterable, List, Sequence, Set, Tuple, Union, TYPE_CHECKING

from .config import DomainConfig
from .errors import DomainTooSmall, DuplicateTown, PathTooShort, TownSamplingExhausted
from .neighborhoods import SegmentRelocate, SegmentReverse
from .towns import Town, tour_length
from ..abc import SingleObjectiveSolution
from ..errors import RetryLimitExceeded
if TYPE_CHECKING:
    from ..abc import BaseNeighborhood
    from ..rng import RandomSource


__all__ = (
    "TSPPathSolution",
)


class TSPPathSolution(SingleObjectiveSolution):
    """Represents a solution to the TSP problem

    The path is stored open: the first town is the start of the tour and is not repeated at the end. The cost
    is the length of the closed circuit.
    """

    __slots__ = (
        "_cost",
        "towns",
    )
    if TYPE_CHECKING:
        _cost: float
        towns: Tuple[Town, ...]

    def __init__(self, towns: Iterable[Town], /) -> None:
        self.towns = tuple(towns)

        seen: Set[Town] = set()
        for town in self.towns:
            if town in seen:
                raise DuplicateTown(town)

            seen.add(town)

        self._cost = tour_length(self.towns, closed=True)

    @property
    def path(self) -> Tuple[Tuple[Union[int, float], Union[int, float]], ...]:
        return tuple(town.as_tuple() for town in self.towns)

    def cost(self) -> float:
        return self._cost

    def open_length(self) -> float:
        return tour_length(self.towns, closed=False)

    def snapshot(self) -> Tuple[Town, ...]:
        return self.towns

    def can_move(self) -> bool:
        return len(self.towns) >= 3

    def get_neighborhoods(self) -> Tuple[BaseNeighborhood[TSPPathSolution], ...]:
        return (
            SegmentReverse(self),
            SegmentRelocate(self),
        )

    def random_segment(self, rng: RandomSource, *, max_retries: int) -> Tuple[int, int]:
        """Sample the bounds [start, end) of a random segment that never contains the first town

        Both bounds are drawn from [1, n] and drawn again while they are equal, so the segment may reach the
        last town.
        """
        size = len(self.towns)
        if size < 3:
            raise PathTooShort(size)

        for _ in range(max_retries):
            start = rng.uniform_int(1, size)
            end = rng.uniform_int(1, size)
            if start != end:
                return (start, end) if start < end else (end, start)

        raise RetryLimitExceeded("sampling a segment", max_retries)

    def reverse(self, start: int, end: int) -> TSPPathSolution:
        """Returns a new solution with the segment [start, end) reversed"""
        if not 0 < start < end <= len(self.towns):
            raise ValueError(f"Invalid segment [{start}, {end}) for a path of {len(self.towns)} towns")

        towns = self.towns
        return self.__class__(towns[:start] + towns[start:end][::-1] + towns[end:])

    def relocate(self, start: int, end: int, position: int) -> TSPPathSolution:
        """Returns a new solution with the segment [start, end) moved

        The segment is removed first, then inserted before index `position` of the remaining towns.
        """
        if not 0 < start < end <= len(self.towns):
            raise ValueError(f"Invalid segment [{start}, {end}) for a path of {len(self.towns)} towns")

        segment = self.towns[start:end]
        remaining = self.towns[:start] + self.towns[end:]
        if not 0 < position <= len(remaining):
            raise ValueError(f"Invalid position {position} for {len(remaining)} remaining towns")

        return self.__class__(remaining[:position] + segment + remaining[position:])

    @classmethod
    def initial(cls, domain: DomainConfig, *, rng: RandomSource) -> TSPPathSolution:
        """Generate a path of `domain.towns_count` distinct towns with random coordinates

        Raises `DomainTooSmall` before sampling anything if the domain cannot hold that many towns.
        """
        if domain.towns_count > domain.capacity:
            raise DomainTooSmall(domain.towns_count, domain.capacity)

        max_retries = domain.sampling_retries()
        towns: List[Town] = []
        seen: Set[Town] = set()
        attempts = 0
        while len(towns) < domain.towns_count:
            if attempts == max_retries:
                raise TownSamplingExhausted(domain.towns_count, attempts)

            attempts += 1
            town = Town(rng.uniform_int(0, domain.x_max + 1), rng.uniform_int(0, domain.y_max + 1))
            if town not in seen:
                seen.add(town)
                towns.append(town)

        return cls(towns)

    @classmethod
    def from_path(cls, path: Sequence[Tuple[Union[int, float], Union[int, float]]], /) -> TSPPathSolution:
        return cls(Town(x, y) for x, y in path)

    def __len__(self) -> int:
        return len(self.towns)

    def __hash__(self) -> int:
        return hash(self.towns)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} cost={self._cost} path={self.path}>"
