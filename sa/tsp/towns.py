from __future__ import annotations

from dataclasses import dataclass
from math import sqrt
from typing import Sequence, Tuple, Union


__all__ = (
    "Town",
    "tour_length",
)


@dataclass(frozen=True, slots=True)
class Town:
    x: Union[int, float]
    y: Union[int, float]

    def distance(self, other: Town, /) -> float:
        return sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def as_tuple(self) -> Tuple[Union[int, float], Union[int, float]]:
        return (self.x, self.y)


def tour_length(towns: Sequence[Town], *, closed: bool) -> float:
    """Sum of the Euclidean distances between consecutive towns

    If `closed` is `True`, the distance from the last town back to the first one is included.
    Paths with fewer than 2 towns have a length of 0.
    """
    if len(towns) < 2:
        return 0.0

    result = 0.0
    for index in range(1, len(towns)):
        result += towns[index - 1].distance(towns[index])

    if closed:
        result += towns[-1].distance(towns[0])

    return result
