from __future__ import annotations

import random
import time
from typing import Optional, TYPE_CHECKING

from .errors import InvalidRandomBounds


__all__ = ("RandomSource",)


class RandomSource:
    """The random source shared by every component of a single search.

    Each search owns one instance and passes it explicitly to whatever needs randomness,
    so that a seeded run can be reproduced exactly.

    Parameters
    -----
    seed:
        The seed of the underlying generator. When omitted, a seed is derived from the wall clock.
    """

    __slots__ = (
        "__random",
        "__seed",
    )
    if TYPE_CHECKING:
        __random: random.Random
        __seed: int

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.time_ns()

        self.__seed = seed
        self.__random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self.__seed

    def uniform_real(self) -> float:
        """Returns a real number in [0, 1)"""
        return self.__random.random()

    def uniform_int(self, minimum: int, offset: int) -> int:
        """Returns an integer in [minimum, minimum + offset)"""
        if offset < 1:
            raise InvalidRandomBounds(minimum, offset)

        return minimum + self.__random.randrange(offset)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} seed={self.__seed}>"
