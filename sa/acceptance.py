from __future__ import annotations

import math

from .rng import RandomSource


__all__ = ("accept",)


def accept(delta: float, temperature: float, rng: RandomSource, /) -> bool:
    """The Metropolis criterion.

    An improving candidate (`delta < 0`) is always accepted and no random number is drawn.
    Otherwise the candidate is accepted with probability `exp(-delta / temperature)`. Note that
    a candidate with `delta == 0` is accepted unless the draw is exactly 1, which `uniform_real`
    never returns.

    Parameters
    -----
    delta:
        The cost of the candidate minus the cost of the current solution
    temperature:
        The current temperature, must be positive
    rng:
        The random source to draw from
    """
    if delta < 0:
        return True

    return math.exp(-delta / temperature) > rng.uniform_real()
