from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from .bases import BaseSolution


__all__ = (
    "Outcome",
    "AnnealingResult",
)


Outcome = Literal["done", "stagnated", "cancelled"]
_ST = TypeVar("_ST", bound=BaseSolution)


@dataclass(frozen=True, kw_only=True, slots=True)
class AnnealingResult(Generic[_ST]):
    """The outcome of a simulated annealing run

    Parameters
    -----
    solution:
        The current solution when the search terminated
    best:
        The solution with the lowest cost among the visited ones
    outcome:
        `"done"` when the temperature reached its floor, `"stagnated"` when no neighbor was accepted within the
        attempt budget of a temperature, `"cancelled"` when the caller requested cancellation
    temperature:
        The last temperature visited
    temperature_steps:
        The number of temperatures visited
    proposals:
        The number of neighbors generated
    accepted:
        The number of neighbors accepted
    seed:
        The seed of the random source used
    """

    solution: _ST
    best: _ST
    outcome: Outcome
    temperature: float
    temperature_steps: int
    proposals: int
    accepted: int
    seed: int
