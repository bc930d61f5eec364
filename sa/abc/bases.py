from __future__ import annotations

from typing import Any, Final, Generic, Sequence, Type, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self

    from ..rng import RandomSource


__all__ = (
    "BaseSolution",
    "BaseNeighborhood",
)


class BaseSolution:

    __slots__ = ()

    def get_neighborhoods(self) -> Sequence[BaseNeighborhood[Self]]:
        """Returns all neighborhoods of the current solution

        Subclasses must implement this.
        """
        raise NotImplementedError

    def can_move(self) -> bool:
        """Whether this solution has any neighbor at all

        The default implementation returns `True`.
        """
        return True

    def random_neighbor(self, *, rng: RandomSource, max_retries: int) -> Self:
        """Pick a neighborhood uniformly at random and return a random candidate from it

        Parameters
        -----
        rng:
            The random source to draw from
        max_retries:
            Passed to `BaseNeighborhood.random_candidate`
        """
        neighborhoods = self.get_neighborhoods()
        neighborhood = neighborhoods[rng.uniform_int(0, len(neighborhoods))]
        return neighborhood.random_candidate(rng=rng, max_retries=max_retries)

    def snapshot(self) -> Sequence[Any]:
        """The items handed to a reporter

        Subclasses must implement this.
        """
        raise NotImplementedError

    def __len__(self) -> int:
        raise NotImplementedError

    def __hash__(self) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} hash={self.__hash__()}>"


_ST = TypeVar("_ST", bound=BaseSolution, covariant=True)


class BaseNeighborhood(Generic[_ST]):

    __slots__ = (
        "_solution",
        "cls",
    )

    def __init__(self, solution: _ST, /) -> None:
        self._solution: Final[_ST] = solution
        self.cls: Final[Type[_ST]] = type(solution)

    def random_candidate(self, *, rng: RandomSource, max_retries: int) -> _ST:
        """Generate a random candidate solution within the neighborhood of the current one.

        Subclasses must implement this.

        Parameters
        -----
        rng:
            The random source to draw from
        max_retries:
            The maximum number of draws when the sampled move is invalid and must be drawn again

        Returns
        -----
        A new solution, the current one is never modified
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} solution={self._solution!r}>"
