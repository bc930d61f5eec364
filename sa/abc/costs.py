from __future__ import annotations

from functools import total_ordering
from typing import Any, TYPE_CHECKING, final

if TYPE_CHECKING:
    from typing_extensions import Self


__all__ = ("BaseCostComparison",)


@total_ordering
class BaseCostComparison:
    """Base class for objects holding a real-valued number as their costs. Lower is better."""

    __slots__ = ()

    def cost(self) -> float:
        """The cost of this object

        Subclasses must implement this.
        """
        raise NotImplementedError

    @final
    def cost_delta(self, other: Self, /) -> float:
        """How much worse this object is than `other`, negative when it is an improvement"""
        return self.cost() - other.cost()

    @final
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, self.__class__):
            return self.cost() == other.cost()

        return NotImplemented

    @final
    def __lt__(self, other: Any) -> bool:
        if isinstance(other, self.__class__):
            return self.cost() < other.cost()

        return NotImplemented
