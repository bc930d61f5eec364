from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ConfigurationError, RetryLimitExceeded, SimulatedAnnealingException
if TYPE_CHECKING:
    from .towns import Town


__all__ = (
    "TSPException",
    "DomainTooSmall",
    "TownSamplingExhausted",
    "DuplicateTown",
    "PathTooShort",
)


class TSPException(SimulatedAnnealingException):
    """Base class for all exceptions from the TSP solver"""
    pass


class DomainTooSmall(ConfigurationError):
    """Exception raised when the coordinate domain cannot hold the requested number of distinct towns"""

    __slots__ = (
        "towns_count",
        "capacity",
    )
    if TYPE_CHECKING:
        towns_count: int
        capacity: int

    def __init__(self, towns_count: int, capacity: int, /) -> None:
        super().__init__("towns_count", towns_count, f"the domain only holds {capacity} distinct towns")
        self.towns_count = towns_count
        self.capacity = capacity


class TownSamplingExhausted(ConfigurationError, RetryLimitExceeded):
    """Exception raised when random sampling fails to collect enough distinct towns within the retry limit

    Usually the domain is barely larger than the requested number of towns, or the retry limit is set too low.
    """

    __slots__ = (
        "towns_count",
        "attempts",
    )
    if TYPE_CHECKING:
        towns_count: int
        attempts: int

    def __init__(self, towns_count: int, attempts: int, /) -> None:
        SimulatedAnnealingException.__init__(self, f"Gave up on sampling {towns_count} distinct towns after {attempts} attempts")
        self.towns_count = towns_count
        self.attempts = attempts


class DuplicateTown(TSPException):
    """Exception raised when a path visits the same town more than once"""

    __slots__ = (
        "town",
    )
    if TYPE_CHECKING:
        town: Town

    def __init__(self, town: Town, /) -> None:
        super().__init__(f"Town {town!r} appears more than once in the path")
        self.town = town


class PathTooShort(TSPException):
    """Exception raised when requesting a segment of a path with fewer than 3 towns"""

    def __init__(self, length: int, /) -> None:
        super().__init__(f"A path of {length} towns has no movable segment (3 or more towns required)")
