from __future__ import annotations

from typing import Any


__all__ = (
    "SimulatedAnnealingException",
    "ConfigurationError",
    "InvalidRandomBounds",
    "RetryLimitExceeded",
)


class SimulatedAnnealingException(Exception):
    """Base class for all exceptions from this library"""
    pass


class ConfigurationError(SimulatedAnnealingException, ValueError):
    """Exception raised when the search is configured with unusable parameters"""

    def __init__(self, name: str, value: Any, requirement: str, /) -> None:
        super().__init__(f"Invalid {name} = {value!r}: {requirement}")


class InvalidRandomBounds(SimulatedAnnealingException, ValueError):
    """Exception raised when sampling an integer from an empty range"""

    def __init__(self, minimum: int, offset: int, /) -> None:
        super().__init__(f"Cannot sample from [{minimum}, {minimum} + {offset}): offset must be 1 or more")


class RetryLimitExceeded(SimulatedAnnealingException):
    """Exception raised when a resampling loop gives up"""

    def __init__(self, operation: str, attempts: int, /) -> None:
        super().__init__(f"Gave up on {operation} after {attempts} attempts")
