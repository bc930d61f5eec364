from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigurationError


__all__ = ("DomainConfig",)


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainConfig:
    """The towns of a randomly generated problem

    Towns have integer coordinates in [0, x_max] x [0, y_max].
    """

    towns_count: int = 25
    x_max: int = 25
    y_max: int = 25
    max_sampling_retries: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("towns_count", "x_max", "y_max"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(name, value, "must not be negative")

        if self.max_sampling_retries is not None and self.max_sampling_retries < 1:
            raise ConfigurationError("max_sampling_retries", self.max_sampling_retries, "must be 1 or more")

    @property
    def capacity(self) -> int:
        return (self.x_max + 1) * (self.y_max + 1)

    def sampling_retries(self) -> int:
        if self.max_sampling_retries is None:
            return 1000 * (self.towns_count + 1)

        return self.max_sampling_retries
