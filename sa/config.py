from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError


__all__ = ("AnnealingConfig",)


@dataclass(frozen=True, kw_only=True, slots=True)
class AnnealingConfig:
    """Parameters of the annealing schedule

    Parameters
    -----
    t_max:
        The starting temperature
    t_min:
        The search stops once the temperature falls to this value or below
    t_step:
        The exponent of the exponential cooling, each step multiplies the temperature by `exp(-t_step)`
    attempts_multiplier:
        At each temperature, up to `attempts_multiplier * n` neighbors are proposed (n being the number of
        towns). If none of them is accepted, the whole search stops early.
    max_segment_retries:
        The maximum number of draws when sampling the bounds of a segment
    """

    t_max: float = 1000.0
    t_min: float = 0.09
    t_step: float = 0.01
    attempts_multiplier: int = 100
    max_segment_retries: int = 1000

    def __post_init__(self) -> None:
        if not self.t_max > 0:
            raise ConfigurationError("t_max", self.t_max, "must be positive")

        if not self.t_min > 0:
            raise ConfigurationError("t_min", self.t_min, "must be positive")

        if not self.t_step > 0:
            raise ConfigurationError("t_step", self.t_step, "must be positive")

        if self.attempts_multiplier < 1:
            raise ConfigurationError("attempts_multiplier", self.attempts_multiplier, "must be 1 or more")

        if self.max_segment_retries < 1:
            raise ConfigurationError("max_segment_retries", self.max_segment_retries, "must be 1 or more")

    def attempts_budget(self, towns_count: int, /) -> int:
        return self.attempts_multiplier * towns_count
