from __future__ import annotations

import math
from typing import Iterator

from .config import AnnealingConfig


__all__ = (
    "exponential_cooling",
    "temperatures",
    "count_temperatures",
)


def exponential_cooling(temperature: float, step: float, /) -> float:
    return temperature * math.exp(-step)


def temperatures(config: AnnealingConfig, /) -> Iterator[float]:
    """Yield the temperatures of the schedule, from `t_max` down to (excluding) `t_min`"""
    temperature = config.t_max
    while temperature > config.t_min:
        yield temperature
        temperature = exponential_cooling(temperature, config.t_step)


def count_temperatures(config: AnnealingConfig, /) -> int:
    # Must match temperatures() exactly, including rounding near t_min
    return sum(1 for _ in temperatures(config))
