from __future__ import annotations

import math
import os
import platform
import sys
from typing import Any, Sequence, overload


__all__ = (
    "ngettext",
    "display_platform",
    "isclose",
)


def ngettext(predicate: bool, if_true: str, if_false: str, /) -> str:
    return if_true if predicate else if_false


def display_platform() -> None:
    cpu_count = os.cpu_count() or 1

    display = f"Running on {sys.platform} with {cpu_count} " + ngettext(cpu_count == 1, "CPU", "CPUs") + "\n"
    display += f"Python {sys.version}\n"
    display += ", ".join((platform.platform(), platform.processor())) + "\n"
    display += "-" * 30

    print(display)


@overload
def isclose(
    first: float,
    second: float,
    /,
) -> bool: ...


@overload
def isclose(
    first: Sequence[float],
    second: Sequence[float],
    /,
) -> bool: ...


def isclose(first: Any, second: Any, /) -> bool:
    try:
        return len(first) == len(second) and all(isclose(f, s) for f, s in zip(first, second))
    except TypeError:
        return math.isclose(first, second, rel_tol=1e-9, abs_tol=1e-9)
