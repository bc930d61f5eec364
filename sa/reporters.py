from __future__ import annotations

import sys
from typing import List, Literal, Optional, Sequence, TextIO, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .tsp import Town


__all__ = (
    "ReportEvent",
    "BaseReporter",
    "ConsoleReporter",
    "CollectReporter",
)


ReportEvent = Literal["initial", "final"]


class BaseReporter:
    """Receives snapshots of the tour during a search"""

    __slots__ = ()

    def report(self, towns: Sequence[Town], *, event: ReportEvent) -> None:
        """Called after the initial tour is generated and once more when the search terminates

        Subclasses must implement this.
        """
        raise NotImplementedError


class ConsoleReporter(BaseReporter):
    """Print every town as `[x][y]` on its own line, followed by an empty line

    Parameters
    -----
    file:
        The stream to write to, defaults to `sys.stdout` (resolved at report time)
    header:
        Whether to print a line naming the event before the towns
    """

    __slots__ = (
        "file",
        "header",
    )
    if TYPE_CHECKING:
        file: Optional[TextIO]
        header: bool

    def __init__(self, *, file: Optional[TextIO] = None, header: bool = False) -> None:
        self.file = file
        self.header = header

    def report(self, towns: Sequence[Town], *, event: ReportEvent) -> None:
        file = sys.stdout if self.file is None else self.file
        if self.header:
            print(f"{event.capitalize()} path:", file=file)

        for town in towns:
            print(f"[{town.x}][{town.y}]", file=file)

        print(file=file)


class CollectReporter(BaseReporter):
    """Keep every report in memory"""

    __slots__ = (
        "reports",
    )
    if TYPE_CHECKING:
        reports: List[Tuple[ReportEvent, Tuple[Town, ...]]]

    def __init__(self) -> None:
        self.reports = []

    def report(self, towns: Sequence[Town], *, event: ReportEvent) -> None:
        self.reports.append((event, tuple(towns)))

    def events(self) -> List[ReportEvent]:
        return [event for event, _ in self.reports]
