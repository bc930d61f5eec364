from __future__ import annotations

from typing import Callable, Iterator, Optional, Union, TYPE_CHECKING

from tqdm import tqdm
if TYPE_CHECKING:
    from typing_extensions import Self

from .bases import BaseSolution
from .costs import BaseCostComparison
from .results import AnnealingResult, Outcome
from ..acceptance import accept
from ..config import AnnealingConfig
from ..cooling import count_temperatures, temperatures
from ..rng import RandomSource
if TYPE_CHECKING:
    from ..reporters import BaseReporter


__all__ = ("SingleObjectiveSolution",)


class SingleObjectiveSolution(BaseSolution, BaseCostComparison):
    """Base class for solutions to a single-objective optimization problem"""

    __slots__ = ()

    @classmethod
    def simulated_annealing(
        cls,
        initial: Self,
        *,
        config: AnnealingConfig,
        rng: RandomSource,
        reporter: Optional[BaseReporter] = None,
        use_tqdm: bool = False,
        cancelled: Optional[Callable[[], bool]] = None,
    ) -> AnnealingResult[Self]:
        """Run the simulated annealing algorithm starting from the given solution.

        At each temperature, neighbors of the current solution are proposed until one of them is accepted, then
        the temperature is cooled down. If no neighbor is accepted within the attempt budget of a temperature,
        the whole search stops early.

        Parameters
        -----
        initial:
            The starting solution
        config:
            The annealing schedule
        rng:
            The random source for neighbor generation and acceptance draws
        reporter:
            If given, receives the initial solution and the solution at termination
        use_tqdm:
            Whether to display the progress bar
        cancelled:
            Polled before each proposal, the search stops as soon as it returns `True`

        Returns
        -----
        The termination outcome along with the final and the best solutions.
        """
        if reporter is not None:
            reporter.report(initial.snapshot(), event="initial")

        result = current = initial
        outcome: Outcome = "done"
        temperature = config.t_max
        temperature_steps = proposals = accepted = 0

        if current.can_move():
            budget = config.attempts_budget(len(current))
            iterations: Union[Iterator[float], tqdm[float]] = temperatures(config)
            if use_tqdm:
                iterations = tqdm(iterations, total=count_temperatures(config), ascii=" █")

            try:
                for temperature in iterations:
                    if isinstance(iterations, tqdm):
                        iterations.set_description_str(f"Simulated annealing ({current.cost()}/{result.cost()})")

                    temperature_steps += 1
                    remaining = budget
                    while True:
                        if cancelled is not None and cancelled():
                            outcome = "cancelled"
                            break

                        candidate = current.random_neighbor(rng=rng, max_retries=config.max_segment_retries)
                        proposals += 1

                        if accept(candidate.cost_delta(current), temperature, rng):
                            current = candidate
                            accepted += 1
                            if current < result:
                                result = current

                            break

                        remaining -= 1
                        if remaining == 0:
                            outcome = "stagnated"
                            break

                    if outcome != "done":
                        break

            finally:
                if isinstance(iterations, tqdm):
                    iterations.close()

        if reporter is not None:
            reporter.report(current.snapshot(), event="final")

        return AnnealingResult(
            solution=current,
            best=result,
            outcome=outcome,
            temperature=temperature,
            temperature_steps=temperature_steps,
            proposals=proposals,
            accepted=accepted,
            seed=rng.seed,
        )
