from __future__ import annotations

from typing import Tuple, TYPE_CHECKING
from unittest.mock import patch

import pytest
from tqdm import tqdm

from sa import AnnealingConfig, CollectReporter, RandomSource, SingleObjectiveSolution, count_temperatures, tsp, utils
if TYPE_CHECKING:
    from sa import BaseNeighborhood


class ScalarSolution(SingleObjectiveSolution):
    """A solution whose only neighbor is `step` away"""

    __slots__ = (
        "value",
        "step",
    )

    def __init__(self, value: float, *, step: float) -> None:
        self.value = value
        self.step = step

    def cost(self) -> float:
        return self.value

    def get_neighborhoods(self) -> Tuple[BaseNeighborhood[ScalarSolution], ...]:
        return ()

    def random_neighbor(self, *, rng: RandomSource, max_retries: int) -> ScalarSolution:
        return ScalarSolution(self.value + self.step, step=self.step)

    def snapshot(self) -> Tuple[float]:
        return (self.value,)

    def __len__(self) -> int:
        return 2

    def __hash__(self) -> int:
        return hash(self.value)


@pytest.mark.parametrize("seed", range(10))
def test_unit_square_converges(seed: int) -> None:
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=4, x_max=1, y_max=1), rng=RandomSource(seed))
    assert set(initial.path) == {(0, 0), (0, 1), (1, 0), (1, 1)}

    result = tsp.TSPPathSolution.simulated_annealing(
        initial,
        config=AnnealingConfig(t_max=1000.0, t_min=0.09, t_step=0.01),
        rng=RandomSource(seed),
    )
    assert utils.isclose(result.solution.cost(), 4.0)
    assert utils.isclose(result.best.cost(), 4.0)
    assert set(result.solution.towns) == set(initial.towns)
    assert result.solution.towns[0] == initial.towns[0]
    assert result.seed == seed


def test_reproducible() -> None:
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=10), rng=RandomSource(7))
    config = AnnealingConfig(t_max=100.0, t_min=1.0, t_step=0.1)

    first = tsp.TSPPathSolution.simulated_annealing(initial, config=config, rng=RandomSource(3))
    second = tsp.TSPPathSolution.simulated_annealing(initial, config=config, rng=RandomSource(3))
    assert first.solution.towns == second.solution.towns
    assert first.proposals == second.proposals


def test_random_problem_improves() -> None:
    rng = RandomSource(0)
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(), rng=rng)
    result = tsp.TSPPathSolution.simulated_annealing(initial, config=AnnealingConfig(), rng=rng)

    assert result.outcome in ("done", "stagnated")
    assert result.best.cost() <= initial.cost()
    assert result.best.cost() <= result.solution.cost()
    assert set(result.solution.towns) == set(initial.towns)
    assert result.accepted <= result.proposals


def test_done() -> None:
    config = AnnealingConfig(t_max=10.0, t_min=1.0, t_step=0.5)
    result = ScalarSolution.simulated_annealing(ScalarSolution(100.0, step=-1.0), config=config, rng=RandomSource(0))

    steps = count_temperatures(config)
    assert result.outcome == "done"
    assert result.temperature_steps == steps
    assert result.proposals == result.accepted == steps
    assert result.solution.value == 100.0 - steps
    assert result.best is result.solution
    assert result.temperature > config.t_min


def test_stagnated() -> None:
    config = AnnealingConfig(t_max=1.0, t_min=0.5, t_step=0.1, attempts_multiplier=3)
    initial = ScalarSolution(0.0, step=1000.0)
    result = ScalarSolution.simulated_annealing(initial, config=config, rng=RandomSource(0))

    assert result.outcome == "stagnated"
    assert result.temperature_steps == 1
    assert result.temperature == 1.0
    assert result.proposals == 6
    assert result.accepted == 0
    assert result.solution is initial
    assert result.best is initial


def test_cancelled() -> None:
    calls = []

    def cancelled() -> bool:
        calls.append(None)
        return len(calls) > 5

    reporter = CollectReporter()
    result = ScalarSolution.simulated_annealing(
        ScalarSolution(0.0, step=-1.0),
        config=AnnealingConfig(),
        rng=RandomSource(0),
        reporter=reporter,
        cancelled=cancelled,
    )

    assert result.outcome == "cancelled"
    assert result.proposals == result.accepted == 5
    assert result.temperature_steps == 6
    assert result.solution.value == -5.0
    assert reporter.events() == ["initial", "final"]


def test_reporter() -> None:
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=8), rng=RandomSource(1))
    reporter = CollectReporter()
    result = tsp.TSPPathSolution.simulated_annealing(
        initial,
        config=AnnealingConfig(t_max=10.0, t_min=1.0, t_step=0.5),
        rng=RandomSource(1),
        reporter=reporter,
    )

    assert reporter.events() == ["initial", "final"]
    assert reporter.reports[0][1] == initial.towns
    assert reporter.reports[1][1] == result.solution.towns


def test_floor_above_start() -> None:
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=5), rng=RandomSource(0))
    result = tsp.TSPPathSolution.simulated_annealing(
        initial,
        config=AnnealingConfig(t_max=0.05, t_min=0.09),
        rng=RandomSource(0),
    )

    assert result.outcome == "done"
    assert result.temperature_steps == 0
    assert result.proposals == 0
    assert result.solution is initial


def test_too_short_to_move() -> None:
    initial = tsp.TSPPathSolution.from_path([(0, 0), (3, 4)])
    reporter = CollectReporter()
    result = tsp.TSPPathSolution.simulated_annealing(initial, config=AnnealingConfig(), rng=RandomSource(0), reporter=reporter)

    assert result.outcome == "done"
    assert result.proposals == 0
    assert result.solution is initial
    assert utils.isclose(result.solution.cost(), 10.0)
    assert reporter.events() == ["initial", "final"]


def test_progress_bar() -> None:
    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=6), rng=RandomSource(0))
    result = tsp.TSPPathSolution.simulated_annealing(
        initial,
        config=AnnealingConfig(t_max=10.0, t_min=1.0, t_step=0.5),
        rng=RandomSource(0),
        use_tqdm=True,
    )

    assert result.temperature_steps > 0


def test_progress_bar_closed_on_error() -> None:
    def cancelled() -> bool:
        raise RuntimeError("interrupted")

    initial = tsp.TSPPathSolution.initial(tsp.DomainConfig(towns_count=6), rng=RandomSource(0))
    with patch.object(tqdm, "close") as close:
        with pytest.raises(RuntimeError):
            tsp.TSPPathSolution.simulated_annealing(
                initial,
                config=AnnealingConfig(t_max=10.0, t_min=1.0, t_step=0.5),
                rng=RandomSource(0),
                use_tqdm=True,
                cancelled=cancelled,
            )

        assert close.called
