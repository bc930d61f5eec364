from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, TYPE_CHECKING

from sa import AnnealingConfig, ConfigurationError, ConsoleReporter, RandomSource, tsp, utils


class Namespace(argparse.Namespace):
    if TYPE_CHECKING:
        towns: int
        x_max: int
        y_max: int
        t_max: float
        t_min: float
        t_step: float
        attempts_multiplier: int
        seed: Optional[int]
        verbose: bool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulated annealing algorithm for random Euclidean TSP problems")
    parser.add_argument("-n", "--towns", default=25, type=int, help="the number of towns to generate (default: 25)")
    parser.add_argument("--x-max", default=25, type=int, help="the maximum x coordinate of a town (default: 25)")
    parser.add_argument("--y-max", default=25, type=int, help="the maximum y coordinate of a town (default: 25)")
    parser.add_argument("--t-max", default=1000.0, type=float, help="the initial temperature (default: 1000)")
    parser.add_argument("--t-min", default=0.09, type=float, help="stop once the temperature falls to this value (default: 0.09)")
    parser.add_argument("--t-step", default=0.01, type=float, help="the exponential cooling step (default: 0.01)")
    parser.add_argument("-k", "--attempts-multiplier", default=100, type=int, help="propose up to k * n neighbors at each temperature before giving up (default: 100)")
    parser.add_argument("--seed", type=int, help="the random seed (default: derived from the wall clock)")
    parser.add_argument("-v", "--verbose", action="store_true", help="whether to display the platform and the progress bar")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()

    namespace = Namespace()
    parser.parse_args(argv, namespace=namespace)
    if namespace.verbose:
        utils.display_platform()

    print(namespace)

    rng = RandomSource(namespace.seed)
    try:
        domain = tsp.DomainConfig(towns_count=namespace.towns, x_max=namespace.x_max, y_max=namespace.y_max)
        config = AnnealingConfig(
            t_max=namespace.t_max,
            t_min=namespace.t_min,
            t_step=namespace.t_step,
            attempts_multiplier=namespace.attempts_multiplier,
        )
        initial = tsp.TSPPathSolution.initial(domain, rng=rng)

    except ConfigurationError as exc:
        parser.error(str(exc))

    result = tsp.TSPPathSolution.simulated_annealing(
        initial,
        config=config,
        rng=rng,
        reporter=ConsoleReporter(header=True),
        use_tqdm=namespace.verbose,
    )

    summary: List[str] = [
        f"Outcome = {result.outcome}",
        f"Solution cost = {result.solution.cost()} (initial {initial.cost()}, best seen {result.best.cost()})",
        f"Seed = {result.seed}",
        f"Visited {result.temperature_steps} " + utils.ngettext(result.temperature_steps == 1, "temperature", "temperatures")
        + f" down to T = {result.temperature}, accepted {result.accepted}/{result.proposals} proposals",
    ]
    print("\n".join(summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
