# simulations/collect.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from coupon_collector import validate_simulation_inputs

from .common import ExperimentResult, format_stats_line
from .report import default_results_filename, write_results
from .run import run_experiment


BANNER = "################################################"

# None means a fresh seed from system entropy on every invocation.
DEFAULT_SEED = None


def _print_progress(percent: int) -> None:
    print(f"Progress: {percent}%")


def _plot(result: ExperimentResult, plot_file: str | None, show: bool) -> None:
    runs = list(range(1, result.spec.max_runs + 1))

    plt.figure(figsize=(8, 4))
    plt.bar(runs, result.histogram, width=1.0)
    plt.title(
        f"Runs for full set (items={result.spec.items}, "
        f"simulations={result.spec.simulations})"
    )
    plt.xlabel("Number of runs for full set")
    plt.ylabel("Occurrences")
    plt.xlim(0.5, result.spec.max_runs + 0.5)
    plt.tight_layout()

    if plot_file:
        plt.savefig(plot_file)
    if show:
        plt.show()
    plt.close()


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Simulates number of runs required to receive at least one copy "
            "of all items with arbitrary probabilities."
        )
    )
    parser.add_argument("simulations", type=int, help="number of simulations")
    parser.add_argument("max_runs", type=int, help="max runs per simulation")
    parser.add_argument(
        "probabilities", type=float, nargs="+",
        help="probability of each item; whatever is left up to 1 is a miss",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed")
    parser.add_argument("--output", default=None, help="results file (default: results-<timestamp>.txt)")
    parser.add_argument("--plot", action="store_true", help="show a histogram plot")
    parser.add_argument("--plot-file", default=None, help="save the histogram plot to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    print(BANNER)
    print("Nifty Monte Carlo Simulator")
    print(
        "Simulates number of runs required to receive at least one copy "
        "of all items with arbitrary probabilities"
    )

    validation = validate_simulation_inputs(args.probabilities, args.simulations, args.max_runs)
    if not validation.ok:
        for err in validation.errors:
            print(f"error: {err}", file=sys.stderr)
        return 2

    print(BANNER)
    print(f"Number of simulations: {args.simulations}")
    print(f"Max runs per simulation: {args.max_runs}")
    print("Item probabilities:")
    for i, p in enumerate(args.probabilities):
        print(f"Item {i + 1}: {p}")

    print(BANNER)
    print("Beginning simulations:")
    result = run_experiment(
        probabilities=args.probabilities,
        simulations=args.simulations,
        max_runs=args.max_runs,
        seed=args.seed,
        progress=_print_progress,
    )
    print(format_stats_line(result))

    filename = args.output or default_results_filename()
    write_results(result.histogram, filename)

    if args.plot or args.plot_file:
        _plot(result, args.plot_file, show=args.plot)

    print(BANNER)
    print(f"Finished execution. Output in file {filename}.")
    return 0


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())
