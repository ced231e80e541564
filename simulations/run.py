# simulations/run.py

from __future__ import annotations

import random
from typing import Optional, Sequence

from coupon_collector import CumulativeDistribution, run_batch
from coupon_collector.simulation import ProgressFn

from .common import ExperimentSpec, ExperimentResult, Timer


def run_experiment(
    probabilities: Sequence[float],
    simulations: int,
    max_runs: int,
    seed: Optional[int] = 42,
    progress: Optional[ProgressFn] = None,
) -> ExperimentResult:
    """
    Run a batch of collection trials and return an ExperimentResult.

    Parameters
    ----------
    probabilities:
        Per-item probabilities (sum <= 1; the rest is the miss mass).
    simulations:
        Number of trials.
    max_runs:
        Draw cap per trial.
    seed:
        RNG seed. None draws a fresh seed from system entropy.
    progress:
        Optional callback receiving completion percentages.

    Returns
    -------
    ExperimentResult
    """
    spec = ExperimentSpec(
        probabilities=tuple(probabilities),
        simulations=simulations,
        max_runs=max_runs,
    )
    rng = random.Random(seed)

    with Timer() as t:
        batch = run_batch(
            spec.probabilities,
            spec.simulations,
            spec.max_runs,
            rng=rng,
            progress=progress,
        )

    return ExperimentResult(
        spec=spec,
        histogram=batch.histogram,
        incomplete=batch.incomplete,
        runtime_s=t.elapsed_s,
        meta={
            "seed": seed,
            "miss_probability": CumulativeDistribution(spec.probabilities).miss_probability,
        },
    )


def run_pair(
    probabilities_a: Sequence[float],
    probabilities_b: Sequence[float],
    simulations: int,
    max_runs: int,
    seed: Optional[int] = 42,
):
    """
    Convenience helper: run two probability vectors with the same
    simulation count, draw cap and seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(
        probabilities=probabilities_a,
        simulations=simulations,
        max_runs=max_runs,
        seed=seed,
    )
    rb = run_experiment(
        probabilities=probabilities_b,
        simulations=simulations,
        max_runs=max_runs,
        seed=seed,
    )
    return ra, rb
