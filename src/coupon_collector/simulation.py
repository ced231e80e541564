import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .distribution import CumulativeDistribution
from .trial import CollectionTrial
from .validation import InvalidInputError, validate_simulation_inputs

logger = logging.getLogger(__name__)

# Progress is reported at 0%, 10%, ..., 90% and finally 100%.
PROGRESS_STEPS = 10

ProgressFn = Callable[[int], None]


@dataclass
class BatchResult:
    """
    Output of one simulation batch.

    histogram[i] is the number of trials that ended after i + 1 draws.
    `incomplete` counts trials that hit the draw cap without finding every
    item; they are included in the last bucket.
    """
    histogram: List[int]
    simulations: int
    max_runs: int
    incomplete: int = 0

    def pairs(self) -> List[Tuple[int, int]]:
        return list(histogram_pairs(self.histogram))


def run_batch(
    probabilities: Sequence[float],
    simulations: int,
    max_runs: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    progress: Optional[ProgressFn] = None,
) -> BatchResult:
    """
    Run `simulations` independent trials and accumulate the histogram of
    draw counts.

    Parameters
    ----------
    probabilities:
        Per-item probabilities; the shortfall below 1.0 is the miss mass.
    simulations:
        Number of trials.
    max_runs:
        Draw cap per trial.
    rng:
        Random stream to draw from. When omitted a new random.Random(seed)
        is created.
    seed:
        Seed for the stream created when rng is omitted. Passing both rng
        and seed is an error.
    progress:
        Optional callback receiving a completion percentage. Decile d is
        reported once the first ceil(d * simulations / 10) trials are done,
        so every label from 0 to 90 is sent exactly once, followed by 100.
        It is called between trials and never touches the random stream.

    Raises
    ------
    InvalidInputError
        Before any trial is run, if the inputs are invalid.
    """
    validate_simulation_inputs(probabilities, simulations, max_runs).raise_for_errors()

    if rng is not None and seed is not None:
        raise InvalidInputError(["pass either rng or seed, not both"])

    distribution = CumulativeDistribution(probabilities)
    if rng is None:
        rng = random.Random(seed)

    logger.debug(
        "starting batch: simulations=%d max_runs=%d items=%d miss_probability=%.6f",
        simulations, max_runs, len(distribution), distribution.miss_probability,
    )

    histogram = [0] * max_runs
    incomplete = 0
    next_decile = 0

    for s in range(simulations):
        while next_decile < PROGRESS_STEPS and s * PROGRESS_STEPS >= next_decile * simulations:
            _notify(progress, next_decile * (100 // PROGRESS_STEPS))
            next_decile += 1

        trial = CollectionTrial(distribution, max_runs, rng)
        draws = trial.run()
        histogram[draws - 1] += 1
        if not trial.completed:
            incomplete += 1

    while next_decile < PROGRESS_STEPS:
        _notify(progress, next_decile * (100 // PROGRESS_STEPS))
        next_decile += 1
    _notify(progress, 100)
    logger.debug("finished batch: incomplete=%d", incomplete)

    return BatchResult(
        histogram=histogram,
        simulations=simulations,
        max_runs=max_runs,
        incomplete=incomplete,
    )


def run_simulations(
    probabilities: Sequence[float],
    simulations: int,
    max_runs: int,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    progress: Optional[ProgressFn] = None,
) -> List[int]:
    """
    Same as run_batch() but returns only the completion histogram.
    """
    return run_batch(
        probabilities,
        simulations,
        max_runs,
        rng=rng,
        seed=seed,
        progress=progress,
    ).histogram


def histogram_pairs(histogram: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """
    Yield (run_count, occurrences) for run_count = 1 .. len(histogram).
    """
    for i, occurrences in enumerate(histogram):
        yield i + 1, occurrences


def _notify(progress: Optional[ProgressFn], percent: int) -> None:
    logger.debug("progress: %d%%", percent)
    if progress is not None:
        progress(percent)
