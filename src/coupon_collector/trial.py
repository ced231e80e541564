import random
from enum import Enum
from typing import List, Sequence, Union

from .distribution import CumulativeDistribution, sample_outcome
from .validation import InvalidInputError, validate_max_runs


class TrialState(Enum):
    RUNNING = "running"
    DONE = "done"


class CollectionTrial:
    """
    CollectionTrial

    One "collect them all" trial. Each step() consumes exactly one value
    from rng.random() and maps it to an item (or a miss) through the
    cumulative distribution. The trial is DONE once every item has been
    seen at least once or `max_runs` draws have been made.

    A trial that hits the cap reports draws == max_runs, the same as a
    trial that completes on its last allowed draw. Use `completed` to tell
    them apart.

    Single use: the found-items counters belong to this trial only.
    """

    def __init__(
        self,
        cumulative: Union[CumulativeDistribution, Sequence[float]],
        max_runs: int,
        rng: random.Random,
    ):
        validate_max_runs(max_runs).raise_for_errors()

        if isinstance(cumulative, CumulativeDistribution):
            self._bounds = cumulative.bounds
        else:
            self._bounds = tuple(cumulative)
        if not self._bounds:
            raise InvalidInputError(["at least one probability is required"])

        self.max_runs = max_runs
        self._rng = rng

        self.found: List[int] = [0] * len(self._bounds)
        self.draws: int = 0
        self.misses: int = 0
        self._missing: int = len(self._bounds)

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------

    @property
    def completed(self) -> bool:
        return self._missing == 0

    @property
    def state(self) -> TrialState:
        if self.completed or self.draws >= self.max_runs:
            return TrialState.DONE
        return TrialState.RUNNING

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def step(self) -> int:
        """
        Make one draw and record it. Returns the outcome index, which is
        len(found) for a miss.
        """
        if self.state is TrialState.DONE:
            raise RuntimeError("trial is already done")

        self.draws += 1
        outcome = sample_outcome(self._bounds, self._rng.random())
        if outcome < len(self.found):
            if self.found[outcome] == 0:
                self._missing -= 1
            self.found[outcome] += 1
        else:
            self.misses += 1
        return outcome

    def run(self) -> int:
        """
        Draw until DONE and return the number of draws made.
        """
        while self.state is TrialState.RUNNING:
            self.step()
        return self.draws

    def snapshot_found(self) -> List[int]:
        return list(self.found)


def run_trial(
    cumulative: Union[CumulativeDistribution, Sequence[float]],
    max_runs: int,
    rng: random.Random,
) -> int:
    """
    Run a single trial and return its draw count, in [1, max_runs].
    """
    return CollectionTrial(cumulative, max_runs, rng).run()
