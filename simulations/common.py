# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import math
import time

from coupon_collector import validate_simulation_inputs


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters of one experiment: the item probabilities, how many trials
    to run and the draw cap per trial.
    """
    probabilities: Tuple[float, ...]
    simulations: int
    max_runs: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "probabilities", tuple(self.probabilities))
        validate_simulation_inputs(
            self.probabilities, self.simulations, self.max_runs
        ).raise_for_errors()

    @property
    def items(self) -> int:
        return len(self.probabilities)


@dataclass(frozen=True)
class SummaryStats:
    """
    Summary stats of the draw counts recorded in a histogram.
    """
    min: int
    max: int
    mean: float
    std: float  # population stddev


def summarize_histogram(histogram: List[int]) -> SummaryStats:
    """
    Compute min/max/mean/std of the draw counts, where histogram[i] is the
    number of trials that took i + 1 draws (population stddev).
    """
    n = 0
    for occ in histogram:
        n += occ
    if n == 0:
        raise ValueError("histogram must record at least one trial")

    mn = None
    mx = None
    total = 0
    for i, occ in enumerate(histogram):
        if occ == 0:
            continue
        runs = i + 1
        if mn is None:
            mn = runs
        mx = runs
        total += runs * occ
    mean = total / n

    var_acc = 0.0
    for i, occ in enumerate(histogram):
        d = (i + 1) - mean
        var_acc += occ * d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=mn, max=mx, mean=mean, std=std)


@dataclass
class ExperimentResult:
    """
    Common return type for experiments.
    """
    spec: ExperimentSpec
    histogram: List[int]
    incomplete: int = 0

    stats: SummaryStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if len(self.histogram) != self.spec.max_runs:
            raise ValueError(
                f"histogram length mismatch: expected {self.spec.max_runs}, got {len(self.histogram)}"
            )

        # Sanity: every trial lands in exactly one bucket
        expected = self.spec.simulations
        actual = 0
        for occ in self.histogram:
            actual += occ
        if actual != expected:
            raise ValueError(
                f"histogram sum mismatch: expected {expected}, got {actual}"
            )

        self.stats = summarize_histogram(self.histogram)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def format_stats_line(r: ExperimentResult, label: str = "runs for full set") -> str:
    """
    Human-friendly one-liner for printing in the CLI.
    """
    s = r.stats
    return (
        f"{label}: min={s.min}, max={s.max}, mean={s.mean:.3f}, std={s.std:.3f}"
        + (f", capped={r.incomplete}" if r.incomplete else "")
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
