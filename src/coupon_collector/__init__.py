"""
Monte Carlo estimate of how many draws it takes to collect at least one of
every item when each draw yields one item (or nothing) with fixed
probabilities.
"""

from .distribution import CumulativeDistribution, build_cumulative, sample_outcome
from .simulation import BatchResult, histogram_pairs, run_batch, run_simulations
from .trial import CollectionTrial, TrialState, run_trial
from .validation import (
    PROBABILITY_TOLERANCE,
    InvalidInputError,
    ValidationResult,
    validate_max_runs,
    validate_probabilities,
    validate_run_parameters,
    validate_simulation_inputs,
)

__all__ = [
    "BatchResult",
    "CollectionTrial",
    "CumulativeDistribution",
    "InvalidInputError",
    "PROBABILITY_TOLERANCE",
    "TrialState",
    "ValidationResult",
    "build_cumulative",
    "histogram_pairs",
    "run_batch",
    "run_simulations",
    "run_trial",
    "sample_outcome",
    "validate_max_runs",
    "validate_probabilities",
    "validate_run_parameters",
    "validate_simulation_inputs",
]
