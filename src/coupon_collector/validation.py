import math
import numbers
from dataclasses import dataclass
from typing import List, Sequence, Tuple


# Absorbs rounding when probabilities such as 0.1 * 10 are summed.
PROBABILITY_TOLERANCE = 1e-9


class InvalidInputError(ValueError):
    """
    Raised when a probability vector or run parameter is unusable.

    The individual problems are kept on `errors` so callers can report
    them one per line.
    """

    def __init__(self, errors: Sequence[str]):
        self.errors: Tuple[str, ...] = tuple(errors)
        super().__init__("; ".join(self.errors) or "invalid input")


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a validation step. An empty `errors` tuple means valid.
    """
    errors: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(self.errors + other.errors)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise InvalidInputError(self.errors)


def validate_probabilities(probabilities: Sequence[float]) -> ValidationResult:
    """
    Check that the vector is non-empty, finite, non-negative and that its
    sum does not exceed 1 (within PROBABILITY_TOLERANCE).
    """
    if len(probabilities) == 0:
        return ValidationResult(("at least one probability is required",))

    errors: List[str] = []
    total = 0.0
    for i, p in enumerate(probabilities):
        if not math.isfinite(p):
            errors.append(f"probability of item {i + 1} is not a finite number: {p}")
            continue
        if p < 0:
            errors.append(f"probability of item {i + 1} must be >= 0, got {p}")
        total += p

    if not errors and total > 1.0 + PROBABILITY_TOLERANCE:
        errors.append(f"sum of probabilities cannot be greater than one, got {total}")

    return ValidationResult(tuple(errors))


def _check_count(label: str, value) -> List[str]:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return [f"{label} must be an integer, got {value!r}"]
    if value <= 0:
        return [f"{label} must be > 0, got {value}"]
    return []


def validate_max_runs(max_runs: int) -> ValidationResult:
    return ValidationResult(tuple(_check_count("max runs per simulation", max_runs)))


def validate_run_parameters(simulations: int, max_runs: int) -> ValidationResult:
    errors = _check_count("simulations", simulations)
    return ValidationResult(tuple(errors)).merge(validate_max_runs(max_runs))


def validate_simulation_inputs(
    probabilities: Sequence[float],
    simulations: int,
    max_runs: int,
) -> ValidationResult:
    """
    Validate everything a simulation batch needs, collecting all problems
    instead of stopping at the first one.
    """
    return validate_probabilities(probabilities).merge(
        validate_run_parameters(simulations, max_runs)
    )
