from typing import Sequence, Tuple

from .validation import validate_probabilities


def build_cumulative(probabilities: Sequence[float]) -> Tuple[float, ...]:
    """
    Turn a probability vector into running sums:

        c[0] = p[0]
        c[i] = c[i - 1] + p[i]

    Raises InvalidInputError for an empty vector, a negative entry, or a
    sum above one.
    """
    validate_probabilities(probabilities).raise_for_errors()

    cumulative = []
    acc = 0.0
    for p in probabilities:
        acc += p
        cumulative.append(acc)
    return tuple(cumulative)


def sample_outcome(cumulative: Sequence[float], r: float) -> int:
    """
    Map one uniform draw r in [0, 1) to an item index.

    Returns the first index whose cumulative bound reaches r, so a draw
    exactly on c[i] belongs to item i. Returns len(cumulative) for a miss.
    """
    for i, bound in enumerate(cumulative):
        if r <= bound:
            return i

    return len(cumulative)


class CumulativeDistribution:
    """
    CumulativeDistribution

    Immutable sampling form of a probability vector. Any mass left over
    below 1.0 is the "miss" outcome, reported by sample() as `miss_index`
    (one past the last item).
    """

    __slots__ = ("_probabilities", "_cumulative")

    def __init__(self, probabilities: Sequence[float]):
        self._cumulative = build_cumulative(probabilities)
        self._probabilities = tuple(float(p) for p in probabilities)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def sample(self, r: float) -> int:
        return sample_outcome(self._cumulative, r)

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    @property
    def probabilities(self) -> Tuple[float, ...]:
        return self._probabilities

    @property
    def bounds(self) -> Tuple[float, ...]:
        return self._cumulative

    @property
    def miss_index(self) -> int:
        return len(self._cumulative)

    @property
    def total(self) -> float:
        return self._cumulative[-1]

    @property
    def miss_probability(self) -> float:
        return max(0.0, 1.0 - self.total)

    def __len__(self) -> int:
        return len(self._cumulative)

    def __repr__(self) -> str:
        return f"CumulativeDistribution({list(self._probabilities)!r})"
