"""Tests for the cumulative distribution builder and the sampler."""

import random

import pytest

from coupon_collector import (
    CumulativeDistribution,
    InvalidInputError,
    build_cumulative,
    sample_outcome,
)


class TestBuildCumulative:
    """Running sums of a probability vector."""

    def test_running_sums(self):
        assert build_cumulative([0.2, 0.3, 0.5]) == pytest.approx((0.2, 0.5, 1.0))

    def test_single_item(self):
        assert build_cumulative([1.0]) == (1.0,)

    def test_non_decreasing_and_last_is_sum(self):
        rng = random.Random(11)
        for _ in range(50):
            k = rng.randint(1, 8)
            raw = [rng.random() for _ in range(k)]
            scale = rng.random() / sum(raw)
            p = [x * scale for x in raw]
            p[rng.randrange(k)] = 0.0

            c = build_cumulative(p)
            assert len(c) == k
            assert all(a <= b for a, b in zip(c, c[1:]))
            assert c[-1] == pytest.approx(sum(p), abs=1e-9)

    def test_zero_probability_repeats_bound(self):
        assert build_cumulative([0.5, 0.0, 0.25]) == (0.5, 0.5, 0.75)

    @pytest.mark.parametrize("probabilities", [[], [-0.1, 0.5], [0.7, 0.7]])
    def test_invalid_vectors(self, probabilities):
        with pytest.raises(InvalidInputError):
            build_cumulative(probabilities)


class TestSampleOutcome:
    """Mapping a uniform draw to an item index or the miss sentinel."""

    def test_picks_first_reached_bound(self):
        c = (0.2, 0.5, 1.0)
        assert sample_outcome(c, 0.0) == 0
        assert sample_outcome(c, 0.1) == 0
        assert sample_outcome(c, 0.3) == 1
        assert sample_outcome(c, 0.99) == 2

    def test_tie_goes_to_lower_index(self):
        """A draw exactly on c[i] belongs to item i, not i + 1."""
        c = (0.25, 0.5, 0.75)
        assert sample_outcome(c, 0.25) == 0
        assert sample_outcome(c, 0.5) == 1
        assert sample_outcome(c, 0.75) == 2

    def test_miss_returns_length(self):
        c = (0.25, 0.5)
        assert sample_outcome(c, 0.5000001) == 2
        assert sample_outcome(c, 0.9) == 2

    def test_zero_probability_item_is_never_returned(self):
        c = build_cumulative([0.5, 0.0, 0.5])
        rng = random.Random(3)
        outcomes = {sample_outcome(c, rng.random()) for _ in range(2000)}
        assert 1 not in outcomes

    def test_returned_index_brackets_draw(self):
        c = build_cumulative([0.1, 0.2, 0.0, 0.3])
        k = len(c)
        rng = random.Random(5)
        for _ in range(1000):
            r = rng.random()
            i = sample_outcome(c, r)
            assert 0 <= i <= k
            if i < k:
                assert r <= c[i]
                assert i == 0 or c[i - 1] < r
            else:
                assert r > c[-1]


class TestCumulativeDistribution:
    """The immutable sampling wrapper."""

    def test_properties(self):
        dist = CumulativeDistribution([0.25, 0.5])
        assert len(dist) == 2
        assert dist.bounds == (0.25, 0.75)
        assert dist.probabilities == (0.25, 0.5)
        assert dist.miss_index == 2
        assert dist.total == pytest.approx(0.75)
        assert dist.miss_probability == pytest.approx(0.25)

    def test_full_mass_has_no_miss(self):
        assert CumulativeDistribution([0.5, 0.5]).miss_probability == 0.0

    def test_sample_matches_function(self):
        dist = CumulativeDistribution([0.25, 0.5])
        for r in (0.0, 0.25, 0.5, 0.75, 0.8):
            assert dist.sample(r) == sample_outcome(dist.bounds, r)

    def test_does_not_alias_input(self):
        p = [0.5, 0.25]
        dist = CumulativeDistribution(p)
        p[0] = 0.0
        assert dist.probabilities == (0.5, 0.25)

    def test_invalid(self):
        with pytest.raises(InvalidInputError):
            CumulativeDistribution([])
