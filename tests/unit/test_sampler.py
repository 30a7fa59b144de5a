"""Tests for resamplekit.data.sampler"""

import numpy as np
import pytest

from resamplekit._exceptions import InvalidArgument
from resamplekit.data.sampler import as_generator, sample_from, sample_indices


class TestAsGenerator:

    def test_same_seed_same_stream(self):
        a = as_generator(42).integers(0, 1000, size=10)
        b = as_generator(42).integers(0, 1000, size=10)
        np.testing.assert_array_equal(a, b)

    def test_generator_passed_through(self):
        rng = np.random.default_rng(1)
        assert as_generator(rng) is rng

    def test_none_gives_fresh_generator(self):
        assert isinstance(as_generator(None), np.random.Generator)

    def test_seed_sequence_accepted(self):
        a = as_generator(np.random.SeedSequence(7)).random()
        b = as_generator(np.random.SeedSequence(7)).random()
        assert a == b

    @pytest.mark.parametrize("bad", ["42", 1.5, True, [1, 2]])
    def test_rejects_non_seed(self, bad):
        with pytest.raises(InvalidArgument, match="`rng`"):
            as_generator(bad)


class TestSampleIndices:

    def test_without_replacement_is_permutation_of_population(self):
        drawn = sample_indices(10, 10, replace=False, rng=as_generator(0))
        np.testing.assert_array_equal(np.sort(drawn), np.arange(10))

    def test_without_replacement_has_no_duplicates(self):
        drawn = sample_indices(100, 30, replace=False, rng=as_generator(0))
        assert len(np.unique(drawn)) == 30
        assert drawn.min() >= 0 and drawn.max() < 100

    def test_too_many_without_replacement(self):
        with pytest.raises(InvalidArgument, match="`k`"):
            sample_indices(5, 6, replace=False, rng=as_generator(0))

    def test_with_replacement_any_size(self):
        drawn = sample_indices(5, 20, replace=True, rng=as_generator(0))
        assert len(drawn) == 20
        assert set(drawn.tolist()) <= set(range(5))

    def test_zero_draws(self):
        drawn = sample_indices(5, 0, replace=False, rng=as_generator(0))
        assert drawn.dtype == np.int64
        assert len(drawn) == 0

    def test_negative_k(self):
        with pytest.raises(InvalidArgument):
            sample_indices(5, -1, replace=True, rng=as_generator(0))

    def test_does_not_touch_global_state(self):
        np.random.seed(0)
        expected = np.random.random()
        np.random.seed(0)
        sample_indices(50, 10, replace=False, rng=as_generator(3))
        assert np.random.random() == expected

    def test_sample_from_returns_elements(self):
        units = np.array([10, 20, 30, 40])
        drawn = sample_from(units, 2, replace=False, rng=as_generator(5))
        assert set(drawn.tolist()) <= {10, 20, 30, 40}
        assert len(set(drawn.tolist())) == 2
