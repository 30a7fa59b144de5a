"""Tests for resamplekit.core.rsplit"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from resamplekit._exceptions import InternalError
from resamplekit.core.rsplit import RSplit, SplitKind


class TestComplement:

    def test_assessment_derived_from_analysis(self, backend):
        split = RSplit(backend, in_id=[0, 1, 2])
        assert split.is_complement
        np.testing.assert_array_equal(split.assessment_ids, np.arange(3, 10))
        assert split.n_analysis == 3
        assert split.n_assessment == 7

    def test_derived_again_on_each_access(self, backend):
        split = RSplit(backend, in_id=[5])
        first = split.assessment_ids
        second = split.assessment_ids
        assert first is not second
        np.testing.assert_array_equal(first, second)

    def test_explicit_assessment_kept(self, backend):
        split = RSplit(backend, in_id=[0, 1], out_id=[5, 6], kind=SplitKind.PLAIN)
        assert not split.is_complement
        np.testing.assert_array_equal(split.assessment_ids, [5, 6])


class TestImmutability:

    def test_index_vectors_read_only(self, backend):
        split = RSplit(backend, in_id=[0, 1, 2])
        with pytest.raises(ValueError):
            split.in_id[0] = 9

    def test_fields_frozen(self, backend):
        split = RSplit(backend, in_id=[0, 1, 2])
        with pytest.raises(FrozenInstanceError):
            split.in_id = np.array([3])

    def test_caller_array_not_frozen(self, backend):
        rows = np.array([0, 1, 2])
        RSplit(backend, in_id=rows)
        rows[0] = 4
        assert rows[0] == 4


class TestInvariants:

    def test_out_of_range(self, backend):
        with pytest.raises(InternalError, match="outside"):
            RSplit(backend, in_id=[0, 10])

    def test_negative(self, backend):
        with pytest.raises(InternalError):
            RSplit(backend, in_id=[-1, 2])

    def test_duplicates_rejected_for_plain(self, backend):
        with pytest.raises(InternalError, match="Duplicate"):
            RSplit(backend, in_id=[1, 1, 2])

    def test_duplicates_allowed_for_bootstrap(self, backend):
        split = RSplit(backend, in_id=[1, 1, 2], out_id=[0, 3], kind=SplitKind.BOOTSTRAP)
        assert split.n_analysis == 3

    def test_overlap_rejected(self, backend):
        with pytest.raises(InternalError, match="overlap"):
            RSplit(backend, in_id=[0, 1], out_id=[1, 2])

    def test_time_split_may_overlap(self, backend):
        split = RSplit(backend, in_id=[0, 1, 2], out_id=[2, 3], kind=SplitKind.TIME)
        assert split.n_assessment == 2

    def test_bootstrap_must_store_assessment(self, backend):
        with pytest.raises(InternalError, match="must store"):
            RSplit(backend, in_id=[0, 0], kind=SplitKind.BOOTSTRAP)

    def test_apparent_sides_must_match(self, backend):
        with pytest.raises(InternalError, match="same rows"):
            RSplit(backend, in_id=[0, 1], out_id=[0], kind=SplitKind.APPARENT)

    def test_kind_from_string(self, backend):
        split = RSplit(backend, in_id=[0], kind="validation")
        assert split.kind is SplitKind.VALIDATION

    @pytest.mark.parametrize("kind", list(SplitKind))
    def test_every_kind_classified(self, kind):
        assert isinstance(kind.derives_complement, bool)
        assert isinstance(kind.allows_duplicates, bool)
        assert isinstance(kind.allows_overlap, bool)


class TestMaterialization:

    def test_analysis_and_assessment_rows(self, backend):
        split = RSplit(backend, in_id=[8, 2])
        assert split.analysis()["x"].tolist() == [8, 2]
        assert split.assessment()["x"].tolist() == [0, 1, 3, 4, 5, 6, 7, 9]

    def test_training_testing_aliases(self, backend):
        split = RSplit(backend, in_id=[0, 1])
        assert split.training().equals(split.analysis())
        assert split.testing().equals(split.assessment())

    def test_shares_backend(self, backend):
        assert RSplit(backend, in_id=[0]).data is backend

    def test_to_dict(self, backend):
        d = RSplit(backend, in_id=[1, 0]).to_dict()
        assert d == {"kind": "plain", "n_rows": 10, "in_id": [1, 0], "out_id": None}

    def test_repr_sizes(self, backend):
        assert "<3/7/10>" in repr(RSplit(backend, in_id=[0, 1, 2]))
