"""Tests for resamplekit.core.rset"""

import pytest

from resamplekit._exceptions import InternalError
from resamplekit.core.rset import RSet, make_ids, make_repeat_ids
from resamplekit.core.rsplit import RSplit
from resamplekit.data.frame_backend import FrameBackend


class TestIds:

    def test_padded_to_largest(self):
        ids = make_ids("Fold", 10)
        assert ids[0] == "Fold01"
        assert ids[-1] == "Fold10"

    def test_no_padding_below_ten(self):
        assert make_ids("Fold", 5) == ["Fold1", "Fold2", "Fold3", "Fold4", "Fold5"]

    def test_bootstrap_ids(self):
        assert make_ids("Bootstrap", 25)[2] == "Bootstrap03"

    def test_repeat_ids(self):
        ids = make_repeat_ids(2, 3)
        assert ids == [
            "Repeat1.Fold1",
            "Repeat1.Fold2",
            "Repeat2.Fold1",
            "Repeat2.Fold2",
            "Repeat3.Fold1",
            "Repeat3.Fold2",
        ]

    def test_single_repeat_has_plain_fold_ids(self):
        assert make_repeat_ids(10, 1)[0] == "Fold01"


class TestAssembly:

    def test_length_mismatch(self, backend):
        split = RSplit(backend, in_id=[0])
        with pytest.raises(InternalError, match="1 splits but 2 ids"):
            RSet([split], ["a", "b"])

    def test_duplicate_ids(self, backend):
        splits = [RSplit(backend, in_id=[0]), RSplit(backend, in_id=[1])]
        with pytest.raises(InternalError, match="unique"):
            RSet(splits, ["a", "a"])

    def test_empty(self):
        with pytest.raises(InternalError):
            RSet([], [])

    def test_different_datasets(self, make_frame):
        frame = make_frame(4)
        splits = [
            RSplit(FrameBackend(frame), in_id=[0]),
            RSplit(FrameBackend(frame), in_id=[1]),
        ]
        with pytest.raises(InternalError, match="different datasets"):
            RSet(splits, ["a", "b"])


class TestAccess:

    @pytest.fixture
    def rset(self, backend):
        splits = [RSplit(backend, in_id=[0, 1]), RSplit(backend, in_id=[2, 3, 4])]
        return RSet(splits, ["Fold1", "Fold2"], attributes={"v": 2}, method="vfold_cv")

    def test_iterates_split_id_pairs(self, rset):
        pairs = list(rset)
        assert [id_ for _, id_ in pairs] == ["Fold1", "Fold2"]
        assert pairs[1][0].n_analysis == 3

    def test_lookup_by_position_and_id(self, rset):
        assert rset[1] is rset["Fold2"]

    def test_unknown_id(self, rset):
        with pytest.raises(KeyError):
            rset["Fold9"]

    def test_attributes_read_only(self, rset):
        assert rset.attributes["v"] == 2
        with pytest.raises(TypeError):
            rset.attributes["v"] = 3

    def test_metadata(self, rset, backend):
        assert len(rset) == 2
        assert rset.method == "vfold_cv"
        assert rset.data is backend
        assert rset.ids == ("Fold1", "Fold2")

    def test_to_frame(self, rset):
        frame = rset.to_frame()
        assert frame["id"].tolist() == ["Fold1", "Fold2"]
        assert frame["n_analysis"].tolist() == [2, 3]
        assert frame["n_assessment"].tolist() == [8, 7]
