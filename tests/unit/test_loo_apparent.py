"""Tests for resamplekit.splitters.loo and resamplekit.splitters.apparent"""

import numpy as np
import pytest

from resamplekit._exceptions import InvalidArgument
from resamplekit.core.rsplit import SplitKind
from resamplekit.splitters.apparent import apparent
from resamplekit.splitters.loo import loo_cv


class TestLooCv:

    def test_one_row_held_out_per_split(self, make_frame):
        rset = loo_cv(make_frame(5))
        assert len(rset) == 5
        for i, (split, _) in enumerate(rset):
            np.testing.assert_array_equal(split.assessment_ids, [i])
            assert split.n_analysis == 4

    def test_ids(self, cars):
        rset = loo_cv(cars)
        assert rset.ids[0] == "Resample01"
        assert rset.ids[-1] == "Resample32"
        assert rset.method == "loo_cv"

    def test_too_few_rows(self, make_frame):
        with pytest.raises(InvalidArgument, match="at least 2 rows"):
            loo_cv(make_frame(1))


class TestApparent:

    def test_all_rows_on_both_sides(self, cars):
        rset = apparent(cars)
        split = rset["Apparent"]
        assert split.kind is SplitKind.APPARENT
        np.testing.assert_array_equal(split.in_id, np.arange(32))
        np.testing.assert_array_equal(split.out_id, np.arange(32))
        assert split.n_assessment == 32
        assert len(split.assessment()) == 32
