"""
Shared fixtures for resamplekit tests.

Provides small deterministic datasets: the 32-row ``cars`` frame (mpg, cyl
and wt columns of the classic mtcars data) and a ``grouped`` frame of 10
groups with 4 rows each.
"""

import numpy as np
import pandas as pd
import pytest

from resamplekit.data.frame_backend import FrameBackend

MPG = [
    21.0, 21.0, 22.8, 21.4, 18.7, 18.1, 14.3, 24.4, 22.8, 19.2, 17.8, 16.4,
    17.3, 15.2, 10.4, 10.4, 14.7, 32.4, 30.4, 33.9, 21.5, 15.5, 15.2, 13.3,
    19.2, 27.3, 26.0, 30.4, 15.8, 19.7, 15.0, 21.4,
]
CYL = [
    6, 6, 4, 6, 8, 6, 8, 4, 4, 6, 6, 8, 8, 8, 8, 8,
    8, 4, 4, 4, 4, 8, 8, 8, 8, 4, 4, 4, 8, 6, 8, 4,
]
WT = [
    2.620, 2.875, 2.320, 3.215, 3.440, 3.460, 3.570, 3.190, 3.150, 3.440,
    3.440, 4.070, 3.730, 3.780, 5.250, 5.424, 5.345, 2.200, 1.615, 1.835,
    2.465, 3.520, 3.435, 3.840, 3.845, 1.935, 2.140, 1.513, 3.170, 2.770,
    3.570, 2.780,
]


@pytest.fixture
def cars() -> pd.DataFrame:
    """32 rows: mpg (numeric), cyl (4/6/8 with 11/7/14 rows), wt."""
    return pd.DataFrame({"mpg": MPG, "cyl": pd.Categorical(CYL), "wt": WT})


@pytest.fixture
def grouped() -> pd.DataFrame:
    """40 rows in groups g0..g9 of 4 rows; site is A for g0-g4, B for g5-g9."""
    groups = np.repeat([f"g{i}" for i in range(10)], 4)
    sites = np.repeat(["A"] * 5 + ["B"] * 5, 4)
    return pd.DataFrame(
        {"patient": groups, "site": sites, "value": np.arange(40, dtype=float)}
    )


@pytest.fixture
def make_frame():
    """Factory for an n-row frame with a running ``x`` column."""

    def _make(n: int) -> pd.DataFrame:
        return pd.DataFrame({"x": np.arange(n), "y": np.arange(n) * 2.0})

    return _make


@pytest.fixture
def backend(make_frame) -> FrameBackend:
    """Backend over a 10-row frame."""
    return FrameBackend(make_frame(10))


@pytest.fixture
def assessment_union():
    """Sorted concatenation of every assessment set of an RSet."""

    def _union(rset) -> np.ndarray:
        return np.sort(np.concatenate([s.assessment_ids for s, _ in rset]))

    return _union


@pytest.fixture
def groups_of():
    """Set of group keys found at the given rows."""

    def _groups(frame: pd.DataFrame, rows, column: str = "patient") -> set:
        return set(frame[column].to_numpy()[np.asarray(rows, dtype=int)])

    return _groups
