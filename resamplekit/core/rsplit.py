"""
A single analysis/assessment split over a shared dataset.

The split stores row positions, never rows. When the assessment set is
the exact complement of the analysis set it is not stored at all and is
recomputed on every access.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import numpy as np

from resamplekit._exceptions import InternalError
from resamplekit.data.backend import DataBackend


class SplitKind(str, Enum):
    """Flavor of a split; decides which invariants apply."""

    PLAIN = "plain"
    VALIDATION = "validation"
    TIME = "time"
    GROUPED = "grouped"
    BOOTSTRAP = "bootstrap"
    APPARENT = "apparent"

    @property
    def derives_complement(self) -> bool:
        """Whether the assessment set may be left implicit."""
        if self in (SplitKind.PLAIN, SplitKind.VALIDATION, SplitKind.GROUPED):
            return True
        elif self in (SplitKind.TIME, SplitKind.BOOTSTRAP, SplitKind.APPARENT):
            return False
        raise InternalError(f"Unhandled split kind: {self!r}")

    @property
    def allows_duplicates(self) -> bool:
        """Whether analysis rows may repeat (draws with replacement)."""
        if self is SplitKind.BOOTSTRAP:
            return True
        elif self in (
            SplitKind.PLAIN,
            SplitKind.VALIDATION,
            SplitKind.TIME,
            SplitKind.GROUPED,
            SplitKind.APPARENT,
        ):
            return False
        raise InternalError(f"Unhandled split kind: {self!r}")

    @property
    def allows_overlap(self) -> bool:
        """Whether analysis and assessment may share rows.

        Apparent splits use every row on both sides; time splits overlap
        in their lag region.
        """
        if self in (SplitKind.APPARENT, SplitKind.TIME):
            return True
        elif self in (
            SplitKind.PLAIN,
            SplitKind.VALIDATION,
            SplitKind.GROUPED,
            SplitKind.BOOTSTRAP,
        ):
            return False
        raise InternalError(f"Unhandled split kind: {self!r}")


def _frozen_ids(values) -> np.ndarray:
    ids = np.array(values, dtype=np.int64).reshape(-1)
    ids.setflags(write=False)
    return ids


@dataclass(frozen=True, eq=False)
class RSplit:
    """One analysis/assessment pair of row positions.

    Attributes:
        data: Shared backend; never copied.
        in_id: 0-based analysis rows.
        out_id: 0-based assessment rows, or None when they are the
            complement of in_id.
        kind: Split flavor.
    """

    data: DataBackend
    in_id: np.ndarray
    out_id: Optional[np.ndarray] = None
    kind: SplitKind = SplitKind.PLAIN

    def __post_init__(self) -> None:
        """Freeze index vectors and check the split invariants."""
        object.__setattr__(self, "kind", SplitKind(self.kind))
        object.__setattr__(self, "in_id", _frozen_ids(self.in_id))
        if self.out_id is not None:
            object.__setattr__(self, "out_id", _frozen_ids(self.out_id))

        n = self.data.n_rows
        in_id = self.in_id
        if len(in_id) and (in_id.min() < 0 or in_id.max() >= n):
            raise InternalError(f"Analysis rows outside [0, {n})")
        if not self.kind.allows_duplicates and len(np.unique(in_id)) != len(in_id):
            raise InternalError(f"Duplicate analysis rows in a {self.kind.value} split")

        if self.out_id is None:
            if not self.kind.derives_complement:
                raise InternalError(
                    f"A {self.kind.value} split must store its assessment rows"
                )
            return

        out_id = self.out_id
        if len(out_id) and (out_id.min() < 0 or out_id.max() >= n):
            raise InternalError(f"Assessment rows outside [0, {n})")
        if self.kind is SplitKind.APPARENT:
            if not np.array_equal(np.unique(in_id), np.unique(out_id)):
                raise InternalError("Apparent split sides must hold the same rows")
        elif not self.kind.allows_overlap and np.intersect1d(in_id, out_id).size:
            raise InternalError("Analysis and assessment rows overlap")

    @property
    def n_rows(self) -> int:
        """Rows in the underlying dataset."""
        return self.data.n_rows

    @property
    def is_complement(self) -> bool:
        """True when the assessment rows are derived rather than stored."""
        return self.out_id is None

    def complement(self) -> np.ndarray:
        """Rows not in the analysis set, ascending."""
        mask = np.ones(self.n_rows, dtype=bool)
        mask[self.in_id] = False
        return np.flatnonzero(mask)

    @property
    def assessment_ids(self) -> np.ndarray:
        """Assessment rows; recomputed on each access when implicit."""
        if self.out_id is None:
            return self.complement()
        return self.out_id

    @property
    def n_analysis(self) -> int:
        return len(self.in_id)

    @property
    def n_assessment(self) -> int:
        if self.out_id is None:
            return self.n_rows - len(np.unique(self.in_id))
        return len(self.out_id)

    def analysis(self) -> Any:
        """Materialize the analysis rows from the shared data."""
        return self.data.take(self.in_id)

    def assessment(self) -> Any:
        """Materialize the assessment rows from the shared data."""
        return self.data.take(self.assessment_ids)

    def training(self) -> Any:
        """Analysis rows of an initial train/test split."""
        return self.analysis()

    def testing(self) -> Any:
        """Assessment rows of an initial train/test split."""
        return self.assessment()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "n_rows": self.n_rows,
            "in_id": self.in_id.tolist(),
            "out_id": None if self.out_id is None else self.out_id.tolist(),
        }

    def __repr__(self) -> str:
        return (
            f"<RSplit {self.kind.value} "
            f"Analysis/Assess/Total <{self.n_analysis}/{self.n_assessment}/{self.n_rows}>>"
        )
