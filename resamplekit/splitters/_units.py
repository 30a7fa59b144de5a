"""
Sampling units shared by all randomized strategies.

A unit is a row, or a whole group when a group column is given. Units may
additionally be bucketed into strata; each stratum is then sampled on its
own and the parts are concatenated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, List, Optional

import numpy as np

from resamplekit._exceptions import InvalidArgument
from resamplekit.data.backend import DataBackend
from resamplekit.data.groups import group_members, group_strata, make_groups
from resamplekit.data.strata import make_strata


@dataclass(frozen=True)
class SamplingUnits:
    """Units to resample and how they map back to rows.

    Attributes:
        n_rows: Rows in the dataset.
        group_ids: Group id per row, or None when rows are the units.
        members: Row positions per group (grouped only).
        strata: Stratum id per unit, or None when unstratified.
    """

    n_rows: int
    group_ids: Optional[np.ndarray] = None
    members: Optional[List[np.ndarray]] = None
    strata: Optional[np.ndarray] = None

    @property
    def grouped(self) -> bool:
        return self.group_ids is not None

    @property
    def n_units(self) -> int:
        return len(self.members) if self.grouped else self.n_rows

    @property
    def n_strata(self) -> int:
        return 1 if self.strata is None else int(self.strata.max()) + 1

    @property
    def sizes(self) -> np.ndarray:
        """Rows per unit."""
        if self.grouped:
            return np.array([len(m) for m in self.members], dtype=np.int64)
        return np.ones(self.n_rows, dtype=np.int64)

    def by_stratum(self) -> List[np.ndarray]:
        """Unit ids of each stratum, ascending."""
        units = np.arange(self.n_units, dtype=np.int64)
        if self.strata is None:
            return [units]
        return [units[self.strata == s] for s in range(self.n_strata)]

    def rows(self, units: np.ndarray) -> np.ndarray:
        """Distinct rows covered by units, ascending."""
        units = np.asarray(units, dtype=np.int64)
        if not self.grouped:
            return np.unique(units)
        return np.flatnonzero(np.isin(self.group_ids, units))

    def expand(self, units: np.ndarray) -> np.ndarray:
        """Rows of units in the given order, repeating repeated units."""
        units = np.asarray(units, dtype=np.int64)
        if not self.grouped:
            return units
        if len(units) == 0:
            return np.empty(0, dtype=np.int64)
        return np.concatenate([self.members[u] for u in units])


def resolve_units(
    data: DataBackend,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    group: Optional[Hashable] = None,
) -> SamplingUnits:
    """Resolve strata/group columns into sampling units.

    Column keys are looked up once here; the strategies only ever see
    integer ids.

    Raises:
        InvalidArgument: If a column is missing or cannot be used.
    """
    n_rows = data.n_rows
    if group is None:
        strata_ids = None
        if strata is not None:
            strata_ids = make_strata(data.column(strata), breaks=breaks, pool=pool)
        return SamplingUnits(n_rows=n_rows, strata=strata_ids)

    group_ids = make_groups(data.column(group))
    members = group_members(group_ids)
    strata_ids = None
    if strata is not None:
        values = group_strata(group_ids, data.column(strata))
        strata_ids = make_strata(values, breaks=breaks, pool=pool)
    return SamplingUnits(
        n_rows=n_rows, group_ids=group_ids, members=members, strata=strata_ids
    )


def check_grouped_strata(units: SamplingUnits) -> None:
    """Grouped proportional splits need a stratum with at least two groups."""
    if units.strata is not None and all(len(s) < 2 for s in units.by_stratum()):
        raise InvalidArgument(
            "`strata` must leave at least one stratum with 2 or more groups"
        )
