"""
Grouping of rows by a key column.

Rows sharing a key value form one group, and a group is always kept on
one side of a split.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from resamplekit._exceptions import InvalidArgument


def make_groups(values) -> np.ndarray:
    """Assign a group id to every row.

    Ids are numbered in order of first appearance. Missing keys form one
    group of their own.

    Args:
        values: Group key per row.

    Returns:
        int64 array of group ids 0..g-1.

    Raises:
        InvalidArgument: If the key has fewer than two distinct values.
    """
    codes, uniques = pd.factorize(
        pd.Series(np.asarray(values), dtype=object), use_na_sentinel=False
    )
    if len(uniques) < 2:
        raise InvalidArgument(
            f"`group` must have at least 2 distinct values, got {len(uniques)}; "
            "use the ungrouped resampling method instead"
        )
    return codes.astype(np.int64)


def group_members(group_ids: np.ndarray) -> list:
    """Row positions of each group, indexed by group id, ascending."""
    order = np.argsort(group_ids, kind="stable")
    sizes = np.bincount(group_ids)
    return np.split(order.astype(np.int64), np.cumsum(sizes)[:-1])


def group_strata(group_ids: np.ndarray, strata_values) -> np.ndarray:
    """Collapse a per-row strata column to one value per group.

    Raises:
        InvalidArgument: If the strata value varies within a group.
    """
    frame = pd.DataFrame({"group": group_ids, "strata": np.asarray(strata_values)})
    by_group = frame.groupby("group", sort=True)["strata"]
    if (by_group.nunique(dropna=False) > 1).any():
        raise InvalidArgument(
            "`strata` must be constant across all members of each `group`"
        )
    return by_group.first().to_numpy()
