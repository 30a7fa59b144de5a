"""
Stratification of a single column into a small number of strata.

Numeric columns are binned at quantile boundaries unless they hold no more
distinct values than there are bins; those, like categorical columns, keep
one stratum per level, with rare levels pooled together. Sampling
is then done stratum by stratum and recombined.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import pandas as pd

from resamplekit._exceptions import InvalidArgument
from resamplekit._logging import get_logger
from resamplekit._validation import check_integer, check_pool

logger = get_logger(__name__)


def is_numeric_column(values: np.ndarray) -> bool:
    """Whether values are numeric (booleans count as levels)."""
    dtype = pd.Series(values).dtype
    return pd.api.types.is_numeric_dtype(dtype) and not pd.api.types.is_bool_dtype(dtype)


def make_strata(values, breaks: int = 4, pool: float = 0.1) -> np.ndarray:
    """Assign a stratum id to every row.

    Args:
        values: One value per row (numeric or categorical).
        breaks: Number of quantile bins for numeric values (>= 2).
        pool: Levels rarer than this proportion are pooled, in [0, 1).

    Returns:
        int64 array of stratum ids 0..k-1 with k >= 2; every id is used.

    Raises:
        InvalidArgument: If breaks/pool are out of range, or fewer than
            two strata result.
    """
    breaks = check_integer("breaks", breaks, minimum=2)
    pool = check_pool(pool)
    values = np.asarray(values)

    if is_numeric_column(values):
        numeric = values.astype(np.float64)
        n_distinct = len(np.unique(numeric[~np.isnan(numeric)]))
        if n_distinct > breaks:
            strata = _bin_numeric(numeric, breaks)
        else:
            # Few distinct values (e.g. a 0/1 outcome): one level per value
            logger.debug(
                f"Numeric column has {n_distinct} distinct values, "
                f"not more than breaks={breaks}; using them as levels"
            )
            strata = _pool_levels(values, pool)
    else:
        strata = _pool_levels(values, pool)

    n_strata = int(strata.max()) + 1 if len(strata) else 0
    if n_strata < 2:
        raise InvalidArgument(
            "`strata` must have at least 2 distinct levels or bins, "
            f"got {n_strata}"
        )
    logger.debug(f"Stratified {len(strata)} rows into {n_strata} strata")
    return strata


def _bin_numeric(values: np.ndarray, breaks: int) -> np.ndarray:
    """Cut values at quantile boundaries, dropping empty bins.

    Bins are closed on the right with the lowest boundary included. Missing
    values get their own stratum after the value bins.
    """
    missing = np.isnan(values)
    present = values[~missing]
    bins = np.zeros(len(values), dtype=np.int64)

    if len(present):
        bounds = np.unique(np.quantile(present, np.linspace(0.0, 1.0, breaks + 1)))
        # side="left" puts values equal to an inner boundary in the lower bin
        raw = np.searchsorted(bounds[1:-1], present, side="left")
        _, bins[~missing] = np.unique(raw, return_inverse=True)

    if missing.any():
        bins[missing] = bins[~missing].max() + 1 if len(present) else 0
    return bins


def _pool_levels(values: np.ndarray, pool: float) -> np.ndarray:
    """One stratum per level, pooling levels whose share is below pool."""
    codes, uniques = pd.factorize(
        pd.Series(values, dtype=object), use_na_sentinel=False
    )
    n = len(codes)
    counts = np.bincount(codes, minlength=len(uniques)).tolist()
    labels = [str(u) for u in uniques]

    members: List[Tuple[List[int], int]] = [([i], counts[i]) for i in range(len(uniques))]
    if n and pool > 0:
        rare = [i for i in range(len(uniques)) if counts[i] / n < pool]
        if rare:
            common = [i for i in range(len(uniques)) if counts[i] / n >= pool]
            pooled = (rare, sum(counts[i] for i in rare))
            members = [([i], counts[i]) for i in common]
            if pooled[1] / n < pool and common:
                # Still too small on its own: fold into the smallest remaining level
                smallest = min(common, key=lambda i: (counts[i], labels[i]))
                members = [m for m in members if m[0] != [smallest]]
                pooled = (rare + [smallest], pooled[1] + counts[smallest])
            members.append(pooled)
            logger.debug(
                f"Pooled {len(rare)} rare levels below {pool:.0%} into one stratum"
            )

    # Order strata by size, ties by the text of their first-ranked label
    def sort_key(member):
        idx, count = member
        return (-count, min(labels[i] for i in idx))

    members.sort(key=sort_key)
    mapping = np.empty(len(uniques), dtype=np.int64)
    for stratum, (idx, _) in enumerate(members):
        mapping[idx] = stratum
    return mapping[codes]
