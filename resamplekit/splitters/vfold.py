"""
V-fold cross-validation, plain and grouped.

Implements:
- vfold_cv: folds over rows, optionally stratified and repeated
- group_vfold_cv: folds over groups, balanced by group count or row count

Within each stratum fold labels are dealt round-robin, continuing from
where the previous stratum stopped, and then shuffled. Fold sizes thus
differ by at most one unit both inside every stratum and overall.
"""

from __future__ import annotations

from typing import Hashable, List, Optional

import numpy as np

from resamplekit._exceptions import InvalidArgument
from resamplekit._logging import get_logger
from resamplekit._validation import check_choice, check_integer
from resamplekit.core.rset import RSet, make_repeat_ids
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.backend import DataBackend
from resamplekit.data.frame_backend import as_backend
from resamplekit.data.sampler import RandomState, as_generator
from resamplekit.splitters._units import SamplingUnits, resolve_units

logger = get_logger(__name__)


def assign_folds(units: SamplingUnits, v: int, rng: np.random.Generator) -> np.ndarray:
    """Fold label per unit, balanced on unit counts."""
    folds = np.empty(units.n_units, dtype=np.int64)
    offset = 0
    for stratum in units.by_stratum():
        labels = (offset + np.arange(len(stratum))) % v
        folds[stratum] = rng.permutation(labels)
        offset += len(stratum)
    return folds


def assign_folds_by_rows(
    units: SamplingUnits, v: int, rng: np.random.Generator
) -> np.ndarray:
    """Fold label per unit, greedily balancing the number of rows.

    Units are visited in shuffled order, stratum by stratum, and each goes
    to the fold currently holding the fewest rows (lowest fold on ties).
    """
    folds = np.empty(units.n_units, dtype=np.int64)
    sizes = units.sizes
    load = np.zeros(v, dtype=np.int64)
    for stratum in units.by_stratum():
        for unit in rng.permutation(stratum):
            fold = int(np.argmin(load))
            folds[unit] = fold
            load[fold] += sizes[unit]
    return folds


def _fold_splits(
    data: DataBackend,
    units: SamplingUnits,
    folds: np.ndarray,
    v: int,
    kind: SplitKind,
) -> List[RSplit]:
    """One split per fold; the held-out fold is the implicit complement."""
    all_units = np.arange(units.n_units, dtype=np.int64)
    return [
        RSplit(data, in_id=units.rows(all_units[folds != fold]), kind=kind)
        for fold in range(v)
    ]


def _check_v(v: int, n_units: int, unit_name: str) -> None:
    if v > n_units:
        raise InvalidArgument(
            f"`v` must be less than or equal to the number of {unit_name} "
            f"({n_units}), got {v}"
        )


def vfold_cv(
    data,
    v: int = 10,
    repeats: int = 1,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """V-fold cross-validation.

    Rows are randomly partitioned into v folds of nearly equal size; each
    fold serves once as the assessment set while the others form the
    analysis set.

    Args:
        data: DataFrame, array or DataBackend.
        v: Number of folds (>= 2, at most the number of rows).
        repeats: Number of independent partitions.
        strata: Column to stratify on (name or position).
        breaks: Quantile bins for a numeric strata column.
        pool: Pooling threshold for rare strata levels.
        rng: Seed or numpy Generator.

    Returns:
        RSet with v * repeats splits, ids "Fold01" or "Repeat1.Fold01".
    """
    backend = as_backend(data)
    v = check_integer("v", v, minimum=2)
    repeats = check_integer("repeats", repeats)
    _check_v(v, backend.n_rows, "rows")
    if repeats > 1 and v == backend.n_rows:
        raise InvalidArgument(
            "`repeats` must be 1 when `v` equals the number of rows; "
            "every repeat would produce the same folds"
        )
    units = resolve_units(backend, strata=strata, breaks=breaks, pool=pool)
    rng = as_generator(rng)

    splits: List[RSplit] = []
    for _ in range(repeats):
        folds = assign_folds(units, v, rng)
        splits.extend(_fold_splits(backend, units, folds, v, SplitKind.PLAIN))

    logger.debug(
        f"vfold_cv: {v} folds x {repeats} repeats over {units.n_units} rows, "
        f"{units.n_strata} strata"
    )
    return RSet(
        splits,
        make_repeat_ids(v, repeats),
        attributes={
            "v": v,
            "repeats": repeats,
            "strata": strata,
            "breaks": breaks,
            "pool": pool,
        },
        method="vfold_cv",
    )


def group_vfold_cv(
    data,
    group: Hashable,
    v: Optional[int] = None,
    repeats: int = 1,
    balance: str = "groups",
    strata: Optional[Hashable] = None,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """Group v-fold cross-validation.

    Every group lands in exactly one assessment fold, so no group is ever
    split between analysis and assessment.

    Args:
        data: DataFrame, array or DataBackend.
        group: Grouping column (name or position).
        v: Number of folds; defaults to the number of groups
            (leave-one-group-out).
        repeats: Number of independent partitions.
        balance: "groups" for equal group counts per fold, "observations"
            for roughly equal row counts.
        strata: Column to stratify on; must be constant within groups.
        pool: Pooling threshold for rare strata levels.
        rng: Seed or numpy Generator.

    Returns:
        RSet with v * repeats grouped splits.
    """
    backend = as_backend(data)
    balance = check_choice("balance", balance, ("groups", "observations"))
    repeats = check_integer("repeats", repeats)
    units = resolve_units(backend, strata=strata, pool=pool, group=group)
    if v is None:
        if repeats > 1:
            raise InvalidArgument(
                "`repeats` must be 1 when `v` is None (leave-one-group-out)"
            )
        v = units.n_units
    v = check_integer("v", v, minimum=2)
    _check_v(v, units.n_units, "groups")
    rng = as_generator(rng)

    assign = assign_folds if balance == "groups" else assign_folds_by_rows
    splits: List[RSplit] = []
    for _ in range(repeats):
        folds = assign(units, v, rng)
        splits.extend(_fold_splits(backend, units, folds, v, SplitKind.GROUPED))

    logger.debug(
        f"group_vfold_cv: {v} folds x {repeats} repeats over {units.n_units} groups "
        f"(balance={balance})"
    )
    return RSet(
        splits,
        make_repeat_ids(v, repeats),
        attributes={
            "v": v,
            "repeats": repeats,
            "group": group,
            "balance": balance,
            "strata": strata,
            "pool": pool,
        },
        method="group_vfold_cv",
    )
