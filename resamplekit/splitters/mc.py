"""
Monte-Carlo resampling and single random splits.

Implements:
- mc_cv / group_mc_cv: repeated random analysis/assessment splits
- validation_split / group_validation_split: one random split as an RSet
- initial_split / group_initial_split: one random train/test RSplit

Analysis units are drawn without replacement, stratum by stratum. The
assessment set is the complement, so it is never stored unless a separate
assessment proportion is requested.
"""

from __future__ import annotations

from typing import Hashable, List, Optional

import numpy as np

from resamplekit._exceptions import InvalidArgument
from resamplekit._logging import get_logger
from resamplekit._validation import check_integer, check_proportion
from resamplekit.core.rset import RSet, make_ids
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.backend import DataBackend
from resamplekit.data.frame_backend import as_backend
from resamplekit.data.sampler import RandomState, as_generator, sample_from
from resamplekit.splitters._units import (
    SamplingUnits,
    check_grouped_strata,
    resolve_units,
)

logger = get_logger(__name__)


def _analysis_counts(units: SamplingUnits, prop: float) -> List[int]:
    """Units retained for analysis in each stratum."""
    counts = [int(np.floor(len(s) * prop)) for s in units.by_stratum()]
    if sum(counts) == 0:
        raise InvalidArgument(
            f"`prop` ({prop}) is too small to retain any of the "
            f"{units.n_units} rows for analysis"
        )
    return counts


def _draw_rows(
    units: SamplingUnits, counts: List[int], rng: np.random.Generator
) -> np.ndarray:
    parts = [
        sample_from(stratum, k, replace=False, rng=rng)
        for stratum, k in zip(units.by_stratum(), counts)
    ]
    return np.concatenate(parts)


def _draw_groups(
    units: SamplingUnits, prop: float, rng: np.random.Generator
) -> np.ndarray:
    """Shuffle groups and keep the prefix whose row share is closest to prop.

    Strata with two or more groups always keep at least one group on each
    side; a single-group stratum goes wherever its share rounds to.
    """
    sizes = units.sizes
    parts = []
    for stratum in units.by_stratum():
        order = rng.permutation(stratum)
        share = np.concatenate([[0.0], np.cumsum(sizes[order]) / sizes[order].sum()])
        k = int(np.argmin(np.abs(share - prop)))
        if len(order) > 1:
            k = min(max(k, 1), len(order) - 1)
        parts.append(order[:k])
    return np.concatenate(parts)


def _mc_splits(
    data: DataBackend,
    units: SamplingUnits,
    prop: float,
    times: int,
    kind: SplitKind,
    rng: np.random.Generator,
    out_prop: Optional[float] = None,
) -> List[RSplit]:
    counts = None
    if units.grouped:
        check_grouped_strata(units)
    else:
        counts = _analysis_counts(units, prop)

    n_out = None
    if out_prop is not None:
        n_out = int(np.floor(units.n_units * out_prop))
        n_left = units.n_units - sum(counts)
        if n_out < 1 or n_out > n_left:
            raise InvalidArgument(
                f"`out_prop` ({out_prop}) must select between 1 and {n_left} "
                f"of the rows left after analysis, got {n_out}"
            )

    splits = []
    for _ in range(times):
        if units.grouped:
            analysis_units = _draw_groups(units, prop, rng)
        else:
            analysis_units = _draw_rows(units, counts, rng)
        out_id = None
        if n_out is not None:
            remaining = np.setdiff1d(np.arange(units.n_units), analysis_units)
            out_id = units.rows(sample_from(remaining, n_out, replace=False, rng=rng))
        splits.append(
            RSplit(data, in_id=units.rows(analysis_units), out_id=out_id, kind=kind)
        )
    return splits


def mc_cv(
    data,
    prop: float = 3 / 4,
    times: int = 25,
    out_prop: Optional[float] = None,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """Monte-Carlo cross-validation.

    Each of ``times`` splits independently draws ``floor(n * prop)`` rows
    (per stratum when stratified) for analysis.

    Args:
        data: DataFrame, array or DataBackend.
        prop: Proportion of rows retained for analysis, on (0, 1).
        times: Number of splits.
        out_prop: If given, the assessment set is a random subset of
            ``floor(n * out_prop)`` of the remaining rows instead of all of
            them.
        strata: Column to stratify on (name or position).
        breaks: Quantile bins for a numeric strata column.
        pool: Pooling threshold for rare strata levels.
        rng: Seed or numpy Generator.

    Returns:
        RSet with ids "Resample01".."ResampleNN".
    """
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    times = check_integer("times", times)
    if out_prop is not None:
        out_prop = check_proportion("out_prop", out_prop)
    units = resolve_units(backend, strata=strata, breaks=breaks, pool=pool)
    rng = as_generator(rng)

    splits = _mc_splits(backend, units, prop, times, SplitKind.PLAIN, rng, out_prop)
    logger.debug(
        f"mc_cv: {times} resamples of prop={prop} over {units.n_units} rows, "
        f"{units.n_strata} strata"
    )
    return RSet(
        splits,
        make_ids("Resample", times),
        attributes={
            "prop": prop,
            "times": times,
            "out_prop": out_prop,
            "strata": strata,
            "breaks": breaks,
            "pool": pool,
        },
        method="mc_cv",
    )


def group_mc_cv(
    data,
    group: Hashable,
    prop: float = 3 / 4,
    times: int = 25,
    strata: Optional[Hashable] = None,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """Group Monte-Carlo cross-validation.

    Whole groups are drawn until the analysis share of rows is as close to
    ``prop`` as the group sizes allow.
    """
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    times = check_integer("times", times)
    units = resolve_units(backend, strata=strata, pool=pool, group=group)
    rng = as_generator(rng)

    splits = _mc_splits(backend, units, prop, times, SplitKind.GROUPED, rng)
    logger.debug(f"group_mc_cv: {times} resamples over {units.n_units} groups")
    return RSet(
        splits,
        make_ids("Resample", times),
        attributes={
            "prop": prop,
            "times": times,
            "group": group,
            "strata": strata,
            "pool": pool,
        },
        method="group_mc_cv",
    )


def validation_split(
    data,
    prop: float = 3 / 4,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """A single random split into analysis and validation rows.

    Returns:
        RSet holding one split with id "Validation".
    """
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    units = resolve_units(backend, strata=strata, breaks=breaks, pool=pool)
    rng = as_generator(rng)

    splits = _mc_splits(backend, units, prop, 1, SplitKind.VALIDATION, rng)
    logger.debug(f"validation_split: prop={prop} over {units.n_units} rows")
    return RSet(
        splits,
        ["Validation"],
        attributes={"prop": prop, "strata": strata, "breaks": breaks, "pool": pool},
        method="validation_split",
    )


def group_validation_split(
    data,
    group: Hashable,
    prop: float = 3 / 4,
    strata: Optional[Hashable] = None,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSet:
    """A single grouped random split; each group falls on one side."""
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    units = resolve_units(backend, strata=strata, pool=pool, group=group)
    rng = as_generator(rng)

    splits = _mc_splits(backend, units, prop, 1, SplitKind.GROUPED, rng)
    logger.debug(f"group_validation_split: prop={prop} over {units.n_units} groups")
    return RSet(
        splits,
        ["Validation"],
        attributes={"prop": prop, "group": group, "strata": strata, "pool": pool},
        method="group_validation_split",
    )


def initial_split(
    data,
    prop: float = 3 / 4,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSplit:
    """Random train/test split; read it with training() and testing()."""
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    units = resolve_units(backend, strata=strata, breaks=breaks, pool=pool)
    rng = as_generator(rng)
    return _mc_splits(backend, units, prop, 1, SplitKind.PLAIN, rng)[0]


def group_initial_split(
    data,
    group: Hashable,
    prop: float = 3 / 4,
    strata: Optional[Hashable] = None,
    pool: float = 0.1,
    rng: RandomState = None,
) -> RSplit:
    """Grouped train/test split."""
    backend = as_backend(data)
    prop = check_proportion("prop", prop)
    units = resolve_units(backend, strata=strata, pool=pool, group=group)
    rng = as_generator(rng)
    return _mc_splits(backend, units, prop, 1, SplitKind.GROUPED, rng)[0]
