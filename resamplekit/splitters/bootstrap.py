"""
Bootstrap resampling, plain and grouped.

The analysis set is a with-replacement draw the size of the population,
kept in draw order with its duplicates. The assessment set holds the
out-of-bag rows; it is stored explicitly and may be empty.
"""

from __future__ import annotations

from typing import Hashable, List, Optional

import numpy as np

from resamplekit._logging import get_logger
from resamplekit._validation import check_integer
from resamplekit.core.rset import RSet, make_ids
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.backend import DataBackend
from resamplekit.data.frame_backend import as_backend
from resamplekit.data.sampler import RandomState, as_generator, sample_from
from resamplekit.splitters._units import SamplingUnits, resolve_units

logger = get_logger(__name__)


def _bootstrap_splits(
    data: DataBackend,
    units: SamplingUnits,
    times: int,
    rng: np.random.Generator,
) -> List[RSplit]:
    all_units = np.arange(units.n_units, dtype=np.int64)
    splits = []
    for _ in range(times):
        drawn = np.concatenate(
            [
                sample_from(stratum, len(stratum), replace=True, rng=rng)
                for stratum in units.by_stratum()
            ]
        )
        out_of_bag = np.setdiff1d(all_units, drawn)
        splits.append(
            RSplit(
                data,
                in_id=units.expand(drawn),
                out_id=units.rows(out_of_bag),
                kind=SplitKind.BOOTSTRAP,
            )
        )
    return splits


def _apparent_split(data: DataBackend) -> RSplit:
    rows = np.arange(data.n_rows, dtype=np.int64)
    return RSplit(data, in_id=rows, out_id=rows, kind=SplitKind.APPARENT)


def bootstraps(
    data,
    times: int = 25,
    strata: Optional[Hashable] = None,
    breaks: int = 4,
    pool: float = 0.1,
    apparent: bool = False,
    rng: RandomState = None,
) -> RSet:
    """Bootstrap resampling.

    Args:
        data: DataFrame, array or DataBackend.
        times: Number of bootstrap samples.
        strata: Column to stratify on; each stratum is resampled to its
            own size.
        breaks: Quantile bins for a numeric strata column.
        pool: Pooling threshold for rare strata levels.
        apparent: Append an "Apparent" split (all rows on both sides).
        rng: Seed or numpy Generator.

    Returns:
        RSet with ids "Bootstrap01".."BootstrapNN" (+ "Apparent").
    """
    backend = as_backend(data)
    times = check_integer("times", times)
    units = resolve_units(backend, strata=strata, breaks=breaks, pool=pool)
    rng = as_generator(rng)

    splits = _bootstrap_splits(backend, units, times, rng)
    ids = make_ids("Bootstrap", times)
    if apparent:
        splits.append(_apparent_split(backend))
        ids.append("Apparent")

    logger.debug(
        f"bootstraps: {times} samples over {units.n_units} rows, "
        f"{units.n_strata} strata"
    )
    return RSet(
        splits,
        ids,
        attributes={
            "times": times,
            "apparent": apparent,
            "strata": strata,
            "breaks": breaks,
            "pool": pool,
        },
        method="bootstraps",
    )


def group_bootstraps(
    data,
    group: Hashable,
    times: int = 25,
    strata: Optional[Hashable] = None,
    pool: float = 0.1,
    apparent: bool = False,
    rng: RandomState = None,
) -> RSet:
    """Group bootstrap resampling.

    Groups are drawn with replacement as many times as there are groups;
    the analysis rows are the rows of every drawn group, repeated as often
    as it was drawn.
    """
    backend = as_backend(data)
    times = check_integer("times", times)
    units = resolve_units(backend, strata=strata, pool=pool, group=group)
    rng = as_generator(rng)

    splits = _bootstrap_splits(backend, units, times, rng)
    ids = make_ids("Bootstrap", times)
    if apparent:
        splits.append(_apparent_split(backend))
        ids.append("Apparent")

    logger.debug(f"group_bootstraps: {times} samples over {units.n_units} groups")
    return RSet(
        splits,
        ids,
        attributes={
            "times": times,
            "apparent": apparent,
            "group": group,
            "strata": strata,
            "pool": pool,
        },
        method="group_bootstraps",
    )
