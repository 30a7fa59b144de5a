"""
Splits that respect the existing row order.

Implements:
- validation_time_split: first rows for analysis, the rest for validation
- initial_time_split: the same as a single train/test RSplit
- rolling_origin: a sequence of forecast origins sliding over the rows

Nothing here is random. Rows are assumed to be sorted in time already.
A ``lag`` moves the start of the assessment set back into the analysis
rows, so models with lagged predictors have the history they need.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from resamplekit._exceptions import InvalidArgument
from resamplekit._logging import get_logger
from resamplekit._validation import check_integer, check_proportion
from resamplekit.core.rset import RSet, make_ids
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.backend import DataBackend
from resamplekit.data.frame_backend import as_backend

logger = get_logger(__name__)


def _time_split(data: DataBackend, prop: float, lag: int) -> Tuple[RSplit, float, int]:
    prop = check_proportion("prop", prop)
    lag = check_integer("lag", lag, minimum=0)

    n = data.n_rows
    n_train = int(np.floor(n * prop))
    if n_train < 1:
        raise InvalidArgument(
            f"`prop` ({prop}) is too small to retain any of the {n} rows for analysis"
        )
    if lag > n_train:
        raise InvalidArgument(
            f"`lag` must be less than or equal to the number of training "
            f"observations ({n_train}), got {lag}"
        )

    split = RSplit(
        data,
        in_id=np.arange(n_train, dtype=np.int64),
        out_id=np.arange(n_train - lag, n, dtype=np.int64),
        kind=SplitKind.TIME,
    )
    return split, prop, lag


def validation_time_split(data, prop: float = 3 / 4, lag: int = 0) -> RSet:
    """Validation split over the first ``floor(n * prop)`` rows.

    Args:
        data: DataFrame, array or DataBackend, sorted by time.
        prop: Proportion of leading rows used for analysis, on (0, 1).
        lag: Rows of analysis history repeated at the start of the
            assessment set.

    Returns:
        RSet holding one split with id "Validation".

    Example:
        200 rows, prop=0.75, lag=0 -> analysis rows 0..149,
        assessment rows 150..199.
    """
    backend = as_backend(data)
    split, prop, lag = _time_split(backend, prop, lag)
    logger.debug(f"validation_time_split: {split.n_analysis} analysis rows, lag={lag}")
    return RSet(
        [split],
        ["Validation"],
        attributes={"prop": prop, "lag": lag},
        method="validation_time_split",
    )


def initial_time_split(data, prop: float = 3 / 4, lag: int = 0) -> RSplit:
    """Train/test split over the first ``floor(n * prop)`` rows."""
    split, _, _ = _time_split(as_backend(data), prop, lag)
    return split


def rolling_origin(
    data,
    initial: int = 5,
    assess: int = 1,
    cumulative: bool = True,
    skip: int = 0,
    lag: int = 0,
) -> RSet:
    """Rolling forecast origin resampling.

    The first analysis set is the first ``initial`` rows and its assessment
    set the next ``assess`` rows. Each following slice moves the origin
    forward by ``skip + 1`` rows.

    Args:
        data: DataFrame, array or DataBackend, sorted by time.
        initial: Rows in the first analysis set.
        assess: Rows in every assessment set.
        cumulative: Grow the analysis set from row 0; otherwise keep a
            window of ``initial`` rows.
        skip: Origins skipped between slices.
        lag: Rows of history repeated at the start of each assessment set.

    Returns:
        RSet with ids "Slice01".."SliceNN".
    """
    backend = as_backend(data)
    initial = check_integer("initial", initial)
    assess = check_integer("assess", assess)
    skip = check_integer("skip", skip, minimum=0)
    lag = check_integer("lag", lag, minimum=0)
    n = backend.n_rows
    if initial + assess > n:
        raise InvalidArgument(
            f"`data` must have at least `initial` + `assess` ({initial + assess}) "
            f"rows, got {n}"
        )
    if lag > initial:
        raise InvalidArgument(
            f"`lag` must be less than or equal to the number of training "
            f"observations ({initial}), got {lag}"
        )

    splits = []
    for stop in range(initial, n - assess + 1, skip + 1):
        start = 0 if cumulative else stop - initial
        splits.append(
            RSplit(
                backend,
                in_id=np.arange(start, stop, dtype=np.int64),
                out_id=np.arange(stop - lag, stop + assess, dtype=np.int64),
                kind=SplitKind.TIME,
            )
        )

    logger.debug(f"rolling_origin: {len(splits)} slices over {n} rows")
    return RSet(
        splits,
        make_ids("Slice", len(splits)),
        attributes={
            "initial": initial,
            "assess": assess,
            "cumulative": cumulative,
            "skip": skip,
            "lag": lag,
        },
        method="rolling_origin",
    )
