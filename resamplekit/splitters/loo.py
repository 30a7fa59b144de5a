"""
Leave-one-out cross-validation.
"""

from __future__ import annotations

import numpy as np

from resamplekit._exceptions import InvalidArgument
from resamplekit._logging import get_logger
from resamplekit.core.rset import RSet, make_ids
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.frame_backend import as_backend

logger = get_logger(__name__)


def loo_cv(data) -> RSet:
    """Leave-one-out cross-validation.

    Deterministic: split i holds out row i alone and analyses every other
    row.

    Args:
        data: DataFrame, array or DataBackend.

    Returns:
        RSet with one split per row, ids "Resample01".."ResampleNN".
    """
    backend = as_backend(data)
    n = backend.n_rows
    if n < 2:
        raise InvalidArgument(f"`data` must have at least 2 rows, got {n}")

    rows = np.arange(n, dtype=np.int64)
    splits = [
        RSplit(backend, in_id=np.delete(rows, i), kind=SplitKind.PLAIN)
        for i in range(n)
    ]
    logger.debug(f"loo_cv: {n} splits")
    return RSet(splits, make_ids("Resample", n), method="loo_cv")
