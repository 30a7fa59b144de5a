"""
Apparent sampling: analysis and assessment are both the full dataset.

Performance measured on such a split is the optimistic in-sample
("apparent") estimate. Bootstrap bias corrections use it; it should not be
averaged with genuine resampling estimates.
"""

from __future__ import annotations

import numpy as np

from resamplekit.core.rset import RSet
from resamplekit.core.rsplit import RSplit, SplitKind
from resamplekit.data.frame_backend import as_backend


def apparent(data) -> RSet:
    """Single split with every row on both sides, id "Apparent"."""
    backend = as_backend(data)
    rows = np.arange(backend.n_rows, dtype=np.int64)
    split = RSplit(backend, in_id=rows, out_id=rows, kind=SplitKind.APPARENT)
    return RSet([split], ["Apparent"], method="apparent")
