"""
scikit-learn interoperability.

RSetSplitter lets an RSet drive any scikit-learn routine that takes a
``cv`` argument (cross_val_score, GridSearchCV, ...), so models are fit on
exactly the analysis rows and scored on the assessment rows of each split.
"""

from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np
from sklearn.model_selection import BaseCrossValidator

from resamplekit._exceptions import InvalidArgument
from resamplekit.core.rset import RSet


class RSetSplitter(BaseCrossValidator):
    """Cross-validator yielding the (analysis, assessment) rows of an RSet.

    Args:
        rset: Resample set built over the same rows as ``X``.
    """

    def __init__(self, rset: RSet):
        self.rset = rset

    def split(self, X, y=None, groups=None) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        """Yield analysis and assessment row positions for each split.

        Raises:
            InvalidArgument: If X has a different number of rows than the
                data the RSet was built on.
        """
        n_rows = self.rset.data.n_rows
        if len(X) != n_rows:
            raise InvalidArgument(
                f"`X` must have the same number of rows as the resampled data "
                f"({n_rows}), got {len(X)}"
            )
        for split, _ in self.rset:
            yield split.in_id, split.assessment_ids

    def get_n_splits(self, X=None, y=None, groups=None) -> int:
        """Return the number of splitting iterations."""
        return len(self.rset)
