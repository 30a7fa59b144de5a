"""
An ordered, named collection of splits over one dataset.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Tuple, Union

import pandas as pd

from resamplekit._exceptions import InternalError
from resamplekit.core.rsplit import RSplit
from resamplekit.data.backend import DataBackend


def make_ids(prefix: str, n: int) -> List[str]:
    """Build ids like "Fold01".."Fold10", zero-padded to the width of n."""
    width = len(str(n))
    return [f"{prefix}{i:0{width}d}" for i in range(1, n + 1)]


def make_repeat_ids(v: int, repeats: int) -> List[str]:
    """Build "Fold01"-style ids, prefixed with "Repeat1." when repeated."""
    folds = make_ids("Fold", v)
    if repeats == 1:
        return folds
    return [f"{r}.{f}" for r in make_ids("Repeat", repeats) for f in folds]


class RSet:
    """Resample set: splits, their ids and the parameters that built them.

    Iterating yields ``(split, id)`` pairs in generation order. Splits can
    be looked up by position or by id.

    Raises:
        InternalError: If splits and ids differ in length, ids repeat, or
            splits reference different datasets.
    """

    def __init__(
        self,
        splits: Iterable[RSplit],
        ids: Iterable[str],
        attributes: Mapping[str, Any] | None = None,
        method: str = "rset",
    ):
        splits = tuple(splits)
        ids = tuple(str(i) for i in ids)

        if len(splits) != len(ids):
            raise InternalError(
                f"{method}: {len(splits)} splits but {len(ids)} ids"
            )
        if not splits:
            raise InternalError(f"{method}: no splits were generated")
        if len(set(ids)) != len(ids):
            raise InternalError(f"{method}: split ids are not unique")
        data = splits[0].data
        if any(split.data is not data for split in splits):
            raise InternalError(f"{method}: splits reference different datasets")

        self._splits = splits
        self._ids = ids
        self._positions = {id_: i for i, id_ in enumerate(ids)}
        self._attributes = MappingProxyType(dict(attributes or {}))
        self._method = method

    @property
    def splits(self) -> Tuple[RSplit, ...]:
        return self._splits

    @property
    def ids(self) -> Tuple[str, ...]:
        return self._ids

    @property
    def attributes(self) -> Mapping[str, Any]:
        """Parameters used to generate the set (read-only)."""
        return self._attributes

    @property
    def method(self) -> str:
        """Name of the strategy that built the set, e.g. "vfold_cv"."""
        return self._method

    @property
    def data(self) -> DataBackend:
        """Backend shared by every split."""
        return self._splits[0].data

    def __len__(self) -> int:
        return len(self._splits)

    def __iter__(self) -> Iterator[Tuple[RSplit, str]]:
        return iter(zip(self._splits, self._ids))

    def __getitem__(self, key: Union[int, str]) -> RSplit:
        if isinstance(key, str):
            if key not in self._positions:
                raise KeyError(f"No split with id {key!r}")
            return self._splits[self._positions[key]]
        return self._splits[key]

    def to_frame(self) -> pd.DataFrame:
        """One row per split with its id and side sizes."""
        return pd.DataFrame(
            {
                "id": list(self._ids),
                "n_analysis": [s.n_analysis for s in self._splits],
                "n_assessment": [s.n_assessment for s in self._splits],
            }
        )

    def __repr__(self) -> str:
        return f"<RSet {self._method}: {len(self)} splits over {self.data.n_rows} rows>"
