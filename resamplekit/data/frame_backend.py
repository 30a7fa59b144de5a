"""
Backends for in-memory pandas DataFrames and numpy arrays.
"""

from __future__ import annotations

from typing import Any, Hashable

import numpy as np
import pandas as pd

from resamplekit._exceptions import InvalidArgument
from resamplekit.data.backend import DataBackend


class FrameBackend(DataBackend):
    """Backend over a pandas DataFrame.

    Columns can be addressed by name or by integer position; names take
    precedence when a frame has integer column labels.
    """

    def __init__(self, frame: pd.DataFrame):
        """Initialize frame backend.

        Args:
            frame: DataFrame to resample. Kept by reference.
        """
        self._frame = frame

    @property
    def source(self) -> pd.DataFrame:
        return self._frame

    @property
    def n_rows(self) -> int:
        return len(self._frame)

    @property
    def columns(self) -> list:
        """Column labels of the wrapped frame."""
        return list(self._frame.columns)

    def column(self, key: Hashable) -> np.ndarray:
        if key in self._frame.columns:
            series = self._frame[key]
        elif (
            isinstance(key, (int, np.integer))
            and not isinstance(key, bool)
            and 0 <= key < self._frame.shape[1]
        ):
            series = self._frame.iloc[:, key]
        else:
            raise InvalidArgument(f"Column {key!r} not found in data")
        # Categorical codes must stay levels, not become numbers to bin
        if isinstance(series.dtype, pd.CategoricalDtype):
            return series.to_numpy(dtype=object)
        # Nullable Int64/Float64 columns: pd.NA becomes NaN so values still bin
        if (
            pd.api.types.is_extension_array_dtype(series.dtype)
            and pd.api.types.is_numeric_dtype(series.dtype)
            and not pd.api.types.is_bool_dtype(series.dtype)
        ):
            return series.to_numpy(dtype=np.float64, na_value=np.nan)
        return series.to_numpy()

    def take(self, indices: np.ndarray) -> pd.DataFrame:
        return self._frame.iloc[np.asarray(indices, dtype=np.int64)]


class ArrayBackend(DataBackend):
    """Backend over a 1-D or 2-D numpy array; columns by position only."""

    def __init__(self, array: np.ndarray):
        """Initialize array backend.

        Args:
            array: Array whose first axis indexes rows. Kept by reference.
        """
        if array.ndim not in (1, 2):
            raise InvalidArgument(
                f"`data` must be a 1-D or 2-D array, got {array.ndim} dimensions"
            )
        self._array = array

    @property
    def source(self) -> np.ndarray:
        return self._array

    @property
    def n_rows(self) -> int:
        return self._array.shape[0]

    def column(self, key: Hashable) -> np.ndarray:
        if isinstance(key, (int, np.integer)) and not isinstance(key, bool):
            if self._array.ndim == 1 and key == 0:
                return self._array
            if self._array.ndim == 2 and 0 <= key < self._array.shape[1]:
                return self._array[:, key]
        raise InvalidArgument(f"Column {key!r} not found in data")

    def take(self, indices: np.ndarray) -> np.ndarray:
        return self._array[np.asarray(indices, dtype=np.int64)]


def as_backend(data: Any) -> DataBackend:
    """Wrap data in a backend, passing existing backends through unchanged.

    Args:
        data: DataBackend, pandas DataFrame or numpy array.

    Returns:
        Backend referencing (not copying) the data.

    Raises:
        InvalidArgument: If the data type is not supported.
    """
    if isinstance(data, DataBackend):
        return data
    if isinstance(data, pd.DataFrame):
        return FrameBackend(data)
    if isinstance(data, np.ndarray):
        return ArrayBackend(data)
    raise InvalidArgument(
        f"`data` must be a pandas DataFrame, numpy array or DataBackend, "
        f"got {type(data).__name__}"
    )
