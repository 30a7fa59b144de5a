"""
Abstract data backend interface.

Defines the contract a rectangular dataset must fulfill so the resampling
engine stays agnostic of the table implementation. The engine only needs
a row count, column access aligned to row order, and positional row
materialization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable

import numpy as np


class DataBackend(ABC):
    """Abstract base class for data backends.

    A backend holds a reference to the caller's data and never copies or
    mutates it. All splits of one resample set share a single backend.
    """

    @property
    @abstractmethod
    def n_rows(self) -> int:
        """Return the number of rows."""
        pass

    @abstractmethod
    def column(self, key: Hashable) -> np.ndarray:
        """Return the values of one column in row order.

        Args:
            key: Column name, or column position.

        Returns:
            Array with one value per row.

        Raises:
            InvalidArgument: If the column does not exist.
        """
        pass

    @abstractmethod
    def take(self, indices: np.ndarray) -> Any:
        """Materialize the rows at the given positions.

        Args:
            indices: 0-based row positions; duplicates are kept.

        Returns:
            Subset of the data, in the backend's native type.
        """
        pass

    @property
    def source(self) -> Any:
        """The wrapped data object."""
        return None

    def __len__(self) -> int:
        """Number of rows."""
        return self.n_rows

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_rows={self.n_rows})"
