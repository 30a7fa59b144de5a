"""
Parameter validation for resampling strategies.

All checks run before any sampling work starts and raise InvalidArgument
with a message naming the parameter and the violated constraint.

Functions:
    - check_integer: Whole number with a lower bound
    - check_proportion: Number strictly between 0 and 1
    - check_pool: Pooling threshold in [0, 1)
    - check_choice: Value from a fixed set of options
"""

from __future__ import annotations

import numbers
from collections.abc import Collection

from resamplekit._exceptions import InvalidArgument


def check_integer(name: str, value, minimum: int = 1) -> int:
    """
    Validate a whole-number parameter.

    Floats with an integral value (e.g. ``2.0``) are accepted and converted.

    Raises:
        InvalidArgument: If value is not a whole number or is below minimum
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"`{name}` must be a whole number, got {value!r}")
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise InvalidArgument(f"`{name}` must be a whole number, got {value!r}")
    value = int(value)
    if value < minimum:
        raise InvalidArgument(f"`{name}` must be at least {minimum}, got {value}")
    return value


def check_proportion(name: str, value) -> float:
    """
    Validate a proportion on the open interval (0, 1).

    Raises:
        InvalidArgument: If value is not a number in (0, 1)
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"`{name}` must be a number on (0, 1), got {value!r}")
    value = float(value)
    if not 0.0 < value < 1.0:
        raise InvalidArgument(f"`{name}` must be a number on (0, 1), got {value}")
    return value


def check_pool(pool) -> float:
    """Validate the rare-level pooling threshold, which must lie in [0, 1)."""
    if isinstance(pool, bool) or not isinstance(pool, numbers.Real):
        raise InvalidArgument(f"`pool` must be a number on [0, 1), got {pool!r}")
    pool = float(pool)
    if not 0.0 <= pool < 1.0:
        raise InvalidArgument(f"`pool` must be a number on [0, 1), got {pool}")
    return pool


def check_choice(name: str, value, choices: Collection[str]) -> str:
    """Validate that value is one of choices."""
    if value not in choices:
        options = ", ".join(f"'{c}'" for c in choices)
        raise InvalidArgument(f"`{name}` must be one of {options}, got {value!r}")
    return value
