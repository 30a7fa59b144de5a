"""
Exception classes for resamplekit.

All resamplekit exceptions inherit from ResampleError for easy catching.

Usage:
    from resamplekit._exceptions import InvalidArgument
    try:
        folds = vfold_cv(df, v=50)
    except InvalidArgument as e:
        print(f"Cannot build folds: {e}")
"""


class ResampleError(Exception):
    """Base exception for all resamplekit errors."""

    pass


class InvalidArgument(ResampleError, ValueError):
    """
    Parameter validation failed before any sampling work started.

    Raised when:
    - A numeric parameter is out of range (v, times, prop, lag, breaks, pool)
    - A strata or group column does not exist
    - A column cannot be stratified or grouped (fewer than 2 levels)
    - Parameters contradict the data (more folds than rows)

    Examples:
        - "`v` must be less than or equal to the number of rows (10), got 50"
        - "`prop` must be a number on (0, 1), got 1.5"
        - "Column 'site' not found in data"

    When caught:
        Fix the inputs and retry. No partial resamples are ever returned.
    """

    pass


class InternalError(ResampleError, RuntimeError):
    """
    An invariant was violated inside the resampling engine.

    Raised when:
    - An RSet is assembled with mismatched splits/ids
    - Splits of one RSet reference different datasets
    - A split's index vectors break the disjointness/range contract

    This always signals a defect. Do not catch it.
    """

    pass
