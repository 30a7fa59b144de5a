"""Split and resample-set data structures."""

from resamplekit.core.rset import RSet, make_ids, make_repeat_ids
from resamplekit.core.rsplit import RSplit, SplitKind

__all__ = [
    "RSplit",
    "RSet",
    "SplitKind",
    "make_ids",
    "make_repeat_ids",
]
