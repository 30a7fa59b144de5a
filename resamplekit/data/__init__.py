"""
Data access, random sampling, stratification and grouping.

This module provides:
- DataBackend: Abstract base class for rectangular data sources
- FrameBackend / ArrayBackend: Backends over pandas and numpy data
- sample_indices: Seeded index draws with or without replacement
- make_strata: Quantile binning and rare-level pooling
- make_groups: Group ids from a key column
"""

from resamplekit.data.backend import DataBackend
from resamplekit.data.frame_backend import ArrayBackend, FrameBackend, as_backend
from resamplekit.data.groups import group_members, group_strata, make_groups
from resamplekit.data.sampler import as_generator, sample_from, sample_indices
from resamplekit.data.strata import make_strata

__all__ = [
    "DataBackend",
    "FrameBackend",
    "ArrayBackend",
    "as_backend",
    "as_generator",
    "sample_indices",
    "sample_from",
    "make_strata",
    "make_groups",
    "group_members",
    "group_strata",
]
