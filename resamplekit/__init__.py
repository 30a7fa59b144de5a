"""
Reproducible resampling plans for model evaluation.

Splits store row positions against a shared dataset; analysis and
assessment rows are materialized only when asked for.

Usage:
    from resamplekit import vfold_cv

    folds = vfold_cv(df, v=5, strata="y", rng=42)
    for split, fold_id in folds:
        train, holdout = split.analysis(), split.assessment()
"""

from resamplekit._exceptions import InternalError, InvalidArgument, ResampleError
from resamplekit.config import ResampleConfig, StrataConfig
from resamplekit.core import RSet, RSplit, SplitKind
from resamplekit.data import ArrayBackend, DataBackend, FrameBackend, as_generator
from resamplekit.interop import RSetSplitter
from resamplekit.resample import resample
from resamplekit.splitters import (
    apparent,
    bootstraps,
    group_bootstraps,
    group_initial_split,
    group_mc_cv,
    group_validation_split,
    group_vfold_cv,
    initial_split,
    initial_time_split,
    loo_cv,
    mc_cv,
    rolling_origin,
    validation_split,
    validation_time_split,
    vfold_cv,
)

__version__ = "0.1.0"

__all__ = [
    "ArrayBackend",
    "DataBackend",
    "FrameBackend",
    "InternalError",
    "InvalidArgument",
    "RSet",
    "RSetSplitter",
    "RSplit",
    "ResampleConfig",
    "ResampleError",
    "SplitKind",
    "StrataConfig",
    "apparent",
    "as_generator",
    "bootstraps",
    "group_bootstraps",
    "group_initial_split",
    "group_mc_cv",
    "group_validation_split",
    "group_vfold_cv",
    "initial_split",
    "initial_time_split",
    "loo_cv",
    "mc_cv",
    "resample",
    "rolling_origin",
    "validation_split",
    "validation_time_split",
    "vfold_cv",
]
