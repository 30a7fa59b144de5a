"""
Resampling strategies.

Supports:
- V-fold cross-validation (plain, repeated, stratified, grouped)
- Monte-Carlo cross-validation and validation splits
- Bootstrap resampling (plain, stratified, grouped)
- Leave-one-out cross-validation
- Time-ordered validation splits and rolling origins
- Apparent sampling
"""

from resamplekit.splitters.apparent import apparent
from resamplekit.splitters.bootstrap import bootstraps, group_bootstraps
from resamplekit.splitters.loo import loo_cv
from resamplekit.splitters.mc import (
    group_initial_split,
    group_mc_cv,
    group_validation_split,
    initial_split,
    mc_cv,
    validation_split,
)
from resamplekit.splitters.time import (
    initial_time_split,
    rolling_origin,
    validation_time_split,
)
from resamplekit.splitters.vfold import group_vfold_cv, vfold_cv

__all__ = [
    "apparent",
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
    "rolling_origin",
    "validation_split",
    "validation_time_split",
    "vfold_cv",
]
