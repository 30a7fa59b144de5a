"""
Config-driven generation of resample sets.

Maps a ResampleConfig onto the strategy function it names, passing only the
parameters that strategy accepts.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from resamplekit._exceptions import InvalidArgument
from resamplekit.config import ResampleConfig
from resamplekit.core.rset import RSet
from resamplekit.data.sampler import as_generator
from resamplekit.splitters import (
    apparent,
    bootstraps,
    group_bootstraps,
    group_mc_cv,
    group_validation_split,
    group_vfold_cv,
    loo_cv,
    mc_cv,
    rolling_origin,
    validation_split,
    validation_time_split,
    vfold_cv,
)

# method -> (function, config fields it takes, whether it draws random numbers)
_STRATEGIES: Dict[str, Tuple[Callable[..., RSet], Tuple[str, ...], bool]] = {
    "vfold_cv": (vfold_cv, ("v", "repeats", "strata", "breaks", "pool"), True),
    "group_vfold_cv": (
        group_vfold_cv,
        ("group", "v", "repeats", "balance", "strata", "pool"),
        True,
    ),
    "mc_cv": (mc_cv, ("prop", "times", "out_prop", "strata", "breaks", "pool"), True),
    "group_mc_cv": (group_mc_cv, ("group", "prop", "times", "strata", "pool"), True),
    "bootstraps": (
        bootstraps,
        ("times", "strata", "breaks", "pool", "apparent"),
        True,
    ),
    "group_bootstraps": (
        group_bootstraps,
        ("group", "times", "strata", "pool", "apparent"),
        True,
    ),
    "loo_cv": (loo_cv, (), False),
    "validation_split": (validation_split, ("prop", "strata", "breaks", "pool"), True),
    "group_validation_split": (
        group_validation_split,
        ("group", "prop", "strata", "pool"),
        True,
    ),
    "validation_time_split": (validation_time_split, ("prop", "lag"), False),
    "rolling_origin": (
        rolling_origin,
        ("initial", "assess", "cumulative", "skip", "lag"),
        False,
    ),
    "apparent": (apparent, (), False),
}


def _config_values(cfg: ResampleConfig) -> Dict[str, Any]:
    values = cfg.model_dump(exclude={"strata", "method", "seed"})
    values["strata"] = cfg.strata.column
    values["breaks"] = cfg.strata.breaks
    values["pool"] = cfg.strata.pool
    return values


def resample(data, cfg: ResampleConfig) -> RSet:
    """Generate the resample set described by cfg.

    Args:
        data: DataFrame, array or DataBackend.
        cfg: Resampling configuration; ``cfg.seed`` seeds a generator
            created for this call only.

    Returns:
        RSet built by the configured method.
    """
    func, fields, random = _STRATEGIES[cfg.method]
    if "group" in fields and cfg.group is None:
        raise InvalidArgument(f"`group` is required for method '{cfg.method}'")
    values = _config_values(cfg)
    kwargs = {name: values[name] for name in fields}
    if random:
        kwargs["rng"] = as_generator(cfg.seed)
    return func(data, **kwargs)
