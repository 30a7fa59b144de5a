"""
Configuration management using pydantic.

Resampling plans can be described in YAML and loaded into ResampleConfig,
then generated with resamplekit.resample. Config files are stored in the
configs/ directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field


# Base path for config files
CONFIGS_DIR = Path(__file__).parent.parent / "configs"

Method = Literal[
    "vfold_cv",
    "group_vfold_cv",
    "mc_cv",
    "group_mc_cv",
    "bootstraps",
    "group_bootstraps",
    "loo_cv",
    "validation_split",
    "group_validation_split",
    "validation_time_split",
    "rolling_origin",
    "apparent",
]


def load_yaml(path: Path | str) -> dict[str, Any]:
    """Load a YAML file and return as dict."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


class StrataConfig(BaseModel):
    """Stratification settings."""

    column: Optional[Union[str, int]] = None
    breaks: int = 4  # Quantile bins for numeric columns
    pool: float = 0.1  # Levels rarer than this are pooled


class ResampleConfig(BaseModel):
    """Configuration for one resampling plan.

    Only the fields the chosen method accepts are used; range checks are
    done by the method itself so errors name the offending parameter.
    """

    method: Method = "vfold_cv"
    seed: Optional[int] = None
    v: Optional[int] = 10  # None means leave-one-group-out for group_vfold_cv
    repeats: int = 1
    times: int = 25
    prop: float = 0.75
    out_prop: Optional[float] = None
    lag: int = 0
    initial: int = 5
    assess: int = 1
    cumulative: bool = True
    skip: int = 0
    group: Optional[Union[str, int]] = None
    balance: Literal["groups", "observations"] = "groups"
    apparent: bool = False
    strata: StrataConfig = Field(default_factory=StrataConfig)

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> ResampleConfig:
        """Load config from YAML file.

        Args:
            path: Path to YAML file. If None, uses configs/resample.yaml.
        """
        if path is None:
            path = CONFIGS_DIR / "resample.yaml"
        return cls(**load_yaml(path))
