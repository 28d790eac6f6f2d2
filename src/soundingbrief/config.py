"""Analysis configuration loading from YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SOUNDINGBRIEF_CONFIG"


class AnalysisConfig(BaseModel):
    """Tunable parameters of the sounding analysis."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mixed_layer_depth_hpa: float = Field(default=100.0, gt=0)
    most_unstable_depth_hpa: float = Field(default=300.0, gt=0)
    moist_adiabat_steps: int = Field(default=200, ge=1)
    parallel_parcels: bool = True


def load_analysis_config(path: Union[str, Path, None] = None) -> AnalysisConfig:
    """Load analysis settings from the ``analysis`` mapping of a YAML file.

    Resolution order:
    1. Explicit path parameter
    2. SOUNDINGBRIEF_CONFIG environment variable
    3. Built-in defaults
    """
    config_path = path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return AnalysisConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Analysis config not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded analysis config from %s", config_path)
    return AnalysisConfig.model_validate(data.get("analysis") or {})
