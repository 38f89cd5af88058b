"""Engine tuning knobs and the YAML loader that fills them in."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, Field

from oreminer.utils.real_time_logger import get_logger

LOGGER = get_logger()

CONFIG_ENV_VAR = "OREMINER_CONFIG"
DEFAULT_CONFIG_NAME = "oreminer.yaml"


class EngineConfig(BaseModel):
    """Constants the decision engine reads every turn."""

    fleet_size: int = Field(default=5, ge=1, description="Own robots, one output line each.")
    radar_radius: int = Field(default=4, ge=0, description="Manhattan reveal radius of a radar.")
    unknown_threshold: float = Field(
        default=0.40,
        ge=0.0,
        le=1.0,
        description="Request radars only while at least this fraction of the map is unknown.",
    )
    radar_cooldown_turns: int = Field(default=5, ge=0)
    trap_cooldown_turns: int = Field(default=5, ge=0)
    turn_budget_ms: float = Field(
        default=50.0, gt=0.0, description="Soft per-turn budget; exceeding it is only logged."
    )


def _search_locations(config_path: Optional[Union[str, Path]]) -> List[Path]:
    locations: List[Path] = []
    if config_path is not None:
        locations.append(Path(config_path))
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        locations.append(Path(env_path))
    locations.append(Path.cwd() / DEFAULT_CONFIG_NAME)
    return locations


def load_config(config_path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """Load engine settings from YAML, falling back to defaults.

    An explicit ``config_path`` must exist; the environment variable and the
    working-directory file are optional.
    """

    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config_file = next((p for p in _search_locations(config_path) if p.exists()), None)
    if config_file is None:
        LOGGER.debug("[config] No %s found, using defaults", DEFAULT_CONFIG_NAME)
        return EngineConfig()

    with config_file.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    # Settings may sit at top level or under an ``engine:`` key.
    if not isinstance(data, dict):
        section = {}
    elif "engine" in data:
        section = data["engine"] or {}
    else:
        section = data
    config = EngineConfig.model_validate(section)
    LOGGER.info("[config] Loaded configuration from %s", config_file)
    return config
