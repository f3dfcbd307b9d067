# heckendorf/config.py
"""Generation settings and YAML configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import structlog
import yaml

from heckendorf.constants import (
    ADDITIONAL_TUNNEL_PERC,
    DEFAULT_FOV_RADIUS,
    DEFAULT_MAX_ATTEMPTS,
    MAX_ROOM_LENGTH,
    MIN_ROOM_LENGTH,
)

log = structlog.get_logger(__name__)

PROJECT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_FILE = PROJECT_DIR / "config" / "config.yaml"


@dataclass
class DungeonConfig:
    width: int = 40
    height: int = 24
    room_attempts: int = 30
    min_room_length: int = MIN_ROOM_LENGTH
    max_room_length: int = MAX_ROOM_LENGTH
    additional_tunnel_perc: float = ADDITIONAL_TUNNEL_PERC
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None
    fov_radius: int = DEFAULT_FOV_RADIUS

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must be at least 1")
        if self.min_room_length < 1:
            raise ValueError("min_room_length must be at least 1")
        if self.min_room_length > self.max_room_length:
            raise ValueError("min_room_length must not exceed max_room_length")
        if not 0 <= self.additional_tunnel_perc <= 100:
            raise ValueError("additional_tunnel_perc must be within [0, 100]")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.room_attempts < 0:
            raise ValueError("room_attempts must not be negative")
        if self.fov_radius < 0:
            raise ValueError("fov_radius must not be negative")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DungeonConfig":
        """Build a config from a mapping, ignoring keys it does not know."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.warning("Ignoring unknown dungeon config keys", keys=unknown)
        return cls(**{k: v for k, v in data.items() if k in known})


def load_yaml_config(config_path: Path, config_name: str) -> Dict[str, Any]:
    """Loads a generic YAML configuration file."""
    if not config_path.is_file():
        log.error(f"{config_name} config file not found", path=str(config_path))
        raise FileNotFoundError(f"{config_name} configuration file not found: {config_path}")
    try:
        with config_path.open("r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        log.error(
            f"Error parsing YAML for {config_name}",
            path=str(config_path),
            error=str(e),
            exc_info=True,
        )
        raise
    if config_data is None:
        log.warning(f"{config_name} config file is empty.", path=str(config_path))
        return {}
    if not isinstance(config_data, dict):
        raise ValueError(f"{config_name} config must be a mapping: {config_path}")
    log.info(f"{config_name} config loaded", path=str(config_path))
    return config_data


def load_config(config_path: Path = DEFAULT_CONFIG_FILE) -> DungeonConfig:
    """Read the ``dungeon`` section of a YAML file into a :class:`DungeonConfig`."""
    data = load_yaml_config(config_path, "Dungeon")
    section = data.get("dungeon") or {}
    if not isinstance(section, dict):
        raise ValueError("'dungeon' config section must be a mapping")
    return DungeonConfig.from_mapping(section)


__all__ = ["DungeonConfig", "DEFAULT_CONFIG_FILE", "load_yaml_config", "load_config"]
