"""
Settings loader for procroute.

Settings come from code or from a small YAML file:

    route_path: /proc/net/route
    log_level: INFO

Nothing is read from the environment.
"""

from __future__ import annotations

import logging
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_ROUTE_PATH = Path("/proc/net/route")


@dataclass
class Settings:
    route_path: Path = DEFAULT_ROUTE_PATH
    log_level: str = "WARNING"

    def __post_init__(self):
        self.route_path = Path(self.route_path)
        self.log_level = str(self.log_level).upper()

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from YAML. Unknown keys are ignored; an empty file gives defaults."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with open(path) as f:
            raw = yaml.safe_load(f)

        if not raw:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")

        kwargs = {}
        if raw.get("route_path"):
            kwargs["route_path"] = raw["route_path"]
        if raw.get("log_level"):
            kwargs["log_level"] = raw["log_level"]
        return cls(**kwargs)


def load_settings(path: str | Path) -> Settings:
    return Settings.from_yaml(path)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings] = None) -> Settings:
    """Install settings as the active ones and apply their log level."""
    global _settings
    _settings = settings or Settings()
    logging.getLogger("procroute").setLevel(_settings.log_level)
    return _settings
