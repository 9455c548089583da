# src/customerlocator/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/customerlocator/config/defaults.yaml`, then optionally overridden by:
- environment variables (e.g., `CUSTOMERLOCATOR_LOG_LEVEL`, `CUSTOMERLOCATOR_CUSTOMERS_PATH`)
- an external YAML file via `CUSTOMERLOCATOR_CONFIG_PATH`

Design rule:
- CLI defaults (radius, reference point, data file) live in YAML, not in argparse.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from customerlocator.core.env import load_dotenv_if_present
from customerlocator.core.geo import DUBLIN_LATITUDE, DUBLIN_LONGITUDE, Coordinate


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `customerlocator.config`."""
    text = resources.files("customerlocator.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    log_level: str = "INFO"


class ReferencePointSettings(BaseModel):
    latitude: float = DUBLIN_LATITUDE
    longitude: float = DUBLIN_LONGITUDE

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class LocatorSettings(BaseModel):
    customers_path: str = "data/customers.json"
    default_radius_km: float = Field(100.0, gt=0)
    reference: ReferencePointSettings = Field(default_factory=ReferencePointSettings)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    locator: LocatorSettings = Field(default_factory=LocatorSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    data = dict(data)
    log_level = os.getenv("CUSTOMERLOCATOR_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    customers_path = os.getenv("CUSTOMERLOCATOR_CUSTOMERS_PATH")
    if customers_path:
        data.setdefault("locator", {})["customers_path"] = customers_path

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("CUSTOMERLOCATOR_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
