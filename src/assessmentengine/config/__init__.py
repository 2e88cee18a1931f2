"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed loader for named engine configuration files."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        return self._base_path / f"{name}.yaml"

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension.

        An empty file yields an empty mapping.
        """
        with self.path_for(name).open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle) or {}

    def load_app_config(self, name: str) -> AppConfig:
        """Load and validate a named configuration file."""
        return load_config(self.load(name))


__all__ = ["ConfigManager"]
