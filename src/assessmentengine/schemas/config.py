"""Pydantic configuration schema for YAML engine settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class ValidationSettings(BaseModel):
    messages: dict[str, str] | None = None
    bytes_per_megabyte: PositiveInt | None = None

    model_config = ConfigDict(extra="forbid")


class CacheSettings(BaseModel):
    enabled: bool = True
    max_entries: PositiveInt = 256

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        validation_settings = self.validation.model_dump(exclude_none=True)
        if validation_settings:
            settings["validation"] = validation_settings
        settings["cache"] = self.cache.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    """Validate a raw mapping (usually parsed YAML); ``None`` means defaults."""
    return AppConfig.model_validate(raw if raw is not None else {})
