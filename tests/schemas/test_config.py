from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from assessmentengine.config import ConfigManager
from assessmentengine.schemas import AppConfig, load_config


def test_load_config_defaults():
    config = load_config(None)

    assert isinstance(config, AppConfig)
    assert config.to_settings() == {"cache": {"enabled": True, "max_entries": 256}}


def test_load_config_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        load_config({"validation": {"colour": "blue"}})


def test_config_manager_loads_named_yaml(tmp_path: Path):
    (tmp_path / "engine.yaml").write_text(
        "validation:\n"
        "  bytes_per_megabyte: 1000000\n"
        "  messages:\n"
        "    required: Please answer\n"
        "cache:\n"
        "  enabled: false\n",
        encoding="utf-8",
    )
    (tmp_path / "empty.yaml").write_text("", encoding="utf-8")
    manager = ConfigManager(tmp_path)

    settings = manager.load_app_config("engine").to_settings()

    assert settings["validation"] == {
        "messages": {"required": "Please answer"},
        "bytes_per_megabyte": 1_000_000,
    }
    assert settings["cache"]["enabled"] is False
    assert manager.load("empty") == {}
