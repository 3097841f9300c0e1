# This project was developed with assistance from AI tools.
"""Tests for settings and the YAML service config loader."""

from pathlib import Path

import pytest

from mortgage_api.core.config import Settings
from mortgage_api.core.yaml_config import ServiceConfig, load_config


def _write(tmp_path: Path, text: str, name: str = "config.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_port(tmp_path):
    path = _write(tmp_path, "server:\n  port: 8080\n")
    config = load_config(path)
    assert isinstance(config, ServiceConfig)
    assert config.server.port == 8080


def test_relative_name_resolves_in_base_dir(tmp_path):
    _write(tmp_path, "server:\n  port: 9000\n", name="test_config.yaml")
    config = load_config("test_config.yaml", base_dir=tmp_path)
    assert config.server.port == 9000


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="non_existing_config.yaml"):
        load_config("non_existing_config.yaml", base_dir=tmp_path)


def test_env_placeholder_default(tmp_path, monkeypatch):
    monkeypatch.delenv("MORTGAGE_TEST_PORT", raising=False)
    path = _write(tmp_path, "server:\n  port: ${MORTGAGE_TEST_PORT:-8181}\n")
    assert load_config(path).server.port == 8181


def test_env_placeholder_override(tmp_path, monkeypatch):
    monkeypatch.setenv("MORTGAGE_TEST_PORT", "9191")
    path = _write(tmp_path, "server:\n  port: ${MORTGAGE_TEST_PORT:-8181}\n")
    assert load_config(path).server.port == 9191


def test_missing_server_section(tmp_path):
    path = _write(tmp_path, "other: 1\n")
    with pytest.raises(ValueError, match="'server' section"):
        load_config(path)


def test_invalid_port(tmp_path):
    path = _write(tmp_path, "server:\n  port: 70000\n")
    with pytest.raises(ValueError, match="Invalid service config"):
        load_config(path)


def test_malformed_yaml(tmp_path):
    path = _write(tmp_path, "server: [unclosed\n")
    with pytest.raises(ValueError, match="Failed to parse YAML"):
        load_config(path)


def test_bundled_config_loads(monkeypatch):
    monkeypatch.delenv("SERVER_PORT", raising=False)
    config = load_config(Settings().CONFIG_PATH)
    assert config.server.port == 8080


def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.APP_NAME == "mortgage-calculator"
    assert s.CONFIG_PATH.name == "config.yaml"
    assert s.LOG_LEVEL == "INFO"
