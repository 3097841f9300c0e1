# This project was developed with assistance from AI tools.
"""Service config loader.

Reads config/config.yaml, substitutes ${ENV_VAR:-default} placeholders and
validates the ``server`` section into a frozen ``ServiceConfig``.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML config loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")


class ServerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    port: int = Field(ge=1, le=65535)


class ServiceConfig(BaseModel):
    """Validated contents of the YAML service config."""

    model_config = ConfigDict(frozen=True)

    server: ServerConfig


def _substitute_env_vars(value: str) -> str:
    """Replace ${VAR:-default} patterns with environment values."""

    def _replace(match: re.Match) -> str:
        var_name = match.group(1)
        default = match.group(2) or ""
        return os.environ.get(var_name, default)

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve env var placeholders in a config tree."""
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _resolve_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_vars(item) for item in obj]
    return obj


def _resolve_path(path: Path | str, base_dir: Path) -> Path:
    """Relative names are looked up inside ``base_dir``."""
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = base_dir / candidate
    return candidate


def load_config(path: Path | str, *, base_dir: Path | None = None) -> ServiceConfig:
    """Load and validate the service config from disk.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: the YAML is malformed or ``server.port`` is missing/invalid.
    """
    config_path = _resolve_path(path, base_dir or _CONFIG_DIR)
    if not config_path.exists():
        raise FileNotFoundError(f"Service config not found: {config_path}")

    try:
        raw = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse YAML in {config_path}: {exc}") from exc

    if not isinstance(raw, dict) or not isinstance(raw.get("server"), dict):
        raise ValueError(f"{config_path.name} must contain a 'server' section")

    try:
        config = ServiceConfig.model_validate(_resolve_env_vars(raw))
    except ValidationError as exc:
        raise ValueError(f"Invalid service config in {config_path.name}: {exc}") from exc

    logger.info("Loaded service config from %s (port=%d)", config_path, config.server.port)
    return config
