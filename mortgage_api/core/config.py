# This project was developed with assistance from AI tools.
"""
Application configuration.

Process-level settings read from environment variables with local dev defaults.
The service config (listening port) lives in YAML and is loaded by
``core.yaml_config``; ``CONFIG_PATH`` points at that file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve project root .env regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "mortgage-calculator"
    DEBUG: bool = False
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied when running via ``python -m mortgage_api``.",
    )

    # -- Server --
    HOST: str = "0.0.0.0"
    CONFIG_PATH: Path = Field(
        default=_PROJECT_ROOT / "config" / "config.yaml",
        description="YAML service config holding ``server.port``.",
    )

    # -- CORS --
    ALLOWED_HOSTS: list[str] = ["http://localhost:5173"]


settings = Settings()
