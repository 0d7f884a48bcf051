"""Load .env and settings.yaml, expose all configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from lolesports.api.client import BASE_URL

log = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Environment variable -> Settings field
ENV_VARS = {
    "LOL_API_KEY": "api_key",
    "LOL_API_BASE_URL": "api_base_url",
    "HTTP_TIMEOUT": "http_timeout_ms",
}


def _load_env() -> None:
    env_path = PROJECT_ROOT / ".env"
    load_dotenv(env_path)


def _load_yaml(settings_path: Path | None = None) -> dict:
    settings_path = settings_path or PROJECT_ROOT / "settings.yaml"
    if settings_path.exists():
        try:
            with open(settings_path) as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            log.warning("Failed to parse %s, using defaults", settings_path.name)
            return {}
    return {}


class Settings(BaseModel):
    api_key: str = ""
    api_base_url: str = BASE_URL
    http_timeout_ms: int = 10_000
    default_language: str = "en-US"
    cache_max_size: int = 1000
    log_level: str = "INFO"

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def http_timeout(self) -> float:
        """Upstream request timeout in seconds."""
        return self.http_timeout_ms / 1000


def load_settings(settings_path: Path | None = None) -> Settings:
    _load_env()
    raw = _load_yaml(settings_path)
    for env_name, field in ENV_VARS.items():
        value = os.getenv(env_name)
        if value:
            raw[field] = value
    return Settings(**raw)
