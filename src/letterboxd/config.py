"""Configuration management for the Letterboxd client.

Loads API credentials from the environment (optionally via .env) and
client settings from an optional letterboxd.yaml.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, ClassVar, Mapping

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from letterboxd.errors import ConfigurationError

API_BASE_URL = "https://api.letterboxd.com/api/v0/"
DEFAULT_TOKEN_FILE = "~/.config/letterboxd/token.json"


class ApiKeyPair(BaseModel):
    """API key/secret pair used to sign every request."""

    API_KEY_ENVVAR: ClassVar[str] = "LETTERBOXD_API_KEY"
    API_SECRET_ENVVAR: ClassVar[str] = "LETTERBOXD_API_SECRET"

    api_key: str
    api_secret: str = Field(repr=False)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ApiKeyPair | None:
        """Read the pair from LETTERBOXD_API_KEY and LETTERBOXD_API_SECRET.

        Returns None if either variable is missing or empty.
        """
        environ = os.environ if environ is None else environ
        api_key = environ.get(cls.API_KEY_ENVVAR, "")
        api_secret = environ.get(cls.API_SECRET_ENVVAR, "")
        if not api_key or not api_secret:
            return None
        return cls(api_key=api_key, api_secret=api_secret)


def require_api_key_pair(explicit: ApiKeyPair | None = None) -> ApiKeyPair:
    """Return the explicit pair, falling back to the environment."""
    pair = explicit or ApiKeyPair.from_env()
    if pair is None:
        raise ConfigurationError(
            "No API credentials configured. Set LETTERBOXD_API_KEY and "
            "LETTERBOXD_API_SECRET or pass an ApiKeyPair explicitly."
        )
    return pair


class Settings(BaseModel):
    """Client settings."""
    api_key: str = Field(default="", description="Letterboxd API key")
    api_secret: str = Field(default="", repr=False, description="Letterboxd API secret")
    base_url: str = Field(default=API_BASE_URL, description="API base URL")
    timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    token_file: str = Field(default=DEFAULT_TOKEN_FILE, description="Where the CLI stores tokens")

    @property
    def api_key_pair(self) -> ApiKeyPair | None:
        """The configured key pair, or None when either half is missing."""
        if not self.api_key or not self.api_secret:
            return None
        return ApiKeyPair(api_key=self.api_key, api_secret=self.api_secret)

    @property
    def token_path(self) -> Path:
        return Path(self.token_file).expanduser()


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_file_settings(path: Path) -> dict[str, Any]:
    """Load settings overrides from a YAML file, if it exists."""
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return data.get("letterboxd", data)


def load_settings(config_path: Path | None = None, env_file: Path | None = None) -> Settings:
    """Load settings once at startup.

    Values from the environment (and .env) take precedence over the YAML file.
    """
    env_path = env_file or Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = Path(_env("LETTERBOXD_CONFIG", default="letterboxd.yaml"))
    values = _load_file_settings(config_path)

    env_values = {
        "api_key": _env("LETTERBOXD_API_KEY"),
        "api_secret": _env("LETTERBOXD_API_SECRET"),
        "base_url": _env("LETTERBOXD_BASE_URL"),
        "timeout": _env("LETTERBOXD_TIMEOUT"),
        "token_file": _env("LETTERBOXD_TOKEN_FILE"),
    }
    values.update({k: v for k, v in env_values.items() if v})

    return Settings(**values)
