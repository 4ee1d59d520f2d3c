"""Resolver configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI.
- Lets adapters (HTTP) and the pipeline (retries) read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "steamid-resolver"
_ENV_HEADER = "# steamid-resolver user config (.env)\n"


def get_user_config_dir() -> Path:
    """Per-user config directory: %APPDATA%, Application Support or XDG."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars(env_path: Path | None = None) -> dict[str, str]:
    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Set variables in the user's .env, keeping unrelated lines and comments.

    `None` values are skipped, not written as empty.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text(_ENV_HEADER, encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value)
    return env_path


class ResolverSettings(BaseSettings):
    """Central configuration for the resolver.

    Why pydantic-settings:
    - Typed, validated env vars at the edge.
    - One configuration contract shared by CLI, adapters and pipeline.
    """

    model_config = SettingsConfigDict(
        env_prefix="STEAMID_RESOLVER_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; steamid-resolver-py)",
        min_length=1,
        description="User-Agent sent to steamcommunity.com.",
    )
    base_url: str = Field(
        default="https://steamcommunity.com",
        min_length=8,
        description="Base URL used when building profile/group/sharedfile URLs.",
    )

    max_retries: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts per lookup before the last error is raised.",
    )
    retry_base_delay_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Backoff unit; attempt n waits base * n seconds.",
    )

    debug: bool = Field(
        default=False,
        description="Emit debug traces through a Rich log handler.",
    )
