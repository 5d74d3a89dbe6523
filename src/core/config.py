"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP session, token store, local stores) read config the
  same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_DIR_NAME = "up-client"
USER_ENV_HEADER = "# up-client user config (.env)\n"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (APPDATA, Application Support or XDG)."""

    if sys.platform == "win32":
        return Path(os.environ.get("APPDATA") or Path.home()) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars(env_path: Path | None = None) -> dict[str, str]:
    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Set keys in the user's global .env, keeping every other line."""

    env_path = env_path or get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text(USER_ENV_HEADER, encoding="utf-8")
    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without leaking into the core.
    - One configuration contract for the CLI and every adapter.
    """

    model_config = SettingsConfigDict(
        env_prefix="UP_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_host: str = Field(
        default="http://localhost:8080",
        min_length=1,
        description="Base URL of the Up API (scheme + host [+ port]).",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="up-client/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )
    page_size: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Default page size for paginated listings.",
    )

    token_store_path: Path | None = Field(
        default=None,
        description="File holding the persisted token pair (defaults to the user config dir).",
    )
    data_dir: Path | None = Field(
        default=None,
        description="Directory for local stores (recent searches, saved companies).",
    )
    recent_search_limit: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of entries kept by each local store.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file; stderr only when unset.",
    )

    def resolved_token_store_path(self) -> Path:
        return self.token_store_path or get_user_config_dir() / "tokens.json"

    def resolved_data_dir(self) -> Path:
        return self.data_dir or get_user_config_dir() / "data"
