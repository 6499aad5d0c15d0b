"""Client configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI or the executor.
- The executor and adapters take an explicit `PathfinderSettings`, so the
  library itself never reads the environment unless a caller builds one.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_QUERY_URL = "https://api-partner.spotify.com/pathfinder/v1/query"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pathfinder-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pathfinder-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pathfinder-client"
    return Path.home() / ".config" / "pathfinder-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env.

    `None` values are skipped so an existing entry is kept.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# pathfinder-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class PathfinderSettings(BaseSettings):
    """Central configuration.

    Order: project `.env` first (dev), then the user config `.env`, with real
    environment variables taking precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATHFINDER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    query_url: str = Field(
        default=DEFAULT_QUERY_URL,
        min_length=8,
        description="Persisted-query endpoint; parameters are appended to it.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="pathfinder-client/0.1",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    access_token: str | None = Field(
        default=None,
        description="Bearer token for the Authorization header. Refresh is the caller's job.",
    )
    client_token: str | None = Field(
        default=None,
        description="Optional client-token header value.",
    )
    app_platform: str = Field(
        default="WebPlayer",
        min_length=1,
        description="App-Platform header value.",
    )

    default_page_limit: int = Field(
        default=25,
        ge=1,
        le=50,
        description="Page size used by the CLI when --limit is not given.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
