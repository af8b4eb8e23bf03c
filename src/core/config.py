"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking into the CLI.
- Lets services read drill defaults (password, limits, deploy command) consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.operations import LogFormat


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "shell-drills"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "shell-drills"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "shell-drills"
    return Path.home() / ".config" / "shell-drills"


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


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Write or update keys in the user's global .env file."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# shell-drills user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars, .env files).
    - One configuration contract shared by the CLI and the services.
    """

    model_config = SettingsConfigDict(
        env_prefix="DRILLS_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    login_password: str = Field(
        default="devops",
        min_length=1,
        description="Password accepted by the login drill.",
    )
    login_max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="Attempts allowed before the account is locked.",
    )

    fizzbuzz_limit: int = Field(
        default=30,
        ge=1,
        description="Default upper bound for FizzBuzz.",
    )

    app_env: str = Field(
        default="DEV",
        min_length=1,
        description="Value exported as APP_ENV by the environment drill.",
    )

    deploy_service_name: str = Field(
        default="payment_service",
        min_length=1,
        description="Service name announced by the deploy drill.",
    )
    deploy_config_file: Path = Field(
        default=Path("config.txt"),
        description="File that must exist before deploying.",
    )
    deploy_command: str = Field(
        default="false",
        min_length=1,
        description="Command simulating the deployment step.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log renderer (console/json).",
    )
