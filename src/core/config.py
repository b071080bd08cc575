"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (CMS/formulario) lean config de forma consistente.
"""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path
from typing import Mapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.locale import Locale

APP_DIR_NAME = "lares-site"
USER_ENV_HEADER = "# Lares site tooling: per-user CMS settings"

_NEEDS_QUOTES = re.compile(r"[\s#]")


def get_user_config_dir() -> Path:
    """Where `lares doctor setup-cms` keeps the per-user CMS settings."""

    home = Path.home()
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or home) / APP_DIR_NAME
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=value pairs of a dotenv file; {} when it is missing or unreadable.

    Comments, blank lines and an `export ` prefix are skipped, and one pair of
    matching quotes around a value is removed.
    """

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return {}

    data: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.strip().removeprefix("export ").partition("=")
        key = key.strip()
        if not sep or not key or key.startswith("#"):
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        data[key] = value
    return data


def _env_value(value: str) -> str:
    return f'"{value}"' if _NEEDS_QUOTES.search(value) else value


def write_user_env_vars(values: Mapping[str, str | None], env_path: Path | None = None) -> Path:
    """Merge `values` into the per-user .env. None values are skipped; other keys stay."""

    env_path = env_path or get_user_env_file()
    merged = read_env_file(env_path)
    merged.update({key: value for key, value in values.items() if value is not None})

    lines = [USER_ENV_HEADER, *(f"{key}={_env_value(merged[key])}" for key in sorted(merged))]
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central configuration.

    Order: project `.env` first (development), then the user's global config.
    """

    model_config = SettingsConfigDict(
        env_prefix="LARES_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    directus_url: str = Field(
        default="http://localhost:8055",
        min_length=8,
        description="Base URL of the Directus instance serving translated content.",
    )
    default_locale: Locale = Field(
        default=Locale.default(),
        description="Locale used when a caller passes none or an unsupported one.",
    )
    contact_endpoint: str | None = Field(
        default=None,
        description="Full URL receiving contact-form posts (defaults to <directus_url>/contact-form).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; unset means no timeout.",
    )
    user_agent: str = Field(
        default="lares-site/0.1 (+https://larescohousing.it)",
        min_length=1,
        description="User-Agent sent to the CMS.",
    )

    @property
    def base_url(self) -> str:
        return self.directus_url.rstrip("/")

    @property
    def contact_url(self) -> str:
        if self.contact_endpoint:
            return self.contact_endpoint
        return f"{self.base_url}/contact-form"
