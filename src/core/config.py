"""Application settings.

- Environment-driven settings (pydantic-settings) shared by the CLI and the
  adapters: HTTP, the quicktype engine, concurrency and defaults.
- Project-level options live in the YAML config file (core/project_config.py).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "typegen-docs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "typegen-docs"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "typegen-docs"
    return Path.home() / ".config" / "typegen-docs"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key:
            data[key] = value.strip().strip('"').strip("'")
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# typegen-docs user config (.env)"]
    for key in sorted(existing):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings (`TYPEGEN_DOCS_*` environment variables)."""

    model_config = SettingsConfigDict(
        env_prefix="TYPEGEN_DOCS_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global one.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per schema request (seconds).",
    )
    user_agent: str = Field(
        default="typegen-docs/0.1",
        min_length=1,
        description="User-Agent sent when fetching schemas from an API.",
    )

    quicktype_command: str = Field(
        default="quicktype",
        min_length=1,
        description="Command used to run quicktype (e.g. 'npx quicktype').",
    )
    quicktype_timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Timeout for one quicktype invocation (seconds).",
    )

    max_concurrency: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Maximum number of documents processed at the same time.",
    )
    default_config_path: Path = Field(
        default=Path("type-gen.config.yml"),
        description="Config file used when --config is not given.",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Documentation language when neither config nor flags set one (en/zh).",
    )
