"""
config/config.py

Purpose
-------
Centralized settings for the daylog file logger.
- Normalizes environment variable names across canonical and short aliases.
- Provides strong typing and safe defaults for the log root, tag layout and
  console mirroring.

Notes for Maintainers
---------------------
- `.env` is loaded on import unless SETTINGS_SKIP_DOTENV=1 (tests set it).
- `log_root` is always stored as an absolute path.

Examples
--------
# PowerShell:
$env:DAYLOG_ROOT = 'D:\\robot'

# Bash:
export DAYLOG_ROOT=/var/lib/robot DAYLOG_MIRROR_STDOUT=0
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("SETTINGS_SKIP_DOTENV") != "1":
    load_dotenv()


# -----------------------------
# Helper functions
# -----------------------------
def _coalesce_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty environment variable from *names*."""
    for name in names:
        val = os.getenv(name)
        if val is not None and str(val).strip() != "":
            return val
    return default


def _parse_bool(value: Optional[str], *, default: bool) -> bool:
    if value is None:
        return default
    v = str(value).strip().lower()
    return v in {"1", "true", "yes", "y", "on"}


def _parse_int(value: Optional[str], *, default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


# -----------------------------
# Main Settings
# -----------------------------
class Settings(BaseSettings):
    # --- Filesystem layout ---
    log_root: Path = Field(
        default_factory=lambda: Path(
            _coalesce_env("DAYLOG_ROOT", "LOG_ROOT") or os.getcwd()
        )
    )
    log_dir_name: str = Field(
        default_factory=lambda: _coalesce_env("DAYLOG_DIR_NAME") or "logs"
    )
    log_encoding: str = Field(
        default_factory=lambda: _coalesce_env("DAYLOG_ENCODING") or "utf-8"
    )

    # --- Line layout ---
    tag_width: int = Field(
        default_factory=lambda: _parse_int(
            _coalesce_env("DAYLOG_TAG_WIDTH"), default=11
        )
    )

    # --- Console ---
    mirror_stdout: bool = Field(
        default_factory=lambda: _parse_bool(
            _coalesce_env("DAYLOG_MIRROR_STDOUT"), default=True
        )
    )
    diagnostics_level: str = Field(
        default_factory=lambda: (
            _coalesce_env("DAYLOG_DIAGNOSTICS_LEVEL", "LOG_LEVEL") or "INFO"
        ).upper()
    )

    # Field names are also read directly as DAYLOG_<FIELD>; the validators
    # below keep both routes parsing values the same way.
    model_config = SettingsConfigDict(case_sensitive=False, env_prefix="DAYLOG_")

    @field_validator("tag_width", mode="before")
    def _lenient_tag_width(cls, v: Any) -> int:
        if isinstance(v, str):
            return _parse_int(v, default=11)
        return v

    @field_validator("mirror_stdout", mode="before")
    def _lenient_mirror_stdout(cls, v: Any) -> bool:
        if isinstance(v, str):
            return _parse_bool(v, default=True)
        return v

    @field_validator("diagnostics_level", mode="before")
    def _upper_level(cls, v: Any) -> str:
        return str(v).strip().upper()

    @field_validator("log_root", mode="after")
    def _absolute_log_root(cls, v: Path) -> Path:
        return Path(v).expanduser().resolve()

    @field_validator("tag_width", mode="after")
    def _positive_tag_width(cls, v: int) -> int:
        return max(1, int(v))


# Singleton settings instance
settings = Settings()
