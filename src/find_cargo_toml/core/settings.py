"""find-cargo-toml runtime settings (Pydantic v2 Settings).

Only the CLI reads these; the library API keeps its own defaults so that
``find(".")`` behaves the same regardless of the environment.

Environment overrides::

    FIND_CARGO_TOML_FILE_NAME=pyproject.toml
    FIND_CARGO_TOML_LOG_LEVEL=DEBUG
    FIND_CARGO_TOML_LOG_JSON=true
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from find_cargo_toml.core.options import DEFAULT_FILE_NAME, check_file_name


class Settings(BaseSettings):
    """All runtime configuration for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="FIND_CARGO_TOML_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Search ──────────────────────────────────────────────
    file_name: str = DEFAULT_FILE_NAME

    # ── Logging ─────────────────────────────────────────────
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("file_name")
    @classmethod
    def _bare_file_name(cls, v: str) -> str:
        return check_file_name(v)

