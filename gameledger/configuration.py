"""Mini README: Centralised configuration for gameledger.

Structure:
    * LedgerSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the ledger file, pick the log level, and
    choose where the web interface binds. Values come from ``GAMELEDGER_*``
    environment variables or a ``.env`` file and are validated once per
    process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Runtime configuration for the revenue ledger."""

    model_config = SettingsConfigDict(
        env_prefix="GAMELEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("."),
        description="Directory holding the ledger text file.",
    )
    ledger_filename: str = Field(
        "casino.txt",
        description="Name of the ledger file saved and loaded by the console.",
    )
    log_level: str = Field(
        "INFO",
        description="Root log level used by the console and web interface.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value or ".").expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level

    @property
    def ledger_path(self) -> Path:
        """Full path of the ledger file."""

        return self.data_directory / self.ledger_filename


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
