"""Library settings loaded from environment variables and bundled config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from closeguard.config import CONFIG_ROOT


class ReportingConfig(BaseModel):
    """Console styling for suppressed close failures."""

    warning_style: str = "yellow"
    prefix: str = "close failed"

    model_config = ConfigDict(extra="forbid")


def _load_reporting(reporting_path: Path) -> ReportingConfig:
    if not reporting_path.exists():
        return ReportingConfig()

    raw_data = yaml.safe_load(reporting_path.read_text(encoding="utf-8")) or {}
    return ReportingConfig(**raw_data)


class Settings(BaseSettings):
    """Runtime switches for closeguard."""

    report_suppressed: bool = Field(default=False)
    annotate_notes: bool = Field(default=True)

    reporting: ReportingConfig = Field(default_factory=lambda: _load_reporting(CONFIG_ROOT / "reporting.yaml"))

    model_config = SettingsConfigDict(env_prefix="CLOSEGUARD_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the library settings."""

    return Settings()


__all__ = ["ReportingConfig", "Settings", "get_settings"]
