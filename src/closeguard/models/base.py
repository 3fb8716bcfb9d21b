"""Shared base model definitions for closeguard records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CloseguardBaseModel(BaseModel):
    """Base model configured for closeguard-wide defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)


__all__ = ["CloseguardBaseModel"]
