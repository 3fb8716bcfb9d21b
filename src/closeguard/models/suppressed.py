"""Record of a close failure attached to an operation failure."""

from __future__ import annotations

from closeguard.models.base import CloseguardBaseModel


class SuppressedClose(CloseguardBaseModel):
    """A close failure recorded as secondary context on a primary error."""

    resource_type: str
    error_type: str
    message: str
    primary_error_type: str


__all__ = ["SuppressedClose"]
