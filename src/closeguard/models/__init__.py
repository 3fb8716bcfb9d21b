"""Structured records describing close outcomes."""

from closeguard.models.base import CloseguardBaseModel
from closeguard.models.suppressed import SuppressedClose

__all__ = ["CloseguardBaseModel", "SuppressedClose"]
