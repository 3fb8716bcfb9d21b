"""Guaranteed cleanup for closable resources."""

from closeguard.protocols import SupportsClose
from closeguard.scoped import add_suppressed, scoped, suppressed_errors, use

__version__ = "0.1.0"

__all__ = ["SupportsClose", "__version__", "add_suppressed", "scoped", "suppressed_errors", "use"]
