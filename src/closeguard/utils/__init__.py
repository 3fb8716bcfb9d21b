"""Utility helpers shared across closeguard modules."""

from closeguard.utils.reporting import describe_suppressed, report_suppressed, resolve_console

__all__ = ["describe_suppressed", "report_suppressed", "resolve_console"]
