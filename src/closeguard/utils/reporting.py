"""Console reporting for close failures that were attached to another error."""

from __future__ import annotations

import sys
from typing import Optional

from rich.console import Console
from rich.markup import escape

from closeguard.config.settings import Settings, get_settings
from closeguard.models.suppressed import SuppressedClose


def describe_suppressed(resource: object, close_error: BaseException, cause: BaseException) -> SuppressedClose:
    """Build a structured record for a close failure suppressed by ``cause``."""

    return SuppressedClose(
        resource_type=type(resource).__name__,
        error_type=type(close_error).__name__,
        message=str(close_error),
        primary_error_type=type(cause).__name__,
    )


def resolve_console(console: Optional[Console] = None, *, settings: Optional[Settings] = None) -> Optional[Console]:
    """Return the console to report on, or ``None`` when reporting is off."""

    if console is not None:
        return console
    settings = settings or get_settings()
    if settings.report_suppressed:
        return Console(file=sys.stderr)
    return None


def report_suppressed(record: SuppressedClose, console: Console, *, settings: Optional[Settings] = None) -> None:
    """Print a single warning line for ``record``."""

    reporting = (settings or get_settings()).reporting
    style = reporting.warning_style
    console.print(
        f"[{style}]{escape(reporting.prefix)}: {record.resource_type} raised "
        f"{record.error_type}: {escape(record.message)} "
        f"(suppressed by {record.primary_error_type})[/{style}]"
    )


__all__ = ["describe_suppressed", "report_suppressed", "resolve_console"]
