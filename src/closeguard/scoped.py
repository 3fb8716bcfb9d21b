"""Run an operation on a closable resource and always close it afterwards.

If the operation raises, the resource is still closed. A failure from that
close is recorded on the operation's exception as a suppressed error instead of
replacing it::

    from closeguard import use, suppressed_errors

    size = use(open(path, "rb"), lambda fh: len(fh.read()))

    try:
        use(resource, work)
    except ValueError as exc:
        for close_error in suppressed_errors(exc):
            ...
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TypeVar

from rich.console import Console

from closeguard.config.settings import get_settings
from closeguard.protocols import SupportsClose
from closeguard.utils.reporting import describe_suppressed, report_suppressed, resolve_console

T = TypeVar("T", bound=Optional[SupportsClose])
R = TypeVar("R")

_SUPPRESSED_ATTR = "_closeguard_suppressed"


def _append_suppressed(error: BaseException, suppressed: BaseException) -> None:
    existing = getattr(error, _SUPPRESSED_ATTR, ())
    setattr(error, _SUPPRESSED_ATTR, (*existing, suppressed))


def _note(suppressed: BaseException) -> str:
    return f"Suppressed: {type(suppressed).__name__}: {suppressed}"


def add_suppressed(error: BaseException, suppressed: BaseException) -> None:
    """Record ``suppressed`` on ``error`` without replacing it.

    The exact instance is stored; ``error.__cause__`` and ``error.__context__``
    are left alone. A PEP 678 note is added as well unless notes are disabled
    in settings, so the suppressed error shows up in tracebacks.

    Raises
    ------
    ValueError
        If ``suppressed`` is ``error`` itself.
    """

    if suppressed is error:
        raise ValueError("An exception cannot suppress itself.")

    _append_suppressed(error, suppressed)

    if get_settings().annotate_notes:
        error.add_note(_note(suppressed))


def suppressed_errors(error: BaseException) -> tuple[BaseException, ...]:
    """Return the errors recorded on ``error`` by :func:`add_suppressed`, oldest first."""

    return getattr(error, _SUPPRESSED_ATTR, ())


def _close_suppressed(
    resource: SupportsClose,
    cause: BaseException,
    *,
    console: Optional[Console] = None,
) -> Optional[BaseException]:
    """Close ``resource``; a close failure is attached to ``cause`` and never raised.

    A close that re-raises ``cause`` itself records nothing. Failures while
    annotating or reporting are attached to ``cause`` as well.
    """

    try:
        resource.close()
    except BaseException as close_error:
        if close_error is cause:
            return None

        _append_suppressed(cause, close_error)
        try:
            settings = get_settings()
            if settings.annotate_notes:
                cause.add_note(_note(close_error))
            target = resolve_console(console, settings=settings)
            if target is not None:
                report_suppressed(describe_suppressed(resource, close_error, cause), target, settings=settings)
        except Exception as report_error:
            _append_suppressed(cause, report_error)
        return close_error
    return None


@contextmanager
def scoped(resource: T, *, console: Optional[Console] = None) -> Iterator[T]:
    """Yield ``resource`` and close it exactly once when the block exits.

    ``None`` is yielded as-is and never closed.
    """

    try:
        yield resource
    except BaseException as exc:
        if resource is not None:
            _close_suppressed(resource, exc, console=console)
        raise

    if resource is not None:
        resource.close()


def use(resource: T, operation: Callable[[T], R], *, console: Optional[Console] = None) -> R:
    """Call ``operation(resource)``, close ``resource`` and return the result.

    Parameters
    ----------
    resource:
        Object with a ``close()`` method, or ``None``.
    operation:
        Single-argument callable invoked with ``resource``.
    console:
        Optional Rich console that receives a warning line whenever a close
        failure is suppressed.

    Returns
    -------
    R
        Whatever ``operation`` returned, provided closing succeeded.

    Raises
    ------
    BaseException
        The operation's own exception, with any close failure attached via
        :func:`add_suppressed`; or the close failure when the operation
        succeeded.
    """

    with scoped(resource, console=console):
        return operation(resource)


__all__ = ["add_suppressed", "scoped", "suppressed_errors", "use"]
