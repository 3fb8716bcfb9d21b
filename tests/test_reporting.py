from __future__ import annotations

import pytest
from pydantic import ValidationError

from closeguard import use
from closeguard.config.settings import Settings
from closeguard.models import SuppressedClose
from closeguard.utils.reporting import describe_suppressed, report_suppressed, resolve_console
from tests.fakes import FakeResource


def _fail(resource):
    raise ValueError("bad data")


def test_describe_suppressed_builds_record():
    record = describe_suppressed(FakeResource(), OSError("disk full"), ValueError("bad"))

    assert record == SuppressedClose(
        resource_type="FakeResource",
        error_type="OSError",
        message="disk full",
        primary_error_type="ValueError",
    )


def test_record_is_frozen():
    record = describe_suppressed(FakeResource(), OSError("x"), ValueError("y"))

    with pytest.raises(ValidationError):
        record.message = "changed"


def test_use_reports_suppressed_close(console_buffer):
    console, buffer = console_buffer
    resource = FakeResource(OSError("disk full"))

    with pytest.raises(ValueError):
        use(resource, _fail, console=console)

    output = buffer.getvalue()
    assert "close failed: FakeResource raised OSError: disk full" in output
    assert "suppressed by ValueError" in output


def test_nothing_reported_when_close_succeeds(console_buffer):
    console, buffer = console_buffer

    with pytest.raises(ValueError):
        use(FakeResource(), _fail, console=console)

    assert buffer.getvalue() == ""


def test_nothing_reported_for_plain_close_failure(console_buffer):
    console, buffer = console_buffer

    with pytest.raises(OSError):
        use(FakeResource(OSError("disk full")), lambda r: 1, console=console)

    assert buffer.getvalue() == ""


def test_markup_in_messages_is_escaped(console_buffer):
    console, buffer = console_buffer
    record = describe_suppressed(FakeResource(), OSError("[bold]oops[/bold]"), ValueError("bad"))

    report_suppressed(record, console)

    assert "[bold]oops[/bold]" in buffer.getvalue()


def test_resolve_console_prefers_explicit(console_buffer):
    console, _ = console_buffer

    assert resolve_console(console) is console


def test_resolve_console_off_by_default():
    assert resolve_console(settings=Settings()) is None


def test_resolve_console_enabled_by_env(monkeypatch):
    monkeypatch.setenv("CLOSEGUARD_REPORT_SUPPRESSED", "1")

    assert resolve_console() is not None


def test_env_enabled_reporting_prints_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("CLOSEGUARD_REPORT_SUPPRESSED", "true")

    with pytest.raises(ValueError):
        use(FakeResource(OSError("disk full")), _fail)

    captured = capsys.readouterr()
    err = " ".join(captured.err.split())
    assert "close failed: FakeResource raised OSError: disk full" in err
    assert "suppressed by ValueError" in err
    assert captured.out == ""


def test_env_enabled_reporting_silent_without_close_failure(monkeypatch, capsys):
    monkeypatch.setenv("CLOSEGUARD_REPORT_SUPPRESSED", "true")

    with pytest.raises(ValueError):
        use(FakeResource(), _fail)

    assert capsys.readouterr().err == ""
