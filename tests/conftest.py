from __future__ import annotations

import io

import pytest
from rich.console import Console

from closeguard.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv("CLOSEGUARD_REPORT_SUPPRESSED", raising=False)
    monkeypatch.delenv("CLOSEGUARD_ANNOTATE_NOTES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def console_buffer():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, width=200), buffer
