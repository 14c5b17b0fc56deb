"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from datetime import datetime

import pytest
import pytz

from coercion.config import reset_settings, runtime
from coercion.time_helpers import clock

FIXED_NOW = pytz.utc.localize(datetime(2024, 3, 15, 9, 30, 0))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Strip COERCION_* variables and .env lookups so every test sees default settings."""
    for name in list(os.environ):
        if name.startswith("COERCION_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixed_now(monkeypatch) -> datetime:
    """Pin the library clock to FIXED_NOW."""
    monkeypatch.setattr(clock, "get_current_time", lambda: FIXED_NOW)
    return FIXED_NOW
