# Project: tourism-forecast
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Shared fixtures: keep log files out of the working tree and skip retry sleeps."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_side_effects(tmp_path, monkeypatch):
    monkeypatch.setattr("tourism_forecast.utils.DEFAULT_LOG_PATH", tmp_path / "test.log")
    monkeypatch.setattr("tourism_forecast.utils.time.sleep", lambda seconds: None)
    monkeypatch.delenv("OPENWEATHERMAP_API_KEY", raising=False)


@pytest.fixture()
def log_file(tmp_path):
    """Path that log_event() writes to by default during a test."""
    return tmp_path / "test.log"
