"""Pytest configuration and shared fixtures."""

import pytest

import config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without an environment selector."""
    for name in config.ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shared_settings(monkeypatch: pytest.MonkeyPatch) -> config.HttpSettings:
    """Fresh process-wide settings, restored after the test."""
    settings = config.HttpSettings()
    monkeypatch.setattr(config, "http_settings", settings)
    return settings
