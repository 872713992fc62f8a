"""Unit tests for settings and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from issuegraph.config import Settings
from issuegraph.utils.logging import configure_logging, get_logger, setup_logging


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.SEARCH_RESULT_LIMIT == 10
    assert settings.SEARCH_MIN_RELEVANCE == 0.3
    assert settings.LAYOUT_SEED is None
    assert settings.LOG_FORMAT == "json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_RESULT_LIMIT", "25")
    monkeypatch.setenv("LAYOUT_SEED", "4")
    settings = Settings(_env_file=None)
    assert settings.SEARCH_RESULT_LIMIT == 25
    assert settings.LAYOUT_SEED == 4


def test_setup_logging_configures_root_logger():
    setup_logging("DEBUG", "console")
    assert logging.getLogger().level == logging.DEBUG
    get_logger("issuegraph.test").info("logging_configured")


def test_configure_logging_uses_settings():
    settings = configure_logging(Settings(_env_file=None, LOG_LEVEL="WARNING", LOG_FORMAT="console"))
    assert settings.LOG_LEVEL == "WARNING"
    assert logging.getLogger().level == logging.WARNING


def test_settings_reject_negative_limit():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SEARCH_RESULT_LIMIT=-1)
