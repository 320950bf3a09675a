"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from paymenthub.config import Settings, get_settings
from paymenthub.logging_setup import configure_logging


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.default_currency == "BRL"
    assert settings.tax_id_serialization == "masked"
    assert not settings.reveal_tax_ids
    assert settings.log_level == "INFO"
    assert settings.debug is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAYMENTHUB_DEFAULT_CURRENCY", "usd")
    monkeypatch.setenv("PAYMENTHUB_TAX_ID_SERIALIZATION", "raw")

    settings = Settings(_env_file=None)

    assert settings.default_currency == "USD"
    assert settings.reveal_tax_ids


def test_unknown_default_currency_is_rejected(monkeypatch):
    monkeypatch.setenv("PAYMENTHUB_DEFAULT_CURRENCY", "XYZ")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_sets_package_level(monkeypatch):
    monkeypatch.setenv("PAYMENTHUB_LOG_LEVEL", "WARNING")

    logger = configure_logging()
    assert logger.name == "paymenthub"
    assert logger.level == logging.WARNING

    assert configure_logging("debug").level == logging.DEBUG

    logging.getLogger("paymenthub").setLevel(logging.NOTSET)
