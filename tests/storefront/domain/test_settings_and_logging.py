"""Tests for environment settings and logging setup."""

import logging

import structlog
from storefront.config import load_settings
from storefront.utils.logging import configure_logging, current_env, get_log_level


class TestSettings:
    def test_defaults(self, monkeypatch):
        for key in ("STOREFRONT_CURRENCY", "CURRENCY", "STOREFRONT_SIGN_IN_PATH", "STOREFRONT_PAYMENT_METHOD"):
            monkeypatch.delenv(key, raising=False)

        settings = load_settings()
        assert settings.currency == "KES"
        assert settings.sign_in_path == "/auth"
        assert settings.default_payment_method == "credit-card"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CURRENCY", "USD")
        monkeypatch.setenv("STOREFRONT_SIGN_IN_PATH", " /login ")

        settings = load_settings()
        assert settings.currency == "USD"
        assert settings.sign_in_path == "/login"

    def test_blank_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CURRENCY", "  ")
        monkeypatch.delenv("CURRENCY", raising=False)
        assert load_settings().currency == "KES"


class TestLogging:
    def test_test_environment_level(self, monkeypatch):
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "test")

        assert current_env() == "test"
        assert get_log_level() == "WARNING"

    def test_explicit_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        assert get_log_level() == "DEBUG"

    def test_configure_logging(self, monkeypatch):
        monkeypatch.setenv("PROTEAN_ENV", "test")
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        configure_logging()

        assert logging.getLogger().level == logging.WARNING
        assert structlog.is_configured()
