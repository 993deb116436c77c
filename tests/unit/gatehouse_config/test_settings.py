"""Unit tests for settings, logging setup and SessionAuthConfig."""

import logging

import pytest
from pydantic import ValidationError

from gatehouse_auth.session import SessionAuthConfig
from gatehouse_config import (
    Settings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)


class TestSettings:
    """Tests for Settings loading."""

    def setup_method(self):
        clear_settings_cache()

    def teardown_method(self):
        clear_settings_cache()

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.session_identity_field == "user_id"
        assert settings.allow_remembering is True
        assert settings.remember_length == 30 * 24 * 60 * 60
        assert settings.remember_cookie_name == "remember"
        assert settings.remember_purge_probability == 0.2
        assert settings.cookie_secure is True
        assert settings.cookie_samesite == "lax"
        assert settings.testing is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("REMEMBER_LENGTH", "3600")
        monkeypatch.setenv("COOKIE_PREFIX", "__Secure-")
        monkeypatch.setenv("TESTING", "true")

        settings = Settings(_env_file=None)

        assert settings.remember_length == 3600
        assert settings.cookie_prefix == "__Secure-"
        assert settings.testing is True

    def test_remember_length_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, remember_length=0)

    def test_purge_probability_range(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, remember_purge_probability=1.5)

    def test_invalid_samesite(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cookie_samesite="sometimes")

    def test_database_url(self):
        settings = Settings(
            _env_file=None,
            postgres_user="gate",
            postgres_password="pw",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="auth",
        )

        assert settings.database_url == "postgresql+asyncpg://gate:pw@db:5433/auth"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self):
        first = get_settings()
        clear_settings_cache()

        assert get_settings() is not first


class TestSessionAuthConfig:
    """Tests for SessionAuthConfig.from_settings."""

    def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            session_identity_field="uid",
            remember_cookie_name="stay",
            cookie_prefix="__Host-",
            remember_length=600,
            rotate_remember_tokens=False,
            remember_purge_probability=0.5,
        )

        config = SessionAuthConfig.from_settings(settings)

        assert config.identity_field == "uid"
        assert config.remember_cookie == "__Host-stay"
        assert config.remember_length == 600
        assert config.rotate_remember_tokens is False
        assert config.purge_probability == 0.5
        assert config.regenerate_session is True

    def test_testing_disables_regeneration(self):
        settings = Settings(_env_file=None, testing=True)

        assert SessionAuthConfig.from_settings(settings).regenerate_session is False


class TestConfigureLogging:
    """Tests for configure_logging."""

    def teardown_method(self):
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for name in ("gatehouse_auth", "gatehouse_identity", "gatehouse_config"):
            logging.getLogger(name).setLevel(logging.NOTSET)

    def test_applies_level(self):
        settings = Settings(_env_file=None, log_level="debug")

        level = configure_logging(settings)

        assert level == logging.DEBUG
        assert logging.getLogger("gatehouse_auth").level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        settings = Settings(_env_file=None, log_level="chatty")

        assert configure_logging(settings) == logging.INFO
