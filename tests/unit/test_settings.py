"""Unit tests for configuration and logging setup."""

import logging

from riskas.config import Settings, get_settings, set_settings, reset_settings, setup_logging


class TestSettings:
    """Tests for Settings."""

    def test_database_url_derived_from_data_dir(self, tmp_path):
        settings = Settings(data_dir=tmp_path / "ledger", database_url=None)

        assert settings.get_database_url() == f"sqlite:///{tmp_path / 'ledger' / 'ledger.db'}"
        assert (tmp_path / "ledger").is_dir()

    def test_explicit_database_url_wins(self, tmp_path):
        settings = Settings(data_dir=tmp_path, database_url="sqlite:///elsewhere.db")

        assert settings.get_database_url() == "sqlite:///elsewhere.db"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings()

        assert settings.port == 8080
        assert settings.log_level == "debug"

    def test_set_and_reset_settings(self):
        custom = Settings(app_name="Test Ledger")
        set_settings(custom)
        try:
            assert get_settings() is custom
        finally:
            reset_settings()

        assert get_settings() is not custom


class TestLogging:
    """Tests for setup_logging."""

    def test_quiets_sqlalchemy_engine(self):
        setup_logging()

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
