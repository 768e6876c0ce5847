"""Unit tests for AppSettings and sub-configs."""

import pytest

from config import AppSettings, LoggingSettings, ScoringServiceSettings, SentrySettings


class TestScoringServiceSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DATA_SCIENCE_API_URL", raising=False)
        monkeypatch.delenv("DATA_SCIENCE_TIMEOUT_SECONDS", raising=False)
        s = ScoringServiceSettings()
        assert s.data_science_api_url == ""
        assert s.data_science_timeout_seconds == 10.0

    def test_loads_host_from_env(self, monkeypatch):
        monkeypatch.setenv("DATA_SCIENCE_API_URL", "ds.internal:8080")
        monkeypatch.setenv("DATA_SCIENCE_TIMEOUT_SECONDS", "3.5")
        s = ScoringServiceSettings()
        assert s.data_science_api_url == "ds.internal:8080"
        assert s.data_science_timeout_seconds == 3.5

    def test_reads_dotenv_in_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DATA_SCIENCE_API_URL", raising=False)
        (tmp_path / ".env").write_text("DATA_SCIENCE_API_URL=from-dotenv:9000\n")
        assert ScoringServiceSettings().data_science_api_url == "from-dotenv:9000"


class TestLoggingSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        s = LoggingSettings()
        assert s.log_level == "INFO"
        assert s.log_format == "console"

    def test_json_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert LoggingSettings().log_format == "json"


class TestAppSettings:
    def test_sub_configs_populated(self):
        s = AppSettings()
        assert isinstance(s.scoring, ScoringServiceSettings)
        assert isinstance(s.logging, LoggingSettings)
        assert isinstance(s.sentry, SentrySettings)

    def test_explicit_sub_config_kept(self):
        scoring = ScoringServiceSettings(data_science_api_url="explicit:1")
        assert AppSettings(scoring=scoring).scoring.data_science_api_url == "explicit:1"

    def test_env_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        assert AppSettings().env == "production"

    def test_sentry_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("SENTRY_DSN", raising=False)
        assert AppSettings().sentry.sentry_dsn == ""
