"""Tests for settings and logging configuration."""

import structlog

from roi_engine.core import logging as roi_logging
from roi_engine.core.settings import EngineSettings, get_settings


class TestEngineSettings:

    def test_defaults(self):
        settings = EngineSettings()
        assert settings.max_horizon_years == 100
        assert settings.default_horizon_years == 30
        assert settings.max_annualized_rate_pct == 500.0
        assert settings.export_dir == "results"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ROI_MAX_HORIZON_YEARS", "40")
        monkeypatch.setenv("ROI_JSON_LOGS", "true")
        settings = get_settings()
        assert settings.max_horizon_years == 40
        assert settings.json_logs is True

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogging:

    def test_get_logger_binds_name(self):
        log = roi_logging.get_logger("roi_engine.tests")
        assert log is not None

    def test_configure_is_idempotent(self, monkeypatch):
        monkeypatch.setattr(roi_logging, "_configured", False)
        first = roi_logging.configure_logging(level="DEBUG")
        second = roi_logging.configure_logging(level="ERROR")
        assert roi_logging._configured is True
        assert first is not None and second is not None

    def test_json_renderer(self, monkeypatch):
        monkeypatch.setattr(roi_logging, "_configured", False)
        roi_logging.configure_logging(json_output=True)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        # Restore console rendering for the rest of the run
        monkeypatch.setattr(roi_logging, "_configured", False)
        roi_logging.configure_logging(json_output=False)
