"""Tests for settings and logging configuration."""

from pathlib import Path

import pytest
import structlog

from merch.infrastructure.config import Settings, configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _processor_types() -> list[type]:
    return [type(p) for p in structlog.get_config()["processors"]]


class TestConfigureLogging:

    def test_production_renders_json(self):
        configure_logging("production")
        assert _processor_types()[-1] is structlog.processors.JSONRenderer

    def test_development_renders_console(self):
        configure_logging("development")
        assert _processor_types()[-1] is structlog.dev.ConsoleRenderer

    def test_only_needed_processors(self):
        configure_logging("development")
        processors = structlog.get_config()["processors"]
        assert structlog.stdlib.add_logger_name not in processors
        assert structlog.processors.StackInfoRenderer not in _processor_types()
        assert len(processors) == 4


class TestSettings:

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MERCH_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MERCH_ENVIRONMENT", "production")

        settings = Settings()

        assert settings.environment == "production"
        assert settings.merchandise_file == Path(tmp_path) / "merchandise.json"
