"""Tests for structlog setup driven by EngineSettings."""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from pydantic import ValidationError

from ethena_engine.config import EngineSettings
from ethena_engine.logging import get_logger, setup_logging


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Put the root logger and structlog back the way the test found them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.usefixtures("restore_logging")
class TestSetupLogging:
    def test_level_from_settings(self, engine_settings: EngineSettings) -> None:
        setup_logging(engine_settings)
        assert logging.getLogger().level == logging.DEBUG

    def test_settings_loaded_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_single_structlog_handler(self) -> None:
        setup_logging(EngineSettings(log_format="json"))
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_lines(self) -> None:
        setup_logging(EngineSettings(log_format="json"))
        formatter = logging.getLogger().handlers[0].formatter
        record = logging.LogRecord("ethena_engine.tests", logging.INFO, __file__, 1, "hedge_ok", None, None)
        assert json.loads(formatter.format(record))["event"] == "hedge_ok"


class TestLoggingSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        settings = EngineSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_format_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        assert EngineSettings().log_format == "json"

    @pytest.mark.parametrize("field,value", [("log_level", "CHATTY"), ("log_format", "xml")])
    def test_unknown_values_rejected(self, field: str, value: str) -> None:
        with pytest.raises(ValidationError):
            EngineSettings(**{field: value})


def test_get_logger_accepts_key_values() -> None:
    logger = get_logger("ethena_engine.tests")
    logger.debug("test_event", value="1")
