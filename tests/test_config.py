"""Tests for settings and logging configuration."""

import logging

from fdkit.config.logging import get_logger, setup_logging
from fdkit.config.settings import Settings


def test_settings_defaults(monkeypatch):
    """Test default settings."""
    for var in ("FDKIT_ATTR_SEP", "FDKIT_MAX_SEARCH_CHECKS", "FDKIT_LOG_LEVEL", "FDKIT_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings()
    assert settings.attr_sep == ","
    assert settings.max_search_checks is None
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    """Test FDKIT_ prefixed environment variables override defaults."""
    monkeypatch.setenv("FDKIT_ATTR_SEP", ";")
    monkeypatch.setenv("FDKIT_MAX_SEARCH_CHECKS", "500")
    settings = Settings()
    assert settings.attr_sep == ";"
    assert settings.max_search_checks == 500


def test_get_logger_prefix():
    """Test loggers live under the fdkit namespace."""
    assert get_logger("core.keys").name == "fdkit.core.keys"
    assert get_logger("fdkit.analysis").name == "fdkit.analysis"


def test_setup_logging_file(tmp_path):
    """Test a log file handler is attached when requested."""
    log_file = tmp_path / "fdkit.log"
    setup_logging(level="DEBUG", log_file=log_file)
    try:
        logger = logging.getLogger("fdkit")
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        get_logger("tests").debug("hello")
        for h in logger.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        setup_logging(level="INFO")
