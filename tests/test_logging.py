# tests/test_logging.py
# ------------------------------------------------------------
# Logging setup must survive repeated calls (Streamlit reruns).
#
from __future__ import annotations

import logging

import pytest

from core.config import log_file_from_env, log_level_from_env
from core.logging_config import setup_logging


@pytest.fixture
def core_logger():
    logger = logging.getLogger("core")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def test_repeated_setup_keeps_one_handler(core_logger):
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    assert len(core_logger.handlers) == 1
    assert core_logger.level == logging.DEBUG


def test_log_file_receives_records(core_logger, tmp_path):
    path = tmp_path / "clearance.log"
    setup_logging("INFO", log_file=str(path))
    setup_logging("INFO", log_file=str(path))
    assert len(core_logger.handlers) == 2

    logging.getLogger("core.clearance").info("deflection computed")
    for handler in core_logger.handlers:
        handler.flush()
    assert "core.clearance - INFO - deflection computed" in path.read_text(encoding="utf-8")


def test_log_settings_from_environment(monkeypatch):
    monkeypatch.delenv("CLEARANCE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CLEARANCE_LOG_FILE", raising=False)
    assert log_level_from_env() == "INFO"
    assert log_file_from_env() is None

    monkeypatch.setenv("CLEARANCE_LOG_LEVEL", "debug")
    monkeypatch.setenv("CLEARANCE_LOG_FILE", "/tmp/clearance.log")
    assert log_level_from_env() == "DEBUG"
    assert log_file_from_env() == "/tmp/clearance.log"

    monkeypatch.setenv("CLEARANCE_LOG_FILE", "")
    assert log_file_from_env() is None
