import logging
from pathlib import Path

import pytest

from screenshot_renamer.logs import ROOT_LOGGER_NAME, configure_logging, get_logger, redact


@pytest.fixture
def pkg_logger():
    # conftest restores handlers and level after each test
    return logging.getLogger(ROOT_LOGGER_NAME)


def test_get_logger_namespaces():
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger("cli").name == "screenshot_renamer.cli"
    assert get_logger("screenshot_renamer.core.executor").name == "screenshot_renamer.core.executor"


def test_configure_logging_is_idempotent(pkg_logger):
    before = len(pkg_logger.handlers)
    configure_logging("INFO")
    configure_logging("DEBUG")
    assert len(pkg_logger.handlers) == before + 1
    assert pkg_logger.level == logging.DEBUG


def test_log_file_receives_messages(pkg_logger, tmp_path: Path):
    log_path = tmp_path / "logs" / "renamer.log"
    configure_logging("INFO", log_path)
    get_logger("test").warning("hello file")
    for h in pkg_logger.handlers:
        h.flush()
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_redact_masks_api_keys(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-secret-123")
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    assert redact("auth failed for sk-secret-123") == "auth failed for [REDACTED]"
