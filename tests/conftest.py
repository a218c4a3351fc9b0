# tests/conftest.py
from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from screenshot_renamer.core.ocr_broker import TextExtractionBroker
from screenshot_renamer.logs import ROOT_LOGGER_NAME
from tests.utils import FakeProposer, FakeRecognizer, make_screenshot, make_settings


# -------- Hermetic environment --------
@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("SHOTNAME_"):
            monkeypatch.delenv(key, raising=False)
    yield


# -------- Filesystem fixtures --------
@pytest.fixture
def shots_dir(tmp_path: Path) -> Path:
    d = tmp_path / "Desktop"
    d.mkdir()
    return d


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def screenshot_factory(shots_dir: Path):
    """
    Callable factory to create screenshot PNGs in the test's shots dir.

    Usage:
        p = screenshot_factory("Screenshot 1.png")
    """

    def _factory(name: str = "Screenshot 1.png", data: bytes | None = None) -> Path:
        return make_screenshot(shots_dir, name, data)

    return _factory


# -------- Collaborator fixtures --------
@pytest.fixture
def fake_recognizer():
    return FakeRecognizer()


@pytest.fixture
def fake_proposer():
    return FakeProposer()


@pytest.fixture
def broker_factory(scratch_dir: Path):
    def _factory(recognizer=None) -> TextExtractionBroker:
        return TextExtractionBroker(scratch_dir, recognizer)

    return _factory


@pytest.fixture
def settings_factory(tmp_path: Path):
    def _factory(**overrides):
        return make_settings(tmp_path, **overrides)

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
