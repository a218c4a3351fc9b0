import re
from pathlib import Path

import pytest

from screenshot_renamer.core.executor import RenameExecutor
from screenshot_renamer.orchestrators.batch_orchestrator import BatchOrchestrator
from screenshot_renamer.tools.agents.mock_proposer import MockNameProposer
from tests.utils import MACOS_SCREENSHOT_NAME, FakeRecognizer

pytestmark = pytest.mark.integration

DESCRIPTIVE = re.compile(r"^[a-z0-9_]+\.png$")


def _orchestrator(settings, broker, proposer=None):
    return BatchOrchestrator(settings, broker, RenameExecutor(proposer or MockNameProposer(), rules=settings.rules))


def test_macos_screenshot_gets_descriptive_name(settings_factory, broker_factory, screenshot_factory, scratch_dir: Path):
    img = screenshot_factory(MACOS_SCREENSHOT_NAME)
    payload = img.read_bytes()
    settings = settings_factory()

    result = _orchestrator(settings, broker_factory(FakeRecognizer("Settings > Python Debugger\n"))).run([img])

    final = result.outcomes[0].final_path
    assert result.outcomes[0].status == "success"
    assert DESCRIPTIVE.match(final.name), final.name
    assert len(final.name) <= 64
    assert len(final.stem.split("_")) <= 10
    assert final.read_bytes() == payload
    assert not img.exists()
    assert list(scratch_dir.glob("*.ocr.txt")) == []


def test_existing_tide_is_never_overwritten(settings_factory, broker_factory, screenshot_factory, shots_dir: Path):
    tide = shots_dir / "tide.png"
    tide.write_bytes(b"the original tide")
    img = screenshot_factory("Screenshot 1.png")

    result = _orchestrator(settings_factory(), broker_factory(FakeRecognizer("Tide\n"))).run([img])

    assert result.outcomes[0].final_path == shots_dir / "tide_1.png"
    assert tide.read_bytes() == b"the original tide"


def test_without_ocr_the_pipeline_still_renames(settings_factory, broker_factory, screenshot_factory):
    img = screenshot_factory(MACOS_SCREENSHOT_NAME)
    result = _orchestrator(settings_factory(), broker_factory(None)).run([img])
    final = result.outcomes[0].final_path
    assert result.succeeded == 1
    assert re.match(r"^screenshot_\d{8}_\d{6}\.png$", final.name)
