from pathlib import Path

import pytest

from screenshot_renamer.core.errors import AgentInvocationError, NameProposalError
from screenshot_renamer.core.executor import RenameExecutor
from tests.utils import FailingAgent, FakeProposer, FakeRecognizer, MovingProposer, RacingFileOps


@pytest.fixture
def shot_and_artifact(screenshot_factory, broker_factory):
    img = screenshot_factory("Screenshot 1.png")
    art = broker_factory(FakeRecognizer()).get_or_create(img)
    return img, art


def test_renames_to_proposed_name_and_discards_artifact(shot_and_artifact):
    img, art = shot_and_artifact
    payload = img.read_bytes()
    proposer = FakeProposer("settings_python_debugger.png\n")

    out = RenameExecutor(proposer).execute(img, art)

    assert out == img.parent / "settings_python_debugger.png"
    assert out.read_bytes() == payload
    assert not img.exists()
    assert not art.path.exists()
    assert "Settings > Python Debugger" in proposer.prompts[0]


def test_agent_failure_still_discards_artifact(shot_and_artifact):
    img, art = shot_and_artifact
    with pytest.raises(AgentInvocationError):
        RenameExecutor(FailingAgent()).execute(img, art)
    assert img.exists()
    assert not art.path.exists()


def test_unexpected_agent_exception_is_wrapped(shot_and_artifact):
    img, art = shot_and_artifact
    with pytest.raises(AgentInvocationError):
        RenameExecutor(FakeProposer(error=ValueError("bad response"))).execute(img, art)
    assert not art.path.exists()


def test_unusable_answer_raises_after_cleanup(shot_and_artifact):
    img, art = shot_and_artifact
    with pytest.raises(NameProposalError):
        RenameExecutor(FakeProposer("   \n")).execute(img, art)
    assert img.exists()
    assert not art.path.exists()


def test_existing_target_gets_numeric_suffix(shot_and_artifact):
    img, art = shot_and_artifact
    existing = img.parent / "tide.png"
    existing.write_bytes(b"original tide")

    out = RenameExecutor(FakeProposer("tide.png")).execute(img, art)

    assert out.name == "tide_1.png"
    assert existing.read_bytes() == b"original tide"


def test_lost_race_moves_on_to_next_suffix(shot_and_artifact):
    img, art = shot_and_artifact
    fs = RacingFileOps()

    out = RenameExecutor(FakeProposer("tide.png"), fs).execute(img, art)

    assert fs.raced == [img.parent / "tide.png"]
    assert (img.parent / "tide.png").read_bytes() == b"intruder"
    assert out.name == "tide_1.png"


def test_same_name_is_noop(screenshot_factory, broker_factory):
    img = screenshot_factory("Screenshot 1.png")
    art = broker_factory(FakeRecognizer()).get_or_create(img)
    first = RenameExecutor(FakeProposer("settings.png")).execute(img, art)

    art2 = broker_factory(FakeRecognizer()).get_or_create(first)
    assert RenameExecutor(FakeProposer("settings.png")).execute(first, art2) == first
    assert first.exists()
    assert not art2.path.exists()


def test_agent_that_renames_itself_is_accepted_with_warning(shot_and_artifact, caplog):
    img, art = shot_and_artifact
    with caplog.at_level("WARNING", logger="screenshot_renamer"):
        out = RenameExecutor(MovingProposer("python_debugger.png"), agent_renames=True).execute(img, art)
    assert out == img.parent / "python_debugger.png"
    assert out.exists()
    assert "not verified locally" in caplog.text


def test_source_vanished_without_target_is_failure(shot_and_artifact):
    img, art = shot_and_artifact
    proposer = MovingProposer("somewhere_else.png")
    proposer.answer = "something_different.png"
    with pytest.raises(AgentInvocationError):
        RenameExecutor(proposer).execute(img, art)


def test_agent_rename_to_nonconforming_name_is_found(shot_and_artifact, caplog):
    img, art = shot_and_artifact
    with caplog.at_level("WARNING", logger="screenshot_renamer"):
        out = RenameExecutor(MovingProposer("Tide-Chart.png"), agent_renames=True).execute(img, art)
    assert out == img.parent / "Tide-Chart.png"
    assert out.exists()
    assert not (img.parent / "tide_chart.png").exists()
    assert "not verified locally" in caplog.text
