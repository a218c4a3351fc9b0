# tests/utils.py
"""
Single source of truth for test data, fakes, and canonical file names.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from screenshot_renamer.config.settings import RenamerSettings
from screenshot_renamer.core.errors import AgentInvocationError, RecognitionError
from screenshot_renamer.core.fs import LocalFileOps

# -----------------------------
# Canonical names
# -----------------------------

NNBSP = "\u202f"
MACOS_SCREENSHOT_NAME = f"Screenshot 2025-12-29 at 10.03.10{NNBSP}PM.png"
PLAIN_SCREENSHOT_NAME = "Screenshot 2025-12-29 at 10.03.10 PM.png"
DEBUGGER_OCR_TEXT = "Settings > Python Debugger\nJust My Code\n"

# -----------------------------
# File factories
# -----------------------------


def png_bytes(w: int = 8, h: int = 8, color: tuple[int, int, int] = (200, 30, 30)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (w, h), color).save(buf, format="PNG")
    return buf.getvalue()


def make_screenshot(directory: Path, name: str = PLAIN_SCREENSHOT_NAME, data: bytes | None = None) -> Path:
    """Write a small real PNG under `directory` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    p = directory / name
    p.write_bytes(png_bytes() if data is None else data)
    return p


def make_settings(tmp_dir: Path, **overrides) -> RenamerSettings:
    base = {
        "agent": "mock",
        "ocr_engine": "none",
        "scratch_dir": tmp_dir / "scratch",
    }
    base.update(overrides)
    return RenamerSettings.model_validate(base)


# -----------------------------
# Fakes for external collaborators
# -----------------------------


class FakeRecognizer:
    """TextRecognizer stand-in that counts calls."""

    def __init__(self, text: str = DEBUGGER_OCR_TEXT, *, is_available: bool = True, fail: bool = False) -> None:
        self.text = text
        self.is_available = is_available
        self.fail = fail
        self.calls: list[Path] = []

    def available(self) -> bool:
        return self.is_available

    def recognize(self, image_path: Path) -> str:
        self.calls.append(Path(image_path))
        if self.fail:
            raise RecognitionError("engine exploded")
        return self.text


class FakeProposer:
    """NameProposer stand-in returning canned answers (or raising)."""

    def __init__(self, answer: str = "settings_python_debugger.png", *, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.prompts: list[str] = []

    def propose(self, image_path: Path, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


class MovingProposer(FakeProposer):
    """Simulates an agent granted `mv` that renames the file itself."""

    def __init__(self, new_name: str) -> None:
        super().__init__(answer=new_name + "\n")
        self.new_name = new_name

    def propose(self, image_path: Path, prompt: str) -> str:
        p = Path(image_path)
        p.rename(p.with_name(self.new_name))
        return super().propose(image_path, prompt)


class FailingAgent(FakeProposer):
    def __init__(self) -> None:
        super().__init__(error=AgentInvocationError("Naming agent exited with status 1: boom"))


class RacingFileOps(LocalFileOps):
    """LocalFileOps whose first rename finds the target freshly created by someone else."""

    def __init__(self) -> None:
        self.raced: list[Path] = []

    def rename(self, src: Path, dst: Path) -> Path:
        if not self.raced:
            Path(dst).write_bytes(b"intruder")
            self.raced.append(Path(dst))
        return super().rename(src, dst)
