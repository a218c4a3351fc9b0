# screenshot_renamer/tools/ocr/command_recognizer.py
"""
External OCR command

Runs `<tool> <imagePath>` and captures stdout verbatim. The stock tool is a
small Vision-framework binary (accurate mode, language correction on) that
prints one line per recognized region; any executable with the same contract
works.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

from screenshot_renamer.core.errors import RecognitionError
from screenshot_renamer.logs import redact
from screenshot_renamer.tools.ocr.base import TextRecognizer

Runner = Callable[..., "subprocess.CompletedProcess[bytes]"]


class CommandRecognizer(TextRecognizer):
    def __init__(self, executable: str = "ocr", *, timeout_s: float = 120.0, runner: Runner | None = None) -> None:
        self.executable = executable
        self.timeout_s = timeout_s
        self._run: Runner = runner or subprocess.run

    def resolve(self) -> str | None:
        return shutil.which(os.path.expanduser(self.executable))

    def available(self) -> bool:
        return self.resolve() is not None

    def recognize(self, image_path: Path) -> str:
        exe = self.resolve()
        if exe is None:
            raise RecognitionError(f"OCR command not found: {self.executable}")

        kwargs: dict[str, Any] = {"capture_output": True, "check": False, "timeout": self.timeout_s}
        try:
            proc = self._run([exe, str(image_path)], **kwargs)
        except (OSError, subprocess.SubprocessError) as exc:
            raise RecognitionError(f"OCR command failed to run: {exc}") from exc

        if proc.returncode != 0:
            detail = redact(_decode(proc.stderr).strip())[:500]
            raise RecognitionError(f"OCR command exited with status {proc.returncode}: {detail}")
        # bytes mode: no newline translation, undecodable bytes replaced
        return _decode(proc.stdout)


def _decode(data: bytes | str | None) -> str:
    if not data:
        return ""
    if isinstance(data, str):
        return data
    return data.decode("utf-8", errors="replace")
