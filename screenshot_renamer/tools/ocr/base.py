# screenshot_renamer/tools/ocr/base.py
"""
Text Recognizer Interface

Purpose
-------
Minimal, engine-agnostic contract for on-image text recognition. The broker
only needs to know whether an engine can run here and, if so, its text.

Public API
----------
class TextRecognizer(Protocol):
    def available(self) -> bool
    def recognize(self, image_path: Path) -> str

Invariants & Guardrails
-----------------------
- `available()` never raises; a missing binary or library means False.
- `recognize()` raises RecognitionError on engine failure, never a raw
  subprocess or library exception.
- Output is newline-joined, one line per recognized text region.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TextRecognizer(Protocol):
    def available(self) -> bool: ...

    def recognize(self, image_path: Path) -> str: ...
