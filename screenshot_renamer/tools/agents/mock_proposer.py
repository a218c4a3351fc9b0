# screenshot_renamer/tools/agents/mock_proposer.py
"""
Mock Naming Agent

Purpose
-------
Deterministic, network-free proposer for tests and dry local runs.

Design
------
- Slugs the first words of the OCR block embedded in the prompt.
- Falls back to the image stem when the OCR block is empty or the placeholder.
- Returns `<slug><ext>` on a single line, like a well-behaved agent.
- Never reads image bytes and never renames anything.
"""

from __future__ import annotations

import re
from pathlib import Path

from screenshot_renamer.core.ocr_broker import PLACEHOLDER_TEXT
from screenshot_renamer.core.prompt import OCR_END_MARKER, OCR_MARKER
from screenshot_renamer.tools.agents.base import NameProposer

_WORD = re.compile(r"[A-Za-z0-9]+")


class MockNameProposer(NameProposer):
    """Deterministic proposer based on the OCR text."""

    def __init__(self, max_words: int = 6) -> None:
        self.max_words = max_words
        self.calls: list[Path] = []

    def propose(self, image_path: Path, prompt: str) -> str:
        p = Path(image_path)
        self.calls.append(p)
        words = _WORD.findall(_ocr_block(prompt))[: self.max_words]
        if not words:
            words = _WORD.findall(p.stem)[: self.max_words] or ["image"]
        return "_".join(w.lower() for w in words) + p.suffix.lower() + "\n"


def _ocr_block(prompt: str) -> str:
    start = prompt.find(OCR_MARKER)
    if start < 0:
        return ""
    start += len(OCR_MARKER)
    end = prompt.find(OCR_END_MARKER, start)
    block = prompt[start : end if end >= 0 else None].strip()
    if block == PLACEHOLDER_TEXT:
        return ""
    return block
