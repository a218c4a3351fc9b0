# screenshot_renamer/tools/ocr/__init__.py
"""
OCR tools package

    from screenshot_renamer.tools.ocr import (
        TextRecognizer,
        CommandRecognizer,
        TesseractRecognizer,
        build_recognizer,
    )
"""

from __future__ import annotations

from .base import TextRecognizer
from .command_recognizer import CommandRecognizer
from .factory import build_recognizer
from .tesseract_recognizer import TesseractRecognizer

__all__ = [
    "TextRecognizer",
    "CommandRecognizer",
    "TesseractRecognizer",
    "build_recognizer",
]
