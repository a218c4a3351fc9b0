# screenshot_renamer/tools/ocr/factory.py
from __future__ import annotations

from screenshot_renamer.config.settings import RenamerSettings
from screenshot_renamer.tools.ocr.base import TextRecognizer
from screenshot_renamer.tools.ocr.command_recognizer import CommandRecognizer
from screenshot_renamer.tools.ocr.tesseract_recognizer import TesseractRecognizer


def build_recognizer(settings: RenamerSettings) -> TextRecognizer | None:
    """Pick the OCR engine named by `settings.ocr_engine` ("none" → no recognizer)."""
    engine = settings.ocr_engine
    if engine == "command":
        return CommandRecognizer(settings.ocr_command)
    if engine == "tesseract":
        return TesseractRecognizer(settings.tesseract_lang)
    return None
