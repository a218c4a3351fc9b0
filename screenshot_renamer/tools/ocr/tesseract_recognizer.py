# screenshot_renamer/tools/ocr/tesseract_recognizer.py
"""
Tesseract OCR (optional engine)

For machines without the Vision-based `ocr` command. Needs the `tesseract`
extra (pytesseract) plus the tesseract binary; otherwise `available()` is
False and the broker falls back to its placeholder.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from screenshot_renamer.core.errors import RecognitionError
from screenshot_renamer.tools.ocr.base import TextRecognizer


class TesseractRecognizer(TextRecognizer):
    def __init__(self, lang: str = "eng") -> None:
        self.lang = lang

    def available(self) -> bool:
        try:
            import pytesseract  # type: ignore

            pytesseract.get_tesseract_version()
        except Exception:
            return False
        return True

    def recognize(self, image_path: Path) -> str:
        try:
            import pytesseract  # type: ignore
        except ImportError as exc:
            raise RecognitionError("pytesseract is not installed") from exc

        try:
            with Image.open(image_path) as im:
                img = ImageOps.exif_transpose(im)  # auto-rotate if needed
                img = img.convert("L")
                text = pytesseract.image_to_string(img, lang=self.lang)
        except (OSError, UnidentifiedImageError, pytesseract.TesseractError) as exc:
            raise RecognitionError(f"Tesseract failed on {Path(image_path).name}: {exc}") from exc

        # one line per region, no blank padding
        lines = [ln.rstrip() for ln in text.splitlines() if ln.strip()]
        return "\n".join(lines) + ("\n" if lines else "")
