# screenshot_renamer/core/ocr_broker.py
"""
OCR artifact broker

Purpose
-------
Produce the `<stem>.ocr.txt` side file consumed by the rename step.

Resolution order
----------------
1) Artifact already in the scratch dir → reuse unchanged (no recognizer call).
2) Recognizer available → write its output verbatim.
3) Otherwise (or the recognizer failed) → write a one-line placeholder so the
   rest of the pipeline proceeds.

Design
------
- The scratch dir is configuration, never the image's own folder by default:
  a folder watch on the screenshots folder would otherwise fire again when the
  artifact appears.
- Text is recognized fully in memory before anything is written, so a failing
  recognizer never leaves a partial artifact behind.
"""

from __future__ import annotations

from pathlib import Path

from screenshot_renamer.core.errors import RecognitionError
from screenshot_renamer.logs import get_logger
from screenshot_renamer.schemas.models import ArtifactSource, OcrArtifact
from screenshot_renamer.tools.ocr.base import TextRecognizer

PLACEHOLDER_TEXT = "(Note to the naming agent: OCR content not available)"
ARTIFACT_SUFFIX = ".ocr.txt"

logger = get_logger(__name__)


class TextExtractionBroker:
    def __init__(self, scratch_dir: str | Path, recognizer: TextRecognizer | None = None) -> None:
        self.scratch_dir = Path(scratch_dir).expanduser()
        self.recognizer = recognizer

    def artifact_path(self, image_path: str | Path) -> Path:
        return self.scratch_dir / f"{Path(image_path).stem}{ARTIFACT_SUFFIX}"

    def get_or_create(self, image_path: str | Path) -> OcrArtifact:
        image = Path(image_path)
        target = self.artifact_path(image)

        if target.exists():
            logger.debug("Reusing OCR artifact %s", target)
            return OcrArtifact(image_path=image, path=target, source="cache")

        if _same_dir(self.scratch_dir, image.parent):
            logger.warning(
                "Scratch dir %s is the image's own folder; a folder watch there may re-trigger.",
                self.scratch_dir,
            )

        text, source = self._recognize(image)
        self.scratch_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8", newline="")
        return OcrArtifact(image_path=image, path=target, source=source)

    def _recognize(self, image: Path) -> tuple[str, ArtifactSource]:
        rec = self.recognizer
        if rec is None or not rec.available():
            logger.warning("OCR recognizer not available, proceeding without OCR content")
            return PLACEHOLDER_TEXT + "\n", "placeholder"
        try:
            return rec.recognize(image), "recognizer"
        except RecognitionError as exc:
            logger.warning("OCR failed for %s (%s); proceeding without OCR content", image.name, exc)
            return PLACEHOLDER_TEXT + "\n", "placeholder"


def _same_dir(a: Path, b: Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return False


__all__ = ["ARTIFACT_SUFFIX", "PLACEHOLDER_TEXT", "TextExtractionBroker"]
