# screenshot_renamer/orchestrators/batch_orchestrator.py
"""
Batch Orchestrator

Purpose
-------
Single door for renaming a list of screenshots:
  1) filter by name (prefix + extension); non-matching inputs are skipped
  2) validate existence; missing files are failures
  3) sanitize → OCR artifact → agent rename, one file at a time
  4) print a summary when more than one path was submitted and at least one
     was eligible

Invariants & Guardrails
-----------------------
- Strictly sequential. The agent call is blocking and expensive, and two
  in-flight renames could race for the same target name.
- Every submitted path gets exactly one FileOutcome.
- Per-file failures never abort the batch. KeyboardInterrupt / SystemExit do,
  leaving completed files renamed (no rollback).
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from screenshot_renamer.config.settings import RenamerSettings
from screenshot_renamer.core.errors import FileValidationError, RenamerError, renamer_error_guard
from screenshot_renamer.core.executor import RenameExecutor
from screenshot_renamer.core.fs import FileOps, LocalFileOps
from screenshot_renamer.core.ocr_broker import TextExtractionBroker
from screenshot_renamer.core.sanitize import sanitize_screenshot_name
from screenshot_renamer.logs import get_logger
from screenshot_renamer.schemas.models import BatchResult, FileOutcome, ImageFile

_RULE = "-" * 60

logger = get_logger(__name__)


class BatchOrchestrator:
    def __init__(
        self,
        settings: RenamerSettings,
        broker: TextExtractionBroker,
        executor: RenameExecutor,
        fs: FileOps | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.broker = broker
        self.executor = executor
        self.fs = fs or LocalFileOps()
        self._out = out

    @property
    def out(self) -> TextIO:
        # resolved lazily so pytest's capsys sees the output
        return self._out or sys.stdout

    def is_eligible(self, path: str | Path) -> bool:
        name = Path(path).name
        if not name.startswith(self.settings.name_prefix):
            return False
        lowered = name.lower()
        return any(lowered.endswith(ext) for ext in self.settings.extensions)

    def run(self, paths: Sequence[str | Path]) -> BatchResult:
        result = BatchResult()

        for raw in paths:
            source = Path(raw)
            if not self.is_eligible(source):
                logger.debug("Skipping non-screenshot input: %s", source)
                result.record(FileOutcome(source=source, status="skipped"))
                continue

            self._banner(source)
            try:
                with renamer_error_guard():
                    final = self.process_one(source)
            except RenamerError as exc:
                result.record(self._failure(source, exc))
                continue

            print(f"Renamed to: {final.name}", file=self.out)
            result.record(FileOutcome(source=source, status="success", final_path=final))

        # no summary when every input was skipped
        if len(paths) > 1 and result.total > 0:
            self._summary(result)
        return result

    def process_one(self, path: str | Path) -> Path:
        """Run the per-file pipeline. Raises a RenamerError subclass on failure."""
        image = ImageFile.from_path(path)
        if not image.exists:
            raise FileValidationError(f"File not found: {path}")

        current = sanitize_screenshot_name(image.path, fs=self.fs)
        artifact = self.broker.get_or_create(current)
        return self.executor.execute(current, artifact)

    # ---------- output ----------

    def _banner(self, source: Path) -> None:
        print(_RULE, file=self.out)
        print(f"Processing: {source}", file=self.out)
        print(_RULE, file=self.out)

    def _failure(self, source: Path, exc: RenamerError) -> FileOutcome:
        print(f"Error: {exc}", file=self.out)
        logger.debug("%s failed with %s", source, type(exc).__name__)
        return FileOutcome(source=source, status="failure", error=str(exc), error_kind=type(exc).__name__)

    def _summary(self, result: BatchResult) -> None:
        print("", file=self.out)
        print(_RULE, file=self.out)
        print(f"Summary: {result.succeeded}/{result.total} files processed successfully", file=self.out)
        if result.failed:
            print(f"{result.failed} file(s) failed", file=self.out)
        print(_RULE, file=self.out)
