# screenshot_renamer/schemas/models.py

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

# =========================
# Naming policy
# =========================


class NamingRules(BaseModel):
    """
    Policy for descriptive filenames. Rendered into the agent prompt and enforced
    locally on whatever name the agent proposes.
    """

    model_config = ConfigDict(frozen=True)

    max_chars: int = Field(64, ge=8, description="Maximum length of the full filename, extension included.")
    max_words: int = Field(10, ge=1, description="Maximum number of underscore-separated words in the stem.")
    name_format: str = Field("topic_subtopic_detail", description="Human-readable shape shown to the agent.")
    max_collision_suffix: int = Field(
        999, ge=1, description="Highest numeric suffix (_1, _2, ...) tried before giving up on a free name."
    )


# =========================
# Files & artifacts
# =========================


class ImageFile(BaseModel):
    """An image on disk. Identity is the absolute path; a rename yields a new ImageFile."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(..., description="Absolute path to the image.")
    exists: bool = Field(False, description="Whether the path existed as a regular file when observed.")

    @classmethod
    def from_path(cls, path: str | Path) -> ImageFile:
        p = Path(path).expanduser().absolute()
        return cls(path=p, exists=p.is_file())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def name(self) -> str:
        return self.path.name

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stem(self) -> str:
        return self.path.stem

    @computed_field  # type: ignore[prop-decorator]
    @property
    def extension(self) -> str:
        return self.path.suffix


ArtifactSource = Literal["cache", "recognizer", "placeholder"]


class OcrArtifact(BaseModel):
    """
    Scratch text file holding recognized on-image text. Single use: the rename
    step discards it whether or not the rename succeeded.
    """

    image_path: Path = Field(..., description="Image the text was recognized from.")
    path: Path = Field(..., description="Location of the .ocr.txt side file in the scratch directory.")
    source: ArtifactSource = Field(..., description="How the artifact came to exist in this cycle.")

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8", errors="replace")

    def discard(self) -> None:
        self.path.unlink(missing_ok=True)


# =========================
# Batch accounting
# =========================

OutcomeStatus = Literal["success", "failure", "skipped"]


class FileOutcome(BaseModel):
    """Per-input record. Every submitted path gets exactly one."""

    source: Path = Field(..., description="Path as submitted.")
    status: OutcomeStatus
    final_path: Path | None = Field(None, description="Where the image ended up (success only).")
    error: str | None = Field(None, description="Human-readable failure message.")
    error_kind: str | None = Field(None, description="Error class name, e.g. 'FileValidationError'.")

    @field_validator("error")
    @classmethod
    def _strip_error(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) else v


class BatchResult(BaseModel):
    """
    In-memory tally for one batch run. Skipped inputs are recorded but do not
    count toward `total`.
    """

    outcomes: list[FileOutcome] = Field(default_factory=list)

    def record(self, outcome: FileOutcome) -> FileOutcome:
        self.outcomes.append(outcome)
        return outcome

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "success")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "failure")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "skipped")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.succeeded + self.failed

    def summary(self) -> dict[str, int]:
        return {"total": self.total, "succeeded": self.succeeded, "failed": self.failed}
