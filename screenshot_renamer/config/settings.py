# screenshot_renamer/config/settings.py
"""
Settings loader for the screenshot renamer.

Goals
-----
- File-first configuration with validation via Pydantic.
- Light environment-variable overrides so folder-action launchers can tweak a
  run without a config file.
- CLI flags win over both (applied through `with_overrides`).

JSON shape
----------
    {
      "agent": "claude",
      "model": "opus",
      "allowed_tools": ["ls", "test"],
      "ocr_engine": "command",
      "scratch_dir": "/tmp",
      "rules": {"max_chars": 64, "max_words": 10}
    }

Environment overrides (optional, prefix SHOTNAME_)
--------------------------------------------------
AGENT, MODEL, AGENT_EXECUTABLE, ALLOWED_TOOLS (comma list), AGENT_TIMEOUT_S,
OCR_ENGINE, OCR_COMMAND, SCRATCH_DIR, NAME_PREFIX, EXTENSIONS (comma list),
LOG_FILE, LOG_LEVEL, DEBUG.

Public API
----------
- class RenamerSettings(BaseModel)
- class SettingsLoader:
    - load(path: str | Path | None) -> RenamerSettings
    - load_json(text: str) -> RenamerSettings
    - with_overrides(settings, **kwargs) -> RenamerSettings (non-destructive copy)
- function load_settings(path) -> RenamerSettings  (convenience)
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import BaseModel, Field, ValidationError, field_validator

from screenshot_renamer.schemas.models import NamingRules

AgentName = Literal["claude", "openai", "mock"]
OcrEngine = Literal["command", "tesseract", "none"]
# The only shell tools the CLI agent may be granted: move, list, existence test
AgentTool = Literal["mv", "ls", "test"]

_TRUTHY = {"1", "true", "yes", "on"}


class RenamerSettings(BaseModel):
    """Every knob for one renamer run."""

    # Naming agent
    agent: AgentName = Field("claude", description="Which naming agent proposes filenames.")
    model: str = Field("opus", description="Model selector passed to the CLI agent.")
    agent_executable: str = Field("claude", description="CLI agent executable.")
    allowed_tools: tuple[AgentTool, ...] = Field(
        ("ls", "test"),
        description="Shell tools the CLI agent may run. Add 'mv' to let it rename files itself.",
    )
    agent_timeout_s: float = Field(300.0, gt=0, description="Wall-clock limit for one agent call.")
    openai_model: str = Field("gpt-4o-mini")
    openai_timeout_s: float = Field(60.0, gt=0)
    openai_max_retries: int = Field(2, ge=0, le=10)

    # OCR
    ocr_engine: OcrEngine = Field("command")
    ocr_command: str = Field("ocr", description="Executable for the command recognizer ('~' expanded).")
    tesseract_lang: str = Field("eng")

    # Files
    scratch_dir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Where .ocr.txt artifacts live. Keep it outside any watched folder.",
    )
    name_prefix: str = Field("Screenshot", description="Only names starting with this are processed.")
    extensions: tuple[str, ...] = Field((".png",), description="Eligible image extensions.")
    rules: NamingRules = Field(default_factory=NamingRules)

    # Logging
    log_file: Path | None = None
    log_level: str = Field("INFO")

    @field_validator("allowed_tools", mode="before")
    @classmethod
    def _split_tools(cls, v: Any) -> Any:
        if isinstance(v, str):
            return tuple(t.strip() for t in v.split(",") if t.strip())
        return v

    @field_validator("allowed_tools")
    @classmethod
    def _dedupe_tools(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(v))

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [e for e in v.split(",")]
        if isinstance(v, (list, tuple)):
            out: list[str] = []
            for e in v:
                e = str(e).strip().lower()
                if not e:
                    continue
                out.append(e if e.startswith(".") else f".{e}")
            if not out:
                raise ValueError("at least one extension is required")
            return tuple(out)
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("name_prefix")
    @classmethod
    def _non_empty_prefix(cls, v: str) -> str:
        if not v:
            raise ValueError("name_prefix must not be empty")
        return v


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class SettingsLoader:
    """
    File-first settings loader with env overrides.

    Responsibilities:
        - Read JSON from a file or string (or start from defaults)
        - Validate with Pydantic
        - Apply SHOTNAME_* environment overrides
    """

    env_prefix: str = "SHOTNAME_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> RenamerSettings:
        """
        Load settings from a JSON file (path), or defaults if path is None,
        then apply environment overrides.

        Raises:
            FileNotFoundError: path given but missing.
            ValueError: invalid JSON or invalid settings.
        """
        raw: dict[str, Any] = {}
        if path is not None:
            p = Path(path).expanduser()
            if not p.exists():
                raise FileNotFoundError(f"Settings file not found: {p}")
            raw = self._read_json_file(p)
        return self._apply_env_overrides(self._parse_root(raw))

    def load_json(self, text: str) -> RenamerSettings:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Settings JSON must be an object.")
        return self._apply_env_overrides(self._parse_root(raw))

    def with_overrides(self, settings: RenamerSettings, **overrides: Any) -> RenamerSettings:
        """
        Return a *new* RenamerSettings with the non-null overrides applied.
        Values are re-validated; the original instance is not mutated.
        """
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return settings
        return self._parse_root({**settings.model_dump(), **updates})

    # ---------- Internals ----------

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported settings format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Settings in {p} must be a JSON object.")
        return cast(dict[str, Any], data)

    def _parse_root(self, data: dict[str, Any]) -> RenamerSettings:
        try:
            return RenamerSettings.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Settings validation failed:\n{e}") from e

    def _apply_env_overrides(self, settings: RenamerSettings) -> RenamerSettings:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        for field, env_name in (
            ("agent", "AGENT"),
            ("model", "MODEL"),
            ("agent_executable", "AGENT_EXECUTABLE"),
            ("allowed_tools", "ALLOWED_TOOLS"),
            ("ocr_engine", "OCR_ENGINE"),
            ("ocr_command", "OCR_COMMAND"),
            ("scratch_dir", "SCRATCH_DIR"),
            ("name_prefix", "NAME_PREFIX"),
            ("extensions", "EXTENSIONS"),
            ("log_file", "LOG_FILE"),
            ("log_level", "LOG_LEVEL"),
        ):
            val = os.getenv(f"{prefix}{env_name}")
            if val:
                updates[field] = val.strip().lower() if field in ("agent", "ocr_engine") else val

        timeout = os.getenv(f"{prefix}AGENT_TIMEOUT_S")
        if timeout:
            try:
                updates["agent_timeout_s"] = float(timeout)
            except ValueError:
                # Ignore bad value; keep validated timeout
                pass

        if os.getenv(f"{prefix}DEBUG", "").strip().lower() in _TRUTHY:
            updates["log_level"] = "DEBUG"

        return self.with_overrides(settings, **updates)


# ----------------------------
# Convenience function
# ----------------------------


def load_settings(path: str | Path | None = None) -> RenamerSettings:
    """Convenience wrapper for one-shot callers."""
    return SettingsLoader().load(path)
