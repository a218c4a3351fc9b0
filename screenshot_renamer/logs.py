# screenshot_renamer/logs.py
"""
Logging helpers

Purpose
-------
One place to wire diagnostics for the renamer:
  - stderr stream handler (human-readable, always on)
  - optional rotating log file (replaces the old "redirect the wrapper to
    /tmp/<something>.log" approach used by folder-action launchers)
  - secret redaction for anything that echoes agent/SDK error output

Progress banners ("Processing: ...", "Renamed to: ...") are *not* logged;
the batch orchestrator prints those to stdout directly.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "screenshot_renamer"

_SECRET_ENV_KEYS = ("OPENAI_API_KEY", "ANTHROPIC_API_KEY")
_PREVIEW_CHARS = 2000

# Handlers we installed, so repeated configure_logging() calls replace instead of stacking
_HANDLER_TAG = "_screenshot_renamer_handler"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace (e.g. 'screenshot_renamer.core.executor')."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "INFO", log_file: str | Path | None = None) -> logging.Logger:
    """
    Install the stderr handler (and optionally a rotating file handler) on the
    package root logger. Idempotent: handlers from a previous call are removed first.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_coerce_level(level))

    for h in list(logger.handlers):
        if getattr(h, _HANDLER_TAG, False):
            logger.removeHandler(h)
            h.close()

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    setattr(stream, _HANDLER_TAG, True)
    logger.addHandler(stream)

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
                datefmt="(%Y-%m-%d %H:%M:%S)",
            )
        )
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    return logger


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def redact(text: str) -> str:
    """Mask API key values if they leak into messages (e.g. CLI stderr, SDK errors)."""
    for key in _SECRET_ENV_KEYS:
        val = os.getenv(key)
        if val:
            text = text.replace(val, "[REDACTED]")
    return text


def log_raw_preview(logger: logging.Logger, text: str, label: str) -> None:
    """Debug-only: dump a truncated, redacted view of raw agent output."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    preview = text if len(text) <= _PREVIEW_CHARS else text[:_PREVIEW_CHARS] + "…"
    logger.debug("%s (preview, first %d chars):\n%s", label, _PREVIEW_CHARS, redact(preview))


__all__ = [
    "ROOT_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "log_raw_preview",
    "redact",
]
