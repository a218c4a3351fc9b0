# screenshot_renamer/core/sanitize.py
"""
Screenshot filename sanitizer.

macOS default screenshot names put a NARROW NO-BREAK SPACE (U+202F) between
the time and the AM/PM marker ("Screenshot 2025-12-29 at 10.03.10 PM.png").
Those names break shell tooling downstream, so they are renamed to
`screenshot_<YYYYMMDD>.<HHMMSS>.<ext>` based on the file's creation time.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from screenshot_renamer.core.errors import SanitizationError
from screenshot_renamer.core.fs import FileOps, LocalFileOps
from screenshot_renamer.logs import get_logger

NARROW_NBSP = "\u202f"

logger = get_logger(__name__)


def needs_sanitization(name: str) -> bool:
    return NARROW_NBSP in name


def creation_time(path: Path) -> datetime:
    """Birth time where the platform records it, else last modification time (local time)."""
    st = os.stat(path)
    ts = getattr(st, "st_birthtime", None)
    if ts is None:
        ts = st.st_mtime
    return datetime.fromtimestamp(ts)


def canonical_screenshot_name(path: Path, created: datetime) -> str:
    ext = Path(path).suffix
    return f"screenshot_{created:%Y%m%d.%H%M%S}{ext}"


def sanitize_screenshot_name(path: str | Path, *, fs: FileOps | None = None) -> Path:
    """
    Rename an irregular macOS screenshot name to its canonical form.

    Returns the (possibly new) path. Names without U+202F are returned unchanged
    without touching the filesystem, so the call is idempotent.

    Raises:
        SanitizationError: the file is missing, the canonical target already
            exists, or the rename itself failed.
    """
    p = Path(path)
    if not needs_sanitization(p.name):
        return p

    ops = fs or LocalFileOps()
    try:
        new_name = canonical_screenshot_name(p, creation_time(p))
        target = p.with_name(new_name)
        ops.rename(p, target)
    except OSError as exc:
        raise SanitizationError(f"Could not sanitize {p.name!r}: {exc}") from exc

    logger.info("Renamed: %s -> %s", p, new_name)
    return target


__all__ = [
    "NARROW_NBSP",
    "canonical_screenshot_name",
    "creation_time",
    "needs_sanitization",
    "sanitize_screenshot_name",
]
