# screenshot_renamer/core/fs.py
"""
File-name capability

Purpose
-------
The renaming pipeline touches file *names* on disk through exactly three
operations: existence test, directory listing, and a no-replace rename.
Everything that could move an image goes through a `FileOps` object, so the
set of side effects is fixed by the interface rather than by convention.

Public API
----------
class FileOps(Protocol):
    def exists(self, path: Path) -> bool
    def list(self, directory: Path) -> list[Path]
    def rename(self, src: Path, dst: Path) -> Path

class LocalFileOps(FileOps)

Invariants & Guardrails
-----------------------
- `rename` never replaces an existing target; it raises FileExistsError.
- On filesystems with hard links the rename is atomic (link + unlink), so a
  target created between the check and the rename is still detected.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Protocol


class FileOps(Protocol):
    def exists(self, path: Path) -> bool: ...

    def list(self, directory: Path) -> list[Path]: ...

    def rename(self, src: Path, dst: Path) -> Path: ...


class LocalFileOps(FileOps):
    """FileOps backed by the local filesystem."""

    def exists(self, path: Path) -> bool:
        # lexists: a dangling symlink still occupies the name
        return os.path.lexists(path)

    def list(self, directory: Path) -> list[Path]:
        base = Path(directory)
        if not base.is_dir():
            return []
        return sorted(base.iterdir(), key=lambda p: p.name.lower())

    def rename(self, src: Path, dst: Path) -> Path:
        src, dst = Path(src), Path(dst)
        if not os.path.lexists(src):
            raise FileNotFoundError(errno.ENOENT, "Source not found", str(src))

        if os.path.lexists(dst):
            # Case-only rename on a case-insensitive volume: same inode, different spelling
            if _same_file(src, dst) and src.name != dst.name:
                os.rename(src, dst)
                return dst
            raise FileExistsError(errno.EEXIST, "Target already exists", str(dst))

        try:
            os.link(src, dst)
        except FileExistsError:
            raise
        except OSError:
            # No hard links here (FAT, some network mounts): plain rename after re-check
            if os.path.lexists(dst):
                raise FileExistsError(errno.EEXIST, "Target already exists", str(dst)) from None
            os.rename(src, dst)
            return dst

        os.unlink(src)
        return dst


def _same_file(a: Path, b: Path) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


__all__ = ["FileOps", "LocalFileOps"]
