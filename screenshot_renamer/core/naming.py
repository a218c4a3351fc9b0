# screenshot_renamer/core/naming.py
"""
Local enforcement of the descriptive-name policy.

Whatever the naming agent prints is treated as a *proposal*: it is reduced to
`[a-z0-9_]+<ext>` within the NamingRules limits, then a free target is found
by checking `name.ext`, `name_1.ext`, `name_2.ext`, ... through FileOps.
"""

from __future__ import annotations

import re
from pathlib import Path, PurePosixPath, PureWindowsPath

from screenshot_renamer.core.errors import CollisionError, NameProposalError
from screenshot_renamer.core.fs import FileOps
from screenshot_renamer.schemas.models import NamingRules

_DISALLOWED = re.compile(r"[^a-z0-9]+")
_WRAPPERS = "`'\" \t*"
# Extensions an agent tends to echo back; anything else is treated as part of the name
_KNOWN_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".webp", ".heic", ".tif", ".tiff", ".bmp"}


def normalize_proposal(raw_output: str, extension: str, rules: NamingRules | None = None) -> str:
    """
    Turn raw agent output into a policy-conforming filename.

    Uses the last non-empty line, drops quoting and directories, lowercases,
    maps disallowed runs to '_', re-applies `extension`, and truncates to
    `max_words` / `max_chars`.
    """
    rules = rules or NamingRules()
    candidate = echoed_filename(raw_output)
    if candidate is None:
        raise NameProposalError("Naming agent returned no output.")

    ext = extension.lower()
    stem, dot_ext = _split_ext(candidate)
    if dot_ext.lower() in _KNOWN_EXTS or dot_ext.lower() == ext:
        candidate = stem

    slug = _DISALLOWED.sub("_", candidate.lower()).strip("_")
    words = [w for w in slug.split("_") if w][: rules.max_words]
    slug = "_".join(words)

    budget = rules.max_chars - len(ext)
    slug = slug[:budget].rstrip("_")
    if not slug:
        raise NameProposalError(f"No usable filename in agent output: {candidate[:80]!r}")
    return f"{slug}{ext}"


def echoed_filename(raw_output: str) -> str | None:
    """The bare filename on the last non-empty output line, as printed (quotes and directories removed)."""
    lines = [ln.strip() for ln in (raw_output or "").splitlines() if ln.strip()]
    if not lines:
        return None
    name = lines[-1].strip(_WRAPPERS)
    return PureWindowsPath(PurePosixPath(name).name).name or None


def next_free_name(
    directory: Path,
    filename: str,
    fs: FileOps,
    rules: NamingRules | None = None,
    *,
    start: int = 0,
) -> tuple[int, Path]:
    """
    Search for the first unused name starting at suffix index `start`
    (0 = the bare name). Returns (index, path).

    Raises:
        CollisionError: every suffix up to `rules.max_collision_suffix` is taken.
    """
    rules = rules or NamingRules()
    stem, ext = _split_ext(filename)

    for n in range(max(0, start), rules.max_collision_suffix + 1):
        if n == 0:
            name = filename
        else:
            suffix = f"_{n}"
            room = rules.max_chars - len(ext) - len(suffix)
            name = f"{stem[:room].rstrip('_')}{suffix}{ext}"
        candidate = Path(directory) / name
        if not fs.exists(candidate):
            return n, candidate

    raise CollisionError(
        f"No free name for {filename!r} in {directory} (tried up to _{rules.max_collision_suffix})."
    )


def resolve_collision(directory: Path, filename: str, fs: FileOps, rules: NamingRules | None = None) -> Path:
    """First free path among `filename`, `<stem>_1<ext>`, `<stem>_2<ext>`, ..."""
    return next_free_name(directory, filename, fs, rules)[1]


def _split_ext(name: str) -> tuple[str, str]:
    idx = name.rfind(".")
    if idx < 0:
        return name, ""
    return name[:idx], name[idx:]


__all__ = ["echoed_filename", "next_free_name", "normalize_proposal", "resolve_collision"]
