# screenshot_renamer/core/errors.py
"""
Typed errors + utilities for the per-file renaming pipeline.

Exports
-------
- RenamerError, FileValidationError, SanitizationError, RecognitionError,
  AgentInvocationError, NameProposalError, CollisionError
- RENAMER_ERRORS
- classify_renamer_error(exc)
- renamer_error_guard()

Policy
------
Every error here is local to one file. The batch orchestrator records it as a
failure outcome and moves on; nothing in this hierarchy aborts a batch.
RecognitionError never reaches the orchestrator: the OCR broker degrades to a
placeholder artifact instead.
"""

from __future__ import annotations

import subprocess
from collections.abc import Iterator
from contextlib import contextmanager

# =========================
# Exception types
# =========================


class RenamerError(RuntimeError):
    """Base class for renaming-pipeline failures."""


class FileValidationError(RenamerError):
    """Input path is missing or is not a regular file."""


class SanitizationError(RenamerError):
    """Normalizing an irregular screenshot name on disk failed."""


class RecognitionError(RenamerError):
    """An available text recognizer failed while processing an image."""


class AgentInvocationError(RenamerError):
    """The external naming agent could not be run or reported an error status."""


class NameProposalError(RenamerError):
    """The agent answered, but nothing usable as a filename could be derived."""


class CollisionError(RenamerError):
    """No free target name could be secured without replacing an existing file."""


# Selector tuple for grouped exception handling
RENAMER_ERRORS = (
    FileValidationError,
    SanitizationError,
    RecognitionError,
    AgentInvocationError,
    NameProposalError,
    CollisionError,
)

# =========================
# Classification helpers
# =========================


def classify_renamer_error(exc: BaseException) -> RenamerError:
    """
    Map arbitrary exceptions raised inside the pipeline to a typed RenamerError.

    Heuristics:
      - Any RenamerError subclass → passed through
      - FileNotFoundError → FileValidationError
      - FileExistsError → CollisionError
      - subprocess failures (non-zero exit, timeout) → AgentInvocationError
      - Fallback → RenamerError
    """
    if isinstance(exc, RenamerError):
        return exc

    msg = f"{type(exc).__name__}: {exc}"

    if isinstance(exc, FileNotFoundError):
        return FileValidationError(msg)

    if isinstance(exc, FileExistsError):
        return CollisionError(msg)

    if isinstance(exc, (subprocess.CalledProcessError, subprocess.TimeoutExpired)):
        return AgentInvocationError(msg)

    return RenamerError(msg)


@contextmanager
def renamer_error_guard() -> Iterator[None]:
    """Context manager to normalize unexpected exceptions from pipeline internals."""
    try:
        yield
    except RenamerError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise classify_renamer_error(exc) from exc


__all__ = [
    "RenamerError",
    "FileValidationError",
    "SanitizationError",
    "RecognitionError",
    "AgentInvocationError",
    "NameProposalError",
    "CollisionError",
    "RENAMER_ERRORS",
    "classify_renamer_error",
    "renamer_error_guard",
]
