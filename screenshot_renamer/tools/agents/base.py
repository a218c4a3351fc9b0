# screenshot_renamer/tools/agents/base.py
"""
Naming Agent Interface

Purpose
-------
Define the contract for the external analysis agent: given an image and the
rename prompt, return the agent's raw textual answer. The core normalizes that
answer into a filename and performs the rename itself.

Public API
----------
class NameProposer(Protocol):
    def propose(self, image_path: Path, prompt: str) -> str

Invariants & Guardrails
-----------------------
- Failures (spawn error, non-zero exit, timeout, SDK error) surface as
  AgentInvocationError. No retries at this seam beyond an adapter's own
  transport retries.
- Proposers do not touch the filesystem except to read the image bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class NameProposer(Protocol):
    def propose(self, image_path: Path, prompt: str) -> str: ...
