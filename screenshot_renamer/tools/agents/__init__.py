# screenshot_renamer/tools/agents/__init__.py
"""
Naming agents package

    from screenshot_renamer.tools.agents import (
        NameProposer,
        ClaudeCliProposer,
        MockNameProposer,
        OpenAIProposer,
        build_proposer,
    )
"""

from __future__ import annotations

from .base import NameProposer
from .claude_cli import ClaudeCliProposer
from .factory import build_proposer
from .mock_proposer import MockNameProposer
from .openai_proposer import OpenAIProposer

__all__ = [
    "NameProposer",
    "ClaudeCliProposer",
    "MockNameProposer",
    "OpenAIProposer",
    "build_proposer",
]
