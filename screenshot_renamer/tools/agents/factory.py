# screenshot_renamer/tools/agents/factory.py
from __future__ import annotations

from screenshot_renamer.config.settings import RenamerSettings
from screenshot_renamer.tools.agents.base import NameProposer
from screenshot_renamer.tools.agents.claude_cli import ClaudeCliProposer
from screenshot_renamer.tools.agents.mock_proposer import MockNameProposer
from screenshot_renamer.tools.agents.openai_proposer import OpenAIProposer


def build_proposer(settings: RenamerSettings) -> NameProposer:
    """
    Select the naming agent named by `settings.agent`.

    Raises:
        RuntimeError: openai requested without OPENAI_API_KEY / SDK.
    """
    if settings.agent == "mock":
        return MockNameProposer(max_words=settings.rules.max_words)
    if settings.agent == "openai":
        return OpenAIProposer(
            model=settings.openai_model,
            timeout_s=settings.openai_timeout_s,
            max_retries=settings.openai_max_retries,
        )
    return ClaudeCliProposer(
        executable=settings.agent_executable,
        model=settings.model,
        allowed_tools=settings.allowed_tools,
        timeout_s=settings.agent_timeout_s,
    )
