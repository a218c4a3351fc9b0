# screenshot_renamer/tools/agents/claude_cli.py
"""
Claude CLI naming agent

Runs the `claude` command-line agent non-interactively:

    claude --model <model> --allowedTools "Bash(ls:*),Bash(test:*)" -p <prompt>

The allow-list is limited to the move / list / existence-test shell tools and
is validated when settings load. By default only the read-only checks are
granted, so the agent proposes a name and the core performs the rename.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, TextIO

from screenshot_renamer.config.settings import AgentTool
from screenshot_renamer.core.errors import AgentInvocationError
from screenshot_renamer.logs import get_logger, redact
from screenshot_renamer.tools.agents.base import NameProposer

Runner = Callable[..., "subprocess.CompletedProcess[str]"]

WAIT_MESSAGE = "Uploading image to the naming agent, please wait for reply..."
_ALLOWED: frozenset[str] = frozenset({"mv", "ls", "test"})

logger = get_logger(__name__)


class ClaudeCliProposer(NameProposer):
    def __init__(
        self,
        executable: str = "claude",
        model: str = "opus",
        allowed_tools: Sequence[AgentTool] = ("ls", "test"),
        timeout_s: float = 300.0,
        *,
        runner: Runner | None = None,
        out: TextIO | None = None,
    ) -> None:
        bad = [t for t in allowed_tools if t not in _ALLOWED]
        if bad:
            raise ValueError(f"Tools not permitted for the naming agent: {bad}")
        self.executable = executable
        self.model = model
        self.allowed_tools: tuple[AgentTool, ...] = tuple(allowed_tools)
        self.timeout_s = timeout_s
        self._run: Runner = runner or subprocess.run
        self._out = out

    @property
    def renames_itself(self) -> bool:
        return "mv" in self.allowed_tools

    def build_argv(self, prompt: str) -> list[str]:
        argv = [self.executable, "--model", self.model]
        if self.allowed_tools:
            argv += ["--allowedTools", ",".join(f"Bash({t}:*)" for t in self.allowed_tools)]
        argv += ["-p", prompt]
        return argv

    def propose(self, image_path: Path, prompt: str) -> str:
        print(WAIT_MESSAGE, file=self._out or sys.stdout, flush=True)
        argv = self.build_argv(prompt)
        logger.debug("Invoking %s --model %s for %s", self.executable, self.model, Path(image_path).name)

        kwargs: dict[str, Any] = {"capture_output": True, "text": True, "check": False, "timeout": self.timeout_s}
        try:
            proc = self._run(argv, **kwargs)
        except subprocess.TimeoutExpired as exc:
            raise AgentInvocationError(f"Naming agent timed out after {self.timeout_s:g}s") from exc
        except OSError as exc:
            raise AgentInvocationError(f"Could not start naming agent {self.executable!r}: {exc}") from exc

        if proc.returncode != 0:
            detail = redact((proc.stderr or proc.stdout or "").strip())[:500]
            raise AgentInvocationError(f"Naming agent exited with status {proc.returncode}: {detail}")
        return proc.stdout or ""
