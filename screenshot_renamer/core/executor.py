# screenshot_renamer/core/executor.py
"""
Rename executor

Purpose
-------
Turn one image + its OCR artifact into a renamed file:
  1) build the prompt from the artifact text
  2) ask the naming agent for a name
  3) discard the artifact (always, even if the agent failed)
  4) normalize the proposal and rename locally, never onto an existing file

Design
------
- The agent proposes; the core renames. Collision avoidance is a checked
  invariant here (check, then no-replace rename, re-check on a lost race),
  not an instruction the agent is trusted to follow.
- Agents granted `mv` may still rename the file themselves. If the source
  vanished and the name the agent printed (or its normalized form) exists,
  that result is accepted with a warning because its collision safety was
  not verified locally.
"""

from __future__ import annotations

from pathlib import Path

from screenshot_renamer.core.errors import AgentInvocationError, RenamerError
from screenshot_renamer.core.fs import FileOps, LocalFileOps
from screenshot_renamer.core.naming import echoed_filename, next_free_name, normalize_proposal
from screenshot_renamer.core.prompt import build_rename_prompt
from screenshot_renamer.logs import get_logger, log_raw_preview, redact
from screenshot_renamer.schemas.models import NamingRules, OcrArtifact
from screenshot_renamer.tools.agents.base import NameProposer

logger = get_logger(__name__)


class RenameExecutor:
    def __init__(
        self,
        proposer: NameProposer,
        fs: FileOps | None = None,
        rules: NamingRules | None = None,
        *,
        agent_renames: bool = False,
    ) -> None:
        self.proposer = proposer
        self.fs = fs or LocalFileOps()
        self.rules = rules or NamingRules()
        self.agent_renames = agent_renames

    def execute(self, image_path: str | Path, artifact: OcrArtifact) -> Path:
        """
        Rename `image_path` to an agent-proposed descriptive name.

        Returns:
            The final path of the image.

        Raises:
            AgentInvocationError: the agent call failed, or the agent moved the
                file somewhere unexpected.
            NameProposalError: the answer held no usable name.
            CollisionError: no free suffix could be secured.
        """
        image = Path(image_path)
        try:
            prompt = build_rename_prompt(image, artifact.read_text(), self.rules, agent_renames=self.agent_renames)
            try:
                raw = self.proposer.propose(image, prompt)
            except RenamerError:
                raise
            except Exception as exc:  # noqa: BLE001
                raise AgentInvocationError(redact(f"{type(exc).__name__}: {exc}")) from exc
        finally:
            artifact.discard()

        log_raw_preview(logger, raw, f"Agent output for {image.name}")
        proposed = normalize_proposal(raw, image.suffix, self.rules)
        return self._commit(image, proposed, echoed_filename(raw))

    def _commit(self, image: Path, proposed: str, echoed: str | None = None) -> Path:
        directory = image.parent

        if not self.fs.exists(image):
            # an agent with `mv` moves to the name it printed, which may not conform
            for name in dict.fromkeys(n for n in (echoed, proposed) if n):
                delegated = directory / name
                if self.fs.exists(delegated):
                    logger.warning(
                        "Agent renamed %s to %s itself; collision safety was not verified locally.",
                        image.name,
                        name,
                    )
                    return delegated
            raise AgentInvocationError(f"{image.name} disappeared during the agent call and {proposed} was not found.")

        if proposed == image.name:
            return image

        start = 0
        while True:
            n, target = next_free_name(directory, proposed, self.fs, self.rules, start=start)
            try:
                return self.fs.rename(image, target)
            except FileExistsError:
                logger.warning("%s appeared before the rename; trying the next suffix.", target.name)
                start = n + 1


__all__ = ["RenameExecutor"]
