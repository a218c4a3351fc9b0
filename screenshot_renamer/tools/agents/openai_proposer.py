# screenshot_renamer/tools/agents/openai_proposer.py
"""
OpenAI naming agent

Purpose
-------
Alternative to the CLI agent: send the rename prompt plus the image (base64
data URL) to an OpenAI multimodal model and return its text answer.

Environment
-----------
OPENAI_API_KEY : required
Model, timeout and retry count come from RenamerSettings.
"""

from __future__ import annotations

import base64
import os
import time
from pathlib import Path

from screenshot_renamer.core.errors import AgentInvocationError
from screenshot_renamer.logs import get_logger, redact
from screenshot_renamer.tools.agents.base import NameProposer

_MIME = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
}

logger = get_logger(__name__)


class OpenAIProposer(NameProposer):
    def __init__(self, model: str = "gpt-4o-mini", timeout_s: float = 60.0, max_retries: int = 2) -> None:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise RuntimeError("OPENAI_API_KEY not set for OpenAIProposer.")
        try:
            from openai import OpenAI  # type: ignore
        except ImportError as e:
            raise RuntimeError("OpenAI SDK not available. Install `openai>=1.0`.") from e

        self._client = OpenAI(api_key=api_key)
        self._model = model
        self._timeout_s = timeout_s
        self._max_retries = max_retries

    def propose(self, image_path: Path, prompt: str) -> str:
        p = Path(image_path)
        try:
            data_url = _data_url(p)
        except OSError as e:
            raise AgentInvocationError(f"Could not read image for the naming agent: {e}") from e

        last_err: Exception | None = None
        for attempt in range(self._max_retries + 1):
            try:
                return self._call(data_url, prompt)
            except Exception as e:  # noqa: BLE001 - SDK raises a wide family of errors
                last_err = e
                if attempt < self._max_retries:
                    logger.debug("OpenAI call failed (attempt %d): %s", attempt + 1, redact(str(e)))
                    time.sleep(min(0.5 * (attempt + 1), 2.0))
        assert last_err is not None
        raise AgentInvocationError(f"OpenAI naming call failed: {redact(str(last_err))}") from last_err

    def _call(self, data_url: str, prompt: str) -> str:
        responses = getattr(self._client, "responses", None)
        if responses is not None:
            out = responses.create(
                model=self._model,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_text", "text": prompt},
                            {"type": "input_image", "image_url": data_url},
                        ],
                    }
                ],
                timeout=self._timeout_s,
            )
            txt = getattr(out, "output_text", None)
            if isinstance(txt, str) and txt.strip():
                return txt

        # Older SDKs without the Responses API
        resp = self._client.chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": data_url}},
                    ],
                }
            ],
            timeout=self._timeout_s,
        )
        return resp.choices[0].message.content or ""


def _data_url(p: Path) -> str:
    mime = _MIME.get(p.suffix.lower(), "application/octet-stream")
    return f"data:{mime};base64,{base64.b64encode(p.read_bytes()).decode('ascii')}"
