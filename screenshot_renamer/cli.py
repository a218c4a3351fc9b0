# screenshot_renamer/cli.py
"""
Entry Point: Screenshot Renamer

Purpose
-------
Rename one or more screenshots to descriptive, searchable filenames:
  1) Load settings (defaults or --config JSON, then SHOTNAME_* env, then flags).
  2) Wire the OCR broker, the naming agent, and the rename executor.
  3) Run the batch orchestrator over the given paths.

Exit status
-----------
- 1 when called without paths (usage printed) or when settings are unusable.
- 0 otherwise, even if individual files failed; the summary reports those.

Usage
-----
    screenshot-renamer ~/Desktop/Screenshot*.png
    screenshot-renamer --agent mock --ocr none "Screenshot 1.png"
    python -m screenshot_renamer --log-file /tmp/screenshot-renamer.log <image> [image...]
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from screenshot_renamer.config.settings import RenamerSettings, SettingsLoader
from screenshot_renamer.core.executor import RenameExecutor
from screenshot_renamer.core.fs import LocalFileOps
from screenshot_renamer.core.ocr_broker import TextExtractionBroker
from screenshot_renamer.logs import configure_logging, get_logger
from screenshot_renamer.orchestrators.batch_orchestrator import BatchOrchestrator
from screenshot_renamer.tools.agents import build_proposer
from screenshot_renamer.tools.ocr import build_recognizer

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="screenshot-renamer",
        description="Rename screenshots to descriptive filenames using OCR + an AI naming agent.",
    )
    p.add_argument("paths", nargs="*", metavar="image_file", help="Screenshot file(s) to rename.")
    p.add_argument("--config", type=str, default=None, help="Path to JSON settings file.")
    p.add_argument("--agent", type=str, default=None, choices=["claude", "openai", "mock"], help="Naming agent.")
    p.add_argument("--model", type=str, default=None, help="Agent model name (overrides config).")
    p.add_argument("--ocr", type=str, default=None, choices=["command", "tesseract", "none"], help="OCR engine.")
    p.add_argument("--ocr-command", type=str, default=None, help="Executable for the command OCR engine.")
    p.add_argument("--scratch-dir", type=str, default=None, help="Directory for .ocr.txt artifacts.")
    p.add_argument("--log-file", type=str, default=None, help="Also write diagnostics to a rotating log file.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging (agent output previews).")
    return p


def resolve_settings(args: argparse.Namespace) -> RenamerSettings:
    loader = SettingsLoader()
    settings = loader.load(args.config)
    overrides = {
        "agent": args.agent,
        "ocr_engine": args.ocr,
        "ocr_command": args.ocr_command,
        "scratch_dir": args.scratch_dir,
        "log_file": args.log_file,
        "log_level": "DEBUG" if args.verbose else None,
    }
    if args.model is not None:
        overrides["openai_model" if (args.agent or settings.agent) == "openai" else "model"] = args.model
    return loader.with_overrides(settings, **overrides)


def build_orchestrator(settings: RenamerSettings) -> BatchOrchestrator:
    fs = LocalFileOps()
    broker = TextExtractionBroker(settings.scratch_dir, build_recognizer(settings))
    proposer = build_proposer(settings)
    executor = RenameExecutor(
        proposer,
        fs,
        settings.rules,
        agent_renames=bool(getattr(proposer, "renames_itself", False)),
    )
    return BatchOrchestrator(settings, broker, executor, fs)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = resolve_settings(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level, settings.log_file)

    try:
        orchestrator = build_orchestrator(settings)
    except RuntimeError as e:
        logger.error("%s", e)
        return 1

    result = orchestrator.run(args.paths)
    logger.debug("Batch finished: %s", result.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
