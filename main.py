# main.py
"""
Entry Point: Screenshot Renamer

Thin shim so the tool runs from a checkout without installing:

    python main.py <image_file> [image_file...]

Folder-action launchers call this (or the `screenshot-renamer` console script)
with the newly added files; see `screenshot_renamer/cli.py` for options.
"""

from __future__ import annotations

from screenshot_renamer.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
