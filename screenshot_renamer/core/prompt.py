# screenshot_renamer/core/prompt.py
"""
Rename prompt builder.

Pure function of (image path, OCR text, naming rules). No filesystem access:
the prompt only *describes* the naming and collision policy. The same policy
is enforced locally on the agent's answer (see core/naming.py).
"""

from __future__ import annotations

from pathlib import Path

from screenshot_renamer.schemas.models import NamingRules

OCR_MARKER = "OCR text from the image:"
OCR_END_MARKER = "(end of OCR text)"
OUTPUT_CONTRACT = "Print ONLY the final filename (no path, no quotes, no commentary) on the last line."


def build_rename_prompt(
    image_path: str | Path,
    ocr_text: str,
    rules: NamingRules | None = None,
    *,
    agent_renames: bool = False,
) -> str:
    """
    Compose the natural-language instruction for the naming agent.

    Args:
        image_path: Image to describe. Its extension is preserved.
        ocr_text: Recognized on-image text (or the placeholder note).
        rules: Naming limits rendered into the prompt.
        agent_renames: When the agent is allowed to run `mv`, ask it to
            perform the rename itself instead of only proposing a name.
    """
    rules = rules or NamingRules()
    p = Path(image_path)
    ext = p.suffix or "(none)"
    stem_example = "tide"

    lines = [
        f"Look at the image '{p}' and choose a descriptive lowercase filename for it.",
        "Use both what you see in the image and the OCR text below.",
        "",
        "NAMING RULES:",
        f"- Max {rules.max_chars} characters total, max {rules.max_words} words",
        "- Only lowercase letters, numbers, and underscores (no spaces, no hyphens)",
        f"- Format: {rules.name_format}{ext}",
        f"- Preserve the original file extension: {ext}",
        "",
        OCR_MARKER,
        ocr_text.rstrip("\n"),
        OCR_END_MARKER,
        "",
        "COLLISION DETECTION (MANDATORY):",
        "- Before any rename, check whether the target name already exists with `test -e <target>`.",
        "- If it exists, do NOT overwrite it. Append _1, _2, _3, ... to the base name,",
        "  incrementing until an unused name is found.",
        "- Re-check with `test -e` before every rename attempt.",
        f"- Example: if {stem_example}{ext} exists, use {stem_example}_1{ext};"
        f" if {stem_example}_1{ext} also exists, use {stem_example}_2{ext}.",
        f"- You may use `ls {p.parent}` to see similar names.",
        "",
    ]

    if agent_renames:
        lines += [
            f"Use mv to rename '{p}' inside {p.parent}, then echo the new filename.",
            "IMPORTANT: YOU MUST ACTUALLY RENAME THE FILE WITH THE ALLOWED TOOLS.",
        ]
    else:
        lines += ["Do NOT rename the file yourself; only decide the name."]

    lines.append(OUTPUT_CONTRACT)
    return "\n".join(lines) + "\n"


__all__ = ["OCR_END_MARKER", "OCR_MARKER", "OUTPUT_CONTRACT", "build_rename_prompt"]
