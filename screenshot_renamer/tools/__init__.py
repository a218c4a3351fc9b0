# screenshot_renamer/tools/__init__.py
"""External collaborators: OCR engines (tools.ocr) and naming agents (tools.agents)."""
