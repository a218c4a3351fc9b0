# screenshot_renamer/core/__init__.py
"""Renaming pipeline: sanitize, OCR artifact, prompt, naming policy, executor."""
