# screenshot_renamer/__init__.py
"""Rename screenshots to descriptive, searchable filenames (OCR + AI naming agent)."""

__version__ = "0.1.0"
