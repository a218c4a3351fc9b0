# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_screenshot, FakeRecognizer, FakeProposer
"""

from .utils import FakeProposer, FakeRecognizer, make_screenshot

__all__ = ["make_screenshot", "FakeRecognizer", "FakeProposer"]
