"""Mock classes for unit testing page objects and step definitions."""

from .mock_page import MockLocator, MockPage
from .mock_world import MockWorld

__all__ = [
    "MockLocator",
    "MockPage",
    "MockWorld",
]
