"""Browser lifecycle fixtures."""

from prism_bdd.fixtures.browser import BrowserManager, browser_manager

__all__ = ["BrowserManager", "browser_manager"]
