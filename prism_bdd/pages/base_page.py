"""Base page with common interactions, wait utilities and fallback selectors.

Selectors for elements that have no stable locator are kept in
``selectors.yaml`` next to this module, so they can be updated when the UI
changes without touching the page objects.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from prism_bdd.exceptions import ElementNotFoundError
from prism_bdd.utils.logger import ScenarioLogger

SELECTORS_FILE = Path(__file__).parent / "selectors.yaml"


@lru_cache(maxsize=None)
def load_selectors(path: Path = SELECTORS_FILE) -> dict[str, Any]:
    """Load the fallback selector configuration."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_selectors(selector_path: str, **kwargs: str) -> list[str]:
    """Return a selector chain by dot-notation path, formatted with ``kwargs``.

    Example:
        get_selectors("dashboard.menu_item", name="Reports", name_lower="reports")
        # ['a:has-text("Reports")', 'button:has-text("Reports")', ...]
    """
    value: Any = load_selectors()
    for part in selector_path.split("."):
        value = value[part]

    if kwargs:
        return [selector.format(**kwargs) for selector in value]
    return list(value)


class BasePage:
    """Common page interactions shared by every page object."""

    def __init__(self, page: Page, context: str = "BasePage"):
        self.page = page
        self.logger = ScenarioLogger(context)

    def navigate(self, url: str) -> None:
        self.logger.action(f"Navigating to URL: {url}")
        self.page.goto(url, wait_until="domcontentloaded")
        self.page.wait_for_load_state("networkidle")

    def click(self, locator: Locator, element_name: Optional[str] = None) -> None:
        self.logger.action("Click", element_name)
        locator.wait_for(state="visible")
        locator.click()

    def fill(self, locator: Locator, text: str, element_name: Optional[str] = None) -> None:
        self.logger.action(f'Fill text: "{text}"', element_name)
        locator.wait_for(state="visible")
        locator.fill(text)

    def get_inner_text(self, locator: Locator, element_name: Optional[str] = None) -> str:
        self.logger.action("Get text", element_name)
        locator.wait_for(state="visible")
        text = locator.inner_text() or ""
        self.logger.info(f'Retrieved text: "{text}"')
        return text

    def get_text(self, locator: Locator, element_name: Optional[str] = None) -> str:
        self.logger.action("Get text content", element_name)
        locator.first.wait_for(state="visible")
        return (locator.first.text_content() or "").strip()

    def is_visible(self, locator: Locator, element_name: Optional[str] = None) -> bool:
        self.logger.action("Check visibility", element_name)
        visible = locator.is_visible()
        self.logger.info(f"Element visibility: {visible}")
        return visible

    def wait_for_element(
        self, locator: Locator, timeout: int = 10000, element_name: Optional[str] = None
    ) -> None:
        self.logger.action(f"Wait for element (timeout: {timeout}ms)", element_name)
        locator.wait_for(state="visible", timeout=timeout)

    def get_title(self) -> str:
        title = self.page.title()
        self.logger.info(f"Page title: {title}")
        return title

    def get_current_url(self) -> str:
        url = self.page.url
        self.logger.info(f"Current URL: {url}")
        return url

    def find_first_visible(
        self, selectors: Sequence[str], visible_timeout: int = 2000
    ) -> Optional[str]:
        """Return the first selector of the chain with a visible match, if any."""
        for selector in selectors:
            try:
                self.page.locator(selector).first.wait_for(
                    state="visible", timeout=visible_timeout
                )
            except PlaywrightError:
                continue
            return selector
        return None

    def click_first_visible(
        self,
        selectors: Sequence[str],
        description: str,
        visible_timeout: int = 2000,
        click_timeout: int = 5000,
    ) -> str:
        """Click the first visible element of a fallback selector chain.

        Returns:
            The selector that was clicked

        Raises:
            ElementNotFoundError: If no selector in the chain could be clicked
        """
        for selector in selectors:
            element = self.page.locator(selector).first
            try:
                element.wait_for(state="visible", timeout=visible_timeout)
                element.click(timeout=click_timeout)
            except PlaywrightError:
                continue
            self.logger.info(f"Clicked {description} using selector: {selector}")
            return selector

        raise ElementNotFoundError(f"Could not find {description} with any known selector")
