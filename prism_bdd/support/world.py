"""The per-scenario world object handed to every step definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TypeVar, Union

import pytest
from playwright.sync_api import Browser, BrowserContext, Page

from prism_bdd.config import Environment, environment
from prism_bdd.fixtures.browser import BrowserManager, browser_manager
from prism_bdd.utils.logger import ScenarioLogger

PageObjectT = TypeVar("PageObjectT")


@dataclass
class Attachment:
    """Data attached to the scenario report (screenshots, error text)."""

    data: Union[bytes, str]
    mime_type: str


class World:
    """Carries browser handles, logger and scenario data between steps.

    Args:
        scenario_name: Name used for the scenario logger
        parameters: Runner parameters, e.g. ``{"browser": "firefox"}``
        manager: Browser manager providing the shared browser/context/page
        config: Environment configuration
    """

    def __init__(
        self,
        scenario_name: str = "CustomWorld",
        parameters: Optional[dict[str, Any]] = None,
        manager: BrowserManager = browser_manager,
        config: Environment = environment,
    ):
        self.scenario_name = scenario_name
        self.parameters = dict(parameters or {})
        self.logger = ScenarioLogger(scenario_name)
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self.attachments: list[Attachment] = []
        self.data: dict[str, Any] = {}
        self._manager = manager
        self._config = config
        self._page_objects: dict[type, Any] = {}

    @property
    def base_url(self) -> str:
        return self._config.get("base_url")

    def init(self, browser_type: Optional[str] = None) -> None:
        """Launch or reuse the browser and bind the shared page to this world."""
        self.logger.info("Initializing world")

        selected_browser = (
            browser_type or self.parameters.get("browser") or self._config.get("browser")
        )
        self.browser = self._manager.launch_browser(selected_browser)

        if self._manager.has_page():
            self.page = self._manager.get_page()
            self.context = self._manager.get_context()
            self.logger.info("Reusing existing page and context")
        else:
            self.context = self._manager.create_context()
            self.page = self._manager.create_page()
            self.logger.info("Created new page and context")

        self.logger.info("World initialized successfully")

    def fresh_session(self) -> None:
        """Replace the shared context and page with new, unauthenticated ones."""
        self.logger.info("Starting a fresh browser session")
        self._manager.cleanup_scenario()
        self.context = self._manager.create_context()
        self.page = self._manager.create_page()
        self._page_objects.clear()

    def page_object(self, page_object_cls: type[PageObjectT]) -> PageObjectT:
        """Return a page or component object bound to the current page.

        Instances are cached per world until the page changes.
        """
        cached = self._page_objects.get(page_object_cls)
        if cached is None or cached.page is not self.page:
            cached = page_object_cls(self.page)
            self._page_objects[page_object_cls] = cached
        return cached

    def attach(self, data: Union[bytes, str], mime_type: str = "text/plain") -> None:
        self.attachments.append(Attachment(data, mime_type))

    def cleanup(self) -> None:
        """Per-scenario cleanup; the page and context stay open for the next scenario."""
        self.logger.info("Cleaning up world")
        self._page_objects.clear()
        self.logger.info("World cleanup completed")


WORLD_KEY = pytest.StashKey[World]()
