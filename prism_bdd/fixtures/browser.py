"""Browser lifecycle management.

A single ``BrowserManager`` per worker process owns the Playwright driver and
at most one browser, context and page. The browser is launched once per
feature file and reused by every scenario of that feature; the context and
page are kept alive between scenarios so a login performed by the first
scenario carries over to the next ones.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from prism_bdd.config import SUPPORTED_BROWSERS, Environment, environment
from prism_bdd.exceptions import BrowserNotInitializedError, ConfigurationError
from prism_bdd.utils.auth_helper import AuthHelper, auth_helper

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = ["--start-maximized", "--start-fullscreen"]


class BrowserManager:
    """Launch, reuse and close the browser, context and page.

    Args:
        config: Environment configuration to read browser settings from
        auth: Helper used to restore saved authentication state
        reports_dir: Root directory for screenshots and videos
    """

    def __init__(
        self,
        config: Environment = environment,
        auth: AuthHelper = auth_helper,
        reports_dir: Union[str, Path] = "reports",
    ):
        self._config = config
        self._auth = auth
        self.reports_dir = Path(reports_dir)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._browser_launched_for_feature = False

    @property
    def screenshot_dir(self) -> Path:
        return self.reports_dir / "screenshots"

    @property
    def video_dir(self) -> Path:
        return self.reports_dir / "videos"

    @property
    def browser_launched_for_feature(self) -> bool:
        return self._browser_launched_for_feature

    def _start_playwright(self) -> Playwright:
        if self._playwright is None:
            logger.info("Starting Playwright driver")
            self._playwright = sync_playwright().start()
        return self._playwright

    def launch_browser_for_feature(self, browser_type: Optional[str] = None) -> Browser:
        """Launch the browser for the current feature, or reuse the running one."""
        if self._browser is not None and self._browser_launched_for_feature:
            logger.info("Browser already launched for this feature, reusing instance")
            return self._browser

        selected_browser = browser_type or self._config.get("browser")
        if selected_browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(f"Unsupported browser type: {selected_browser}")
        logger.info("Launching browser for feature: %s", selected_browser)

        launcher = getattr(self._start_playwright(), selected_browser)
        self._browser = launcher.launch(
            headless=self._config.get("headless"),
            slow_mo=self._config.get("slow_mo"),
            args=CHROMIUM_ARGS if selected_browser == "chromium" else [],
        )

        self._browser_launched_for_feature = True
        logger.info("Browser launched successfully for feature")
        return self._browser

    def launch_browser(self, browser_type: Optional[str] = None) -> Browser:
        if self._browser is not None and self._browser_launched_for_feature:
            logger.info("Reusing existing browser instance")
            return self._browser
        return self.launch_browser_for_feature(browser_type)

    def create_context(self, **options: Any) -> BrowserContext:
        """Create a new browser context on the running browser.

        Keyword arguments are passed to ``Browser.new_context`` and override
        the defaults (no fixed viewport, video recording, saved auth state).
        """
        logger.info("Creating browser context")
        browser = self.get_browser()

        context_options: dict[str, Any] = {"no_viewport": True}
        if self._config.get("video_on_failure"):
            context_options["record_video_dir"] = str(self.video_dir)
        if self._config.get("reuse_auth_state") and self._auth.has_auth_state():
            context_options["storage_state"] = str(self._auth.auth_file_path)
        context_options.update(options)

        self._context = browser.new_context(**context_options)
        logger.info("Browser context created successfully")
        return self._context

    def create_page(self) -> Page:
        logger.info("Creating new page")
        if self._context is None:
            self.create_context()

        self._page = self._context.new_page()
        self._page.set_default_timeout(self._config.get("timeout"))

        logger.info("New page created successfully")
        return self._page

    def has_page(self) -> bool:
        return self._page is not None

    def get_page(self) -> Page:
        if self._page is None:
            raise BrowserNotInitializedError("Page not initialized. Call create_page() first.")
        return self._page

    def get_context(self) -> BrowserContext:
        if self._context is None:
            raise BrowserNotInitializedError(
                "Context not initialized. Call create_context() first."
            )
        return self._context

    def get_browser(self) -> Browser:
        if self._browser is None:
            raise BrowserNotInitializedError(
                "Browser not initialized. Call launch_browser() first."
            )
        return self._browser

    def close_page(self) -> None:
        if self._page is not None:
            logger.info("Closing page")
            self._page.close()
            self._page = None

    def close_context(self) -> None:
        if self._context is not None:
            logger.info("Closing browser context")
            self._context.close()
            self._context = None

    def close_browser(self) -> None:
        if self._browser is not None:
            logger.info("Closing browser")
            self._browser.close()
        self._browser = None
        self._context = None
        self._page = None
        self._browser_launched_for_feature = False

    def close_browser_for_feature(self) -> None:
        logger.info("Closing browser instance for feature")
        self.close_browser()
        logger.info("Browser instance closed for feature")

    def take_screenshot_on_failure(self, scenario_name: str) -> Optional[Path]:
        """Save a full-page screenshot named after the failed scenario.

        Returns:
            Path of the saved screenshot, or None when screenshots are disabled
            or no page is open
        """
        if not self._config.get("screenshot_on_failure") or self._page is None:
            return None

        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        timestamp = re.sub(r"[:.]", "-", datetime.now().isoformat())
        safe_name = re.sub(r"[^\w-]+", "_", scenario_name).strip("_")
        filepath = self.screenshot_dir / f"{safe_name}_{timestamp}.png"

        self._page.screenshot(path=str(filepath), full_page=True)
        logger.info("Screenshot saved: %s", filepath)
        return filepath

    def cleanup_scenario(self) -> None:
        """Close page and context while keeping the browser alive for reuse."""
        logger.info("Cleaning up scenario resources (page and context only)")
        self.close_page()
        self.close_context()
        logger.info("Scenario cleanup completed")

    def cleanup(self) -> None:
        logger.info("Cleaning up browser resources")
        self.close_page()
        self.close_context()
        logger.info("Browser cleanup completed")

    def shutdown(self) -> None:
        """Close everything, including the Playwright driver."""
        self.close_browser()
        if self._playwright is not None:
            logger.info("Stopping Playwright driver")
            self._playwright.stop()
            self._playwright = None


browser_manager = BrowserManager()
