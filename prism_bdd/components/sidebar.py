"""Left navigation drawer.

Menu items are matched by their primary text; the active item carries the
``bg-primary-200`` class.
"""

from __future__ import annotations

from typing import Optional

from playwright.sync_api import Locator, Page

from prism_bdd.utils.logger import ScenarioLogger

DRAWER_SELECTOR = ".MuiDrawer-root.MuiDrawer-anchorLeft.MuiDrawer-docked"
MENU_ITEM_SELECTOR = ".MuiListItem-root"
MENU_TEXT_SELECTOR = ".MuiListItemText-primary"
ACTIVE_CLASS = "bg-primary-200"


class SidebarComponent:
    def __init__(self, page: Page):
        self.page = page
        self.logger = ScenarioLogger("SidebarComponent")

        self.drawer = page.locator(DRAWER_SELECTOR)
        self.toggle_button = self.drawer.locator(
            'button[type="button"]',
            has=page.locator('[data-testid="ChevronRightIcon"]'),
        )

    def _menu_item(self, menu_text: str, selector: str = MENU_ITEM_SELECTOR) -> Locator:
        return self.drawer.locator(
            selector,
            has=self.page.locator(f'{MENU_TEXT_SELECTOR}:has-text("{menu_text}")'),
        )

    def is_visible(self) -> bool:
        self.logger.action("Check if sidebar is visible")
        return self.drawer.is_visible()

    def click_menu_item(self, menu_text: str) -> None:
        self.logger.action(f"Click menu item: {menu_text}")
        menu_item = self._menu_item(menu_text)
        menu_item.wait_for(state="visible")
        menu_item.click()

    def is_menu_item_active(self, menu_text: str) -> bool:
        self.logger.action(f'Check if menu item "{menu_text}" is active')
        class_attribute = self._menu_item(menu_text).get_attribute("class")
        return bool(class_attribute) and ACTIVE_CLASS in class_attribute

    def get_menu_item_names(self) -> list[str]:
        self.logger.action("Get all menu item names")
        return self.drawer.locator(MENU_TEXT_SELECTOR).all_text_contents()

    def click_toggle_button(self) -> None:
        self.logger.action("Click sidebar toggle button")
        self.toggle_button.wait_for(state="visible")
        self.toggle_button.click()

    def is_menu_item_icon_visible(self, menu_text: str) -> bool:
        return self._menu_item(menu_text).locator(".MuiListItemIcon-root img").is_visible()

    def get_active_menu_item(self) -> Optional[str]:
        active_item = self.drawer.locator(
            f"{MENU_ITEM_SELECTOR}.{ACTIVE_CLASS} {MENU_TEXT_SELECTOR}"
        )
        if active_item.count() > 0:
            return active_item.text_content()
        return None

    def verify_all_menu_items(self, expected_items: list[str]) -> bool:
        """True when every expected name is among the drawer's menu items."""
        actual_items = self.get_menu_item_names()
        for expected in expected_items:
            if expected not in actual_items:
                self.logger.error(f'Menu item "{expected}" not found')
                return False
        return True

    def wait_for_menu_item_active(self, menu_text: str, timeout: int = 5000) -> None:
        self.logger.action(f'Wait for menu item "{menu_text}" to be active')
        active_item = self._menu_item(menu_text, f"{MENU_ITEM_SELECTOR}.{ACTIVE_CLASS}")
        active_item.wait_for(state="visible", timeout=timeout)

    def get_sidebar_width(self) -> float:
        box = self.drawer.bounding_box()
        return box["width"] if box else 0

    def is_toggle_button_visible(self) -> bool:
        return self.toggle_button.is_visible()
