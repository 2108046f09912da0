"""Locators and actions shared by every screen (tabs, headings, buttons, text)."""

from __future__ import annotations

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from prism_bdd.pages.base_page import BasePage


class CommonPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "CommonPage")

    def get_tab(self, tab_name: str) -> Locator:
        return self.page.get_by_role("tab", name=tab_name)

    def get_heading(self, heading_text: str) -> Locator:
        return self.page.get_by_role("heading", name=heading_text)

    def get_section_heading(self, section_name: str) -> Locator:
        """Section headings are rendered as h6."""
        return self.page.get_by_role("heading", name=section_name, level=6)

    def get_button(self, button_name: str) -> Locator:
        return self.page.get_by_role("button", name=button_name)

    def get_text_element(self, text: str) -> Locator:
        return self.page.locator(f"text={text}")

    def get_search_box_by_placeholder(self, placeholder: str) -> Locator:
        return self.page.get_by_placeholder(placeholder)

    def _safe_is_visible(self, locator: Locator) -> bool:
        try:
            return locator.is_visible()
        except PlaywrightError:
            return False

    def get_element(self, element_name: str) -> Locator:
        """Resolve a named element: a button, then a tab, then any matching text."""
        element = self.get_button(element_name)
        if self._safe_is_visible(element):
            return element

        element = self.get_tab(element_name)
        if self._safe_is_visible(element):
            return element

        return self.get_text_element(element_name).first

    def click_tab(self, tab_name: str) -> None:
        tab = self.get_tab(tab_name)
        self.click(tab, f"Tab: {tab_name}")
        tab.wait_for(state="attached")
        self.page.wait_for_load_state("domcontentloaded")

    def click_button(self, button_name: str) -> None:
        self.click(self.get_button(button_name), f"Button: {button_name}")
        self.page.wait_for_load_state("domcontentloaded")

    def click_element(self, element_name: str) -> None:
        self.logger.action("Click", element_name)
        self.get_element(element_name).click()
        self.page.wait_for_load_state("domcontentloaded")

    def navigate_to_tab(self, tab_name: str) -> None:
        """Click the tab unless it is already selected."""
        if not self.is_tab_selected(tab_name):
            self.click_tab(tab_name)

    def is_tab_selected(self, tab_name: str) -> bool:
        return self.get_tab(tab_name).get_attribute("aria-selected") == "true"

    def is_button_visible(self, button_name: str) -> bool:
        return self.get_button(button_name).is_visible()

    def is_heading_visible(self, heading_text: str) -> bool:
        return self.get_heading(heading_text).is_visible()

    def is_text_visible(self, text: str) -> bool:
        return self.get_text_element(text).first.is_visible()

    def is_section_visible(self, section_name: str) -> bool:
        return self.get_section_heading(section_name).first.is_visible()

    def is_search_box_visible(self, placeholder: str) -> bool:
        return self.get_search_box_by_placeholder(placeholder).is_visible()

    def are_tabs_visible(self, tab_names: list[str]) -> list[bool]:
        return [self.get_tab(tab_name).is_visible() for tab_name in tab_names]
