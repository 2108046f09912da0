"""Reports page: per-user activity and stain usage."""

from __future__ import annotations

import re

from playwright.sync_api import Locator, Page, expect

from prism_bdd.pages.base_page import BasePage

USER_EMAIL_DOMAIN = "@pictorlabs.ai"
STAIN_CATEGORIES = re.compile(r"Immunohistochemistry|Hematoxylin and Eosin|Special Stain")


class ReportsPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "ReportsPage")

        self.year_dropdown = page.locator("text=Year").locator("..").locator('[role="combobox"]')
        self.search_box = page.get_by_placeholder("Search by name or email")
        self.view_user_button = page.get_by_role("button", name="View User").first
        self.user_entries = page.locator(
            f'[class*="user"], p:has-text("{USER_EMAIL_DOMAIN}")'
        )
        self.quarter_selector = (
            page.locator("text=Quarter").locator("..").locator('[role="combobox"]')
        )
        self.expand_buttons = page.locator("button").filter(has_text=STAIN_CATEGORIES)
        self.icons = page.locator("img").filter(has_not=page.locator('img[alt=""]'))
        self.first_user = page.locator(f'p:has-text("{USER_EMAIL_DOMAIN}")').first
        self.pagination_controls = page.locator("button").filter(has_text="1")
        self.current_page_button = page.locator('button:has-text("1")')

    def verify_search_box_displayed(self) -> None:
        expect(self.search_box).to_be_visible()

    def verify_user_list_displayed(self) -> None:
        expect(self.user_entries.first).to_be_visible()

    def click_view_user_button(self) -> None:
        self.click(self.view_user_button, "View User Button")
        self.page.wait_for_timeout(1000)

    def verify_user_details_expanded(self) -> None:
        """An expanded user row shows its quarter selector."""
        expect(self.quarter_selector).to_be_visible()

    def get_year_dropdown(self) -> Locator:
        return self.year_dropdown

    def get_stain_type_heading(self, stain_type: str) -> Locator:
        return self.page.get_by_role("heading", name=stain_type, level=3)

    def get_expand_buttons(self) -> Locator:
        return self.expand_buttons

    def get_icons(self) -> Locator:
        return self.icons

    def get_labels(self, label: str) -> Locator:
        return self.page.locator(f"text={label}")

    def get_first_user(self) -> Locator:
        return self.first_user

    def get_quarter_selector(self) -> Locator:
        return self.quarter_selector

    def get_chart_section_heading(self, chart_name: str) -> Locator:
        return self.page.get_by_role("heading", name=chart_name, level=6)

    def get_metric_heading(self, metric_name: str) -> Locator:
        return self.page.get_by_role("heading", name=metric_name, level=6)

    def get_pagination_controls(self) -> Locator:
        return self.pagination_controls

    def get_current_page_button(self) -> Locator:
        return self.current_page_button
