"""Dashboard page: organization activity, slide overview and stain usage charts."""

from __future__ import annotations

import re

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from prism_bdd.pages.base_page import BasePage, get_selectors

UNAUTHENTICATED_URL_PARTS = ("/login", "/auth", "auth0.com/u/login")


def is_authenticated_url(url: str) -> bool:
    """True when ``url`` is not one of the login or identity-provider pages."""
    return not any(part in url for part in UNAUTHENTICATED_URL_PARTS)


class DashboardPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "DashboardPage")

        self.quarter_dropdown = page.locator('[role="combobox"]').first
        self.chart_area = page.locator("img").filter(has_not=page.locator('img[alt=""]'))
        # chart axes are SVG; month ticks are plain <text> nodes such as "JAN"
        self.chart_axes = page.locator("svg")
        self.filter_menu = page.locator('[role="menu"]')
        self.progress_bar = page.locator('[role="progressbar"]')

    def is_dashboard_loaded(self) -> bool:
        """Check the URL is past the login flow and some dashboard landmark is visible."""
        self.logger.action("Verify dashboard is loaded")
        try:
            self.page.wait_for_load_state("networkidle", timeout=15000)
        except PlaywrightError as e:
            self.logger.error(f"Dashboard load check failed: {e}")
            return False

        if not is_authenticated_url(self.page.url):
            return False

        indicator = self.find_first_visible(
            get_selectors("dashboard.loaded_indicators"), visible_timeout=5000
        )
        return indicator is not None

    def click_user_profile_menu(self) -> None:
        self.logger.action("Click user profile menu")
        self.page.wait_for_load_state("networkidle")
        self.click_first_visible(get_selectors("dashboard.user_menu"), "user profile menu")

    def click_logout(self) -> None:
        self.logger.action("Click logout")
        self.click_first_visible(get_selectors("dashboard.logout"), "logout button")
        self.page.wait_for_load_state("networkidle", timeout=10000)

    def logout(self) -> None:
        self.logger.step("Logout from application")
        self.click_user_profile_menu()
        self.click_logout()

    def navigate_to_menu_item(self, menu_item_text: str) -> None:
        self.logger.action(f"Navigate to menu item: {menu_item_text}")
        self.page.wait_for_load_state("networkidle", timeout=10000)
        self.click_first_visible(
            get_selectors(
                "dashboard.menu_item",
                name=menu_item_text,
                name_lower=menu_item_text.lower(),
            ),
            f'menu item "{menu_item_text}"',
        )
        self.page.wait_for_load_state("networkidle", timeout=5000)

    def is_user_information_visible(self) -> bool:
        return self.find_first_visible(get_selectors("dashboard.user_indicator")) is not None

    def get_quarter_dropdown_text(self) -> str:
        self.quarter_dropdown.wait_for(state="visible")
        return (self.quarter_dropdown.text_content() or "").strip()

    def select_quarter(self, quarter_text: str) -> None:
        self.logger.action(f"Select quarter: {quarter_text}")
        self.click(self.quarter_dropdown, "Quarter Dropdown")
        self.page.get_by_role("option", name=quarter_text).click()
        self.page.wait_for_load_state("networkidle")

    def get_heading(self, heading_name: str) -> Locator:
        return self.page.get_by_role("heading", name=heading_name)

    def get_metric(self, metric_name: str) -> Locator:
        return self.page.locator(f"text={metric_name}")

    def get_metric_counts(self) -> Locator:
        return self.page.get_by_role("heading", level=6).filter(has_text=re.compile(r"^\d+$"))

    def get_quality_label(self, label_name: str) -> Locator:
        return self.page.locator(f'//*[text()="{label_name}"]')

    def get_progress_bar(self) -> Locator:
        return self.progress_bar

    def get_stain_type(self, stain_type: str) -> Locator:
        return self.page.locator(f"text={stain_type}")

    def get_button(self, button_name: str) -> Locator:
        return self.page.get_by_role("button", name=button_name)

    def get_table_column(self, column_name: str) -> Locator:
        if column_name == "Checkbox":
            return self.page.locator('input[type="checkbox"]')
        return self.page.locator(f"text={column_name}")

    def get_filter_menu(self) -> Locator:
        return self.filter_menu

    def get_filter_option(self, option_name: str) -> Locator:
        return self.page.locator(f'//ul[@role="menu"]//*[text()="{option_name}"]')

    def get_quarter_dropdown(self) -> Locator:
        return self.quarter_dropdown

    def get_month_label(self, month: str) -> Locator:
        """Chart tick labelled exactly ``month`` (e.g. ``"JAN"``), never other page text."""
        return self.chart_axes.get_by_text(month, exact=True)

    def get_chart_area(self) -> Locator:
        return self.chart_area

    def get_counts(self) -> Locator:
        return self.page.get_by_role("heading", level=5)
