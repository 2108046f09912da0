"""Model page: stainer availability and stain model versions."""

from __future__ import annotations

from playwright.sync_api import Locator, Page

from prism_bdd.pages.base_page import BasePage

TOTAL_STAINERS_XPATH = '//div[text()="Total Stainers Available"]/following-sibling::div'


class ModelPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "ModelPage")
        self.checkboxes = page.locator('input[type="checkbox"]')

    def get_total_stainers_count(self) -> str:
        """Text of the "Total Stainers Available" counter, ``"0"`` when empty."""
        self.page.wait_for_load_state("networkidle")
        count = self.page.locator(TOTAL_STAINERS_XPATH).first.text_content()
        return count or "0"

    def get_tab(self, tab_name: str) -> Locator:
        return self.page.get_by_role("tab", name=tab_name)

    def get_metric(self, metric_name: str) -> Locator:
        return self.page.locator(f"text={metric_name}")

    def get_stain_element(self, stain_name: str) -> Locator:
        return self.page.locator(f"text={stain_name}")

    def get_stain_type_element(self, stain_type: str) -> Locator:
        return self.page.locator(f"text={stain_type}")

    def get_version_element(self, version: str) -> Locator:
        return self.page.locator(f"text={version}")

    def get_checkboxes(self) -> Locator:
        return self.checkboxes

    def get_stain_checkbox(self, stain_name: str, version: str) -> Locator:
        # the stain card is three levels above its name label
        container = (
            self.page.locator(f"text={stain_name}").locator("../../..").filter(has_text=version)
        )
        return container.locator('input[type="checkbox"]').first
