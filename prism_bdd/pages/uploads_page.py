"""Uploads page: slide upload tabs, guidelines and the drop zone."""

from __future__ import annotations

from playwright.sync_api import Locator, Page, expect

from prism_bdd.pages.base_page import BasePage

TAB_SETTLE_MS = 1000


class UploadsPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "UploadsPage")

        self.upload_tab = page.get_by_role("tab", name="Upload")
        self.in_progress_tab = page.get_by_role("tab", name="In Progress")
        self.completed_tab = page.get_by_role("tab", name="Completed")
        self.upload_guidelines_heading = page.get_by_role(
            "heading", name="Upload Guidelines:", level=3
        )
        self.drag_drop_area = page.locator("text=Choose files or drag and drop files here")
        self.instructions = page.locator("text=Select and upload slide files")

    def _click_tab(self, tab: Locator, name: str) -> None:
        self.click(tab, name)
        self.page.wait_for_timeout(TAB_SETTLE_MS)

    def click_upload_tab(self) -> None:
        self._click_tab(self.upload_tab, "Upload Tab")

    def click_in_progress_tab(self) -> None:
        self._click_tab(self.in_progress_tab, "In Progress Tab")

    def click_completed_tab(self) -> None:
        self._click_tab(self.completed_tab, "Completed Tab")

    def verify_upload_guidelines_displayed(self) -> None:
        expect(self.upload_guidelines_heading).to_be_visible()

    def verify_guideline(self, guideline: str) -> None:
        expect(self.get_text_element(guideline)).to_be_visible()

    def verify_drag_drop_area_displayed(self) -> None:
        expect(self.drag_drop_area).to_be_visible()

    def verify_supported_formats(self, formats: str) -> None:
        expect(self.get_text_element(formats)).to_be_visible()

    def verify_max_file_size(self, max_size: str) -> None:
        expect(self.get_text_element(max_size)).to_be_visible()

    def get_instructions(self) -> Locator:
        return self.instructions

    def get_text_element(self, text: str) -> Locator:
        return self.page.locator(f"text={text}")

    def get_drag_drop_icon(self) -> Locator:
        return self.drag_drop_area.locator("..").get_by_test_id("CloudUploadIcon")

    def get_upload_button(self, button_name: str) -> Locator:
        return self.drag_drop_area.locator("../..").get_by_role("button", name=button_name)

    def get_description_element(self, description: str) -> Locator:
        return self.page.locator(f"text={description}")

    def get_tab(self, tab_name: str) -> Locator:
        return self.page.get_by_role("tab", name=tab_name)
