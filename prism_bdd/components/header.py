"""Application header (the MUI AppBar across the top of every screen)."""

from __future__ import annotations

from playwright.sync_api import Page

from prism_bdd.utils.logger import ScenarioLogger


class HeaderComponent:
    def __init__(self, page: Page):
        self.page = page
        self.logger = ScenarioLogger("HeaderComponent")

        self.header = page.locator("header.MuiAppBar-root")
        self.organization_name = page.locator("header .flex.items-center.capitalize span")

    def get_organization_name(self) -> str:
        self.logger.action("Get organization name")
        return self.organization_name.text_content() or ""

    def is_header_visible(self) -> bool:
        return self.header.is_visible()
