"""Login page: the hosted sign-in form and its validation messages."""

from __future__ import annotations

from playwright.sync_api import Page

from prism_bdd.pages.base_page import BasePage


class LoginPage(BasePage):
    def __init__(self, page: Page):
        super().__init__(page, "LoginPage")

        self.sign_in_button = page.get_by_role("button", name="Sign In")
        self.username_input = page.locator('//input[@id="username"]')
        self.password_input = page.locator('//input[@id="password"]')
        self.login_button = page.locator('//button[normalize-space(text())="Continue"]')
        self.error_message = page.locator('//span[@id="error-element-password"]')
        self.username_error_message = page.locator("#error-cs-username-required")
        self.password_error_message = page.locator("#error-cs-password-required")
        self.forgot_password_link = page.get_by_role("link", name="Forgot password?")

    def navigate_to_login_page(self, url: str) -> None:
        """Open the application and follow its Sign In button to the login form."""
        self.logger.step("Navigate to login page")
        self.navigate(url)
        self.click(self.sign_in_button, "Sign In Button")

    def enter_username(self, username: str) -> None:
        self.logger.action(f"Enter username: {username}")
        self.fill(self.username_input, username, "Username Input")

    def enter_password(self, password: str) -> None:
        self.logger.action("Enter password")
        self.password_input.wait_for(state="visible")
        self.password_input.fill(password)

    def click_login_button(self) -> None:
        self.logger.action("Click login button")
        self.click(self.login_button, "Login Button")
        self.page.wait_for_load_state("networkidle")

    def get_error_message(self) -> str:
        self.logger.action("Get error message")
        self.wait_for_element(self.error_message, 5000, "Error Message")
        return self.get_inner_text(self.error_message, "Error Message")

    def is_error_message_visible(self) -> bool:
        return self.is_visible(self.error_message, "Error Message")

    def get_all_error_messages(self) -> str:
        """Collect the visible field validation messages, joined by ", "."""
        self.logger.action("Get all visible error messages")
        errors = []

        for locator, name in (
            (self.username_error_message, "Username Error Message"),
            (self.password_error_message, "Password Error Message"),
        ):
            if self.is_visible(locator, name):
                self.wait_for_element(locator, 5000, name)
                errors.append(self.get_inner_text(locator, name))

        return ", ".join(errors)

    def wait_for_successful_login(self, timeout: int = 10000) -> None:
        self.logger.action("Wait for successful login")
        self.page.wait_for_load_state("networkidle", timeout=timeout)
