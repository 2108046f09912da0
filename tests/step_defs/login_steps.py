"""Step definitions for the login feature."""

from pytest_bdd import given, parsers, then, when

from prism_bdd.components import HeaderComponent
from prism_bdd.pages import LoginPage
from prism_bdd.support import World, feature_session
from prism_bdd.utils import data_helper

from tests.step_defs.helpers import valid_credentials


@given("I am on the login page")
def on_login_page(world: World) -> None:
    world.logger.step("Navigate to login page")
    world.fresh_session()
    feature_session.invalidate_login()
    world.page_object(LoginPage).navigate_to_login_page(world.base_url)


@when("I enter valid credentials")
def enter_valid_credentials(world: World) -> None:
    world.logger.step("Enter valid credentials")
    credentials = valid_credentials()
    login_page = world.page_object(LoginPage)
    login_page.enter_username(credentials["username"])
    login_page.enter_password(credentials["password"])


@when("I enter invalid credentials")
def enter_invalid_credentials(world: World) -> None:
    world.logger.step("Enter invalid credentials")
    credentials = data_helper.get_login_credentials("invalidUser")
    login_page = world.page_object(LoginPage)
    login_page.enter_username(credentials["username"])
    login_page.enter_password(credentials["password"])


@when(parsers.re(r'I enter username "(?P<username>[^"]*)"'))
def enter_username(world: World, username: str) -> None:
    world.logger.step(f"Enter username: {username}")
    if username:
        world.page_object(LoginPage).enter_username(username)


@when(parsers.re(r'I enter password "(?P<password>[^"]*)"'))
def enter_password(world: World, password: str) -> None:
    world.logger.step(f"Enter password: {'***' if password else '(empty)'}")
    if password:
        world.page_object(LoginPage).enter_password(password)


@when("I click the login button")
def click_login_button(world: World) -> None:
    world.logger.step("Click login button")
    world.page_object(LoginPage).click_login_button()


@then("I should be redirected to the dashboard")
def redirected_to_dashboard(world: World) -> None:
    world.logger.step("Verify redirect to dashboard")
    login_page = world.page_object(LoginPage)
    login_page.wait_for_successful_login()

    current_url = login_page.get_current_url()
    world.logger.assertion(
        f"Home (Dashboard) Page URL: {current_url}", "login" not in current_url
    )
    assert "login" not in current_url, f"Still on the login page: {current_url}"
    feature_session.mark_logged_in()


@then("I should see the header component")
def header_component_visible(world: World) -> None:
    world.logger.step("Verify header component is visible")
    world.page.wait_for_load_state("networkidle")

    header_visible = world.page_object(HeaderComponent).is_header_visible()
    world.logger.assertion("Header component is visible", header_visible)
    assert header_visible, "Header component is not visible"


@then("I should see an error message")
def error_message_displayed(world: World) -> None:
    world.logger.step("Verify error message is displayed")
    expected_error = data_helper.get_login_credentials("invalidUser")["message"]
    login_page = world.page_object(LoginPage)

    error_text = login_page.get_error_message()
    world.logger.info(f"Error message: {error_text}")
    world.logger.assertion(f'Expected error: "{expected_error}"', error_text == expected_error)
    assert error_text == expected_error


@then(parsers.re(r'I should see an error message "(?P<expected_error>[^"]*)"'))
def specific_error_message_displayed(world: World, expected_error: str) -> None:
    world.logger.step("Verify error message is displayed")

    all_errors = world.page_object(LoginPage).get_all_error_messages()
    world.logger.info(f"Error messages found: {all_errors}")
    world.logger.assertion(f'Expected error: "{expected_error}"', all_errors == expected_error)
    assert all_errors == expected_error


@then("I should remain on the login page")
def remain_on_login_page(world: World) -> None:
    world.logger.step("Verify still on login page")
    current_url = world.page_object(LoginPage).get_current_url()
    world.logger.assertion(f"URL contains login: {current_url}", "login" in current_url)
    assert "login" in current_url, f"Left the login page: {current_url}"
