"""Shared helper functions for step definitions."""

from prism_bdd.components import HeaderComponent, SidebarComponent
from prism_bdd.config import environment
from prism_bdd.pages import LoginPage, is_authenticated_url
from prism_bdd.support import World, feature_session
from prism_bdd.utils import auth_helper, data_helper


def table_rows(datatable: list[list[str]]) -> list[dict[str, str]]:
    """Turn a step data table into one dict per row, keyed by the header row."""
    if not datatable:
        return []
    header, *rows = datatable
    return [dict(zip(header, row)) for row in rows]


def valid_credentials() -> dict[str, str]:
    """Valid-user credentials, with TEST_USERNAME/TEST_PASSWORD taking precedence."""
    credentials = dict(data_helper.get_login_credentials("validUser"))
    if environment.has_credentials():
        credentials["username"] = environment.get("username")
        credentials["password"] = environment.get("password")
    return credentials


def restore_saved_session(world: World) -> bool:
    """Open the app with a saved storage state and report whether it is still valid."""
    if not (environment.get("reuse_auth_state") and auth_helper.has_auth_state()):
        return False

    world.page.goto(world.base_url, wait_until="domcontentloaded")
    world.page.wait_for_load_state("networkidle")
    header = world.page_object(HeaderComponent)
    return is_authenticated_url(world.page.url) and header.is_header_visible()


def login(world: World) -> None:
    """Run the full login flow with the valid user and record it for the feature."""
    login_page = world.page_object(LoginPage)

    world.logger.step("Navigate to login page")
    login_page.navigate_to_login_page(world.base_url)

    world.logger.step("Login with valid credentials")
    credentials = valid_credentials()
    login_page.enter_username(credentials["username"])
    login_page.enter_password(credentials["password"])
    login_page.click_login_button()
    login_page.wait_for_successful_login()

    current_url = login_page.get_current_url()
    world.logger.assertion(
        f"Home (Dashboard) Page URL: {current_url}", "login" not in current_url
    )
    assert "login" not in current_url, f"Still on the login page: {current_url}"

    feature_session.mark_logged_in()
    if environment.get("reuse_auth_state"):
        auth_helper.save_auth_state(world.context)


def ensure_logged_in(world: World, verify_layout: bool = False) -> None:
    """Log in unless this feature already did.

    With ``verify_layout`` the header and sidebar must be visible afterwards.
    """
    if feature_session.is_logged_in:
        world.logger.info("User is already logged in (login performed once per feature)")
    elif restore_saved_session(world):
        world.logger.info("Restored saved authentication state")
        feature_session.mark_logged_in()
    else:
        world.logger.info("User not logged in, performing login now")
        login(world)

    if not verify_layout:
        return

    world.logger.step("Verify header & sidebar component is visible")
    world.page.wait_for_load_state("networkidle")

    header_visible = world.page_object(HeaderComponent).is_header_visible()
    world.logger.assertion("Header component is visible", header_visible)
    assert header_visible, "Header component is not visible"

    sidebar_visible = world.page_object(SidebarComponent).is_visible()
    world.logger.assertion("Sidebar component is visible", sidebar_visible)
    assert sidebar_visible, "Sidebar component is not visible"
