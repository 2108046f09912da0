"""Step definitions shared by every feature: login precondition, tabs, headings, navigation.

Steps whose quoted argument is followed by more text use ``parsers.re`` with
``[^"]+`` so that e.g. 'the "X" should be displayed' never swallows
'the "X" section should be displayed'.
"""

from playwright.sync_api import expect
from pytest_bdd import given, parsers, then, when

from prism_bdd.components import SidebarComponent
from prism_bdd.pages import CommonPage
from prism_bdd.support import World

from tests.step_defs.helpers import ensure_logged_in, table_rows

NAVIGATION_ITEMS = "Dashboard|Model|Reports|Uploads"


@given("the user is logged in to the application")
def user_is_logged_in(world: World) -> None:
    world.logger.info("Verifying user is logged in")
    ensure_logged_in(world, verify_layout=True)


@when(parsers.re(rf"the user clicks on the (?P<menu_item>{NAVIGATION_ITEMS}) navigation button"))
def user_clicks_navigation_button(world: World, menu_item: str) -> None:
    sidebar = world.page_object(SidebarComponent)
    sidebar.click_menu_item(menu_item)
    world.page.wait_for_load_state("networkidle")
    sidebar.wait_for_menu_item_active(menu_item)


@then(parsers.parse('the URL should contain "{url_part}"'))
def url_should_contain(world: World, url_part: str) -> None:
    assert url_part in world.page.url, f"{url_part!r} not in {world.page.url!r}"


@given(parsers.re(r'the user is on the "(?P<tab_name>[^"]+)" tab'))
def user_is_on_tab(world: World, tab_name: str) -> None:
    world.page_object(CommonPage).navigate_to_tab(tab_name)


@when(parsers.re(r'the user clicks on the "(?P<tab_name>[^"]+)" tab'))
def user_clicks_tab(world: World, tab_name: str) -> None:
    world.page_object(CommonPage).click_tab(tab_name)


@then(parsers.re(r'the "(?P<tab_name>[^"]+)" tab should be selected( by default)?'))
def tab_should_be_selected(world: World, tab_name: str) -> None:
    tab = world.page_object(CommonPage).get_tab(tab_name)
    expect(tab).to_have_attribute("aria-selected", "true")


@then(parsers.re(r'the "(?P<tab_name>[^"]+)" tab should be displayed'))
def tab_should_be_displayed(world: World, tab_name: str) -> None:
    expect(world.page_object(CommonPage).get_tab(tab_name)).to_be_visible()


@then(parsers.re(r'the page should display the heading "(?P<heading>[^"]+)"'))
def page_should_display_heading(world: World, heading: str) -> None:
    expect(world.page_object(CommonPage).get_heading(heading)).to_be_visible(timeout=10000)


@then(parsers.re(r'the "(?P<heading>[^"]+)" heading should be displayed'))
def heading_should_be_displayed(world: World, heading: str) -> None:
    expect(world.page_object(CommonPage).get_heading(heading)).to_be_visible()


@then(parsers.re(r'the page should display the description "(?P<description>[^"]+)"'))
def page_should_display_description(world: World, description: str) -> None:
    expect(world.page_object(CommonPage).get_text_element(description)).to_be_visible()


@then(parsers.re(r'the "(?P<button_name>[^"]+)" navigation button should be active'))
def navigation_button_should_be_active(world: World, button_name: str) -> None:
    active = world.page_object(SidebarComponent).is_menu_item_active(button_name)
    world.logger.assertion(f'"{button_name}" navigation button is active', active)
    assert active, f'"{button_name}" navigation button is not active'


@then(parsers.re(r'the "(?P<button_name>[^"]+)" navigation icon should be displayed'))
def navigation_icon_should_be_displayed(world: World, button_name: str) -> None:
    visible = world.page_object(SidebarComponent).is_menu_item_icon_visible(button_name)
    assert visible, f'"{button_name}" navigation icon is not displayed'


@when(parsers.re(r'the user clicks on the "(?P<button_name>[^"]+)" button'))
def user_clicks_button(world: World, button_name: str) -> None:
    world.page_object(CommonPage).click_button(button_name)


@then(parsers.re(r'the "(?P<button_name>[^"]+)" button should be displayed'))
def button_should_be_displayed(world: World, button_name: str) -> None:
    expect(world.page_object(CommonPage).get_button(button_name)).to_be_visible()


@then(parsers.re(r'the page should display "(?P<text>[^"]+)"'))
def page_should_display_text(world: World, text: str) -> None:
    expect(world.page_object(CommonPage).get_text_element(text).first).to_be_visible()


@then(parsers.re(r'the "(?P<element_name>[^"]+)" should be displayed'))
def element_should_be_displayed(world: World, element_name: str) -> None:
    expect(world.page_object(CommonPage).get_text_element(element_name).first).to_be_visible()


@then(parsers.re(r'the search box should have placeholder "(?P<placeholder>[^"]+)"'))
def search_box_should_have_placeholder(world: World, placeholder: str) -> None:
    search_box = world.page_object(CommonPage).get_search_box_by_placeholder(placeholder)
    expect(search_box).to_be_visible()


@then("the following tabs should be displayed:")
def following_tabs_should_be_displayed(world: World, datatable) -> None:
    common_page = world.page_object(CommonPage)
    for row in table_rows(datatable):
        expect(common_page.get_tab(row["Tab Name"])).to_be_visible()


@then(parsers.re(r'the "(?P<section_name>[^"]+)" section should be displayed'))
def section_should_be_displayed(world: World, section_name: str) -> None:
    expect(world.page_object(CommonPage).get_section_heading(section_name).first).to_be_visible()


@when(parsers.re(r'the user clicks on "(?P<element_name>[^"]+)"'))
def user_clicks_on_element(world: World, element_name: str) -> None:
    world.page_object(CommonPage).click_element(element_name)
