"""pytest plugin: scenario hooks, the ``--browser-type`` option and the world fixture.

Loaded from the root conftest.py. The hooks keep one browser per feature
file, reset the login cache at feature boundaries and attach failure
screenshots to the HTML report.
"""

import base64

import pytest
import pytest_html
from playwright.sync_api import Error as PlaywrightError

from prism_bdd.config import SUPPORTED_BROWSERS, environment
from prism_bdd.fixtures import browser_manager
from prism_bdd.support import WORLD_KEY, World, feature_session
from prism_bdd.utils import data_helper, setup_logging
from prism_bdd.utils.logger import ScenarioLogger

REPORTED_TAGS = ("smoke", "regression")

SCENARIO_NAME_KEY = pytest.StashKey[str]()
SCENARIO_FAILED_KEY = pytest.StashKey[bool]()

hooks_logger = ScenarioLogger("Hooks")


def pytest_addoption(parser):
    parser.addoption(
        "--browser-type",
        action="store",
        dest="browser_type",
        default=None,
        choices=SUPPORTED_BROWSERS,
        help="Browser to run scenarios in (defaults to the BROWSER setting)",
    )


def pytest_sessionstart(session):
    setup_logging()
    data_helper.load_test_data()

    hooks_logger.info("=" * 60)
    hooks_logger.info("Test Suite Execution Started")
    hooks_logger.info(f"Environment: {environment.get('env')}")
    hooks_logger.info(f"Base URL: {environment.get('base_url')}")
    hooks_logger.info(
        f"Browser: {session.config.getoption('browser_type') or environment.get('browser')}"
    )
    hooks_logger.info("=" * 60)


def pytest_sessionfinish(session, exitstatus):
    browser_manager.shutdown()
    hooks_logger.info("=" * 60)
    hooks_logger.info(f"Test Suite Execution Completed (exit status: {exitstatus})")
    hooks_logger.info("=" * 60)


def pytest_bdd_before_scenario(request, feature, scenario):
    """Close the previous feature's browser when a new feature file starts."""
    if feature_session.start_feature(feature.filename):
        if browser_manager.browser_launched_for_feature:
            hooks_logger.info("New feature detected, closing previous feature browser")
            browser_manager.close_browser_for_feature()
        hooks_logger.info(f"Starting feature: {feature.name}")

    request.node.stash[SCENARIO_NAME_KEY] = scenario.name
    hooks_logger.info(f"Starting scenario: {scenario.name}")

    for tag in REPORTED_TAGS:
        if tag in scenario.tags:
            hooks_logger.info(f"Running {tag} test: {scenario.name}")


def pytest_bdd_step_error(
    request, feature, scenario, step, step_func, step_func_args, exception
):
    """Save a screenshot of the failed step and attach it to the report."""
    request.node.stash[SCENARIO_FAILED_KEY] = True
    hooks_logger.error(f'Step failed: "{step.keyword} {step.name}": {exception}')

    try:
        screenshot = browser_manager.take_screenshot_on_failure(scenario.name)
    except PlaywrightError as e:
        hooks_logger.error(f"Could not capture failure screenshot: {e}")
        screenshot = None

    world = request.node.stash.get(WORLD_KEY, None)
    if world is None:
        return
    if screenshot is not None:
        world.attach(screenshot.read_bytes(), "image/png")
    world.attach(f"Error: {exception}", "text/plain")


def pytest_bdd_after_scenario(request, feature, scenario):
    status = "FAILED" if request.node.stash.get(SCENARIO_FAILED_KEY, False) else "PASSED"
    hooks_logger.info(f"Scenario completed: {scenario.name} - Status: {status}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Add the scenario's screenshots and error text to the HTML report."""
    outcome = yield
    report = outcome.get_result()
    if report.when != "call":
        return

    world = item.stash.get(WORLD_KEY, None)
    if world is None or not world.attachments:
        return

    extras = getattr(report, "extras", [])
    for attachment in world.attachments:
        if attachment.mime_type == "image/png":
            encoded = base64.b64encode(attachment.data).decode("ascii")
            extras.append(pytest_html.extras.png(encoded, name="Screenshot"))
        else:
            extras.append(pytest_html.extras.text(attachment.data, name="Error"))
    report.extras = extras


@pytest.fixture
def world(request):
    """Per-scenario world bound to the browser shared by the current feature."""
    scenario_name = request.node.stash.get(SCENARIO_NAME_KEY, request.node.name)
    world = World(
        scenario_name,
        parameters={"browser": request.config.getoption("browser_type")},
    )
    request.node.stash[WORLD_KEY] = world
    world.init()
    yield world
    world.cleanup()
