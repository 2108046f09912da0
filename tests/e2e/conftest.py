"""E2E conftest: scenarios need a reachable Prism instance and a real account."""

import pytest

from prism_bdd.config import environment


def pytest_collection_modifyitems(config, items):
    if environment.has_credentials():
        return

    skip_e2e = pytest.mark.skip(
        reason="Prism credentials not available. "
        "Set TEST_USERNAME and TEST_PASSWORD (or APP_USERNAME/APP_PASSWORD)."
    )
    e2e_dir = config.rootpath / "tests" / "e2e"
    for item in items:
        if e2e_dir in item.path.parents:
            item.add_marker(skip_e2e)
