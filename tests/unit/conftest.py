"""Unit test conftest: mock pages and isolated module-level state."""

import pytest

from prism_bdd.support import feature_session
from tests.unit.mocks import MockPage


@pytest.fixture(autouse=True)
def reset_feature_session():
    """Each unit test starts outside any feature and logged out."""
    feature_session.reset()
    yield
    feature_session.reset()


@pytest.fixture
def mock_page() -> MockPage:
    """Mock Playwright page fixture."""
    return MockPage()
