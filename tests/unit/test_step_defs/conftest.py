"""Unit test conftest for step definitions.

Overrides the ``world`` fixture from the root conftest.py with a mock, so
step definition functions run without launching a browser.
"""

import pytest

from tests.unit.mocks import MockWorld


@pytest.fixture
def world() -> MockWorld:
    """Mock world fixture.

    Provides a clean, isolated world for each unit test.
    """
    return MockWorld()
