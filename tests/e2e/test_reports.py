"""Reports feature scenarios.

Step definitions are registered by the root conftest.py.
"""

from pytest_bdd import scenarios

scenarios("reports.feature")
