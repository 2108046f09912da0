"""Helper script to run the unit tests with coverage programmatically."""

import sys
from pathlib import Path

import coverage
import pytest

# Add project root to Python path to ensure modules are found
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

# The framework package and the step definitions are measured; page objects
# are only exercised against mocks here.
cov = coverage.Coverage(source=["prism_bdd", "tests.step_defs"])
cov.start()

exit_code = pytest.main(["tests/unit/"])

cov.stop()
cov.save()

cov.report(show_missing=True)
sys.exit(exit_code)
