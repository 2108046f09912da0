"""Prism BDD - browser automation support for the Prism dashboard test suite.

The package holds everything the step definitions in tests/step_defs/ build on:
environment configuration, the browser lifecycle manager, the per-scenario
world, page objects and the logging/test-data helpers.
"""

__version__ = "0.1.0"
