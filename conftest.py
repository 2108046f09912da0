"""Root conftest.py - register the scenario hooks and step definitions for pytest-bdd."""

from pathlib import Path

STEP_DEFS_DIR = Path(__file__).parent / "tests" / "step_defs"

# Every *_steps.py module under tests/step_defs is loaded as a plugin so its
# steps are visible to all feature test modules, wherever they live.
pytest_plugins = ["prism_bdd.plugin"] + [
    f"tests.step_defs.{path.stem}" for path in sorted(STEP_DEFS_DIR.glob("*_steps.py"))
]
