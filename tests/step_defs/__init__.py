"""Step definitions package for BDD tests.

Modules named *_steps.py are loaded as plugins by the root conftest.py, so
every feature module can use every step.
"""
