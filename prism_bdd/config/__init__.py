"""Environment configuration for the test suite."""

from prism_bdd.config.environment import (
    PROJECT_ROOT,
    SUPPORTED_BROWSERS,
    Environment,
    EnvironmentConfig,
    environment,
)

__all__ = [
    "PROJECT_ROOT",
    "SUPPORTED_BROWSERS",
    "Environment",
    "EnvironmentConfig",
    "environment",
]
