"""Centralized environment configuration.

Settings are read from environment variables (a ``.env`` file in the working
directory is loaded first) and fall back to the defaults below. The runner
and the browser manager only ever read configuration through the module-level
``environment`` instance.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from prism_bdd.exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).resolve().parents[2]

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

DEFAULT_BASE_URL = "https://development.prism.deepstain.com/"


@dataclass(frozen=True)
class EnvironmentConfig:
    """Resolved settings for one test run."""

    env: str = "dev"
    base_url: str = DEFAULT_BASE_URL
    username: str = ""
    password: str = ""
    browser: str = "chromium"
    headless: bool = False
    slow_mo: int = 0
    timeout: int = 30000
    parallel_workers: int = 3
    retry_count: int = 1
    screenshot_on_failure: bool = True
    video_on_failure: bool = True
    reuse_auth_state: bool = False
    log_level: str = "info"


def _int_setting(source: Mapping[str, str], name: str, default: int) -> int:
    raw = source.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}"
        ) from e


def _first_set(source: Mapping[str, str], *names: str) -> str:
    for name in names:
        value = source.get(name)
        if value:
            return value
    return ""


class Environment:
    """Centralized environment configuration manager.

    Args:
        source: Mapping to read settings from. Defaults to ``os.environ``
            after loading ``.env``.
    """

    def __init__(self, source: Optional[Mapping[str, str]] = None):
        if source is None:
            load_dotenv()
            source = os.environ
        self._config = self._load(source)

    @staticmethod
    def _load(source: Mapping[str, str]) -> EnvironmentConfig:
        browser = source.get("BROWSER") or "chromium"
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, "
                f"got {browser!r}"
            )

        return EnvironmentConfig(
            env=source.get("ENV") or "dev",
            base_url=source.get("BASE_URL") or DEFAULT_BASE_URL,
            username=_first_set(source, "TEST_USERNAME", "APP_USERNAME"),
            password=_first_set(source, "TEST_PASSWORD", "APP_PASSWORD"),
            browser=browser,
            headless=source.get("HEADLESS") == "true",
            slow_mo=_int_setting(source, "SLOW_MO", 0),
            timeout=_int_setting(source, "TIMEOUT", 30000),
            parallel_workers=_int_setting(source, "PARALLEL_WORKERS", 3),
            retry_count=_int_setting(source, "RETRY_COUNT", 1),
            screenshot_on_failure=source.get("SCREENSHOT_ON_FAILURE") != "false",
            video_on_failure=source.get("VIDEO_ON_FAILURE") != "false",
            reuse_auth_state=source.get("REUSE_AUTH_STATE") == "true",
            log_level=(source.get("LOG_LEVEL") or "info").lower(),
        )

    def get(self, key: str) -> Any:
        """Return a single setting by its field name (e.g. ``"base_url"``)."""
        if key not in {f.name for f in fields(EnvironmentConfig)}:
            raise ConfigurationError(f"Unknown configuration key: {key}")
        return getattr(self._config, key)

    def get_all(self) -> EnvironmentConfig:
        return self._config

    def as_dict(self) -> dict[str, Any]:
        return asdict(self._config)

    def has_credentials(self) -> bool:
        return bool(self._config.username and self._config.password)

    def get_browser_config(self) -> dict[str, Any]:
        return {
            "browser_name": self._config.browser,
            "headless": self._config.headless,
            "slow_mo": self._config.slow_mo,
            "timeout": self._config.timeout,
        }


environment = Environment()
