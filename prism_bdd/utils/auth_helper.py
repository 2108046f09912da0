"""Persist browser authentication state for session reuse between features."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from playwright.sync_api import BrowserContext

from prism_bdd.config import PROJECT_ROOT

logger = logging.getLogger(__name__)

DEFAULT_AUTH_DIR = PROJECT_ROOT / ".auth"
AUTH_FILENAME = "user.json"


class AuthHelper:
    """Save and restore Playwright storage state (cookies and local storage)."""

    def __init__(self, auth_dir: Union[str, Path] = DEFAULT_AUTH_DIR):
        self.auth_dir = Path(auth_dir)
        self.auth_file = self.auth_dir / AUTH_FILENAME

    def save_auth_state(self, context: BrowserContext) -> Path:
        """Write the storage state of ``context`` to the auth file."""
        if not self.auth_dir.exists():
            self.auth_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created auth directory: %s", self.auth_dir)

        context.storage_state(path=str(self.auth_file))
        logger.info("Authentication state saved to: %s", self.auth_file)
        return self.auth_file

    def load_auth_state(self) -> Optional[dict[str, Any]]:
        """Return the saved storage state, or None when missing or unreadable."""
        if not self.auth_file.exists():
            logger.info("No saved auth state found")
            return None

        try:
            with open(self.auth_file, encoding="utf-8") as f:
                state = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load auth state: %s", e)
            return None

        logger.info("Authentication state loaded from: %s", self.auth_file)
        return state

    def has_auth_state(self) -> bool:
        exists = self.auth_file.exists()
        logger.info("Auth state exists: %s", exists)
        return exists

    def delete_auth_state(self) -> None:
        """Remove the auth file, and the auth directory once it is empty."""
        if self.auth_file.exists():
            self.auth_file.unlink()
            logger.info("Deleted auth state file: %s", self.auth_file)

        if self.auth_dir.exists() and not any(self.auth_dir.iterdir()):
            self.auth_dir.rmdir()
            logger.info("Removed empty auth directory: %s", self.auth_dir)

    @property
    def auth_file_path(self) -> Path:
        return self.auth_file

    @property
    def auth_dir_path(self) -> Path:
        return self.auth_dir


auth_helper = AuthHelper()
