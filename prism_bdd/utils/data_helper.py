"""Access to the JSON test data file (credentials, users, error messages)."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Optional, Union

from prism_bdd.config import PROJECT_ROOT
from prism_bdd.exceptions import TestDataError

DEFAULT_DATA_DIR = PROJECT_ROOT / "tests" / "data"
DEFAULT_DATA_FILE = "test_data.json"


class DataHelper:
    """Load test data once and look values up by dotted key path.

    Example:
        credentials = data_helper.get_data("login.validUser")
        message = data_helper.get_error_message("sessionExpired")
    """

    def __init__(self, data_dir: Union[str, Path] = DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)
        self._test_data: Optional[dict[str, Any]] = None

    def load_test_data(self, filename: str = DEFAULT_DATA_FILE) -> dict[str, Any]:
        """Read ``filename`` from the data directory and cache its content."""
        filepath = self.data_dir / filename
        if not filepath.exists():
            raise TestDataError(f"Test data file not found: {filepath}")

        with open(filepath, encoding="utf-8") as f:
            self._test_data = json.load(f)
        return self._test_data

    @property
    def is_loaded(self) -> bool:
        return self._test_data is not None

    def get_data(self, key_path: str) -> Any:
        """Return the value at ``key_path`` (e.g. ``"login.validUser"``)."""
        if self._test_data is None:
            self.load_test_data()

        value: Any = self._test_data
        for key in key_path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                raise TestDataError(f"Key path not found in test data: {key_path}")
        return value

    def get_all_data(self) -> dict[str, Any]:
        if self._test_data is None:
            self.load_test_data()
        return self._test_data

    def get_login_credentials(self, user_type: str = "validUser") -> dict[str, str]:
        """Return ``username``, ``password`` and ``message`` for a credential set."""
        return self.get_data(f"login.{user_type}")

    def get_user_by_id(self, user_id: int) -> Optional[dict[str, Any]]:
        users = self.get_data("users")
        return next((user for user in users if user.get("id") == user_id), None)

    def get_random_user(self) -> dict[str, Any]:
        users = self.get_data("users")
        if not users:
            raise TestDataError("No users defined in test data")
        return random.choice(users)

    def get_error_message(self, key: str) -> str:
        return self.get_data(f"errorMessages.{key}")

    def get_timeout(self, key: str) -> int:
        return self.get_data(f"timeouts.{key}")


data_helper = DataHelper()
